"""Unit tests for color parsing and conversion."""

import pytest

from fieldkit.convert.colors import (
    Rgba,
    convert,
    format_alpha,
    is_color,
    parse_color,
    patterns_for,
    rgb_to_hex,
    rgb_to_hsl,
)
from fieldkit.models.enums import ColorFormat


class TestParseColor:
    """Test suite for reading each supported notation."""

    @pytest.mark.parametrize(
        "value, expected",
        [
            ("#abc", Rgba(170, 187, 204)),
            ("#AABBCC", Rgba(170, 187, 204)),
            ("rgb(1, 2, 3)", Rgba(1, 2, 3)),
            ("rgba(1,2,3,0.5)", Rgba(1, 2, 3, 0.5)),
            ("hsl(0, 100%, 50%)", Rgba(255, 0, 0)),
            ("hsla(0, 100%, 50%, .25)", Rgba(255, 0, 0, 0.25)),
        ],
    )
    def test_notations(self, value, expected):
        """Verify every notation parses into the same channel tuple."""
        # Act & Assert
        assert parse_color(value) == expected

    def test_hex_alpha_becomes_fraction(self):
        """Verify the fourth hex byte is read as a 0-1 alpha."""
        # Act
        rgba = parse_color("#000000ff")

        # Assert
        assert rgba.a == 1.0

    @pytest.mark.parametrize("value", ["red", "#12345", "rgb(1,2)", "#abc\n", "hsl(10, 10, 10)"])
    def test_rejects_unknown_text(self, value):
        """Verify unsupported text is not a color."""
        # Assert
        assert parse_color(value) is None
        assert not is_color(value)


class TestConvert:
    """Test suite for converting between notations."""

    @pytest.mark.parametrize(
        "value, fmt, expected",
        [
            ("#ff0000", ColorFormat.RGB, "rgb(255, 0, 0)"),
            ("#f00", ColorFormat.HEX, "#ff0000"),
            ("rgb(255, 0, 0)", ColorFormat.HSL, "hsl(0, 100%, 50%)"),
            ("hsl(120, 100%, 50%)", ColorFormat.HEX, "#00ff00"),
            ("rgba(255, 0, 0, 0.5)", ColorFormat.HEX, "#ff000080"),
            ("rgba(255, 0, 0, 1)", ColorFormat.RGB, "rgba(255, 0, 0, 1)"),
        ],
    )
    def test_conversions(self, value, fmt, expected):
        """Verify conversions between hex, rgb and hsl."""
        # Act & Assert
        assert convert(value, fmt) == expected

    def test_unknown_target_format(self):
        """Verify an unknown target notation yields None."""
        # Assert
        assert convert("#fff", "cmyk") is None

    def test_unparseable_source(self):
        """Verify an unparseable source yields None."""
        # Assert
        assert convert("blue", ColorFormat.HEX) is None


class TestChannelMath:
    """Test suite for the channel helpers."""

    def test_black_and_white_have_no_hue(self):
        """Verify greys have zero hue and saturation."""
        # Assert
        assert tuple(rgb_to_hsl(0, 0, 0)) == (0, 0, 0)
        assert tuple(rgb_to_hsl(255, 255, 255)) == (0, 0, 100)

    def test_rgb_to_hex_lowercase_with_alpha_byte(self):
        """Verify hex output is lowercase and alpha rounds half up."""
        # Assert
        assert rgb_to_hex(171, 205, 239) == "#abcdef"
        assert rgb_to_hex(0, 0, 0, 0.5) == "#00000080"

    @pytest.mark.parametrize("alpha, expected", [(1.0, "1"), (0, "0"), (0.25, "0.25")])
    def test_format_alpha(self, alpha, expected):
        """Verify whole alphas drop the fraction."""
        # Assert
        assert format_alpha(alpha) == expected

    def test_patterns_for_alpha(self):
        """Verify alpha notations are only accepted when asked for."""
        # Act
        plain = patterns_for(ColorFormat.RGB)
        with_alpha = patterns_for(ColorFormat.RGB, alpha=True)

        # Assert
        assert not any(pattern.fullmatch("rgba(0, 0, 0, 0.5)") for pattern in plain)
        assert any(pattern.fullmatch("rgba(0, 0, 0, 0.5)") for pattern in with_alpha)
