"""Unit tests for number parsing and formatting."""

import pytest

from fieldkit.convert.numbers import format_number, js_number, parse_number


class TestFormatNumber:
    """Test suite for locale-aware number rendering."""

    @pytest.mark.parametrize(
        "value, args, expected",
        [
            (1234.5, {}, "1.234,5"),
            (1234.5, {"locale": "en-US", "min_decimals": 2}, "1,234.50"),
            (1000000, {"decimals": 0}, "1.000.000"),
            (-1234.567, {"decimals": 2}, "-1.234,57"),
            (-0.001, {"decimals": 2}, "0"),
            (12, {"decimals": 2, "min_decimals": 2}, "12,00"),
        ],
    )
    def test_format(self, value, args, expected):
        """Verify grouping, separators and fraction digits."""
        # Act & Assert
        assert format_number(value, **args) == expected

    def test_unknown_locale_uses_default(self):
        """Verify unknown locales fall back to tr-TR separators."""
        # Act & Assert
        assert format_number(1234.5, locale="xx-XX") == "1.234,5"


class TestParseNumber:
    """Test suite for number coercion."""

    @pytest.mark.parametrize(
        "raw, expected",
        [(5, 5), (2.5, 2.5), ("12,5", 12.5), (" 1 234 ", 1234.0), ("-3", -3.0)],
    )
    def test_accepts_numbers_and_numeric_text(self, raw, expected):
        """Verify numbers pass and text is read with either decimal separator."""
        # Act & Assert
        assert parse_number(raw) == expected

    @pytest.mark.parametrize("raw", ["", "abc", "nan", True, None, [1]])
    def test_rejects_other_input(self, raw):
        """Verify non-numeric input yields None."""
        # Act & Assert
        assert parse_number(raw) is None


@pytest.mark.parametrize("value, expected", [(3.0, "3"), (3.5, "3.5"), (3, "3")])
def test_js_number(value, expected):
    """Verify whole floats render without a fraction."""
    # Act & Assert
    assert js_number(value) == expected
