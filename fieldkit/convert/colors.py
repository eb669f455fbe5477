"""Color notation parsing and conversion.

Every supported notation (hex with 3/4/6/8 digits, ``rgb()``/``rgba()``,
``hsl()``/``hsla()``) is parsed into an ``Rgba`` tuple and projected back to
the requested notation from there. Alpha is carried as a 0-1 fraction and
only becomes a byte when written as hex.
"""

import math
import re
from typing import NamedTuple

from fieldkit.models.enums import ColorFormat

HEX_PATTERN = re.compile(r"^#([0-9A-Fa-f]{3}|[0-9A-Fa-f]{6})$")
HEX_ALPHA_PATTERN = re.compile(r"^#([0-9A-Fa-f]{4}|[0-9A-Fa-f]{8})$")
RGB_PATTERN = re.compile(
    r"^rgb\(\s*(\d{1,3})\s*,\s*(\d{1,3})\s*,\s*(\d{1,3})\s*\)$", re.ASCII
)
RGBA_PATTERN = re.compile(
    r"^rgba\(\s*(\d{1,3})\s*,\s*(\d{1,3})\s*,\s*(\d{1,3})\s*,\s*(0|1|0?\.\d+)\s*\)$",
    re.ASCII,
)
HSL_PATTERN = re.compile(
    r"^hsl\(\s*(\d{1,3})\s*,\s*(\d{1,3})%\s*,\s*(\d{1,3})%\s*\)$", re.ASCII
)
HSLA_PATTERN = re.compile(
    r"^hsla\(\s*(\d{1,3})\s*,\s*(\d{1,3})%\s*,\s*(\d{1,3})%\s*,\s*(0|1|0?\.\d+)\s*\)$",
    re.ASCII,
)

ALL_PATTERNS = (
    HEX_PATTERN,
    HEX_ALPHA_PATTERN,
    RGB_PATTERN,
    RGBA_PATTERN,
    HSL_PATTERN,
    HSLA_PATTERN,
)


class Rgba(NamedTuple):
    r: int
    g: int
    b: int
    a: float | None = None


class Hsl(NamedTuple):
    h: int
    s: int
    l: int  # noqa: E741


def round_half_up(value: float) -> int:
    """Round halves up (2.5 -> 3) instead of to the nearest even integer."""
    return math.floor(value + 0.5)


def format_alpha(alpha: float) -> str:
    """Render an alpha fraction without a trailing ``.0`` for whole numbers."""
    if float(alpha).is_integer():
        return str(int(alpha))
    return repr(float(alpha))


def patterns_for(fmt: str, alpha: bool = False) -> tuple[re.Pattern[str], ...]:
    """Patterns accepted for a configured notation."""
    if fmt == ColorFormat.RGB:
        return (RGB_PATTERN, RGBA_PATTERN) if alpha else (RGB_PATTERN,)
    if fmt == ColorFormat.HSL:
        return (HSL_PATTERN, HSLA_PATTERN) if alpha else (HSL_PATTERN,)
    return (HEX_PATTERN, HEX_ALPHA_PATTERN) if alpha else (HEX_PATTERN,)


def is_color(value: str) -> bool:
    """True when ``value`` is written in any supported notation."""
    return any(pattern.fullmatch(value) for pattern in ALL_PATTERNS)


def _expand_hex(digits: str) -> str:
    if len(digits) in (3, 4):
        return "".join(char * 2 for char in digits)
    return digits


def parse_color(value: str) -> Rgba | None:
    """Parse any supported notation into RGB(+alpha), or None."""
    match = HEX_PATTERN.fullmatch(value) or HEX_ALPHA_PATTERN.fullmatch(value)
    if match:
        digits = _expand_hex(match.group(1))
        channels = [int(digits[i : i + 2], 16) for i in range(0, len(digits), 2)]
        alpha = channels[3] / 255 if len(channels) == 4 else None
        return Rgba(channels[0], channels[1], channels[2], alpha)

    match = RGB_PATTERN.fullmatch(value)
    if match:
        return Rgba(*(int(group) for group in match.groups()))

    match = RGBA_PATTERN.fullmatch(value)
    if match:
        r, g, b, a = match.groups()
        return Rgba(int(r), int(g), int(b), float(a))

    match = HSL_PATTERN.fullmatch(value)
    if match:
        return hsl_to_rgb(*(int(group) for group in match.groups()))

    match = HSLA_PATTERN.fullmatch(value)
    if match:
        h, s, l, a = match.groups()  # noqa: E741
        return hsl_to_rgb(int(h), int(s), int(l))._replace(a=float(a))

    return None


def rgb_to_hex(r: int, g: int, b: int, a: float | None = None) -> str:
    text = f"#{r:02x}{g:02x}{b:02x}"
    if a is not None:
        text += f"{round_half_up(a * 255):02x}"
    return text


def rgb_to_hsl(r: int, g: int, b: int) -> Hsl:
    """Convert RGB channels to whole-degree hue and whole-percent s/l."""
    red, green, blue = r / 255, g / 255, b / 255
    high = max(red, green, blue)
    low = min(red, green, blue)
    lightness = (high + low) / 2
    hue = saturation = 0.0

    if high != low:
        delta = high - low
        if lightness > 0.5:
            saturation = delta / (2 - high - low)
        else:
            saturation = delta / (high + low)

        if high == red:
            hue = ((green - blue) / delta + (6 if green < blue else 0)) / 6
        elif high == green:
            hue = ((blue - red) / delta + 2) / 6
        else:
            hue = ((red - green) / delta + 4) / 6

    return Hsl(
        round_half_up(hue * 360),
        round_half_up(saturation * 100),
        round_half_up(lightness * 100),
    )


def _hue_to_channel(p: float, q: float, t: float) -> float:
    if t < 0:
        t += 1
    if t > 1:
        t -= 1
    if t < 1 / 6:
        return p + (q - p) * 6 * t
    if t < 1 / 2:
        return q
    if t < 2 / 3:
        return p + (q - p) * (2 / 3 - t) * 6
    return p


def hsl_to_rgb(h: int, s: int, l: int) -> Rgba:  # noqa: E741
    hue, saturation, lightness = h / 360, s / 100, l / 100

    if saturation == 0:
        red = green = blue = lightness
    else:
        if lightness < 0.5:
            q = lightness * (1 + saturation)
        else:
            q = lightness + saturation - lightness * saturation
        p = 2 * lightness - q
        red = _hue_to_channel(p, q, hue + 1 / 3)
        green = _hue_to_channel(p, q, hue)
        blue = _hue_to_channel(p, q, hue - 1 / 3)

    return Rgba(
        round_half_up(red * 255),
        round_half_up(green * 255),
        round_half_up(blue * 255),
    )


def format_color(rgba: Rgba, fmt: str) -> str:
    """Render parsed channels in the given notation."""
    r, g, b, a = rgba
    if fmt == ColorFormat.RGB:
        if a is not None:
            return f"rgba({r}, {g}, {b}, {format_alpha(a)})"
        return f"rgb({r}, {g}, {b})"
    if fmt == ColorFormat.HSL:
        hsl = rgb_to_hsl(r, g, b)
        if a is not None:
            return f"hsla({hsl.h}, {hsl.s}%, {hsl.l}%, {format_alpha(a)})"
        return f"hsl({hsl.h}, {hsl.s}%, {hsl.l}%)"
    return rgb_to_hex(r, g, b, a)


def convert(value: str, fmt: str) -> str | None:
    """Convert a color string to another notation, or None if unparseable."""
    if fmt not in (ColorFormat.HEX, ColorFormat.RGB, ColorFormat.HSL):
        return None
    rgba = parse_color(value)
    if rgba is None:
        return None
    return format_color(rgba, fmt)
