"""Locale-aware number rendering."""

import re

from fieldkit.schema import is_number

# (thousands separator, decimal separator)
SEPARATORS = {
    "tr-TR": (".", ","),
    "de-DE": (".", ","),
    "en-US": (",", "."),
    "en-GB": (",", "."),
}
DEFAULT_LOCALE = "tr-TR"

_WHITESPACE = re.compile(r"\s+")


def format_number(
    value: float,
    decimals: int = 2,
    locale: str | None = None,
    min_decimals: int = 0,
) -> str:
    """Group thousands and keep between ``min_decimals`` and ``decimals`` fraction digits."""
    thousands, point = SEPARATORS.get(locale or DEFAULT_LOCALE, SEPARATORS[DEFAULT_LOCALE])
    decimals = max(decimals, min_decimals, 0)
    text = f"{abs(value):,.{decimals}f}"
    whole, _, fraction = text.partition(".")
    fraction = fraction.rstrip("0").ljust(min_decimals, "0")
    sign = "-" if value < 0 and float(text.replace(",", "")) != 0 else ""
    whole = whole.replace(",", thousands)
    return f"{sign}{whole}{point}{fraction}" if fraction else f"{sign}{whole}"


def js_number(value: float) -> str:
    """Shortest text for a number: ``3`` for 3.0, ``3.5`` for 3.5."""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def parse_number(raw: object) -> float | None:
    """Numbers pass through; strings accept spaces and a comma decimal point."""
    if is_number(raw):
        return raw
    if isinstance(raw, str):
        text = _WHITESPACE.sub("", raw).replace(",", ".")
        if not text:
            return None
        try:
            number = float(text)
        except ValueError:
            return None
        return None if number != number else number
    return None
