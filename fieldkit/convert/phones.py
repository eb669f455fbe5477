"""Per-country phone number rules and formatting."""

import re
from typing import NamedTuple

from fieldkit.models.enums import PhoneCountry

SEPARATORS = re.compile(r"[\s\-().]")
NON_DIGITS = re.compile(r"\D", re.ASCII)


class PhonePlan(NamedTuple):
    """Dialing rules of one country."""

    name: str
    regex: re.Pattern[str]
    mask: str
    prefix: str
    example: str
    normalize_regex: re.Pattern[str]


PHONE_PLANS: dict[str, PhonePlan] = {
    PhoneCountry.TR: PhonePlan(
        name="Turkish",
        regex=re.compile(r"^(\+90|0)?[5][0-9]{9}$"),
        mask="(5XX) XXX XX XX",
        prefix="+90",
        example="532 123 45 67",
        normalize_regex=re.compile(r"^(?:\+90|90|0)?([5][0-9]{9})$"),
    ),
    PhoneCountry.US: PhonePlan(
        name="US",
        regex=re.compile(r"^(\+1)?[2-9]\d{2}[2-9]\d{6}$", re.ASCII),
        mask="(XXX) XXX-XXXX",
        prefix="+1",
        example="(555) 123-4567",
        normalize_regex=re.compile(r"^(?:\+1|1)?([2-9]\d{2}[2-9]\d{6})$", re.ASCII),
    ),
    PhoneCountry.DE: PhonePlan(
        name="German",
        regex=re.compile(r"^(\+49|0)?[1-9]\d{6,14}$", re.ASCII),
        mask="XXXX XXXXXXX",
        prefix="+49",
        example="151 12345678",
        normalize_regex=re.compile(r"^(?:\+49|49|0)?([1-9]\d{6,14})$", re.ASCII),
    ),
    PhoneCountry.GB: PhonePlan(
        name="UK",
        regex=re.compile(r"^(\+44|0)?[7]\d{9}$", re.ASCII),
        mask="XXXX XXX XXXX",
        prefix="+44",
        example="7911 123456",
        normalize_regex=re.compile(r"^(?:\+44|44|0)?([7]\d{9})$", re.ASCII),
    ),
    PhoneCountry.FR: PhonePlan(
        name="French",
        regex=re.compile(r"^(\+33|0)?[67]\d{8}$", re.ASCII),
        mask="XX XX XX XX XX",
        prefix="+33",
        example="06 12 34 56 78",
        normalize_regex=re.compile(r"^(?:\+33|33|0)?([67]\d{8})$", re.ASCII),
    ),
    PhoneCountry.INTL: PhonePlan(
        name="international",
        regex=re.compile(r"^\+?[1-9]\d{6,14}$", re.ASCII),
        mask="+X XXX XXX XXXX",
        prefix="+",
        example="+90 532 123 45 67",
        normalize_regex=re.compile(r"^\+?([1-9]\d{6,14})$", re.ASCII),
    ),
}


def get_plan(country: str | None) -> PhonePlan:
    """Plan for ``country``; unknown codes use the Turkish plan."""
    return PHONE_PLANS.get(country or PhoneCountry.TR, PHONE_PLANS[PhoneCountry.TR])


def strip_separators(value: str) -> str:
    """Drop spaces, dashes, dots and parentheses."""
    return SEPARATORS.sub("", value)


def matches_plan(value: str, plan: PhonePlan) -> bool:
    return plan.regex.fullmatch(value) is not None


def normalize_phone(value: str | None, plan: PhonePlan) -> str | None:
    """National significant number of ``value``.

    Falls back to every digit in the input when the country pattern does
    not recognise it.
    """
    if not value:
        return None
    cleaned = strip_separators(value)
    match = plan.normalize_regex.fullmatch(cleaned)
    if match and match.group(1):
        return match.group(1)
    return NON_DIGITS.sub("", cleaned)


def _group(digits: str, country: str) -> str | None:
    length = len(digits)
    if country == PhoneCountry.TR and length == 10:
        return f"({digits[:3]}) {digits[3:6]} {digits[6:8]} {digits[8:10]}"
    if country == PhoneCountry.US and length == 10:
        return f"({digits[:3]}) {digits[3:6]}-{digits[6:10]}"
    if country == PhoneCountry.DE and length >= 10:
        return f"{digits[:4]} {digits[4:]}"
    if country == PhoneCountry.GB and length == 10:
        return f"{digits[:4]} {digits[4:7]} {digits[7:]}"
    if country == PhoneCountry.FR and length == 9:
        return f"{digits[:1]} {digits[1:3]} {digits[3:5]} {digits[5:7]} {digits[7:]}"
    return None


def format_phone(digits: str, country: str, show_prefix: bool = True) -> str:
    """Insert the country's digit grouping, optionally after the dialing code."""
    plan = get_plan(country)
    formatted = _group(digits, country) or digits
    return f"{plan.prefix} {formatted}" if show_prefix else formatted


def to_e164(national: str, plan: PhonePlan) -> str:
    """Dialing code plus national number, e.g. ``+905321234567``."""
    return f"+{plan.prefix.lstrip('+')}{national}"
