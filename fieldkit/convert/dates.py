"""Date parsing, formatting and bounds helpers.

Dates are held as naive ``datetime`` values. Timezone-aware inputs are
converted to UTC first, and exports render naive values as UTC.
"""

import re
from datetime import date, datetime, time, timedelta, timezone

from fieldkit.schema import is_number

# Excel counts 1900-02-29 as a real day, so serial 1 lands on 1899-12-31
EXCEL_EPOCH = datetime(1899, 12, 30)
EXCEL_SERIAL_LIMIT = 2958466  # 9999-12-31
UNIX_EPOCH = datetime(1970, 1, 1)

LOCALE_DATE_PATTERN = re.compile(r"^(\d{2})\.(\d{2})\.(\d{4})$", re.ASCII)
TIME_PATTERN = re.compile(r"^(\d{1,2}):(\d{2})$", re.ASCII)

DATE_FORMATS = {
    "tr-TR": "%d.%m.%Y",
    "en-US": "%m/%d/%Y",
    "en-GB": "%d/%m/%Y",
    "de-DE": "%d.%m.%Y",
}
DEFAULT_LOCALE = "tr-TR"


def to_naive(value: datetime) -> datetime:
    """Drop timezone information after converting to UTC."""
    if value.tzinfo is None:
        return value
    return value.astimezone(timezone.utc).replace(tzinfo=None)


def as_datetime(value: date) -> datetime:
    """Promote a ``date`` to midnight of that day; datetimes become naive."""
    if isinstance(value, datetime):
        return to_naive(value)
    return datetime(value.year, value.month, value.day)


def start_of_day(value: datetime) -> datetime:
    return value.replace(hour=0, minute=0, second=0, microsecond=0)


def end_of_day(value: datetime) -> datetime:
    return value.replace(hour=23, minute=59, second=59, microsecond=999000)


def parse_iso(text: str) -> datetime | None:
    try:
        return to_naive(datetime.fromisoformat(text.strip()))
    except ValueError:
        return None


def parse_locale_date(text: str) -> datetime | None:
    """Parse ``DD.MM.YYYY``; impossible days such as 31.02 are rejected."""
    match = LOCALE_DATE_PATTERN.fullmatch(text.strip())
    if not match:
        return None
    day, month, year = (int(group) for group in match.groups())
    try:
        return datetime(year, month, day)
    except ValueError:
        return None


def excel_serial_to_datetime(serial: float) -> datetime | None:
    try:
        return EXCEL_EPOCH + timedelta(days=int(serial // 1))
    except OverflowError:
        return None


def timestamp_to_datetime(milliseconds: float) -> datetime | None:
    try:
        return UNIX_EPOCH + timedelta(milliseconds=milliseconds)
    except (OverflowError, ValueError):
        return None


def parse_date(raw: object) -> datetime | None:
    """Best-effort conversion of an external value to a naive datetime.

    Tried in order: date/datetime objects, ISO-8601 strings, ``DD.MM.YYYY``
    strings, Excel serial numbers (``0 < n < 2958466``) and millisecond Unix
    timestamps. Bounds are not checked here.
    """
    if isinstance(raw, date):
        return as_datetime(raw)
    if isinstance(raw, str):
        return parse_iso(raw) or parse_locale_date(raw)
    if is_number(raw):
        if 0 < raw < EXCEL_SERIAL_LIMIT:
            return excel_serial_to_datetime(raw)
        return timestamp_to_datetime(raw)
    return None


def format_date(value: datetime, locale: str | None = None, fmt: str | None = None) -> str:
    pattern = fmt or DATE_FORMATS.get(locale or DEFAULT_LOCALE, DATE_FORMATS[DEFAULT_LOCALE])
    return value.strftime(pattern)


def to_iso(value: datetime) -> str:
    """ISO-8601 UTC text with millisecond precision, e.g. ``2024-01-15T00:00:00.000Z``."""
    value = to_naive(value)
    return (
        f"{value.year:04d}-{value.month:02d}-{value.day:02d}"
        f"T{value.hour:02d}:{value.minute:02d}:{value.second:02d}"
        f".{value.microsecond // 1000:03d}Z"
    )


def parse_time(raw: object) -> time | None:
    """Accept ``H:MM``/``HH:MM`` text, ``{"hours", "minutes"}`` mappings and time objects."""
    if isinstance(raw, datetime):
        return raw.time().replace(second=0, microsecond=0)
    if isinstance(raw, time):
        return raw.replace(second=0, microsecond=0, tzinfo=None)
    hours = minutes = None
    if isinstance(raw, str):
        match = TIME_PATTERN.fullmatch(raw.strip())
        if match:
            hours, minutes = int(match.group(1)), int(match.group(2))
    elif isinstance(raw, dict):
        hours, minutes = raw.get("hours"), raw.get("minutes")
        if not (isinstance(hours, int) and isinstance(minutes, int)):
            return None
        if isinstance(hours, bool) or isinstance(minutes, bool):
            return None
    if hours is None or minutes is None:
        return None
    try:
        return time(hours, minutes)
    except ValueError:
        return None


def format_time(value: time) -> str:
    return f"{value.hour:02d}:{value.minute:02d}"
