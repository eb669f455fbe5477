"""Date and time field types."""

from datetime import date, datetime, time
from typing import Any

from fieldkit.convert.dates import (
    as_datetime,
    end_of_day,
    format_date,
    format_time,
    parse_date,
    parse_time,
    start_of_day,
    to_iso,
)
from fieldkit.fields.base import UNCOERCIBLE, BaseField
from fieldkit.messages import message
from fieldkit.models.enums import EMPTY_DISPLAY, FieldKind, IssueCode
from fieldkit.schema import Schema


class DateField(BaseField[datetime]):
    """Calendar date held as a naive ``datetime``.

    ``min_today``/``max_today`` are evaluated each time ``schema()`` runs,
    so a long-lived field follows the calendar. A plain ``date`` given as
    ``max`` allows the whole of that day.
    """

    kind = FieldKind.DATE

    def bounds(self) -> tuple[datetime | None, datetime | None]:
        """Earliest and latest accepted values for the current day."""
        config = self.config
        now = datetime.now()
        low = high = None
        if config.get("min_today"):
            low = start_of_day(now)
        elif config.get("min") is not None:
            low = parse_date(config["min"])
        if config.get("max_today"):
            high = end_of_day(now)
        elif config.get("max") is not None:
            bound = config["max"]
            high = parse_date(bound)
            if high is not None and isinstance(bound, date) and not isinstance(bound, datetime):
                high = end_of_day(high)
        return low, high

    def schema(self) -> Schema:
        base = Schema.datetime(message("date.invalid")).transform(as_datetime)
        low, high = self.bounds()
        locale = self.config.get("locale")
        if low is not None:
            base = base.minimum(low, message("date.min", min=format_date(low, locale)))
        if high is not None:
            base = base.maximum(high, message("date.max", max=format_date(high, locale)))
        return self.apply_required(base)

    def present(self, value: datetime | None) -> str:
        if value is None:
            return EMPTY_DISPLAY
        return format_date(value, self.config.get("locale"), self.config.get("format"))

    def to_export(self, value: datetime | None) -> str | None:
        if value is None:
            return None
        return to_iso(value)

    def coerce(self, raw: Any) -> Any:
        parsed = parse_date(raw)
        return UNCOERCIBLE if parsed is None else parsed


class TimeField(BaseField[time]):
    """Time of day with minute precision, written ``HH:MM``."""

    kind = FieldKind.TIME

    def _bound(self, key: str) -> time | None:
        value = self.config.get(key)
        return None if value is None else parse_time(value)

    def schema(self) -> Schema:
        base = Schema.time(message("time.invalid"))
        low, high = self._bound("min"), self._bound("max")
        if low is not None:
            base = base.check(
                lambda value: value.replace(tzinfo=None) >= low,
                message("time.min", min=format_time(low)),
                IssueCode.TOO_SMALL,
            )
        if high is not None:
            base = base.check(
                lambda value: value.replace(tzinfo=None) <= high,
                message("time.max", max=format_time(high)),
                IssueCode.TOO_BIG,
            )
        return self.apply_required(base)

    def present(self, value: time | None) -> str:
        if value is None:
            return EMPTY_DISPLAY
        return format_time(value)

    def to_export(self, value: time | None) -> str | None:
        if value is None:
            return None
        return format_time(value)

    def coerce(self, raw: Any) -> Any:
        parsed = parse_time(raw)
        return UNCOERCIBLE if parsed is None else parsed
