"""Phone number field."""

from typing import Any

from fieldkit.convert.phones import (
    PhonePlan,
    format_phone,
    get_plan,
    matches_plan,
    normalize_phone,
    strip_separators,
    to_e164,
)
from fieldkit.fields.base import UNCOERCIBLE, BaseField
from fieldkit.messages import message
from fieldkit.models.enums import EMPTY_DISPLAY, FieldKind, IssueCode, PhoneCountry
from fieldkit.schema import Schema, is_number


class PhoneField(BaseField[str]):
    """Phone number validated against one country's dialing plan.

    Separators (spaces, dashes, dots, parentheses) are ignored when
    validating and stripped from the validated value. Exports use the
    international ``+<code><number>`` form.
    """

    kind = FieldKind.PHONE

    @property
    def country(self) -> str:
        country = self.config.get("country") or PhoneCountry.TR
        return country if country in PhoneCountry.__members__ else PhoneCountry.TR

    @property
    def plan(self) -> PhonePlan:
        return get_plan(self.country)

    def schema(self) -> Schema:
        plan = self.plan
        base = (
            Schema.string()
            .transform(strip_separators)
            .check(
                lambda value: matches_plan(value, plan),
                message("phone.invalid", example=plan.example),
                IssueCode.INVALID_STRING,
            )
        )
        return self.apply_required(base)

    def normalize(self, value: str | None) -> str | None:
        return normalize_phone(value, self.plan)

    def format_phone(self, digits: str) -> str:
        return format_phone(digits, self.country, self.config.get("show_country_code", True) is not False)

    def present(self, value: str | None) -> str:
        if not value:
            return EMPTY_DISPLAY
        digits = self.normalize(value)
        if not digits:
            return value
        return self.format_phone(digits)

    def to_export(self, value: str | None) -> str | None:
        if not value:
            return None
        digits = self.normalize(value)
        if not digits:
            return value
        return to_e164(digits, self.plan)

    def coerce(self, raw: Any) -> Any:
        if isinstance(raw, str):
            return strip_separators(raw)
        if is_number(raw) and float(raw).is_integer():
            return str(int(raw))
        return UNCOERCIBLE

    @property
    def mask(self) -> str:
        return self.plan.mask

    @property
    def example(self) -> str:
        return self.plan.example
