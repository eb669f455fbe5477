"""Numeric field types: number, percent, rating and money."""

import math
from collections.abc import Mapping
from typing import Any, TypedDict

from fieldkit.convert.numbers import format_number, js_number, parse_number
from fieldkit.fields.base import UNCOERCIBLE, BaseField
from fieldkit.messages import message
from fieldkit.models.enums import EMPTY_DISPLAY, FieldKind, IssueCode
from fieldkit.schema import Schema, is_number

DEFAULT_CURRENCIES = ["TRY", "USD", "EUR"]
CURRENCY_SYMBOLS = {"TRY": "₺", "USD": "$", "EUR": "€", "GBP": "£"}


def _or_uncoercible(value: float | None) -> Any:
    return UNCOERCIBLE if value is None else value


def _bounded(schema: Schema, config: Mapping[str, Any]) -> Schema:
    if config.get("min") is not None:
        schema = schema.minimum(config["min"], message("number.min", min=config["min"]))
    if config.get("max") is not None:
        schema = schema.maximum(config["max"], message("number.max", max=config["max"]))
    return schema


class NumberField(BaseField[float]):
    """Integer or decimal number.

    Imports accept numbers and numeric strings written with either decimal
    separator; booleans are not numbers.
    """

    kind = FieldKind.NUMBER

    def schema(self) -> Schema:
        config = self.config
        base = Schema.number()
        if config.get("integer"):
            base = base.check(
                lambda value: float(value).is_integer(), message("number.integer"), IssueCode.INVALID_TYPE
            )
        if config.get("positive"):
            base = base.check(lambda value: value > 0, message("number.positive"), IssueCode.TOO_SMALL)
        if config.get("negative"):
            base = base.check(lambda value: value < 0, message("number.negative"), IssueCode.TOO_BIG)
        return self.apply_required(_bounded(base, config))

    def present(self, value: float | None) -> str:
        if value is None:
            return EMPTY_DISPLAY
        decimals = 0 if self.config.get("integer") else self.config.get("decimals", 2)
        return format_number(value, decimals, self.config.get("locale"))

    def coerce(self, raw: Any) -> Any:
        return _or_uncoercible(parse_number(raw))


class PercentField(BaseField[float]):
    """Percentage, bounded to 0..100 unless configured otherwise."""

    kind = FieldKind.PERCENT

    def schema(self) -> Schema:
        low = self.config.get("min", 0)
        high = self.config.get("max", 100)
        base = (
            Schema.number()
            .minimum(low, message("percent.min", min=low))
            .maximum(high, message("percent.max", max=high))
        )
        return self.apply_required(base)

    def present(self, value: float | None) -> str:
        if value is None:
            return EMPTY_DISPLAY
        decimals = self.config.get("decimals", 0)
        return f"%{value:.{decimals}f}"

    def coerce(self, raw: Any) -> Any:
        if isinstance(raw, str):
            raw = raw.replace("%", "")
        return _or_uncoercible(parse_number(raw))


class RatingField(BaseField[float]):
    """Star rating from 0 to ``max`` in whole or half steps."""

    kind = FieldKind.RATING

    @property
    def max_stars(self) -> int:
        return self.config.get("max", 5)

    def schema(self) -> Schema:
        top = self.max_stars
        range_message = message("rating.range", max=top)
        base = Schema.number().minimum(0, range_message).maximum(top, range_message)
        if self.config.get("allow_half"):
            base = base.check(
                lambda value: float(value * 2).is_integer(), message("rating.half_step")
            )
        else:
            base = base.check(lambda value: float(value).is_integer(), message("rating.step"))
        return self.apply_required(base)

    def present(self, value: float | None) -> str:
        if value is None:
            return EMPTY_DISPLAY
        top = self.max_stars
        filled = max(math.floor(value), 0)
        empty = max(top - math.ceil(value), 0)
        return f"{js_number(value)}/{top} {'★' * filled}{'☆' * empty}"

    def coerce(self, raw: Any) -> Any:
        return _or_uncoercible(parse_number(raw))


class MoneyValue(TypedDict):
    amount: float
    currency: str


class MoneyField(BaseField[MoneyValue]):
    """Amount with a currency code, held as ``{"amount": ..., "currency": ...}``."""

    kind = FieldKind.MONEY

    @property
    def currencies(self) -> list[str]:
        return list(self.config.get("currencies") or DEFAULT_CURRENCIES)

    @property
    def default_currency(self) -> str:
        return self.config.get("currency") or self.currencies[0]

    def schema(self) -> Schema:
        amount = Schema.number()
        if not self.config.get("allow_negative"):
            amount = amount.minimum(0, message("money.negative"))
        amount = _bounded(amount, self.config)
        currencies = self.currencies
        currency = Schema.string().check(
            lambda value: value in currencies, message("money.currency"), IssueCode.INVALID_ENUM_VALUE
        )
        return self.apply_required(Schema.object_of({"amount": amount, "currency": currency}))

    def currency_symbol(self, currency: str) -> str:
        return CURRENCY_SYMBOLS.get(currency, currency)

    def present(self, value: MoneyValue | None) -> str:
        if not value:
            return EMPTY_DISPLAY
        decimals = self.config.get("decimals", 2)
        formatted = format_number(value["amount"], decimals, self.config.get("locale"), min_decimals=decimals)
        return f"{formatted} {self.currency_symbol(value['currency'])}"

    def to_export(self, value: MoneyValue | None) -> dict[str, Any] | None:
        if not value:
            return None
        return {"amount": value["amount"], "currency": value["currency"]}

    def coerce(self, raw: Any) -> Any:
        if is_number(raw):
            return {"amount": raw, "currency": self.default_currency}
        if isinstance(raw, Mapping):
            amount, currency = raw.get("amount"), raw.get("currency")
            if is_number(amount) and isinstance(currency, str):
                return {"amount": amount, "currency": currency}
        return UNCOERCIBLE
