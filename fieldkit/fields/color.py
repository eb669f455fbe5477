"""Color field."""

from typing import Any

from fieldkit.convert import colors
from fieldkit.fields.base import UNCOERCIBLE, BaseField
from fieldkit.messages import message
from fieldkit.models.enums import EMPTY_DISPLAY, ColorFormat, FieldKind, IssueCode
from fieldkit.schema import Schema


class ColorField(BaseField[str]):
    """Color written in the configured notation (hex by default).

    With ``alpha`` the alpha-channel variants of that notation are accepted
    too. ``allow_custom=False`` together with ``presets`` limits values to
    the preset list, compared case-insensitively. Exports are always
    upper-case hex.
    """

    kind = FieldKind.COLOR

    @property
    def format(self) -> ColorFormat:
        try:
            return ColorFormat(self.config.get("format", ColorFormat.HEX))
        except ValueError:
            return ColorFormat.HEX

    @property
    def presets(self) -> list[str]:
        return list(self.config.get("presets") or [])

    def schema(self) -> Schema:
        patterns = colors.patterns_for(self.format, bool(self.config.get("alpha")))
        base = Schema.string().check(
            lambda value: any(pattern.fullmatch(value) for pattern in patterns),
            message("color.invalid", format=self.format.upper()),
            IssueCode.INVALID_STRING,
        )
        presets = self.presets
        if self.config.get("allow_custom") is False and presets:
            folded = {preset.casefold() for preset in presets}
            base = base.check(
                lambda value: value.casefold() in folded,
                message("color.preset"),
                IssueCode.INVALID_ENUM_VALUE,
            )
        return self.apply_required(base)

    def convert(self, value: str, fmt: str) -> str | None:
        return colors.convert(value, fmt)

    def present(self, value: str | None) -> str:
        if not value:
            return EMPTY_DISPLAY
        return value.upper()

    def to_export(self, value: str | None) -> str | None:
        if not value:
            return None
        converted = colors.convert(value, ColorFormat.HEX)
        return (converted or value).upper()

    def coerce(self, raw: Any) -> Any:
        if not isinstance(raw, str):
            return UNCOERCIBLE
        value = raw.strip()
        if not colors.is_color(value):
            return UNCOERCIBLE
        return colors.convert(value, self.format) or value
