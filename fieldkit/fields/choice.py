"""Choice field types: boolean, select and multiselect."""

from collections.abc import Sequence
from typing import Any

from fieldkit.fields.base import UNCOERCIBLE, BaseField
from fieldkit.messages import message
from fieldkit.models.config import SelectOption
from fieldkit.models.enums import EMPTY_DISPLAY, FieldKind, IssueCode
from fieldkit.schema import Schema, is_number

TRUE_WORDS = frozenset({"true", "1", "evet"})
FALSE_WORDS = frozenset({"false", "0", "hayır"})


def same_value(left: Any, right: Any) -> bool:
    """Equality that keeps booleans apart from the numbers 0 and 1."""
    if isinstance(left, bool) != isinstance(right, bool):
        return False
    return left == right


class BooleanField(BaseField[bool]):
    """True/false value.

    A required boolean only accepts ``True``, which is what consent
    checkboxes need. Even when optional, ``None`` is not a boolean and
    is rejected.
    """

    kind = FieldKind.BOOLEAN
    accepts_empty = False

    def schema(self) -> Schema:
        base = Schema.boolean()
        if self.required:
            base = base.check(lambda value: value is True, message("boolean.required"))
        return self.apply_required(base)

    def present(self, value: bool | None) -> str:
        if value is None:
            return EMPTY_DISPLAY
        if value:
            return self.config.get("true_label", "Yes")
        return self.config.get("false_label", "No")

    def coerce(self, raw: Any) -> Any:
        if isinstance(raw, bool):
            return raw
        if isinstance(raw, str):
            word = raw.strip().lower()
            if word in TRUE_WORDS:
                return True
            if word in FALSE_WORDS:
                return False
            return UNCOERCIBLE
        if is_number(raw):
            if raw == 1:
                return True
            if raw == 0:
                return False
        return UNCOERCIBLE


class _OptionsMixin:
    """Option lookups shared by select and multiselect."""

    config: Any

    @property
    def options(self) -> list[SelectOption]:
        return list(self.config.get("options") or [])

    def active_options(self) -> list[SelectOption]:
        return [option for option in self.options if not option.get("disabled")]

    def active_values(self) -> list[Any]:
        return [option.get("value") for option in self.active_options()]

    def is_active_value(self, value: Any) -> bool:
        return any(same_value(value, candidate) for candidate in self.active_values())

    def option_for(self, value: Any) -> SelectOption | None:
        for option in self.options:
            if same_value(option.get("value"), value):
                return option
        return None

    def label_for(self, value: Any) -> str:
        option = self.option_for(value)
        if option is not None and option.get("label") is not None:
            return option["label"]
        return str(value)

    def grouped_options(self) -> dict[str | None, list[SelectOption]]:
        """Options keyed by their ``group``, in first-seen order."""
        grouped: dict[str | None, list[SelectOption]] = {}
        for option in self.options:
            grouped.setdefault(option.get("group"), []).append(option)
        return grouped


class SelectField(_OptionsMixin, BaseField[Any]):
    """One value out of a fixed option list.

    Disabled options stay listed for display but are not valid values.
    """

    kind = FieldKind.SELECT

    def schema(self) -> Schema:
        base = Schema.of(lambda value: True).check(
            self.is_active_value, message("select.invalid"), IssueCode.INVALID_ENUM_VALUE
        )
        return self.apply_required(base)

    def present(self, value: Any) -> str:
        if value is None:
            return EMPTY_DISPLAY
        return self.label_for(value)

    def is_empty(self, value: Any) -> bool:
        return value is None

    def coerce(self, raw: Any) -> Any:
        option = self.option_for(raw)
        if option is not None:
            return option.get("value")
        if isinstance(raw, str):
            wanted = raw.lower()
            for option in self.options:
                label = option.get("label")
                if isinstance(label, str) and label.lower() == wanted:
                    return option.get("value")
        return UNCOERCIBLE


class MultiselectField(_OptionsMixin, BaseField[list[Any]]):
    """Several values out of a fixed option list."""

    kind = FieldKind.MULTISELECT

    def schema(self) -> Schema:
        item = Schema.of(lambda value: True).check(
            self.is_active_value, message("select.invalid"), IssueCode.INVALID_ENUM_VALUE
        )
        base = Schema.array_of(item)
        low = self.config.get("min_selections")
        if low is not None:
            base = base.min_length(low, message("multiselect.min", min=low))
        high = self.config.get("max_selections")
        if high is not None:
            base = base.max_length(high, message("multiselect.max", max=high))
        return self.apply_required(base)

    def present(self, value: list[Any] | None) -> str:
        if not value:
            return EMPTY_DISPLAY
        return ", ".join(self.label_for(item) for item in value)

    def filter_preview(self, value: list[Any] | None) -> str | None:
        if not value:
            return None
        if len(value) == 1:
            return self.label_for(value[0])
        return f"{len(value)} selected"

    def _match(self, item: Any) -> SelectOption | None:
        option = self.option_for(item)
        if option is not None:
            return option
        for candidate in self.options:
            if isinstance(item, str) and candidate.get("label") == item:
                return candidate
        return None

    def coerce(self, raw: Any) -> Any:
        if isinstance(raw, str):
            raw = [part.strip() for part in raw.split(",")]
        if not isinstance(raw, Sequence) or isinstance(raw, (str, bytes)):
            return UNCOERCIBLE
        matched = [option.get("value") for option in map(self._match, raw) if option is not None]
        return matched or UNCOERCIBLE

    def is_max_reached(self, selected_count: int) -> bool:
        high = self.config.get("max_selections")
        return high is not None and selected_count >= high

    def all_values(self) -> list[Any]:
        return self.active_values()
