"""Group field: a fixed set of named child fields edited as one object."""

from collections.abc import Iterable, Mapping, Sequence
from typing import Any

from fieldkit.fields.base import BaseField
from fieldkit.messages import message
from fieldkit.models.enums import EMPTY_DISPLAY, FieldKind, IssueCode
from fieldkit.models.results import FieldState, ImportResult
from fieldkit.reactive import Computed, WritableComputed
from fieldkit.schema import Schema

GROUP_PREVIEW_ENTRIES = 3


class ChildMap:
    """Editing states of a list of child fields, keyed by field name.

    Aggregates are computed cells over the children: ``values`` projects
    every child's current value, ``valid`` is true when all children are
    valid, ``errors`` maps each name to its first error and ``error`` is the
    first non-null child error in declaration order.
    """

    def __init__(self, fields: Sequence[BaseField], initial: Mapping[str, Any]):
        self.fields: dict[str, FieldState] = {
            field.name: field.create_value(initial.get(field.name)) for field in fields
        }
        self.values = Computed(
            lambda: {name: state.value() for name, state in self.fields.items()}
        )
        self.valid = Computed(lambda: all(state.valid() for state in self.fields.values()))
        self.errors = Computed(
            lambda: {name: state.error() for name, state in self.fields.items()}
        )
        self.error = Computed(self._first_error)
        self.touched = Computed(
            lambda: any(state.touched() for state in self.fields.values())
        )

    def _first_error(self) -> str | None:
        for state in self.fields.values():
            error = state.error()
            if error is not None:
                return error
        return None

    def set_value(self, name: str, value: Any) -> None:
        """Write one child; unknown names are ignored."""
        state = self.fields.get(name)
        if state is not None:
            state.value.set(value)

    def assign(self, values: Mapping[str, Any] | None) -> None:
        """Write every child, missing names become None."""
        values = values or {}
        for name, state in self.fields.items():
            state.value.set(values.get(name))

    def touch_all(self) -> None:
        for state in self.fields.values():
            state.touched.set(True)

    def untouch_all(self) -> None:
        for state in self.fields.values():
            state.touched.set(False)


class GroupState(ChildMap):
    """Editing state returned by ``GroupField.create_group_state``."""

    def __init__(self, fields: Sequence[BaseField], initial: Mapping[str, Any]):
        super().__init__(fields, initial)
        self._initial = {name: initial.get(name) for name in self.fields}

    def patch_values(self, values: Mapping[str, Any]) -> None:
        for name, value in values.items():
            self.set_value(name, value)

    def reset(self, values: Mapping[str, Any] | None = None) -> None:
        """Restore ``values`` (or the values captured at creation) and clear touched."""
        self.assign(self._initial if values is None else values)
        self.untouch_all()


def import_children(
    fields: Iterable[BaseField], raw: Mapping[str, Any], prefix: tuple[str | int, ...] = ()
) -> ImportResult[dict[str, Any]]:
    """Import each child from ``raw``; absent entries stay None.

    The first failing child aborts the import, with its issue path prefixed
    by ``prefix`` and the child name.
    """
    values: dict[str, Any] = {}
    for field in fields:
        item = raw.get(field.name)
        if item is None:
            values[field.name] = None
            continue
        result = field.from_import_with_details(item)
        if not result.success:
            issue = result.error
            return ImportResult.failed(issue.message, (*prefix, field.name, *issue.path), issue.code)
        values[field.name] = result.data
    return ImportResult.ok(values)


class GroupField(BaseField[dict[str, Any]]):
    """Fixed set of child fields forming one object value.

    Example:
        ```python
        address = GroupField("address", "Address", [
            StringField("street", config={"required": True}),
            StringField("city"),
        ])
        state = address.create_group_state({"city": "Ankara"})
        state.valid()  # False: street is required
        ```
    """

    kind = FieldKind.GROUP

    def __init__(
        self,
        name: str,
        label: str | None = None,
        fields: Sequence[BaseField] | None = None,
        config: Mapping[str, Any] | None = None,
    ):
        super().__init__(name, label, config)
        self._fields = tuple(fields or ())

    @property
    def fields(self) -> tuple[BaseField, ...]:
        return self._fields

    def get_field(self, name: str) -> BaseField | None:
        for field in self._fields:
            if field.name == name:
                return field
        return None

    def field_names(self) -> list[str]:
        return [field.name for field in self._fields]

    def schema(self) -> Schema:
        shape = {field.name: field.schema() for field in self._fields}
        return self.apply_required(Schema.object_of(shape))

    def create_group_state(self, initial: Mapping[str, Any] | None = None) -> GroupState:
        if initial is None:
            initial = self.config.get("default_value") or {}
        return GroupState(self._fields, initial)

    def create_value(self, initial: Mapping[str, Any] | None = None) -> FieldState[dict[str, Any]]:
        """Editing state whose value and touched cells fan out to the children."""
        state = self.create_group_state(initial)

        def set_touched(touched: bool) -> None:
            if touched:
                state.touch_all()
            else:
                state.untouch_all()

        return FieldState(
            value=WritableComputed(state.values, state.assign),
            touched=WritableComputed(state.touched, set_touched),
            valid=state.valid,
            error=state.error,
            composite=state,
        )

    def present(self, value: Mapping[str, Any] | None) -> str:
        if not value:
            return EMPTY_DISPLAY
        shown = [
            field.present(value.get(field.name))
            for field in self._fields
            if not field.is_empty(value.get(field.name))
        ]
        if not shown:
            return EMPTY_DISPLAY
        return ", ".join(shown[:GROUP_PREVIEW_ENTRIES])

    def is_empty(self, value: Any) -> bool:
        return not value

    def to_export(self, value: Mapping[str, Any] | None) -> dict[str, Any] | None:
        if value is None:
            return None
        return {field.name: field.to_export(value.get(field.name)) for field in self._fields}

    def from_import_with_details(self, raw: Any) -> ImportResult[dict[str, Any]]:
        if raw is None:
            return ImportResult.failed(message("required"), code=IssueCode.REQUIRED)
        if not isinstance(raw, Mapping):
            return ImportResult.failed(message("invalid"), code=IssueCode.INVALID_TYPE)
        imported = import_children(self._fields, raw)
        if not imported.success:
            return imported
        result = self.schema().validate(imported.data)
        if not result.success:
            issue = result.first_issue
            return ImportResult.failed(issue.message, issue.path, issue.code)
        return ImportResult.ok(result.data)
