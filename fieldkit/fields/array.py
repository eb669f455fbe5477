"""Array field: a variable-length list of rows sharing one set of item fields."""

import json
from collections.abc import Mapping, Sequence
from typing import Any
from uuid import uuid4

from fieldkit.fields.base import BaseField
from fieldkit.fields.group import ChildMap, import_children
from fieldkit.messages import message
from fieldkit.models.enums import EMPTY_DISPLAY, FieldKind, IssueCode
from fieldkit.models.results import FieldState, ImportResult
from fieldkit.reactive import Computed, Signal, WritableComputed
from fieldkit.schema import Schema


class ArrayItem(ChildMap):
    """One row: a child map plus an opaque id that survives reordering."""

    def __init__(self, fields: Sequence[BaseField], initial: Mapping[str, Any]):
        super().__init__(fields, initial)
        self.id = uuid4().hex

    def __repr__(self) -> str:
        return f"ArrayItem(id={self.id!r})"


class ArrayState:
    """Editing state returned by ``ArrayField.create_array_state``.

    ``items`` is a signal holding the row list; every mutation replaces the
    list so dependants recompute. Mutations that would break the configured
    bounds are silently ignored.
    """

    def __init__(self, field: "ArrayField", initial: Sequence[Mapping[str, Any]]):
        self._field = field
        self.items: Signal[list[ArrayItem]] = Signal([self._new_item(row) for row in initial])
        self.own_touched = Signal(False)
        self.values = Computed(lambda: [item.values() for item in self.items()])
        self.count = Computed(lambda: len(self.items()))
        self.bounds_error = Computed(lambda: field.count_error(self.count()))
        self.valid = Computed(
            lambda: all(item.valid() for item in self.items()) and self.bounds_error() is None
        )
        self.can_add = Computed(
            lambda: field.max_items is None or self.count() < field.max_items
        )
        self.can_remove = Computed(lambda: self.count() > field.min_items)
        self.touched = Computed(
            lambda: self.own_touched() or any(item.touched() for item in self.items())
        )
        self.error = Computed(self._first_error)

    def _new_item(self, row: Mapping[str, Any] | None = None) -> ArrayItem:
        return ArrayItem(self._field.fields, row or {})

    def _first_error(self) -> str | None:
        for item in self.items():
            error = item.error()
            if error is not None:
                return error
        if self.own_touched():
            return self.bounds_error()
        return None

    def get(self, item_id: str) -> ArrayItem | None:
        for item in self.items.peek():
            if item.id == item_id:
                return item
        return None

    def add(self, initial: Mapping[str, Any] | None = None) -> ArrayItem | None:
        """Append a row; returns it, or None when the maximum is reached."""
        if not self.can_add():
            return None
        item = self._new_item(initial)
        self.items.set([*self.items.peek(), item])
        return item

    def remove(self, item_id: str) -> None:
        if not self.can_remove() or self.get(item_id) is None:
            return
        self.items.set([item for item in self.items.peek() if item.id != item_id])

    def move(self, from_index: int, to_index: int) -> None:
        """Move a row to ``to_index``, shifting the rows in between."""
        rows = list(self.items.peek())
        if not 0 <= from_index < len(rows):
            return
        row = rows.pop(from_index)
        rows.insert(to_index, row)
        self.items.set(rows)

    def clear(self) -> None:
        """Drop every row, leaving ``min`` blank rows when a minimum is set."""
        self.items.set([self._new_item() for _ in range(self._field.min_items)])

    def assign(self, rows: Sequence[Mapping[str, Any]] | None) -> None:
        """Replace every row with fresh rows built from ``rows``."""
        self.items.set([self._new_item(row) for row in rows or []])

    def touch_all(self) -> None:
        self.own_touched.set(True)
        for item in self.items.peek():
            item.touch_all()

    def untouch_all(self) -> None:
        self.own_touched.set(False)
        for item in self.items.peek():
            item.untouch_all()


class ArrayField(BaseField[list[dict[str, Any]]]):
    """Repeating rows, each an object built from the same item fields.

    ``required`` means at least one row. ``min``/``max`` bound the row count;
    ``clear()`` leaves ``min`` blank rows behind.
    """

    kind = FieldKind.ARRAY

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

    @property
    def min_items(self) -> int:
        return self.config.get("min") or 0

    @property
    def max_items(self) -> int | None:
        return self.config.get("max")

    def count_error(self, count: int) -> str | None:
        """Message for a row count outside the configured bounds."""
        if self.required and count == 0:
            return message("required")
        if count < self.min_items:
            return message("array.min", min=self.min_items)
        if self.max_items is not None and count > self.max_items:
            return message("array.max", max=self.max_items)
        return None

    def item_title(self, index: int) -> str:
        template = self.config.get("item_title")
        if template:
            return template.replace("{index}", str(index + 1))
        return f"{self.label} #{index + 1}"

    def apply_required(self, schema: Schema) -> Schema:
        if self.required:
            return schema.check(lambda rows: len(rows) >= 1, message("required"), IssueCode.REQUIRED)
        return schema.nullable()

    def schema(self) -> Schema:
        row = Schema.object_of({field.name: field.schema() for field in self._fields})
        base = Schema.array_of(row)
        if self.config.get("min") is not None:
            base = base.min_length(self.config["min"], message("array.min", min=self.config["min"]))
        if self.max_items is not None:
            base = base.max_length(self.max_items, message("array.max", max=self.max_items))
        return self.apply_required(base)

    def create_array_state(self, initial: Sequence[Mapping[str, Any]] | None = None) -> ArrayState:
        if initial is None:
            initial = self.config.get("default_value") or []
        return ArrayState(self, initial)

    def create_value(self, initial: Sequence[Mapping[str, Any]] | None = None) -> FieldState[list[dict[str, Any]]]:
        state = self.create_array_state(initial)

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

    def present(self, value: Sequence[Mapping[str, Any]] | None) -> str:
        if not value:
            return EMPTY_DISPLAY
        return f"{len(value)} items"

    def to_export(self, value: Sequence[Mapping[str, Any]] | None) -> list[dict[str, Any]] | None:
        if value is None:
            return None
        return [
            {field.name: field.to_export(row.get(field.name)) for field in self._fields}
            for row in value
        ]

    def from_import_with_details(self, raw: Any) -> ImportResult[list[dict[str, Any]]]:
        """Import a list of row mappings, or a JSON string holding one."""
        if raw is None or raw == "":
            return ImportResult.failed(message("required"), code=IssueCode.REQUIRED)
        if isinstance(raw, str):
            try:
                raw = json.loads(raw)
            except ValueError:
                return ImportResult.failed(message("invalid"), code=IssueCode.INVALID_TYPE)
        if not isinstance(raw, (list, tuple)):
            return ImportResult.failed(message("invalid"), code=IssueCode.INVALID_TYPE)
        rows = []
        for index, row in enumerate(raw):
            if not isinstance(row, Mapping):
                return ImportResult.failed(message("invalid"), (index,), IssueCode.INVALID_TYPE)
            imported = import_children(self._fields, row, (index,))
            if not imported.success:
                return imported
            rows.append(imported.data)
        result = self.schema().validate(rows)
        if not result.success:
            issue = result.first_issue
            return ImportResult.failed(issue.message, issue.path, issue.code)
        return ImportResult.ok(result.data)
