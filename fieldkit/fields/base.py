"""Field contract shared by every field type.

A field is an immutable definition (``name``, ``label``, ``config``) plus the
behaviour derived from it:

- ``schema()`` builds a fresh validation ``Schema`` from the configuration
- ``create_value()`` opens a reactive editing session (``FieldState``)
- ``present()``/``filter_preview()`` render values for people
- ``to_export()``/``from_import()`` translate to and from external data

Field instances hold no edited data, so one instance can back any number of
editing sessions.
"""

from abc import ABC, abstractmethod
from collections.abc import Mapping
from types import MappingProxyType
from typing import Any, ClassVar, Generic, TypeVar

from fieldkit.messages import message
from fieldkit.models.enums import EMPTY_DISPLAY, FieldKind, IssueCode
from fieldkit.models.results import FieldState, ImportResult
from fieldkit.reactive import Computed, Signal
from fieldkit.schema import Schema, SchemaResult

T = TypeVar("T")


class _Uncoercible:
    """Marker returned by ``coerce`` when no candidate value can be built."""

    def __repr__(self) -> str:
        return "UNCOERCIBLE"


UNCOERCIBLE: Any = _Uncoercible()


def first_error(result: SchemaResult) -> str | None:
    """Message of the first issue, or None when validation passed."""
    if result.success:
        return None
    issue = result.first_issue
    if issue is not None and issue.message:
        return issue.message
    return message("invalid")


class BaseField(ABC, Generic[T]):
    """Abstract base for all field types.

    Subclasses set ``kind`` and implement ``schema()``. Import coercion is
    customised through ``coerce()``; both import paths share it so that
    ``from_import(raw)`` is non-null exactly when
    ``from_import_with_details(raw).success`` is true.
    """

    kind: ClassVar[FieldKind]
    # False for types whose optional form still rejects None (booleans)
    accepts_empty: ClassVar[bool] = True

    def __init__(
        self,
        name: str,
        label: str | None = None,
        config: Mapping[str, Any] | None = None,
    ):
        self._name = name
        self._label = name if label is None else label
        self._config = MappingProxyType(dict(config or {}))

    @property
    def name(self) -> str:
        return self._name

    @property
    def label(self) -> str:
        return self._label

    @property
    def config(self) -> Mapping[str, Any]:
        """Read-only view of the configuration."""
        return self._config

    @property
    def required(self) -> bool:
        return bool(self._config.get("required", False))

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self._name!r}, label={self._label!r})"

    # ------------------------------------------------------------------
    # Validation
    # ------------------------------------------------------------------

    @abstractmethod
    def schema(self) -> Schema:
        """Build the validation schema for the current configuration."""

    def apply_required(self, schema: Schema) -> Schema:
        """Return ``schema`` unchanged when required, otherwise also accept None."""
        if self.required or not self.accepts_empty:
            return schema
        return schema.nullable()

    def create_value(self, initial: T | None = None) -> FieldState[T]:
        """Open an editing session starting at ``initial``.

        ``valid`` tracks the value only. ``error`` stays None until the
        field is touched, then shows the first validation message.
        """
        if initial is None:
            initial = self._config.get("default_value")
        value: Signal[Any] = Signal(initial)
        touched = Signal(False)
        result = Computed(lambda: self.schema().validate(value()))
        valid = Computed(lambda: result().success)
        error = Computed(lambda: first_error(result()) if touched() else None)
        return FieldState(value=value, touched=touched, valid=valid, error=error)

    # ------------------------------------------------------------------
    # Presentation
    # ------------------------------------------------------------------

    def is_empty(self, value: Any) -> bool:
        return value is None or value == "" or value == []

    def present(self, value: T | None) -> str:
        if self.is_empty(value):
            return EMPTY_DISPLAY
        return str(value)

    def filter_preview(self, value: T | None) -> str | None:
        """Short label for an active filter, None when there is nothing to show."""
        if self.is_empty(value):
            return None
        return self.present(value)

    # ------------------------------------------------------------------
    # Import / export
    # ------------------------------------------------------------------

    def to_export(self, value: T | None) -> Any:
        return value

    def coerce(self, raw: Any) -> Any:
        """Turn an external value into a candidate for validation.

        Return ``UNCOERCIBLE`` when the input has the wrong shape. The default
        passes values through untouched.
        """
        return raw

    def from_import(self, raw: Any) -> T | None:
        """Coerce and validate ``raw``; None on any failure."""
        result = self.from_import_with_details(raw)
        return result.data if result.success else None

    def from_import_with_details(self, raw: Any) -> ImportResult[T]:
        """Coerce and validate ``raw``, reporting the first issue on failure."""
        if raw is None:
            return ImportResult.failed(message("required"), code=IssueCode.REQUIRED)

        schema = self.schema()
        candidate = self.coerce(raw)
        if candidate is UNCOERCIBLE:
            issue = schema.validate(raw).first_issue
            if issue is None:
                return ImportResult.failed(message("invalid"), code=IssueCode.INVALID_TYPE)
            return ImportResult.failed(issue.message, issue.path, issue.code)

        result = schema.validate(candidate)
        if not result.success:
            issue = result.first_issue
            return ImportResult.failed(first_error(result), issue.path, issue.code)
        if result.data is None:
            return ImportResult.failed(message("required"), code=IssueCode.REQUIRED)
        return ImportResult.ok(result.data)
