"""Result and state containers returned by field operations."""

from dataclasses import dataclass
from typing import Any, Generic, TypeVar

from fieldkit.reactive import Computed, Signal, WritableComputed

T = TypeVar("T")


@dataclass(frozen=True)
class ImportIssue:
    """First validation failure of a detailed import."""

    message: str
    path: tuple[str | int, ...] = ()
    code: str | None = None


@dataclass(frozen=True)
class ImportResult(Generic[T]):
    """Outcome of ``from_import_with_details``.

    On success ``data`` holds the coerced, validated value and ``error`` is
    None; on failure ``data`` is None and ``error`` describes the first issue.
    """

    success: bool
    data: T | None = None
    error: ImportIssue | None = None

    @classmethod
    def ok(cls, data: T) -> "ImportResult[T]":
        return cls(success=True, data=data)

    @classmethod
    def failed(
        cls, message: str, path: tuple[str | int, ...] = (), code: str | None = None
    ) -> "ImportResult[T]":
        return cls(success=False, error=ImportIssue(message=message, path=path, code=code))


@dataclass(frozen=True)
class FieldState(Generic[T]):
    """Per-session editing state of one field.

    Attributes:
        value: Current value cell, read by calling it and written with ``set``
        touched: Whether the user has interacted with the field
        valid: Schema success for the current value, independent of ``touched``
        error: First validation message, None unless touched and invalid
        composite: The ``GroupState`` or ``ArrayState`` behind a composite field
    """

    value: Signal[T] | WritableComputed[T]
    touched: Signal[bool] | WritableComputed[bool]
    valid: Computed[bool]
    error: Computed[str | None]
    composite: Any = None

    def touch(self) -> None:
        self.touched.set(True)
