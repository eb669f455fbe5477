"""Process-wide registry of field types by name.

The registry maps a type name (``"string"``, ``"checkbox"``...) to a field
constructor taking ``(name, label, config)``. It is filled with the built-in
types at import time and can be extended at runtime:

    ```python
    from fieldkit.registry import register_field_type, get_field_type

    register_field_type("iban", IbanField)
    field = get_field_type("iban")("account", "Account")
    ```

Overwriting a name always warns, even when the constructor is the same one.
Looking up an unknown name returns None; choosing a fallback is up to the
caller. Registration and lookup are guarded by a lock so that threads
registering types cannot race with field construction.
"""

import threading
import warnings
from collections.abc import Iterator

from fieldkit.fields import (
    BooleanField,
    ColorField,
    DateField,
    EmailField,
    JsonField,
    MaskedField,
    MoneyField,
    MultiselectField,
    NumberField,
    PasswordField,
    PercentField,
    PhoneField,
    RatingField,
    SelectField,
    SlugField,
    StringField,
    TagsField,
    TextareaField,
    TimeField,
    UrlField,
)
from fieldkit.models.config import FieldConstructor

BUILTIN_TYPES: dict[str, FieldConstructor] = {
    "string": StringField,
    "text": StringField,
    "textarea": TextareaField,
    "password": PasswordField,
    "slug": SlugField,
    "masked": MaskedField,
    "number": NumberField,
    "integer": NumberField,
    "decimal": NumberField,
    "percent": PercentField,
    "rating": RatingField,
    "money": MoneyField,
    "boolean": BooleanField,
    "checkbox": BooleanField,
    "toggle": BooleanField,
    "date": DateField,
    "time": TimeField,
    "select": SelectField,
    "enum": SelectField,
    "multiselect": MultiselectField,
    "color": ColorField,
    "phone": PhoneField,
    "email": EmailField,
    "url": UrlField,
    "json": JsonField,
    "tags": TagsField,
}


class FieldRegistry:
    """Mutable name to field-constructor mapping."""

    def __init__(self, types: dict[str, FieldConstructor] | None = None):
        self._types: dict[str, FieldConstructor] = dict(types or {})
        self._lock = threading.RLock()

    def register(self, name: str, ctor: FieldConstructor) -> None:
        """
        Register ``ctor`` under ``name``, replacing any previous entry.

        Args:
            name: Exact, case-sensitive type name
            ctor: Callable building a field from ``(name, label, config)``

        Warns:
            UserWarning: When ``name`` was already registered
        """
        with self._lock:
            if name in self._types:
                warnings.warn(
                    f"Field type '{name}' is already registered and will be overwritten",
                    UserWarning,
                    stacklevel=2,
                )
            self._types[name] = ctor

    def is_registered(self, name: str) -> bool:
        with self._lock:
            return name in self._types

    def get(self, name: str) -> FieldConstructor | None:
        """Constructor registered under ``name``, or None."""
        with self._lock:
            return self._types.get(name)

    def list_registered_names(self) -> list[str]:
        with self._lock:
            return list(self._types)

    def __getitem__(self, name: str) -> FieldConstructor:
        with self._lock:
            return self._types[name]

    def __delitem__(self, name: str) -> None:
        with self._lock:
            del self._types[name]

    def __contains__(self, name: object) -> bool:
        with self._lock:
            return name in self._types

    def __iter__(self) -> Iterator[str]:
        return iter(self.list_registered_names())

    def __len__(self) -> int:
        with self._lock:
            return len(self._types)


# Global registry instance
_global_registry = FieldRegistry(BUILTIN_TYPES)


def get_global_registry() -> FieldRegistry:
    """Get the process-wide field registry."""
    return _global_registry


def register_field_type(name: str, ctor: FieldConstructor) -> None:
    """Register a field type in the global registry."""
    _global_registry.register(name, ctor)


def get_field_type(name: str) -> FieldConstructor | None:
    return _global_registry.get(name)


def is_registered(name: str) -> bool:
    return _global_registry.is_registered(name)


def list_registered_names() -> list[str]:
    return _global_registry.list_registered_names()
