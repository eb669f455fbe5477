"""Definition-driven field construction.

A field definition is plain data (``{"type": "email", "name": "contact",
"config": {"required": True}}``) that can live in a YAML or JSON file. The
factory resolves ``type`` through the field registry; ``group`` and ``array``
definitions build their children from a nested ``fields`` list.

Unknown types and constructors that fail both fall back to ``StringField``
with a ``UserWarning`` so one bad definition never blocks a whole form.
"""

import re
import warnings
from collections.abc import Iterable, Mapping
from typing import Any

from fieldkit.fields import ArrayField, BaseField, GroupField, StringField
from fieldkit.models.config import FieldDefinition
from fieldkit.models.enums import FieldKind
from fieldkit.registry import FieldRegistry, get_global_registry
from fieldkit.schema import Schema

COMPOSITES = {FieldKind.GROUP: GroupField, FieldKind.ARRAY: ArrayField}


def _config_of(definition: Mapping[str, Any]) -> dict[str, Any]:
    config = dict(definition.get("config") or {})
    if "default_value" in definition:
        config["default_value"] = definition["default_value"]
    return config


def create_field(
    definition: Mapping[str, Any], registry: FieldRegistry | None = None
) -> BaseField:
    """
    Build one field from its definition.

    Args:
        definition: Mapping with ``type`` and ``name``, optionally ``label``,
            ``config``, ``default_value`` and, for composites, ``fields``
        registry: Registry to resolve ``type`` in, the global one by default

    Returns:
        The constructed field; a ``StringField`` when the type is unknown or
        its constructor fails
    """
    registry = registry or get_global_registry()
    field_type = definition.get("type")
    name = definition["name"]
    label = definition.get("label") or name
    config = _config_of(definition)

    composite = COMPOSITES.get(field_type)
    if composite is not None:
        children = create_fields(definition.get("fields") or [], registry)
        return composite(name, label, children, config)

    ctor = registry.get(field_type)
    if ctor is None:
        warnings.warn(
            f"Unknown field type '{field_type}' for '{name}', using StringField",
            UserWarning,
            stacklevel=2,
        )
        return StringField(name, label, config)

    try:
        return ctor(name, label, config)
    except Exception as exc:
        warnings.warn(
            f"Could not create field '{name}' of type '{field_type}': {exc}",
            UserWarning,
            stacklevel=2,
        )
        return StringField(name, label)


def create_fields(
    definitions: Iterable[Mapping[str, Any]], registry: FieldRegistry | None = None
) -> list[BaseField]:
    return [create_field(definition, registry) for definition in definitions]


def create_field_groups(
    groups: Mapping[str, Iterable[Mapping[str, Any]]],
    registry: FieldRegistry | None = None,
) -> dict[str, list[BaseField]]:
    """Build several named field lists, e.g. one per form section."""
    return {name: create_fields(definitions, registry) for name, definitions in groups.items()}


def _serializable(field: BaseField, key: str, value: Any) -> tuple[bool, Any]:
    if isinstance(value, re.Pattern):
        return True, value.pattern
    if callable(value) or isinstance(value, Schema):
        warnings.warn(
            f"Field '{field.name}' option '{key}' cannot be serialized and is skipped",
            UserWarning,
            stacklevel=3,
        )
        return False, None
    return True, value


def to_definition(field: BaseField) -> FieldDefinition:
    """Plain-data definition that ``create_field`` turns back into ``field``.

    Compiled patterns become their source string. Callables and schema
    objects cannot be written to a file and are dropped with a warning.
    """
    config: dict[str, Any] = {}
    for key, value in field.config.items():
        keep, value = _serializable(field, key, value)
        if keep:
            config[key] = value
    default_value = config.pop("default_value", None)

    definition: FieldDefinition = {
        "type": str(field.kind),
        "name": field.name,
        "label": field.label,
        "config": config,
    }
    if default_value is not None:
        definition["default_value"] = default_value
    if isinstance(field, (GroupField, ArrayField)):
        definition["fields"] = to_definitions(field.fields)
    return definition


def to_definitions(fields: Iterable[BaseField]) -> list[FieldDefinition]:
    return [to_definition(field) for field in fields]
