"""Pytest configuration and shared fixtures for the fieldkit test suite."""

import json
import warnings
from pathlib import Path
from typing import Any

import pytest
from ruamel.yaml import YAML

from fieldkit.fields import (
    ArrayField,
    BooleanField,
    DateField,
    EmailField,
    GroupField,
    NumberField,
    StringField,
)
from fieldkit.registry import BUILTIN_TYPES, FieldRegistry


@pytest.fixture
def registry() -> FieldRegistry:
    """A fresh registry holding only the built-in types."""
    return FieldRegistry(BUILTIN_TYPES)


@pytest.fixture
def address_group() -> GroupField:
    """Group with one required and one optional child."""
    return GroupField(
        "address",
        "Address",
        [
            StringField("street", "Street", {"required": True}),
            StringField("city", "City"),
        ],
    )


@pytest.fixture
def contacts_array() -> ArrayField:
    """Array of contact rows bounded to 1..3 rows."""
    return ArrayField(
        "contacts",
        "Contacts",
        [
            StringField("name", "Name", {"required": True}),
            EmailField("email", "Email"),
        ],
        {"min": 1, "max": 3},
    )


@pytest.fixture
def signup_fields() -> list:
    """A small form mixing scalar field types."""
    return [
        StringField("name", "Name", {"required": True, "trim": True}),
        EmailField("email", "Email", {"required": True}),
        NumberField("age", "Age", {"integer": True, "min": 18}),
        DateField("birthday", "Birthday"),
        BooleanField("terms", "Accept terms", {"required": True}),
    ]


@pytest.fixture
def signup_definitions() -> list[dict[str, Any]]:
    """Plain definitions matching ``signup_fields``."""
    return [
        {"type": "string", "name": "name", "label": "Name", "config": {"required": True, "trim": True}},
        {"type": "email", "name": "email", "label": "Email", "config": {"required": True}},
        {"type": "integer", "name": "age", "label": "Age", "config": {"integer": True, "min": 18}},
        {"type": "date", "name": "birthday", "label": "Birthday"},
        {"type": "checkbox", "name": "terms", "label": "Accept terms", "config": {"required": True}},
    ]


@pytest.fixture
def write_yaml(tmp_path: Path):
    """Write data to a YAML file under tmp_path and return its path."""

    def _write(name: str, data: Any) -> Path:
        path = tmp_path / name
        yaml = YAML()
        yaml.default_flow_style = False
        with open(path, "w", encoding="utf-8") as f:
            yaml.dump(data, f)
        return path

    return _write


@pytest.fixture
def write_json(tmp_path: Path):
    """Write data to a JSON file under tmp_path and return its path."""

    def _write(name: str, data: Any) -> Path:
        path = tmp_path / name
        path.write_text(json.dumps(data), encoding="utf-8")
        return path

    return _write


@pytest.fixture
def no_warnings():
    """Fail the test if any warning is emitted."""
    with warnings.catch_warnings():
        warnings.simplefilter("error")
        yield
