"""
fieldkit: form field definitions with validation, reactive editing state
and import/export converters.

Every field type implements one contract: ``schema()`` builds a validation
rule set from the field's configuration, ``create_value()`` opens a reactive
editing session, ``present()`` renders values for people and
``to_export()``/``from_import()`` translate to and from external data.
``GroupField`` and ``ArrayField`` compose child fields into object and list
values with cascading validity.

Example Usage:
    ```python
    from fieldkit import BooleanField, EmailField, GroupField

    signup = GroupField("signup", "Sign up", [
        EmailField("email", "Email", {"required": True}),
        BooleanField("terms", "Accept terms", {"required": True}),
    ])
    state = signup.create_group_state()
    state.set_value("email", "ada@example.com")
    state.valid()  # False until terms is True

    signup.from_import({"email": " ADA@example.com ", "terms": "evet"})
    # {'email': 'ada@example.com', 'terms': True}
    ```
"""

__version__ = "0.1.0"

from .exceptions import DefinitionError, FieldKitError, LoadError
from .factory import create_field, create_field_groups, create_fields, to_definition, to_definitions
from .fields import (
    ArrayField,
    ArrayState,
    BaseField,
    BooleanField,
    ColorField,
    DateField,
    EmailField,
    GroupField,
    GroupState,
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
from .loader import load_definitions, load_fields, load_records
from .models import FieldKind, FieldState, ImportIssue, ImportResult, IssueCode
from .reactive import Computed, Signal, WritableComputed, computed, signal
from .registry import (
    FieldRegistry,
    get_field_type,
    get_global_registry,
    is_registered,
    list_registered_names,
    register_field_type,
)
from .schema import Schema, SchemaIssue, SchemaResult

__all__ = [
    # Field contract
    "BaseField",
    "FieldKind",
    "FieldState",
    "ImportIssue",
    "ImportResult",
    "IssueCode",
    # Field types
    "StringField",
    "TextareaField",
    "PasswordField",
    "SlugField",
    "MaskedField",
    "NumberField",
    "PercentField",
    "RatingField",
    "MoneyField",
    "BooleanField",
    "SelectField",
    "MultiselectField",
    "DateField",
    "TimeField",
    "ColorField",
    "PhoneField",
    "EmailField",
    "UrlField",
    "JsonField",
    "TagsField",
    "GroupField",
    "GroupState",
    "ArrayField",
    "ArrayState",
    # Registry and factory
    "FieldRegistry",
    "get_global_registry",
    "register_field_type",
    "get_field_type",
    "is_registered",
    "list_registered_names",
    "create_field",
    "create_fields",
    "create_field_groups",
    "to_definition",
    "to_definitions",
    # Loading
    "load_definitions",
    "load_fields",
    "load_records",
    "LoadError",
    "DefinitionError",
    "FieldKitError",
    # Primitives
    "Schema",
    "SchemaIssue",
    "SchemaResult",
    "Signal",
    "Computed",
    "WritableComputed",
    "signal",
    "computed",
]
