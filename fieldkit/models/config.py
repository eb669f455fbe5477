"""Configuration interfaces for field types using TypedDict.

Each field type reads its options from one of these contracts. All keys are
optional and unknown keys are ignored, so definitions loaded from files can
carry extra metadata without breaking construction.
"""

import re
from collections.abc import Callable
from datetime import date, time
from typing import Any, NotRequired, TypedDict


class FieldConfig(TypedDict, total=False):
    """Options understood by every field type."""

    required: bool  # Reject null/empty values
    placeholder: str  # Hint shown by input widgets
    hint: str  # Help text shown under the input
    default_value: Any  # Value used when the editing state starts empty


class StringFieldConfig(FieldConfig, total=False):
    min_length: int
    max_length: int
    pattern: "str | re.Pattern[str]"
    pattern_message: str  # Message for pattern mismatches
    email: bool
    url: bool
    trim: bool  # Strip surrounding whitespace before validation
    lowercase: bool
    uppercase: bool


class TextareaFieldConfig(FieldConfig, total=False):
    min_length: int
    max_length: int
    rows: int


class PasswordFieldConfig(FieldConfig, total=False):
    min_length: int  # Defaults to 8
    max_length: int
    require_uppercase: bool
    require_lowercase: bool
    require_number: bool
    require_special: bool
    show_strength: bool


class SlugFieldConfig(FieldConfig, total=False):
    source_field: str  # Name of the field the slug is derived from
    auto_format: bool  # Slugify input before validation, default True
    prefix: str
    suffix: str
    max_length: int


class MaskedFieldConfig(FieldConfig, total=False):
    mask: str  # '#' digit, 'A' letter, '*' any character
    placeholder_char: str
    unmask_value: bool  # Export without mask characters, default True


class NumberFieldConfig(FieldConfig, total=False):
    min: float
    max: float
    integer: bool
    positive: bool
    negative: bool
    decimals: int  # Fraction digits used by present(), default 2
    step: float
    locale: str  # "tr-TR" (default) or "en-US"


class PercentFieldConfig(FieldConfig, total=False):
    min: float  # Defaults to 0
    max: float  # Defaults to 100
    decimals: int


class RatingFieldConfig(FieldConfig, total=False):
    max: int  # Highest rating, default 5
    allow_half: bool


class MoneyFieldConfig(FieldConfig, total=False):
    currency: str  # Default currency, "TRY"
    currencies: list[str]  # Accepted currencies
    min: float
    max: float
    decimals: int
    allow_negative: bool
    locale: str


class BooleanFieldConfig(FieldConfig, total=False):
    true_label: str
    false_label: str


class SelectOption(TypedDict, total=False):
    value: Any
    label: str
    disabled: bool
    group: str


class SelectFieldConfig(FieldConfig, total=False):
    options: list[SelectOption]
    searchable: bool
    clearable: bool


class MultiselectFieldConfig(SelectFieldConfig, total=False):
    min_selections: int
    max_selections: int


class DateFieldConfig(FieldConfig, total=False):
    min: date
    max: date
    min_today: bool  # Earliest allowed value is the start of today
    max_today: bool  # Latest allowed value is the end of today
    format: str  # strftime pattern used by present()
    locale: str


class TimeFieldConfig(FieldConfig, total=False):
    min: "time | str"
    max: "time | str"
    minute_step: int


class ColorFieldConfig(FieldConfig, total=False):
    format: str  # "hex" (default), "rgb" or "hsl"
    alpha: bool  # Accept alpha-channel notations
    presets: list[str]
    allow_custom: bool  # False restricts values to presets


class PhoneFieldConfig(FieldConfig, total=False):
    country: str  # Key of the phone table, default "TR"
    show_country_code: bool  # Prefix presentation with the dialing code


class EmailFieldConfig(FieldConfig, total=False):
    allowed_domains: list[str]
    blocked_domains: list[str]
    block_disposable: bool


class UrlFieldConfig(FieldConfig, total=False):
    allowed_protocols: list[str]  # Defaults to http and https
    require_https: bool
    allowed_domains: list[str]
    blocked_domains: list[str]
    require_path: bool


class JsonFieldConfig(FieldConfig, total=False):
    schema: Any  # A fieldkit Schema or any pydantic-validatable type
    pretty_print: bool
    max_display_length: int  # Default 100


class TagsFieldConfig(FieldConfig, total=False):
    min_tags: int
    max_tags: int
    min_tag_length: int  # Default 1
    max_tag_length: int  # Default 50
    allow_duplicates: bool
    suggestions: list[str]
    restrict_to_suggestions: bool
    separators: list[str]  # Import separators, default [",", ";"]
    lowercase: bool


class GroupFieldConfig(FieldConfig, total=False):
    collapsible: bool
    columns: int


class ArrayFieldConfig(FieldConfig, total=False):
    min: int  # Fewest rows, also the number of rows clear() leaves
    max: int
    sortable: bool
    add_label: str
    item_title: str  # Row title template, "{index}" is the 1-based row number


class FieldDefinition(TypedDict):
    """Plain-data description of a field, as read from definition files."""

    type: str
    name: str
    label: NotRequired[str]
    config: NotRequired[dict[str, Any]]
    default_value: NotRequired[Any]
    fields: NotRequired[list["FieldDefinition"]]  # Children of group and array types


# Signature every registered field type satisfies
FieldConstructor = Callable[..., Any]
