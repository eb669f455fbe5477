"""Field types.

Every field implements the contract in ``fieldkit.fields.base.BaseField``;
``GroupField`` and ``ArrayField`` compose child fields into one value.
"""

from .array import ArrayField, ArrayItem, ArrayState
from .base import UNCOERCIBLE, BaseField, first_error
from .choice import BooleanField, MultiselectField, SelectField
from .color import ColorField
from .group import ChildMap, GroupField, GroupState
from .numeric import MoneyField, MoneyValue, NumberField, PercentField, RatingField
from .phone import PhoneField
from .structured import JsonField, TagsField
from .temporal import DateField, TimeField
from .text import MaskedField, PasswordField, SlugField, StringField, TextareaField
from .web import EmailField, UrlField

__all__ = [
    "BaseField",
    "UNCOERCIBLE",
    "first_error",
    # Text
    "StringField",
    "TextareaField",
    "PasswordField",
    "SlugField",
    "MaskedField",
    # Numeric
    "NumberField",
    "PercentField",
    "RatingField",
    "MoneyField",
    "MoneyValue",
    # Choice
    "BooleanField",
    "SelectField",
    "MultiselectField",
    # Temporal
    "DateField",
    "TimeField",
    # Formatted
    "ColorField",
    "PhoneField",
    "EmailField",
    "UrlField",
    "JsonField",
    "TagsField",
    # Composite
    "ChildMap",
    "GroupField",
    "GroupState",
    "ArrayField",
    "ArrayItem",
    "ArrayState",
]
