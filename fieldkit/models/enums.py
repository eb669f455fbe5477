"""
Enums and constants shared across fieldkit.

Usage:
    from fieldkit.models.enums import FieldKind, IssueCode
"""

from enum import StrEnum

# ============================================================================
# Field discriminant
# ============================================================================


class FieldKind(StrEnum):
    """Discriminant tag carried by every field instance.

    Renderers and serializers dispatch on ``field.kind`` instead of the
    concrete class.
    """

    STRING = "string"
    TEXTAREA = "textarea"
    PASSWORD = "password"
    SLUG = "slug"
    MASKED = "masked"
    NUMBER = "number"
    PERCENT = "percent"
    RATING = "rating"
    MONEY = "money"
    BOOLEAN = "boolean"
    SELECT = "select"
    MULTISELECT = "multiselect"
    DATE = "date"
    TIME = "time"
    COLOR = "color"
    PHONE = "phone"
    EMAIL = "email"
    URL = "url"
    JSON = "json"
    TAGS = "tags"
    GROUP = "group"
    ARRAY = "array"

    @property
    def is_composite(self) -> bool:
        return self in (FieldKind.GROUP, FieldKind.ARRAY)


# ============================================================================
# Validation issue codes
# ============================================================================


class IssueCode(StrEnum):
    """Machine-readable code attached to every validation issue."""

    REQUIRED = "required"
    INVALID_TYPE = "invalid_type"
    TOO_SMALL = "too_small"
    TOO_BIG = "too_big"
    INVALID_STRING = "invalid_string"
    INVALID_ENUM_VALUE = "invalid_enum_value"
    INVALID_DATE = "invalid_date"
    CUSTOM = "custom"


# ============================================================================
# Per-type option enums
# ============================================================================


class ColorFormat(StrEnum):
    """Textual color notations understood by the color field."""

    HEX = "hex"
    RGB = "rgb"
    HSL = "hsl"


class PhoneCountry(StrEnum):
    """Countries with a dialing plan in the phone table."""

    TR = "TR"
    US = "US"
    DE = "DE"
    GB = "GB"
    FR = "FR"
    INTL = "INTL"


class PasswordStrength(StrEnum):
    """Strength buckets reported by ``PasswordField.calculate_strength``."""

    WEAK = "weak"
    FAIR = "fair"
    GOOD = "good"
    STRONG = "strong"


# Sentinel rendered for null or empty values
EMPTY_DISPLAY = "-"

# Truncation length for free-text previews
PREVIEW_LENGTH = 100
