"""Enums, configuration contracts and result types."""

from .enums import (
    EMPTY_DISPLAY,
    PREVIEW_LENGTH,
    ColorFormat,
    FieldKind,
    IssueCode,
    PasswordStrength,
    PhoneCountry,
)
from .results import FieldState, ImportIssue, ImportResult

__all__ = [
    "EMPTY_DISPLAY",
    "PREVIEW_LENGTH",
    "ColorFormat",
    "FieldKind",
    "IssueCode",
    "PasswordStrength",
    "PhoneCountry",
    "FieldState",
    "ImportIssue",
    "ImportResult",
]
