"""Default validation messages.

Every rule in the toolkit looks its message up here by key so that a host
application can swap the table (``MESSAGES.update(...)``) without touching
field code. Templates use ``str.format`` placeholders.
"""

from typing import Any

MESSAGES: dict[str, str] = {
    "required": "This field is required",
    "invalid": "Invalid value",
    # Strings
    "string.min": "Must be at least {min} characters",
    "string.max": "Must be at most {max} characters",
    "string.email": "Enter a valid email address",
    "string.url": "Enter a valid URL",
    "string.pattern": "Invalid format",
    # Numbers
    "number.min": "Must be at least {min}",
    "number.max": "Must be at most {max}",
    "number.integer": "Must be a whole number",
    "number.positive": "Must be a positive number",
    "number.negative": "Must be a negative number",
    "percent.min": "Must be at least %{min}",
    "percent.max": "Must be at most %{max}",
    "rating.range": "Rating must be between 0 and {max}",
    "rating.step": "Rating must be a whole number",
    "rating.half_step": "Rating must be in steps of 0.5",
    "money.negative": "Amount cannot be negative",
    "money.currency": "Unsupported currency",
    # Choices
    "boolean.required": "This box must be checked",
    "select.invalid": "Select a valid option",
    "multiselect.min": "Select at least {min} options",
    "multiselect.max": "Select at most {max} options",
    # Dates and times
    "date.invalid": "Enter a valid date",
    "date.min": "Date must be on or after {min}",
    "date.max": "Date must be on or before {max}",
    "time.invalid": "Enter a valid time",
    "time.min": "Time must be {min} or later",
    "time.max": "Time must be {max} or earlier",
    # Structured text
    "color.invalid": "Enter a valid {format} color",
    "color.preset": "Choose one of the preset colors",
    "phone.invalid": "Enter a valid phone number (e.g. {example})",
    "email.domain_not_allowed": "Allowed email domains: {domains}",
    "email.domain_blocked": "Email domain is blocked",
    "email.disposable": "Disposable email addresses are not accepted",
    "url.protocol": "URL must use one of: {protocols}",
    "url.https": "URL must use https",
    "url.domain_not_allowed": "Allowed domains: {domains}",
    "url.domain_blocked": "URL domain is blocked",
    "url.path": "URL must include a path",
    "slug.invalid": "Use lowercase letters, digits and single hyphens",
    "masked.invalid": "Value must match {mask}",
    "password.min": "Password must be at least {min} characters",
    "password.max": "Password must be at most {max} characters",
    "password.uppercase": "Must contain an uppercase letter",
    "password.lowercase": "Must contain a lowercase letter",
    "password.number": "Must contain a number",
    "password.special": "Must contain a special character",
    "json.invalid": "Enter a valid JSON object",
    # Collections
    "tags.min": "Add at least {min} tags",
    "tags.max": "Add at most {max} tags",
    "tags.length": "Tags must be {min} to {max} characters long",
    "tags.duplicate": "Duplicate tags are not allowed",
    "tags.suggestion": "Only suggested tags are allowed",
    "array.min": "Add at least {min} items",
    "array.max": "Add at most {max} items",
}


def message(key: str, **params: Any) -> str:
    """Render the message registered under ``key``.

    Unknown keys render as the generic invalid message so a missing entry
    never hides a failure.
    """
    template = MESSAGES.get(key, MESSAGES["invalid"])
    if not params:
        return template
    return template.format(**params)
