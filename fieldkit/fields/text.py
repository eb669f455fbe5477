"""Free-text field types: string, textarea, password, slug and masked input."""

from typing import Any

from fieldkit.convert.numbers import js_number
from fieldkit.convert.text import (
    SLUG_PATTERN,
    apply_mask,
    mask_to_regex,
    to_slug,
    unmask,
)
from fieldkit.convert.web import is_email, is_url
from fieldkit.fields.base import UNCOERCIBLE, BaseField
from fieldkit.messages import message
from fieldkit.models.enums import (
    EMPTY_DISPLAY,
    PREVIEW_LENGTH,
    FieldKind,
    IssueCode,
    PasswordStrength,
)
from fieldkit.schema import Schema, is_number

DEFAULT_PASSWORD_LENGTH = 8
SPECIAL_CHARACTERS = "!@#$%^&*()_+-=[]{}|;:,.<>?"
MASKED_PASSWORD = "••••••••"


def _text_from_scalar(raw: Any) -> Any:
    """Strings pass; numbers and booleans become their text form."""
    if isinstance(raw, str):
        return raw
    if isinstance(raw, bool):
        return "true" if raw else "false"
    if is_number(raw):
        return js_number(raw)
    return UNCOERCIBLE


def _non_empty(schema: Schema) -> Schema:
    return schema.check(lambda value: len(value) >= 1, message("required"), IssueCode.REQUIRED)


def _length_bounds(schema: Schema, config: Any, prefix: str = "string") -> Schema:
    min_length = config.get("min_length")
    if min_length is not None:
        schema = schema.min_length(min_length, message(f"{prefix}.min", min=min_length))
    max_length = config.get("max_length")
    if max_length is not None:
        schema = schema.max_length(max_length, message(f"{prefix}.max", max=max_length))
    return schema


class StringField(BaseField[str]):
    """Single-line text.

    ``None`` is validated as the empty string, so a required string rejects
    both. Configured ``trim``/``lowercase``/``uppercase`` transforms run
    before the checks and shape the validated output.
    """

    kind = FieldKind.STRING

    def _normalize(self, value: Any) -> Any:
        if value is None:
            return ""
        if not isinstance(value, str):
            return value
        if self.config.get("trim"):
            value = value.strip()
        if self.config.get("lowercase"):
            value = value.lower()
        if self.config.get("uppercase"):
            value = value.upper()
        return value

    def schema(self) -> Schema:
        config = self.config
        base = Schema.string()
        if self.required:
            base = _non_empty(base)
        base = _length_bounds(base, config)
        if config.get("email"):
            base = base.check(is_email, message("string.email"), IssueCode.INVALID_STRING)
        if config.get("url"):
            base = base.check(is_url, message("string.url"), IssueCode.INVALID_STRING)
        if config.get("pattern"):
            base = base.pattern(
                config["pattern"], config.get("pattern_message") or message("string.pattern")
            )
        return self.apply_required(base.preprocess(self._normalize))

    def coerce(self, raw: Any) -> Any:
        return _text_from_scalar(raw)


class TextareaField(BaseField[str]):
    """Multi-line text with a truncated preview."""

    kind = FieldKind.TEXTAREA

    def schema(self) -> Schema:
        return self.apply_required(_length_bounds(Schema.string(), self.config))

    def present(self, value: str | None) -> str:
        if self.is_empty(value):
            return EMPTY_DISPLAY
        if len(value) > PREVIEW_LENGTH:
            return value[:PREVIEW_LENGTH] + "..."
        return value

    def coerce(self, raw: Any) -> Any:
        return _text_from_scalar(raw)

    @property
    def rows(self) -> int:
        return self.config.get("rows", 3)

    def remaining_characters(self, current_length: int) -> int | None:
        max_length = self.config.get("max_length")
        if max_length is None:
            return None
        return max_length - current_length


class PasswordField(BaseField[str]):
    """Secret text with composition rules; never rendered in clear."""

    kind = FieldKind.PASSWORD

    def schema(self) -> Schema:
        config = self.config
        min_length = config.get("min_length", DEFAULT_PASSWORD_LENGTH)
        base = Schema.string().min_length(min_length, message("password.min", min=min_length))
        if self.required:
            base = _non_empty(base)
        if config.get("max_length") is not None:
            base = base.max_length(
                config["max_length"], message("password.max", max=config["max_length"])
            )
        if config.get("require_uppercase"):
            base = base.pattern(r"[A-Z]", message("password.uppercase"))
        if config.get("require_lowercase"):
            base = base.pattern(r"[a-z]", message("password.lowercase"))
        if config.get("require_number"):
            base = base.pattern(r"[0-9]", message("password.number"))
        if config.get("require_special"):
            base = base.check(
                lambda value: any(char in SPECIAL_CHARACTERS for char in value),
                message("password.special"),
                IssueCode.INVALID_STRING,
            )
        return self.apply_required(base.preprocess(lambda value: "" if value is None else value))

    def present(self, value: str | None) -> str:
        if self.is_empty(value):
            return EMPTY_DISPLAY
        return MASKED_PASSWORD

    def coerce(self, raw: Any) -> Any:
        return raw if isinstance(raw, str) else UNCOERCIBLE

    @staticmethod
    def calculate_strength(value: str | None) -> PasswordStrength:
        """Score length and character variety into a strength bucket."""
        if not value:
            return PasswordStrength.WEAK
        score = sum(len(value) >= size for size in (8, 12, 16))
        score += any(char.islower() and char.isascii() for char in value)
        score += any(char.isupper() and char.isascii() for char in value)
        score += any(char.isdigit() and char.isascii() for char in value)
        score += any(not (char.isascii() and char.isalnum()) for char in value)
        if score <= 2:
            return PasswordStrength.WEAK
        if score <= 4:
            return PasswordStrength.FAIR
        if score <= 6:
            return PasswordStrength.GOOD
        return PasswordStrength.STRONG

    def strength_percentage(self, value: str | None) -> int:
        return {
            PasswordStrength.WEAK: 25,
            PasswordStrength.FAIR: 50,
            PasswordStrength.GOOD: 75,
            PasswordStrength.STRONG: 100,
        }[self.calculate_strength(value)]


class SlugField(BaseField[str]):
    """URL slug such as ``my-first-post``.

    Input is slugified before validation unless ``auto_format`` is false;
    ``prefix``/``suffix`` are added when missing.
    """

    kind = FieldKind.SLUG

    def _normalize(self, value: Any) -> Any:
        if value is None:
            return ""
        if not isinstance(value, str):
            return value
        if self.config.get("auto_format", True):
            value = to_slug(value)
        prefix = self.config.get("prefix") or ""
        suffix = self.config.get("suffix") or ""
        if prefix and not value.startswith(prefix):
            value = prefix + value
        if suffix and not value.endswith(suffix):
            value = value + suffix
        return value

    def schema(self) -> Schema:
        base = Schema.string()
        if self.required:
            base = _non_empty(base)
        base = _length_bounds(base, self.config).pattern(SLUG_PATTERN, message("slug.invalid"))
        return self.apply_required(base.preprocess(self._normalize))

    def coerce(self, raw: Any) -> Any:
        return _text_from_scalar(raw)

    to_slug = staticmethod(to_slug)


class MaskedField(BaseField[str]):
    """Fixed-layout input such as ``(###) ###-####``.

    Mask tokens: ``#`` a digit, ``A`` a letter, ``*`` any character. Values
    are held with the mask applied; exports drop the literal characters unless
    ``unmask_value`` is false.
    """

    kind = FieldKind.MASKED

    @property
    def mask(self) -> str:
        return self.config.get("mask", "")

    def schema(self) -> Schema:
        base = Schema.string()
        if self.required:
            base = _non_empty(base)
        base = base.check(
            lambda value: mask_to_regex(self.mask).fullmatch(value) is not None,
            message("masked.invalid", mask=self.mask),
            IssueCode.INVALID_STRING,
        )
        return self.apply_required(base)

    def apply_mask(self, value: str) -> str:
        return apply_mask(value, self.mask)

    def unmask(self, value: str) -> str:
        return unmask(value, self.mask)

    def present(self, value: str | None) -> str:
        if self.is_empty(value):
            return EMPTY_DISPLAY
        return self.apply_mask(value)

    def to_export(self, value: str | None) -> str | None:
        if value is None:
            return None
        if self.config.get("unmask_value", True):
            return self.unmask(value)
        return value

    def coerce(self, raw: Any) -> Any:
        text = _text_from_scalar(raw)
        if text is UNCOERCIBLE:
            return text
        pattern = mask_to_regex(self.mask)
        if pattern.fullmatch(text):
            return text
        masked = self.apply_mask(text)
        return masked if pattern.fullmatch(masked) else text
