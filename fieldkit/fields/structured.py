"""Structured field types: free-form JSON objects and tag lists."""

import json
import re
from collections.abc import Mapping, Sequence
from typing import Any

from fieldkit.fields.base import UNCOERCIBLE, BaseField
from fieldkit.messages import message
from fieldkit.models.enums import EMPTY_DISPLAY, PREVIEW_LENGTH, FieldKind, IssueCode
from fieldkit.models.results import ImportResult
from fieldkit.schema import Schema

DEFAULT_SEPARATORS = (",", ";")
DEFAULT_MIN_TAG_LENGTH = 1
DEFAULT_MAX_TAG_LENGTH = 50


def parse_json_object(text: str) -> dict[str, Any] | None:
    """Decode ``text`` when it holds a JSON object, otherwise None."""
    try:
        parsed = json.loads(text)
    except ValueError:
        return None
    return parsed if isinstance(parsed, dict) else None


class JsonField(BaseField[dict[str, Any]]):
    """Arbitrary JSON object, optionally validated by a nested schema.

    ``schema`` in the configuration may be a ``Schema`` or any type pydantic
    can validate (a model class, ``dict[str, int]``...).
    """

    kind = FieldKind.JSON

    def schema(self) -> Schema:
        custom = self.config.get("schema")
        if custom is None:
            return self.apply_required(Schema.mapping())
        if not isinstance(custom, Schema):
            custom = Schema(custom)
        return self.apply_required(custom)

    def present(self, value: dict[str, Any] | None) -> str:
        if value is None:
            return EMPTY_DISPLAY
        if self.config.get("pretty_print"):
            return json.dumps(value, indent=2, ensure_ascii=False, default=str)
        limit = self.config.get("max_display_length", PREVIEW_LENGTH)
        text = json.dumps(value, separators=(",", ":"), ensure_ascii=False, default=str)
        if len(text) > limit:
            return text[:limit] + "..."
        return text

    def to_export(self, value: dict[str, Any] | None) -> str | None:
        if value is None:
            return None
        return json.dumps(value, separators=(",", ":"), ensure_ascii=False, default=str)

    def coerce(self, raw: Any) -> Any:
        if isinstance(raw, Mapping):
            return dict(raw)
        if isinstance(raw, str) and raw:
            parsed = parse_json_object(raw)
            return UNCOERCIBLE if parsed is None else parsed
        return UNCOERCIBLE

    def from_import_with_details(self, raw: Any) -> ImportResult[dict[str, Any]]:
        result = super().from_import_with_details(raw)
        if not result.success and isinstance(raw, str) and raw and parse_json_object(raw) is None:
            return ImportResult.failed(message("json.invalid"), code=IssueCode.INVALID_TYPE)
        return result

    def get_value(self, obj: Mapping[str, Any] | None, path: str) -> Any:
        """Read a nested entry by dotted path, None when any step is missing."""
        current: Any = obj
        for key in path.split("."):
            if not isinstance(current, Mapping):
                return None
            current = current.get(key)
        return current

    def set_value(self, obj: Mapping[str, Any] | None, path: str, value: Any) -> dict[str, Any]:
        """Copy of ``obj`` with the dotted ``path`` set to ``value``.

        Intermediate mappings along the path are copied, never mutated;
        missing or non-mapping steps are replaced by new dicts.
        """
        result = dict(obj or {})
        keys = path.split(".")
        current = result
        for key in keys[:-1]:
            child = current.get(key)
            current[key] = dict(child) if isinstance(child, Mapping) else {}
            current = current[key]
        current[keys[-1]] = value
        return result


class TagsField(BaseField[list[str]]):
    """Free-form list of short labels."""

    kind = FieldKind.TAGS

    @property
    def suggestions(self) -> list[str]:
        return list(self.config.get("suggestions") or [])

    def _normalize_tag(self, tag: str) -> str:
        tag = tag.strip()
        return tag.lower() if self.config.get("lowercase") else tag

    def schema(self) -> Schema:
        config = self.config
        low = config.get("min_tag_length", DEFAULT_MIN_TAG_LENGTH)
        high = config.get("max_tag_length", DEFAULT_MAX_TAG_LENGTH)
        length_message = message("tags.length", min=low, max=high)
        item = Schema.string().min_length(low, length_message).max_length(high, length_message)
        if config.get("restrict_to_suggestions") and self.suggestions:
            allowed = set(self.suggestions)
            item = item.check(
                lambda tag: tag in allowed, message("tags.suggestion"), IssueCode.INVALID_ENUM_VALUE
            )
        base = Schema.array_of(item)
        if config.get("min_tags") is not None:
            base = base.min_length(config["min_tags"], message("tags.min", min=config["min_tags"]))
        if config.get("max_tags") is not None:
            base = base.max_length(config["max_tags"], message("tags.max", max=config["max_tags"]))
        if not config.get("allow_duplicates"):
            base = base.check(
                lambda tags: len(set(tags)) == len(tags), message("tags.duplicate")
            )
        return self.apply_required(base)

    def present(self, value: list[str] | None) -> str:
        if not value:
            return EMPTY_DISPLAY
        return ", ".join(value)

    def split(self, text: str) -> list[str]:
        """Break free text on the configured separators, dropping blanks."""
        separators = self.config.get("separators") or DEFAULT_SEPARATORS
        pattern = "|".join(re.escape(separator) for separator in separators)
        parts = (self._normalize_tag(part) for part in re.split(pattern, text))
        return [part for part in parts if part]

    def coerce(self, raw: Any) -> Any:
        if isinstance(raw, str):
            return self.split(raw)
        if isinstance(raw, Sequence) and not isinstance(raw, bytes):
            return [self._normalize_tag(item) for item in raw if isinstance(item, str)]
        return UNCOERCIBLE

    def add_tag(self, tags: list[str] | None, tag: str) -> list[str]:
        """New list with ``tag`` appended, unless blank, full or a disallowed duplicate."""
        tags = list(tags or [])
        tag = self._normalize_tag(tag)
        if not tag:
            return tags
        high = self.config.get("max_tags")
        if high is not None and len(tags) >= high:
            return tags
        if tag in tags and not self.config.get("allow_duplicates"):
            return tags
        return [*tags, tag]

    def remove_tag(self, tags: list[str] | None, tag: str) -> list[str]:
        return [item for item in tags or [] if item != tag]

    def filter_suggestions(self, query: str, current: list[str] | None = None) -> list[str]:
        """Suggestions containing ``query`` (case-insensitive) not already chosen."""
        wanted = query.strip().lower()
        chosen = set(current or [])
        return [
            suggestion
            for suggestion in self.suggestions
            if wanted in suggestion.lower() and suggestion not in chosen
        ]
