"""Email and URL field types."""

from typing import Any

from fieldkit.convert.web import DISPOSABLE_DOMAINS, email_domain, is_email, parse_url
from fieldkit.fields.base import UNCOERCIBLE, BaseField
from fieldkit.messages import message
from fieldkit.models.enums import EMPTY_DISPLAY, FieldKind, IssueCode
from fieldkit.schema import Schema

DEFAULT_PROTOCOLS = ("http", "https")


def _lowered(values: Any) -> list[str]:
    return [value.lower() for value in values or []]


class EmailField(BaseField[str]):
    """Email address with optional domain allow/block lists."""

    kind = FieldKind.EMAIL

    def schema(self) -> Schema:
        config = self.config
        base = Schema.string().check(is_email, message("string.email"), IssueCode.INVALID_STRING)
        allowed = _lowered(config.get("allowed_domains"))
        if allowed:
            base = base.check(
                lambda value: email_domain(value) in allowed,
                message("email.domain_not_allowed", domains=", ".join(config["allowed_domains"])),
            )
        blocked = _lowered(config.get("blocked_domains"))
        if blocked:
            base = base.check(
                lambda value: email_domain(value) not in blocked,
                message("email.domain_blocked"),
            )
        if config.get("block_disposable"):
            base = base.check(
                lambda value: email_domain(value) not in DISPOSABLE_DOMAINS,
                message("email.disposable"),
            )
        return self.apply_required(base)

    def normalize(self, value: str | None) -> str | None:
        if not value:
            return None
        return value.strip().lower()

    def to_export(self, value: str | None) -> str | None:
        return self.normalize(value)

    def coerce(self, raw: Any) -> Any:
        if not isinstance(raw, str):
            return UNCOERCIBLE
        return self.normalize(raw) or raw


class UrlField(BaseField[str]):
    """Absolute URL restricted to a protocol list (http/https by default)."""

    kind = FieldKind.URL

    @property
    def protocols(self) -> list[str]:
        if self.config.get("require_https"):
            return ["https"]
        return _lowered(self.config.get("allowed_protocols") or DEFAULT_PROTOCOLS)

    def _hostname(self, value: str) -> str | None:
        parts = parse_url(value)
        return parts.hostname if parts else None

    def schema(self) -> Schema:
        config = self.config
        protocols = self.protocols
        base = Schema.string().check(
            lambda value: parse_url(value) is not None, message("string.url"), IssueCode.INVALID_STRING
        )
        if config.get("require_https"):
            protocol_message = message("url.https")
        else:
            protocol_message = message("url.protocol", protocols=", ".join(protocols))
        base = base.check(
            lambda value: parse_url(value).scheme.lower() in protocols,
            protocol_message,
            IssueCode.INVALID_STRING,
        )
        allowed = _lowered(config.get("allowed_domains"))
        if allowed:
            base = base.check(
                lambda value: self._hostname(value) in allowed,
                message("url.domain_not_allowed", domains=", ".join(config["allowed_domains"])),
            )
        blocked = _lowered(config.get("blocked_domains"))
        if blocked:
            base = base.check(
                lambda value: self._hostname(value) not in blocked,
                message("url.domain_blocked"),
            )
        if config.get("require_path"):
            base = base.check(
                lambda value: len(parse_url(value).path) > 1, message("url.path")
            )
        return self.apply_required(base)

    def normalize(self, value: str | None) -> str | None:
        """Trim and drop the lone trailing slash of a bare host URL."""
        if not value:
            return None
        url = value.strip()
        parts = parse_url(url)
        if parts is not None and parts.path == "/" and url.endswith("/"):
            url = url[:-1]
        return url

    def present(self, value: str | None) -> str:
        if not value:
            return EMPTY_DISPLAY
        parts = parse_url(value)
        if parts is None or not parts.hostname:
            return value
        path = parts.path if parts.path not in ("", "/") else ""
        return parts.hostname + path

    def to_export(self, value: str | None) -> str | None:
        return self.normalize(value)

    def coerce(self, raw: Any) -> Any:
        if not isinstance(raw, str):
            return UNCOERCIBLE
        return raw.strip()
