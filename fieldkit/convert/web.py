"""Email and URL parsing helpers."""

import re
from urllib.parse import SplitResult, urlsplit

# No leading or doubled dots in the local part, a dotted domain and an
# alphabetic top-level label
EMAIL_PATTERN = re.compile(
    r"^(?!\.)(?!.*\.\.)([A-Z0-9_'+\-.]*)[A-Z0-9_+-]@([A-Z0-9][A-Z0-9\-]*\.)+[A-Z]{2,}$",
    re.IGNORECASE | re.ASCII,
)

SCHEME_PATTERN = re.compile(r"^[A-Za-z][A-Za-z0-9+.\-]*$")

DISPOSABLE_DOMAINS = frozenset(
    {
        "tempmail.com",
        "throwaway.com",
        "guerrillamail.com",
        "mailinator.com",
        "10minutemail.com",
        "temp-mail.org",
        "fakeinbox.com",
        "trashmail.com",
        "yopmail.com",
        "getnada.com",
    }
)


def is_email(value: str) -> bool:
    return EMAIL_PATTERN.fullmatch(value) is not None


def email_domain(value: str) -> str | None:
    parts = value.split("@")
    return parts[1].lower() if len(parts) == 2 else None


def parse_url(value: str) -> SplitResult | None:
    """Split an absolute URL, or None when it has no scheme or location."""
    if not value or any(char.isspace() for char in value):
        return None
    try:
        parts = urlsplit(value)
        parts.port  # noqa: B018 - raises ValueError for malformed ports
    except ValueError:
        return None
    if not SCHEME_PATTERN.fullmatch(parts.scheme or ""):
        return None
    if parts.scheme.lower() in ("http", "https", "ftp", "ws", "wss") and not parts.hostname:
        return None
    if not (parts.netloc or parts.path):
        return None
    return parts


def is_url(value: str) -> bool:
    return parse_url(value) is not None
