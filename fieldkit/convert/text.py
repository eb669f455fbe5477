"""Slug and input-mask helpers."""

import re

SLUG_PATTERN = re.compile(r"^[a-z0-9]+(?:-[a-z0-9]+)*$")

_TRANSLITERATION = str.maketrans(
    {"ğ": "g", "ü": "u", "ş": "s", "ı": "i", "ö": "o", "ç": "c",
     "Ğ": "g", "Ü": "u", "Ş": "s", "İ": "i", "Ö": "o", "Ç": "c"}
)
_NOT_SLUG = re.compile(r"[^a-z0-9\s-]")
_SPACES = re.compile(r"\s+")
_HYPHENS = re.compile(r"-+")

# Mask tokens and the characters they accept
MASK_TOKENS = {"#": r"\d", "A": "[a-zA-Z]", "*": "."}


def to_slug(text: str) -> str:
    """Lowercase, transliterate Turkish letters and join words with single hyphens."""
    text = text.translate(_TRANSLITERATION).lower()
    text = _NOT_SLUG.sub("", text)
    text = _SPACES.sub("-", text)
    text = _HYPHENS.sub("-", text)
    return text.strip("-")


def mask_to_regex(mask: str) -> re.Pattern[str]:
    parts = [MASK_TOKENS.get(char, re.escape(char)) for char in mask]
    return re.compile("^" + "".join(parts) + "$", re.ASCII)


def slot_count(mask: str) -> int:
    return sum(1 for char in mask if char in MASK_TOKENS)


def apply_mask(value: str, mask: str) -> str:
    """Lay ``value``'s characters into the mask's token slots.

    Literal mask characters are inserted between them; an input character
    equal to the literal being inserted is consumed. Output stops when the
    input runs out.
    """
    result: list[str] = []
    index = 0
    for token in mask:
        if index >= len(value):
            break
        if token in MASK_TOKENS:
            result.append(value[index])
            index += 1
        else:
            result.append(token)
            if value[index] == token:
                index += 1
    return "".join(result)


def unmask(value: str, mask: str) -> str:
    """Keep the characters that sit in token slots of the mask."""
    return "".join(
        char for char, token in zip(value, mask) if token in MASK_TOKENS
    )
