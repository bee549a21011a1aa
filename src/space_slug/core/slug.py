"""String cleaning for slug fragments."""

from __future__ import annotations

import re

_NON_ALNUM = re.compile(r"[^a-zA-Z0-9]+")
_WHITESPACE = re.compile(r"\s+")


def _boundary_pattern(separator: str) -> re.Pattern[str]:
    if not separator:
        return _WHITESPACE
    return re.compile(rf"(?:\s|{re.escape(separator)})+")


def clean_string(value: str, separator: str) -> str:
    """Normalize free text into a separator-delimited fragment.

    Whitespace runs and runs of the separator itself split words. Every
    character that is not an ASCII letter or digit is dropped from the words,
    and the non-empty words are joined with a single separator.

    Args:
        value: Raw text.
        separator: Separator placed between words.

    Returns:
        The cleaned fragment, without leading or trailing separators.

    Examples:
        >>> clean_string("#a very", "-")
        'a-very'
        >>> clean_string("space--slug", "-")
        'space-slug'
        >>> clean_string("a very", "")
        'avery'
    """
    words = (_NON_ALNUM.sub("", chunk) for chunk in _boundary_pattern(separator).split(value))
    return separator.join(w for w in words if w)
