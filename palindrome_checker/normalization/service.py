"""Canonical-form normalization for palindrome checks."""

import re
from typing import Protocol

# Anything that is not a lowercase ASCII letter or digit
_NON_CANONICAL = re.compile(r"[^a-z0-9]")


class TextNormalizer(Protocol):
    """Anything that turns raw text into the string a strategy compares."""

    def normalize(self, text: str) -> str: ...


def normalize(raw: str) -> str:
    """Normalize raw text into its canonical form.

    Case folding runs before filtering, so uppercase letters are kept as
    their lowercase form rather than deleted. Every other character outside
    ``[a-z0-9]`` (whitespace, punctuation, non-ASCII) is removed and the
    relative order of the survivors is preserved.

    Args:
        raw: Any text, including the empty string

    Returns:
        Canonical string (possibly empty)

    Example:
        >>> normalize("Was it a car or a cat I saw?")
        'wasitacaroracatisaw'
    """
    if not raw:
        return ""

    return _NON_CANONICAL.sub("", raw.lower())


def is_canonical(text: str) -> bool:
    """Return True if text is already in canonical form."""
    return _NON_CANONICAL.search(text) is None


class CanonicalNormalizer:
    """Default TextNormalizer used by PalindromeEvaluator."""

    def normalize(self, text: str) -> str:
        return normalize(text)

    def __repr__(self) -> str:
        return "CanonicalNormalizer()"
