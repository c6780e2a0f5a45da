"""String exercises: palindrome checking and subsequence listing."""

from __future__ import annotations

from itertools import compress, product

__all__ = ["is_palindrome", "subsequences"]


def is_palindrome(text: str) -> bool:
    """Tell whether the ASCII letters and digits of ``text`` read the same
    both ways, ignoring case."""
    chars = [c.lower() for c in text if c.isascii() and c.isalnum()]
    return chars == chars[::-1]


def subsequences(text: str) -> list[str]:
    """Return every non-empty subsequence of ``text``.

    The order is that of an exclude-before-include choice on each
    character from left to right.
    """
    return [
        "".join(compress(text, mask))
        for mask in product((False, True), repeat=len(text))
        if any(mask)
    ]