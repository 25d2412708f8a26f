"""Text helpers used by derived post views."""
from __future__ import annotations


def count_words(text: object) -> int:
    """Return the number of whitespace-delimited tokens in ``text``.

    Missing or non-string values count as empty text.
    """
    if not isinstance(text, str):
        return 0
    return len(text.split())
