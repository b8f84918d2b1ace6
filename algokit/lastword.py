"""Length of the last word in a string."""

from __future__ import annotations

__all__ = ["length_of_last_word"]


def length_of_last_word(s: str) -> int:
    """Return the length of the last space-separated word, or 0 if none.

    Surrounding whitespace is stripped first; words are separated by spaces.
    """
    for word in reversed(s.strip().split(" ")):
        if word:
            return len(word)
    return 0