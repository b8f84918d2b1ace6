"""Longest palindromic substring by expanding around centres."""

from __future__ import annotations

__all__ = ["longest_palindrome"]


def _expand(s: str, left: int, right: int) -> int:
    while left >= 0 and right < len(s) and s[left] == s[right]:
        left -= 1
        right += 1
    return right - left - 1


def longest_palindrome(s: str) -> str:
    """Return the longest palindromic substring; the earliest wins ties."""
    if not s:
        return ""
    start = end = 0
    for centre in range(len(s)):
        length = max(_expand(s, centre, centre), _expand(s, centre, centre + 1))
        if length > end - start:
            start = centre - (length - 1) // 2
            end = centre + length // 2
    return s[start : end + 1]