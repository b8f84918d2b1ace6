"""Number of ways to climb stairs one or two steps at a time."""

from __future__ import annotations

__all__ = ["climb_stairs"]


def climb_stairs(n: int) -> int:
    """Return the number of distinct ways to climb n steps by 1 or 2.

    Values of n of 2 or less are returned unchanged.
    """
    if n <= 2:
        return n
    a, b = 1, 2
    for _ in range(3, n + 1):
        a, b = b, a + b
    return b