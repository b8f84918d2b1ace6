"""Split a binary array into three parts of equal binary value."""

from __future__ import annotations

from collections.abc import Sequence

__all__ = ["three_equal_parts"]


def three_equal_parts(arr: Sequence[int]) -> tuple[int, int]:
    """Return (i, j) such that arr[:i+1], arr[i+1:j] and arr[j:] are equal.

    Each part is read as a binary number, leading zeros allowed.
    Returns (-1, -1) when no such split exists.
    """
    bits = list(arr)
    ones = [index for index, bit in enumerate(bits) if bit == 1]
    if len(ones) % 3:
        return (-1, -1)
    if not ones:
        return (0, len(bits) - 1)

    k = len(ones) // 3
    first, second, third = ones[0], ones[k], ones[2 * k]
    span = len(bits) - third
    if not (
        bits[first : first + span]
        == bits[second : second + span]
        == bits[third:]
    ):
        return (-1, -1)
    return (first + span - 1, second + span)