"""Read a matrix in clockwise spiral order."""

from __future__ import annotations

from collections.abc import Sequence

__all__ = ["spiral_order"]


def spiral_order(matrix: Sequence[Sequence[int]]) -> list[int]:
    """Return the elements of matrix walking clockwise from the top-left."""
    if not matrix:
        return []
    result: list[int] = []
    top, bottom = 0, len(matrix) - 1
    left, right = 0, len(matrix[0]) - 1

    while top <= bottom and left <= right:
        result.extend(matrix[top][left : right + 1])
        top += 1
        result.extend(matrix[r][right] for r in range(top, bottom + 1))
        right -= 1
        if top <= bottom:
            result.extend(matrix[bottom][c] for c in range(right, left - 1, -1))
            bottom -= 1
        if left <= right:
            result.extend(matrix[r][left] for r in range(bottom, top - 1, -1))
            left += 1
    return result