"""Distance of every cell to the nearest zero in a grid."""

from __future__ import annotations

import sys
from collections import deque
from collections.abc import Sequence
from typing import TextIO

__all__ = ["update_matrix", "print_matrix"]

_DIRECTIONS = ((0, 1), (1, 0), (0, -1), (-1, 0))


def update_matrix(mat: Sequence[Sequence[int]]) -> list[list[int]]:
    """Return a new grid holding each cell's step distance to the nearest 0.

    Cells that cannot reach any zero are marked -1. The input is not changed.
    """
    if not mat:
        raise ValueError("matrix must have at least one row")
    cols = len(mat[0])
    if any(len(row) != cols for row in mat):
        raise ValueError("matrix rows must all have the same length")
    rows = len(mat)

    result = [[0 if value == 0 else -1 for value in row] for row in mat]
    queue = deque(
        (r, c) for r, row in enumerate(result) for c, value in enumerate(row) if value == 0
    )

    while queue:
        r, c = queue.popleft()
        for dr, dc in _DIRECTIONS:
            nr, nc = r + dr, c + dc
            if 0 <= nr < rows and 0 <= nc < cols and result[nr][nc] == -1:
                result[nr][nc] = result[r][c] + 1
                queue.append((nr, nc))
    return result


def print_matrix(matrix: Sequence[Sequence[int]], file: TextIO | None = None) -> None:
    """Write each row as '[a b c]' on its own line."""
    out = file if file is not None else sys.stdout
    for row in matrix:
        print("[" + " ".join(str(value) for value in row) + "]", file=out)