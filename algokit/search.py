"""Word search along adjacent cells of a letter grid."""

from __future__ import annotations

from collections.abc import Sequence

__all__ = ["exist"]

_STEPS = ((1, 0), (-1, 0), (0, 1), (0, -1))


def exist(board: Sequence[Sequence[str]], word: str) -> bool:
    """Return True if word can be traced through horizontally or vertically
    adjacent cells, using each cell at most once.

    The board needs at least one row; its width is taken from the first row.
    """
    if not board:
        raise ValueError("board must have at least one row")
    rows = len(board)
    cols = len(board[0])
    visited: set[tuple[int, int]] = set()

    def trace(r: int, c: int, index: int) -> bool:
        if index == len(word):
            return True
        if (
            not (0 <= r < rows and 0 <= c < cols)
            or (r, c) in visited
            or board[r][c] != word[index]
        ):
            return False
        visited.add((r, c))
        found = any(trace(r + dr, c + dc, index + 1) for dr, dc in _STEPS)
        visited.discard((r, c))
        return found

    return any(trace(r, c, 0) for r in range(rows) for c in range(cols))