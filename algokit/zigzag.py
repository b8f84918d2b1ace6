"""Zigzag row conversion of a string."""

from __future__ import annotations

__all__ = ["convert"]


def convert(s: str, num_rows: int) -> str:
    """Write s in a zigzag over num_rows rows and read it back row by row."""
    if num_rows == 1 or num_rows >= len(s):
        return s
    if num_rows < 1:
        raise ValueError("num_rows must be at least 1")

    rows: list[list[str]] = [[] for _ in range(num_rows)]
    current = 0
    going_down = False
    for char in s:
        rows[current].append(char)
        if current in (0, num_rows - 1):
            going_down = not going_down
        current += 1 if going_down else -1
    return "".join("".join(row) for row in rows)