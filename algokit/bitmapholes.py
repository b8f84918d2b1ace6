"""Count connected regions of zeros in a bitmap of '0'/'1' strings."""

from __future__ import annotations

from collections.abc import Sequence

__all__ = ["bitmap_holes"]


def bitmap_holes(rows: Sequence[str]) -> int:
    """Return the number of 4-connected regions made of '0' cells.

    The width of the bitmap is taken from the first row; a row shorter than
    that raises ValueError. Characters past the width are ignored.
    """
    if not rows:
        return 0
    width = len(rows[0])
    for number, row in enumerate(rows):
        if len(row) < width:
            raise ValueError(
                f"row {number} has {len(row)} cells, expected at least {width}"
            )

    open_cells = {
        (r, c)
        for r, row in enumerate(rows)
        for c, cell in enumerate(row[:width])
        if cell == "0"
    }

    holes = 0
    while open_cells:
        holes += 1
        stack = [open_cells.pop()]
        while stack:
            r, c = stack.pop()
            for neighbour in ((r + 1, c), (r - 1, c), (r, c + 1), (r, c - 1)):
                if neighbour in open_cells:
                    open_cells.remove(neighbour)
                    stack.append(neighbour)
    return holes