"""All subsets of a sequence."""

from __future__ import annotations

from collections.abc import Iterator, Sequence

__all__ = ["subsets"]


def subsets(nums: Sequence[int]) -> list[list[int]]:
    """Return every subset of nums in depth-first order, starting with []."""
    pool = list(nums)

    def build(start: int, path: list[int]) -> Iterator[list[int]]:
        yield list(path)
        for index in range(start, len(pool)):
            path.append(pool[index])
            yield from build(index + 1, path)
            path.pop()

    return list(build(0, []))