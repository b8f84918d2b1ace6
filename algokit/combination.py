"""Combinations of candidates, with repetition, that add up to a target."""

from __future__ import annotations

from collections.abc import Iterator, Sequence

__all__ = ["combination_sum"]


def combination_sum(candidates: Sequence[int], target: int) -> list[list[int]]:
    """Return every combination of candidates summing to target.

    Each candidate may be used any number of times. Combinations list
    candidates in input order and appear in depth-first search order.
    Candidates must be positive, otherwise the search would not end.
    """
    pool = list(candidates)
    if any(value <= 0 for value in pool):
        raise ValueError("candidates must be positive integers")

    def search(start: int, remaining: int, path: list[int]) -> Iterator[list[int]]:
        if remaining == 0:
            yield list(path)
            return
        for index in range(start, len(pool)):
            value = pool[index]
            if value > remaining:
                continue
            path.append(value)
            yield from search(index, remaining - value, path)
            path.pop()

    return list(search(0, target, []))