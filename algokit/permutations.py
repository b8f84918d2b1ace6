"""All orderings of a sequence."""

from __future__ import annotations

from collections.abc import Sequence
from itertools import permutations

__all__ = ["permute"]


def permute(nums: Sequence[int]) -> list[list[int]]:
    """Return every permutation of nums, ordered by position choices.

    Positions are treated as distinct, so repeated values yield repeated
    permutations. An empty input gives a single empty permutation.
    """
    return [list(order) for order in permutations(nums)]