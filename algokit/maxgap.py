"""Largest gap between successive values in sorted order, by bucketing."""

from __future__ import annotations

from collections.abc import Iterable

__all__ = ["maximum_gap"]


def maximum_gap(nums: Iterable[int]) -> int:
    """Return the largest difference between neighbours once sorted.

    Runs in linear time using buckets. Fewer than two values give 0.
    """
    values = list(nums)
    n = len(values)
    if n < 2:
        return 0
    low, high = min(values), max(values)
    if low == high:
        return 0

    bucket_size = max(1, (high - low) // (n - 1))
    bucket_count = (high - low) // bucket_size + 1
    buckets: list[tuple[int, int] | None] = [None] * bucket_count

    for value in values:
        index = (value - low) // bucket_size
        bucket = buckets[index]
        if bucket is None:
            buckets[index] = (value, value)
        else:
            buckets[index] = (min(bucket[0], value), max(bucket[1], value))

    gap = 0
    previous_max = low
    for bucket in buckets:
        if bucket is None:
            continue
        gap = max(gap, bucket[0] - previous_max)
        previous_max = bucket[1]
    return gap