"""Maximum contiguous subarray sum, by Kadane's scan and by divide and conquer."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from itertools import accumulate


def max_subarray_kadane(values: Iterable[int]) -> int:
    """Return the largest sum of a non-empty contiguous run, in one pass."""
    iterator = iter(values)
    try:
        first = next(iterator)
    except StopIteration:
        raise ValueError("values must not be empty") from None
    best = ending = first
    for value in iterator:
        ending = max(ending + value, value)
        best = max(best, ending)
    return best


def _crossing_sum(values: Sequence[int], left: int, mid: int, right: int) -> int:
    left_best = max(accumulate(values[mid - i] for i in range(mid - left + 1)))
    right_best = max(accumulate(values[mid + 1 : right + 1]))
    return left_best + right_best


def _max_in_range(values: Sequence[int], left: int, right: int) -> int:
    if left == right:
        return values[left]
    mid = (left + right) // 2
    return max(
        _max_in_range(values, left, mid),
        _max_in_range(values, mid + 1, right),
        _crossing_sum(values, left, mid, right),
    )


def max_subarray_divide(values: Iterable[int]) -> int:
    """Return the largest sum of a non-empty contiguous run, by divide and conquer."""
    items = list(values)
    if not items:
        raise ValueError("values must not be empty")
    return _max_in_range(items, 0, len(items) - 1)