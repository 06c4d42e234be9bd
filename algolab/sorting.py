"""Classic comparison sorts: insertion, selection, merge and quick sort.

Each function takes any iterable and returns a new sorted list.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any


def insertion_sort(items: Iterable[Any]) -> list[Any]:
    """Sort by inserting each element into the sorted prefix before it."""
    result = list(items)
    for i in range(1, len(result)):
        key = result[i]
        j = i - 1
        while j >= 0 and result[j] > key:
            result[j + 1] = result[j]
            j -= 1
        result[j + 1] = key
    return result


def selection_sort(items: Iterable[Any]) -> list[Any]:
    """Sort by repeatedly moving the minimum of the unsorted tail to its front."""
    result = list(items)
    for i in range(len(result) - 1):
        min_idx = min(range(i, len(result)), key=result.__getitem__)
        if min_idx != i:
            result[i], result[min_idx] = result[min_idx], result[i]
    return result


def _merge(left: list[Any], right: list[Any]) -> list[Any]:
    merged: list[Any] = []
    i = j = 0
    while i < len(left) and j < len(right):
        if left[i] <= right[j]:
            merged.append(left[i])
            i += 1
        else:
            merged.append(right[j])
            j += 1
    merged.extend(left[i:])
    merged.extend(right[j:])
    return merged


def merge_sort(items: Iterable[Any]) -> list[Any]:
    """Stable divide-and-conquer sort."""
    values = list(items)
    if len(values) <= 1:
        return values
    mid = (len(values) - 1) // 2 + 1
    return _merge(merge_sort(values[:mid]), merge_sort(values[mid:]))


def _partition(values: list[Any], low: int, high: int) -> int:
    """Lomuto partition around the last element; return the pivot's final index."""
    pivot = values[high]
    i = low - 1
    for j in range(low, high):
        if values[j] < pivot:
            i += 1
            values[i], values[j] = values[j], values[i]
    values[i + 1], values[high] = values[high], values[i + 1]
    return i + 1


def quick_sort(items: Iterable[Any]) -> list[Any]:
    """Quick sort with the last element of each range as pivot."""
    result = list(items)
    pending = [(0, len(result) - 1)]
    while pending:
        low, high = pending.pop()
        if low >= high:
            continue
        pivot_index = _partition(result, low, high)
        pending.append((low, pivot_index - 1))
        pending.append((pivot_index + 1, high))
    return result