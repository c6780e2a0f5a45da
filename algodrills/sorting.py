"""Comparison sorts: top-down merge sort and a count-based quick sort."""

from __future__ import annotations

from collections.abc import Iterable, MutableSequence
from typing import Any

__all__ = ["merge_sort", "quick_sort", "partition"]


def _merge(left: list[Any], right: list[Any]) -> list[Any]:
    """Merge two sorted lists; on ties the right-hand item goes first."""
    merged: list[Any] = []
    i = j = 0
    while i < len(left) and j < len(right):
        if left[i] < right[j]:
            merged.append(left[i])
            i += 1
        else:
            merged.append(right[j])
            j += 1
    merged.extend(left[i:])
    merged.extend(right[j:])
    return merged


def merge_sort(values: Iterable[Any]) -> list[Any]:
    """Return a new list holding ``values`` in ascending order."""
    items = list(values)
    if len(items) <= 1:
        return items
    # The left half takes the extra item when the count is odd.
    mid = (len(items) + 1) // 2
    return _merge(merge_sort(items[:mid]), merge_sort(items[mid:]))


def partition(values: MutableSequence[Any], start: int, end: int) -> int:
    """Partition ``values[start:end + 1]`` in place around its first item.

    Items not greater than the pivot end up on its left, greater ones on
    its right. Returns the pivot's final index.
    """
    if not 0 <= start <= end < len(values):
        raise IndexError("partition range out of bounds")

    pivot = values[start]
    count = sum(1 for item in values[start + 1 : end + 1] if item <= pivot)
    pivot_index = start + count
    values[pivot_index], values[start] = values[start], values[pivot_index]

    i, j = start, end
    while i < pivot_index and j > pivot_index:
        while values[i] <= pivot:
            i += 1
        while values[j] > pivot:
            j -= 1
        if i < pivot_index and j > pivot_index:
            values[i], values[j] = values[j], values[i]
            i += 1
            j -= 1
    return pivot_index


def quick_sort(values: Iterable[Any]) -> list[Any]:
    """Return a new list holding ``values`` in ascending order."""
    items = list(values)
    pending = [(0, len(items) - 1)]
    while pending:
        start, end = pending.pop()
        if start >= end:
            continue
        pivot_index = partition(items, start, end)
        pending.append((start, pivot_index - 1))
        pending.append((pivot_index + 1, end))
    return items