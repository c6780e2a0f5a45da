"""Binary search over a sorted sequence."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

__all__ = ["binary_search"]


def binary_search(values: Sequence[Any], target: Any) -> int:
    """Return an index of ``target`` in ascending ``values``, or -1."""
    start, end = 0, len(values) - 1
    while start <= end:
        mid = start + (end - start) // 2
        if values[mid] == target:
            return mid
        if values[mid] < target:
            start = mid + 1
        else:
            end = mid - 1
    return -1