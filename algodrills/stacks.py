"""Stack exercises on Python lists whose top is the last item."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

__all__ = [
    "delete_middle",
    "insert_at_bottom",
    "reverse_stack",
    "next_smaller_elements",
]


def delete_middle(stack: list[Any]) -> Any:
    """Remove and return the middle item, counted ``len // 2`` from the top."""
    if not stack:
        raise IndexError("delete from empty stack")
    from_top = len(stack) // 2
    return stack.pop(len(stack) - 1 - from_top)


def insert_at_bottom(stack: list[Any], element: Any) -> None:
    """Put ``element`` beneath every item already on the stack."""
    stack.insert(0, element)


def reverse_stack(stack: list[Any]) -> None:
    """Reverse the stack in place, so the bottom item becomes the top."""
    stack.reverse()


def next_smaller_elements(values: Iterable[int]) -> list[int]:
    """For each item, the first later item strictly smaller than it, else -1."""
    items = list(values)
    answer = [-1] * len(items)
    candidates: list[int] = []
    for index in reversed(range(len(items))):
        current = items[index]
        while candidates and candidates[-1] >= current:
            candidates.pop()
        if candidates:
            answer[index] = candidates[-1]
        candidates.append(current)
    return answer