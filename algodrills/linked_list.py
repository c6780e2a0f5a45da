"""Singly linked list nodes and the classic operations on them."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any, Optional

__all__ = [
    "Node",
    "from_values",
    "to_values",
    "length",
    "is_circular",
    "find_middle",
    "remove_sorted_duplicates",
    "remove_unsorted_duplicates",
    "sort_zero_one_two",
    "reverse_in_groups",
    "detect_and_remove_loop",
    "reverse",
]


@dataclass(eq=False, repr=False)
class Node:
    """A node of a singly linked list; nodes compare by identity."""

    data: Any
    next: Optional[Node] = None

    def __repr__(self) -> str:
        return f"Node({self.data!r})"


def _nodes(head: Optional[Node]) -> Iterator[Node]:
    """Yield each node from ``head`` onwards, refusing to walk a cycle."""
    seen: set[int] = set()
    node = head
    while node is not None:
        if id(node) in seen:
            raise ValueError("linked list contains a cycle")
        seen.add(id(node))
        yield node
        node = node.next


def from_values(values: Iterable[Any]) -> Optional[Node]:
    """Build a list holding ``values`` in order and return its head."""
    head: Optional[Node] = None
    tail: Optional[Node] = None
    for value in values:
        node = Node(value)
        if tail is None:
            head = node
        else:
            tail.next = node
        tail = node
    return head


def to_values(head: Optional[Node]) -> list[Any]:
    """Return the data of every node from ``head`` onwards."""
    return [node.data for node in _nodes(head)]


def length(head: Optional[Node]) -> int:
    """Return the number of nodes from ``head`` onwards."""
    return sum(1 for _ in _nodes(head))


def is_circular(head: Optional[Node]) -> bool:
    """Tell whether the list loops back to its own head.

    An empty list counts as circular; a list whose loop starts anywhere
    other than the head does not.
    """
    if head is None:
        return True
    if head.next is None:
        return False

    slow: Optional[Node] = head
    fast: Optional[Node] = head
    while fast is not None and fast.next is not None:
        slow = slow.next
        fast = fast.next.next
        if slow is fast:
            break

    return slow is fast and slow is head


def find_middle(head: Optional[Node]) -> Optional[Node]:
    """Return the middle node; for an even count, the second of the two."""
    steps = length(head) // 2
    node = head
    for _ in range(steps):
        node = node.next
    return node


def remove_sorted_duplicates(head: Optional[Node]) -> Optional[Node]:
    """Drop adjacent nodes with equal data from a sorted list, in place."""
    current = head
    while current is not None and current.next is not None:
        if current.data == current.next.data:
            current.next = current.next.next
        else:
            current = current.next
    return head


def remove_unsorted_duplicates(head: Optional[Node]) -> Optional[Node]:
    """Keep only the first node for each data value, in place."""
    if head is None or head.next is None:
        return head

    visited = {head.data}
    previous = head
    current = head.next
    while current is not None:
        if current.data in visited:
            previous.next = current.next
        else:
            visited.add(current.data)
            previous = current
        current = previous.next
    return head


def sort_zero_one_two(head: Optional[Node]) -> Optional[Node]:
    """Sort a list of 0s, 1s and 2s by counting and rewriting the data."""
    counts = {0: 0, 1: 0, 2: 0}
    for node in _nodes(head):
        if node.data in counts:
            counts[node.data] += 1

    for node in _nodes(head):
        for digit in (0, 1, 2):
            if counts[digit] > 0:
                node.data = digit
                counts[digit] -= 1
                break
    return head


def reverse_in_groups(head: Optional[Node], k: int) -> Optional[Node]:
    """Reverse every full run of ``k`` nodes; a shorter tail stays as is."""
    if k < 0:
        raise ValueError("group size must not be negative")
    if head is None or k == 0:
        return head

    new_head: Optional[Node] = None
    previous_tail: Optional[Node] = None
    group_start: Optional[Node] = head
    remaining = length(head)

    while group_start is not None and remaining >= k:
        prev: Optional[Node] = None
        current: Optional[Node] = group_start
        for _ in range(k):
            following = current.next
            current.next = prev
            prev = current
            current = following

        if previous_tail is None:
            new_head = prev
        else:
            previous_tail.next = prev
        # The first node of the group is now its tail.
        group_start.next = current
        previous_tail = group_start
        group_start = current
        remaining -= k

    return new_head if new_head is not None else head


def detect_and_remove_loop(head: Optional[Node]) -> bool:
    """Break a loop in the list if there is one; return whether one was found."""
    if head is None or head.next is None:
        return False

    slow: Optional[Node] = head
    fast: Optional[Node] = head
    while fast is not None and fast.next is not None:
        slow = slow.next
        fast = fast.next.next
        if slow is fast:
            break

    if slow is not fast:
        return False

    slow = head
    if slow is fast:
        while fast.next is not slow:
            fast = fast.next
        fast.next = None
        return True

    while slow.next is not fast.next:
        slow = slow.next
        fast = fast.next
    fast.next = None
    return True


def reverse(head: Optional[Node]) -> Optional[Node]:
    """Reverse the list in place and return its new head."""
    prev: Optional[Node] = None
    current = head
    while current is not None:
        following = current.next
        current.next = prev
        prev = current
        current = following
    return prev