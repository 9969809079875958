"""Linked-list exercises: minimum of a ring and in-place reversal."""

from __future__ import annotations

from collections.abc import Iterator
from itertools import islice
from typing import Any

from .linked_list import ListNode


def _walk(node: ListNode | None) -> Iterator[Any]:
    while node is not None:
        yield node.value
        node = node.next


def find_min(head: ListNode, length: int) -> Any:
    """Return the smallest value among the first ``length`` nodes from ``head``.

    The list may be circular, so the walk is bounded by ``length`` rather
    than by the end of the list. With ``length`` 0 the head's value is returned.
    """
    if head is None:
        raise ValueError("the list is empty")
    if length < 0:
        raise ValueError("length must not be negative")
    values = list(islice(_walk(head), length))
    if len(values) < length:
        raise ValueError(f"the list has fewer than {length} nodes")
    return min(values, default=head.value)


def reverse_list(head: ListNode | None) -> ListNode | None:
    """Reverse the links of a terminated list in one pass; return the new head."""
    previous: ListNode | None = None
    current = head
    while current is not None:
        current.next, previous, current = previous, current, current.next
    return previous