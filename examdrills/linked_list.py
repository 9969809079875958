"""Singly linked lists, both terminated and circular."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any


@dataclass(eq=False)
class ListNode:
    """A singly linked list node."""

    value: Any
    next: ListNode | None = None


def _make_nodes(values: Iterable[Any]) -> list[ListNode]:
    nodes = [ListNode(value) for value in values]
    if not nodes:
        raise ValueError("cannot build a list from an empty sequence")
    for current, following in zip(nodes, nodes[1:]):
        current.next = following
    return nodes


def list_get(values: Iterable[Any]) -> ListNode:
    """Build a ``None``-terminated list and return its head."""
    return _make_nodes(values)[0]


def list_ring_get(values: Iterable[Any]) -> tuple[ListNode, int]:
    """Build a circular list; return its head and its length."""
    nodes = _make_nodes(values)
    nodes[-1].next = nodes[0]
    return nodes[0], len(nodes)


def iter_list(node: ListNode | None) -> Iterator[Any]:
    """Yield values from ``node`` until the end or back at the start."""
    start = node
    while node is not None:
        yield node.value
        node = node.next
        if node is start:
            break


def format_list(node: ListNode | None) -> str:
    """Return the list's values separated by single spaces."""
    return " ".join(str(value) for value in iter_list(node))


def print_list(node: ListNode | None) -> None:
    """Write :func:`format_list` output to standard output."""
    print(format_list(node), end="")