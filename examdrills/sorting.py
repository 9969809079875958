"""Quicksort with the first element of each range as pivot."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any


def _partition(items: list[Any], begin: int, end: int) -> int:
    pivot = items[begin]
    left, right = begin + 1, end - 1
    while True:
        while left <= right and items[left] <= pivot:
            left += 1
        while left <= right and items[right] > pivot:
            right -= 1
        if left < right:
            items[left], items[right] = items[right], items[left]
        else:
            break
    items[begin], items[right] = items[right], items[begin]
    return right


def quick_sort(values: Iterable[Any]) -> list[Any]:
    """Return the values in ascending order as a new list."""
    items = list(values)
    pending = [(0, len(items))]
    while pending:
        begin, end = pending.pop()
        if end - begin < 2:
            continue
        split = _partition(items, begin, end)
        pending.append((begin, split))
        pending.append((split + 1, end))
    return items