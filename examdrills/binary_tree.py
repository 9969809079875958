"""Binary trees built from level-order arrays, and a level-by-level printer."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any

NULL_NUMBER = 114514
"""Marker in a level-order array for a missing node."""


@dataclass(eq=False)
class TreeNode:
    """A binary tree node."""

    value: Any
    left: TreeNode | None = None
    right: TreeNode | None = None


def _is_null(value: Any) -> bool:
    return value is None or value == NULL_NUMBER


def build_tree(values: Iterable[Any]) -> TreeNode | None:
    """Build a tree from a heap-ordered array.

    Entries equal to ``NULL_NUMBER`` (or ``None``) stand for missing nodes.
    Returns the root, which is ``None`` when the first entry is missing.
    """
    nodes = [None if _is_null(value) else TreeNode(value) for value in values]
    if not nodes:
        raise ValueError("cannot build a tree from an empty sequence")
    size = len(nodes)
    for index, node in enumerate(nodes):
        if node is None:
            continue
        left, right = 2 * index + 1, 2 * index + 2
        node.left = nodes[left] if left < size else None
        node.right = nodes[right] if right < size else None
    return nodes[0]


def format_tree(root: TreeNode | None) -> str:
    """Render the tree level by level, ``*`` marking missing nodes.

    Each entry is followed by a space and each level ends with a newline.
    Rendering stops at the first level that holds no real node.
    """
    lines: list[str] = []
    level: list[TreeNode | None] = [root]
    while True:
        tokens: list[str] = []
        next_level: list[TreeNode | None] = []
        present = 0
        for node in level:
            if node is None:
                tokens.append("*")
                next_level.extend((None, None))
            else:
                tokens.append(str(node.value))
                next_level.extend((node.left, node.right))
                present += 1
        if not present:
            break
        lines.append("".join(f"{token} " for token in tokens) + "\n")
        level = next_level
    return "".join(lines)


def print_tree(root: TreeNode | None) -> None:
    """Write :func:`format_tree` output to standard output."""
    print(format_tree(root), end="")