"""Binary tree exercises: equality, search-tree building, leaves, level order."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable
from typing import Any

from .binary_tree import TreeNode


def compare_trees(first: TreeNode | None, second: TreeNode | None) -> bool:
    """Return True when both trees have the same shape and the same values."""
    if first is None or second is None:
        return first is None and second is None
    if first.value != second.value:
        return False
    return compare_trees(first.left, second.left) and compare_trees(
        first.right, second.right
    )


def bst_build(values: Iterable[Any]) -> TreeNode | None:
    """Insert ``values`` in order into a binary search tree and return its root.

    Values not greater than a node go to its left subtree.
    """
    root: TreeNode | None = None
    for value in values:
        if root is None:
            root = TreeNode(value)
            continue
        current = root
        while True:
            if current.value < value:
                if current.right is None:
                    current.right = TreeNode(value)
                    break
                current = current.right
            else:
                if current.left is None:
                    current.left = TreeNode(value)
                    break
                current = current.left
    return root


def number_of_leaves(root: TreeNode | None) -> int:
    """Count the nodes that have no children."""
    if root is None:
        return 0
    if root.left is None and root.right is None:
        return 1
    return number_of_leaves(root.left) + number_of_leaves(root.right)


def level_order(root: TreeNode | None) -> list[Any]:
    """Return the tree's values in breadth-first order."""
    if root is None:
        return []
    result = []
    queue = deque([root])
    while queue:
        node = queue.popleft()
        result.append(node.value)
        queue.extend(child for child in (node.left, node.right) if child is not None)
    return result