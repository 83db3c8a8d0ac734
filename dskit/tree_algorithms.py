"""Queries over binary trees built from :class:`dskit.bst.Node`."""

from __future__ import annotations

from collections import deque
from typing import Any, Iterator, Optional

from dskit.bst import Node

__all__ = [
    "min_value",
    "kth_largest",
    "kth_smallest",
    "ancestors",
    "height",
    "diameter",
    "nodes_at_distance",
]


def min_value(root: Optional[Node]) -> Any:
    """Return the smallest value of a binary search tree (its leftmost node)."""
    if root is None:
        raise ValueError("empty tree has no minimum")
    node = root
    while node.left is not None:
        node = node.left
    return node.value


def _inorder_nodes(root: Optional[Node], reverse: bool) -> Iterator[Node]:
    """Yield nodes in in-order (or reverse in-order) using an explicit stack."""
    stack: list[Node] = []
    node = root
    while stack or node is not None:
        while node is not None:
            stack.append(node)
            node = node.right if reverse else node.left
        node = stack.pop()
        yield node
        node = node.left if reverse else node.right


def _kth(root: Optional[Node], k: int, reverse: bool) -> Any:
    if k < 1:
        raise IndexError("k must be at least 1")
    for position, node in enumerate(_inorder_nodes(root, reverse), start=1):
        if position == k:
            return node.value
    raise IndexError(f"tree has fewer than {k} nodes")


def kth_largest(root: Optional[Node], k: int) -> Any:
    """Return the k-th largest value (1-based) of a binary search tree."""
    return _kth(root, k, reverse=True)


def kth_smallest(root: Optional[Node], k: int) -> Any:
    """Return the k-th smallest value (1-based) of a binary search tree."""
    return _kth(root, k, reverse=False)


def ancestors(root: Optional[Node], value: Any) -> list[Any]:
    """Return the values on the search path to ``value``, nearest ancestor first.

    If ``value`` is absent, every node visited by the failed search is returned.
    """
    path: list[Any] = []
    node = root
    while node is not None and node.value != value:
        path.append(node.value)
        node = node.left if node.value > value else node.right
    path.reverse()
    return path


def height(root: Optional[Node]) -> int:
    """Return the height in edges; an empty tree has height -1."""
    if root is None:
        return -1
    return 1 + max(height(root.left), height(root.right))


def diameter(root: Optional[Node]) -> int:
    """Return the number of edges on the longest path between any two nodes."""

    def measure(node: Optional[Node]) -> tuple[int, int]:
        # (height counted in nodes, best diameter found below)
        if node is None:
            return 0, 0
        left_h, left_d = measure(node.left)
        right_h, right_d = measure(node.right)
        return 1 + max(left_h, right_h), max(left_d, right_d, left_h + right_h)

    return measure(root)[1]


def nodes_at_distance(root: Optional[Node], k: int) -> list[Any]:
    """Return the values exactly ``k`` levels below the root, left to right."""
    if root is None or k < 0:
        return []
    level: deque[Node] = deque([root])
    for _ in range(k):
        next_level: deque[Node] = deque()
        for node in level:
            if node.left is not None:
                next_level.append(node.left)
            if node.right is not None:
                next_level.append(node.right)
        if not next_level:
            return []
        level = next_level
    return [node.value for node in level]