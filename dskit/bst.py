"""Unbalanced binary search tree of comparable values."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from typing import Any, Iterator, Optional


@dataclass(eq=False)
class Node:
    """A tree node holding a value and links to its two children."""

    value: Any
    left: Optional["Node"] = None
    right: Optional["Node"] = None


class BinarySearchTree:
    """Binary search tree; values equal to a node go to its right subtree."""

    def __init__(self, root_value: Any = None) -> None:
        self.root: Optional[Node] = None if root_value is None else Node(root_value)

    def insert(self, value: Any) -> None:
        """Insert ``value`` by walking down from the root."""
        new = Node(value)
        if self.root is None:
            self.root = new
            return
        current = self.root
        while True:
            if value < current.value:
                if current.left is None:
                    current.left = new
                    return
                current = current.left
            else:
                if current.right is None:
                    current.right = new
                    return
                current = current.right

    def insert_recursive(self, value: Any) -> None:
        """Insert ``value`` by recursive descent."""
        self.root = self._insert_at(self.root, value)

    def _insert_at(self, node: Optional[Node], value: Any) -> Node:
        if node is None:
            return Node(value)
        if node.value > value:
            node.left = self._insert_at(node.left, value)
        else:
            node.right = self._insert_at(node.right, value)
        return node

    def search(self, value: Any) -> Optional[Node]:
        """Return the first node holding ``value``, or None."""
        current = self.root
        while current is not None and current.value != value:
            current = current.left if value < current.value else current.right
        return current

    def __contains__(self, value: Any) -> bool:
        return self.search(value) is not None

    def delete(self, value: Any) -> bool:
        """Remove one occurrence of ``value``; return whether it was found."""
        parent: Optional[Node] = None
        current = self.root
        while current is not None and current.value != value:
            parent = current
            current = current.left if value < current.value else current.right
        if current is None:
            return False

        if current.left is not None and current.right is not None:
            successor_parent = current
            successor = current.right
            while successor.left is not None:
                successor_parent = successor
                successor = successor.left
            current.value = successor.value
            if successor_parent is current:
                successor_parent.right = successor.right
            else:
                successor_parent.left = successor.right
            return True

        child = current.left if current.left is not None else current.right
        if parent is None:
            self.root = child
        elif parent.left is current:
            parent.left = child
        else:
            parent.right = child
        return True

    def delete_recursive(self, value: Any) -> bool:
        """Remove one occurrence of ``value`` recursively; return whether it was found."""
        self.root, removed = self._delete_at(self.root, value)
        return removed

    def _delete_at(self, node: Optional[Node], value: Any) -> tuple[Optional[Node], bool]:
        if node is None:
            return None, False
        if value < node.value:
            node.left, removed = self._delete_at(node.left, value)
            return node, removed
        if value > node.value:
            node.right, removed = self._delete_at(node.right, value)
            return node, removed
        if node.left is None:
            return node.right, True
        if node.right is None:
            return node.left, True
        least = node.right
        while least.left is not None:
            least = least.left
        node.value, least.value = least.value, node.value
        node.right, _ = self._delete_at(node.right, least.value)
        return node, True

    @staticmethod
    def _walk_in(node: Optional[Node]) -> Iterator[Any]:
        if node is not None:
            yield from BinarySearchTree._walk_in(node.left)
            yield node.value
            yield from BinarySearchTree._walk_in(node.right)

    @staticmethod
    def _walk_pre(node: Optional[Node]) -> Iterator[Any]:
        if node is not None:
            yield node.value
            yield from BinarySearchTree._walk_pre(node.left)
            yield from BinarySearchTree._walk_pre(node.right)

    @staticmethod
    def _walk_post(node: Optional[Node]) -> Iterator[Any]:
        if node is not None:
            yield from BinarySearchTree._walk_post(node.left)
            yield from BinarySearchTree._walk_post(node.right)
            yield node.value

    def inorder(self) -> list[Any]:
        """Values in sorted (left, node, right) order."""
        return list(self._walk_in(self.root))

    def preorder(self) -> list[Any]:
        """Values in node, left, right order."""
        return list(self._walk_pre(self.root))

    def postorder(self) -> list[Any]:
        """Values in left, right, node order."""
        return list(self._walk_post(self.root))

    def level_order(self) -> list[list[Any]]:
        """Values grouped by depth, each level read left to right."""
        levels: list[list[Any]] = []
        queue: deque[Node] = deque([self.root] if self.root is not None else [])
        while queue:
            level = []
            for _ in range(len(queue)):
                node = queue.popleft()
                level.append(node.value)
                if node.left is not None:
                    queue.append(node.left)
                if node.right is not None:
                    queue.append(node.right)
            levels.append(level)
        return levels

    def zigzag_level_order(self) -> list[list[Any]]:
        """Levels alternating left-to-right and right-to-left, starting left-to-right."""
        return [
            level if depth % 2 == 0 else level[::-1]
            for depth, level in enumerate(self.level_order())
        ]

    def __iter__(self) -> Iterator[Any]:
        return self._walk_in(self.root)