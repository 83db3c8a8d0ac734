"""Union-find structures with union by rank and path compression."""

from __future__ import annotations

from typing import Hashable, Iterable, Sequence

__all__ = ["DisjointSet", "KeyedDisjointSet", "has_cycle", "count_provinces"]


class DisjointSet:
    """Disjoint sets over the integers ``0 .. size - 1``."""

    def __init__(self, size: int) -> None:
        if size < 0:
            raise ValueError("size must not be negative")
        self._parent = list(range(size))
        self._rank = [0] * size

    def __len__(self) -> int:
        return len(self._parent)

    def _check(self, item: int) -> None:
        if not 0 <= item < len(self._parent):
            raise IndexError(f"element {item} out of range")

    def find(self, item: int) -> int:
        """Return the representative of the set holding ``item``."""
        self._check(item)
        root = item
        while self._parent[root] != root:
            root = self._parent[root]
        while self._parent[item] != root:
            self._parent[item], item = root, self._parent[item]
        return root

    def union(self, a: int, b: int) -> bool:
        """Merge the sets of ``a`` and ``b``; return False if already joined."""
        x, y = self.find(a), self.find(b)
        if x == y:
            return False
        if self._rank[x] > self._rank[y]:
            self._parent[y] = x
        elif self._rank[x] < self._rank[y]:
            self._parent[x] = y
        else:
            self._rank[x] += 1
            self._parent[y] = x
        return True

    def rank(self, item: int) -> int:
        """Return the rank recorded for ``item``."""
        self._check(item)
        return self._rank[item]


class KeyedDisjointSet:
    """Disjoint sets over arbitrary hashable keys added with :meth:`make_set`."""

    def __init__(self) -> None:
        self._parent: dict[Hashable, Hashable] = {}
        self._rank: dict[Hashable, int] = {}

    def __contains__(self, item: object) -> bool:
        return item in self._parent

    def __len__(self) -> int:
        return len(self._parent)

    def make_set(self, item: Hashable) -> None:
        """Add ``item`` as a set of its own."""
        if item in self._parent:
            raise ValueError(f"{item!r} already belongs to a set")
        self._parent[item] = item
        self._rank[item] = 0

    def find(self, item: Hashable) -> Hashable:
        """Return the representative key of the set holding ``item``."""
        if item not in self._parent:
            raise KeyError(item)
        root = item
        while self._parent[root] != root:
            root = self._parent[root]
        while self._parent[item] != root:
            self._parent[item], item = root, self._parent[item]
        return root

    def union(self, a: Hashable, b: Hashable) -> bool:
        """Merge the sets of ``a`` and ``b``; return False if already joined."""
        x, y = self.find(a), self.find(b)
        if x == y:
            return False
        if self._rank[x] > self._rank[y]:
            self._parent[y] = x
        elif self._rank[x] < self._rank[y]:
            self._parent[x] = y
        else:
            self._rank[x] += 1
            self._parent[y] = x
        return True

    def rank(self, item: Hashable) -> int:
        """Return the rank recorded for ``item``."""
        if item not in self._rank:
            raise KeyError(item)
        return self._rank[item]


def has_cycle(vertices: int, edges: Iterable[tuple[int, int]]) -> bool:
    """Return whether the undirected graph given by ``edges`` has a cycle."""
    sets = DisjointSet(vertices)
    return any(not sets.union(u, v) for u, v in edges)


def count_provinces(is_connected: Sequence[Sequence[int]]) -> int:
    """Return the number of connected groups in an adjacency matrix."""
    n = len(is_connected)
    if any(len(row) != n for row in is_connected):
        raise ValueError("adjacency matrix must be square")
    sets = DisjointSet(n)
    for i, row in enumerate(is_connected):
        for j in range(i + 1, n):
            if row[j] == 1:
                sets.union(i, j)
    return len({sets.find(i) for i in range(n)})