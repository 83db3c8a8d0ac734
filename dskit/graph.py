"""Adjacency-list graph with traversals and structural queries."""

from __future__ import annotations

from collections import deque
from typing import Any, Iterator, Optional

__all__ = ["Graph"]


class Graph:
    """Graph on the vertices ``0 .. vertices - 1`` stored as adjacency lists.

    Each edge carries a weight; edges added without one weigh 1.
    In an undirected graph every edge is stored in both endpoints' lists.
    """

    def __init__(self, vertices: int, undirected: bool = False) -> None:
        if vertices < 0:
            raise ValueError("number of vertices must not be negative")
        self.vertices = vertices
        self.undirected = undirected
        self.weighted = False
        self._adj: list[list[tuple[int, Any]]] = [[] for _ in range(vertices)]

    def __len__(self) -> int:
        return self.vertices

    def _check(self, vertex: int) -> None:
        if not 0 <= vertex < self.vertices:
            raise IndexError(f"vertex {vertex} out of range")

    def add_edge(self, source: int, destination: int, weight: Any = None) -> None:
        """Add an edge; in an undirected graph it is added in both directions."""
        self._check(source)
        self._check(destination)
        if weight is None:
            weight = 1
        else:
            self.weighted = True
        self._adj[source].append((destination, weight))
        if self.undirected:
            self._adj[destination].append((source, weight))

    @staticmethod
    def _drop(entries: list[tuple[int, Any]], target: int) -> bool:
        for position, (vertex, _) in enumerate(entries):
            if vertex == target:
                del entries[position]
                return True
        return False

    def remove_edge(self, source: int, destination: int) -> None:
        """Remove one edge from ``source`` to ``destination``.

        Raises ValueError if there is no such edge.
        """
        self._check(source)
        self._check(destination)
        if not self._drop(self._adj[source], destination):
            raise ValueError(f"no edge from {source} to {destination}")
        if self.undirected:
            self._drop(self._adj[destination], source)

    def neighbors(self, vertex: int) -> list[int]:
        """Return the vertices adjacent to ``vertex`` in insertion order."""
        self._check(vertex)
        return [destination for destination, _ in self._adj[vertex]]

    def weighted_neighbors(self, vertex: int) -> list[tuple[int, Any]]:
        """Return ``(vertex, weight)`` pairs adjacent to ``vertex`` in insertion order."""
        self._check(vertex)
        return list(self._adj[vertex])

    def format(self) -> str:
        """Render the adjacency lists, one line per vertex."""
        if self.weighted:
            kind = "Weighted"
        else:
            kind = "Undirected" if self.undirected else "Directed"
        lines = [f"Adjacency List of {kind} Graph"]
        for vertex, entries in enumerate(self._adj):
            if self.weighted:
                cells = "".join(f"[v:{v}, w:{w}] -> " for v, w in entries)
            else:
                cells = "".join(f"[{v}] -> " for v, _ in entries)
            lines.append(f"|{vertex}| => {cells}NULL")
        return "\n".join(lines)

    def __str__(self) -> str:
        return self.format()

    def transpose(self) -> "Graph":
        """Return a new graph with every directed edge reversed."""
        result = Graph(self.vertices, self.undirected)
        result.weighted = self.weighted
        if self.undirected:
            result._adj = [list(entries) for entries in self._adj]
            return result
        for vertex, entries in enumerate(self._adj):
            for destination, weight in entries:
                result._adj[destination].append((vertex, weight))
        return result

    def bfs(self, source: int) -> list[int]:
        """Return the vertices reached from ``source`` in breadth-first order."""
        self._check(source)
        visited = {source}
        order: list[int] = []
        queue = deque([source])
        while queue:
            node = queue.popleft()
            order.append(node)
            for nbr, _ in self._adj[node]:
                if nbr not in visited:
                    visited.add(nbr)
                    queue.append(nbr)
        return order

    def _dfs_order(self, source: int, visited: set[int]) -> Iterator[int]:
        """Yield vertices in recursive depth-first preorder, marking them visited."""
        visited.add(source)
        yield source
        stack = [iter(self._adj[source])]
        while stack:
            for nbr, _ in stack[-1]:
                if nbr not in visited:
                    visited.add(nbr)
                    yield nbr
                    stack.append(iter(self._adj[nbr]))
                    break
            else:
                stack.pop()

    def dfs(self, source: int) -> list[int]:
        """Return the vertices reached from ``source`` in depth-first preorder."""
        self._check(source)
        return list(self._dfs_order(source, set()))

    def dfs_iterative(self, source: int) -> list[int]:
        """Depth-first order using an explicit stack that marks vertices when pushed."""
        self._check(source)
        visited = {source}
        order: list[int] = []
        stack = [source]
        while stack:
            node = stack.pop()
            order.append(node)
            for nbr, _ in self._adj[node]:
                if nbr not in visited:
                    visited.add(nbr)
                    stack.append(nbr)
        return order

    def _directed_cycle(self) -> bool:
        state = [0] * self.vertices  # 0 unseen, 1 on the current path, 2 finished
        for start in range(self.vertices):
            if state[start]:
                continue
            state[start] = 1
            stack = [(start, iter(self._adj[start]))]
            while stack:
                node, pending = stack[-1]
                for nbr, _ in pending:
                    if state[nbr] == 1:
                        return True
                    if state[nbr] == 0:
                        state[nbr] = 1
                        stack.append((nbr, iter(self._adj[nbr])))
                        break
                else:
                    state[node] = 2
                    stack.pop()
        return False

    def _undirected_cycle_from(self, start: int, visited: set[int]) -> bool:
        visited.add(start)
        stack = [(start, -1, iter(self._adj[start]))]
        while stack:
            node, parent, pending = stack[-1]
            for nbr, _ in pending:
                if nbr not in visited:
                    visited.add(nbr)
                    stack.append((nbr, node, iter(self._adj[nbr])))
                    break
                if nbr != parent:
                    return True
            else:
                stack.pop()
        return False

    def has_cycle(self) -> bool:
        """Return whether the graph contains a cycle."""
        if not self.undirected:
            return self._directed_cycle()
        visited: set[int] = set()
        return any(
            start not in visited and self._undirected_cycle_from(start, visited)
            for start in range(self.vertices)
        )

    def mother_vertex(self) -> Optional[int]:
        """Return a vertex from which every vertex is reachable, or None."""
        if not self.vertices:
            return None
        visited: set[int] = set()
        last = 0
        for vertex in range(self.vertices):
            if vertex not in visited:
                for _ in self._dfs_order(vertex, visited):
                    pass
                last = vertex
        reached = set(self._dfs_order(last, set()))
        return last if len(reached) == self.vertices else None

    def edge_count(self) -> int:
        """Return the number of edges added to the graph."""
        total = sum(len(entries) for entries in self._adj)
        return total // 2 if self.undirected else total

    def has_path(self, source: int, destination: int) -> bool:
        """Return whether ``destination`` is reachable from ``source``."""
        self._check(source)
        self._check(destination)
        return any(v == destination for v in self._dfs_order(source, set()))

    def is_tree(self) -> bool:
        """Return whether an undirected graph is connected and acyclic."""
        if not self.undirected:
            raise ValueError("tree check applies to undirected graphs")
        if not self.vertices:
            return False
        visited: set[int] = set()
        if self._undirected_cycle_from(0, visited):
            return False
        return len(visited) == self.vertices