"""Path, ordering and connectivity algorithms over :class:`dskit.graph.Graph`."""

from __future__ import annotations

import heapq
import math
from collections import deque
from typing import Any, Iterator, Optional, Sequence

from dskit.graph import Graph

__all__ = [
    "shortest_path_length",
    "topological_sort",
    "strongly_connected_components",
    "dijkstra",
    "min_cost_within_time",
    "can_finish",
]


def _check_vertex(graph: Graph, vertex: int) -> None:
    if not 0 <= vertex < graph.vertices:
        raise IndexError(f"vertex {vertex} out of range")


def shortest_path_length(graph: Graph, source: int, destination: int) -> Optional[int]:
    """Return the fewest edges from ``source`` to ``destination``, or None if unreachable."""
    _check_vertex(graph, source)
    _check_vertex(graph, destination)
    if source == destination:
        return 0
    distance = {source: 0}
    queue = deque([source])
    while queue:
        node = queue.popleft()
        for nbr in graph.neighbors(node):
            if nbr in distance:
                continue
            distance[nbr] = distance[node] + 1
            if nbr == destination:
                return distance[nbr]
            queue.append(nbr)
    return None


def topological_sort(graph: Graph) -> list[int]:
    """Order the vertices so every edge points forward (Kahn's algorithm).

    Raises ValueError if the graph has a cycle.
    """
    indegree = [0] * graph.vertices
    for vertex in range(graph.vertices):
        for nbr in graph.neighbors(vertex):
            indegree[nbr] += 1
    queue = deque(v for v, degree in enumerate(indegree) if degree == 0)
    order: list[int] = []
    while queue:
        node = queue.popleft()
        order.append(node)
        for nbr in graph.neighbors(node):
            indegree[nbr] -= 1
            if indegree[nbr] == 0:
                queue.append(nbr)
    if len(order) != graph.vertices:
        raise ValueError("graph has a cycle")
    return order


def _preorder(graph: Graph, start: int, visited: set[int]) -> Iterator[int]:
    visited.add(start)
    yield start
    stack = [iter(graph.neighbors(start))]
    while stack:
        for nbr in stack[-1]:
            if nbr not in visited:
                visited.add(nbr)
                yield nbr
                stack.append(iter(graph.neighbors(nbr)))
                break
        else:
            stack.pop()


def _finish_order(graph: Graph) -> list[int]:
    visited: set[int] = set()
    finished: list[int] = []
    for start in range(graph.vertices):
        if start in visited:
            continue
        visited.add(start)
        stack = [(start, iter(graph.neighbors(start)))]
        while stack:
            node, pending = stack[-1]
            for nbr in pending:
                if nbr not in visited:
                    visited.add(nbr)
                    stack.append((nbr, iter(graph.neighbors(nbr))))
                    break
            else:
                finished.append(node)
                stack.pop()
    return finished


def strongly_connected_components(graph: Graph) -> list[list[int]]:
    """Return the strongly connected components (Kosaraju's algorithm).

    Each component lists its vertices in depth-first order on the transposed graph.
    """
    finished = _finish_order(graph)
    transposed = graph.transpose()
    visited: set[int] = set()
    return [
        list(_preorder(transposed, vertex, visited))
        for vertex in reversed(finished)
        if vertex not in visited
    ]


def dijkstra(graph: Graph, source: int, destination: int) -> Optional[Any]:
    """Return the least total edge weight from ``source`` to ``destination``, or None."""
    _check_vertex(graph, source)
    _check_vertex(graph, destination)
    dist: list[Any] = [math.inf] * graph.vertices
    dist[source] = 0
    heap = [(0, source)]
    while heap:
        d, u = heapq.heappop(heap)
        if d > dist[u]:
            continue
        for v, w in graph.weighted_neighbors(u):
            candidate = d + w
            if candidate < dist[v]:
                dist[v] = candidate
                heapq.heappush(heap, (candidate, v))
    result = dist[destination]
    return None if result == math.inf else result


def min_cost_within_time(
    max_time: int, edges: Sequence[Sequence[int]], fees: Sequence[int]
) -> Optional[int]:
    """Cheapest passing-fee total from city 0 to the last city within ``max_time``.

    ``edges`` are undirected ``[u, v, time]`` roads; the fee of every city
    visited, the first and last included, is paid. Returns None if the last
    city cannot be reached in time.
    """
    n = len(fees)
    if n == 0:
        raise ValueError("at least one city is required")
    adj: list[list[tuple[int, int, int]]] = [[] for _ in range(n)]
    for u, v, t in edges:
        if not (0 <= u < n and 0 <= v < n):
            raise IndexError(f"road {u}-{v} refers to a missing city")
        adj[u].append((v, t, fees[v]))
        adj[v].append((u, t, fees[u]))

    cost: list[Any] = [math.inf] * n
    time: list[Any] = [math.inf] * n
    cost[0], time[0] = fees[0], 0
    heap = [(cost[0], time[0], 0)]
    while heap:
        c, t, u = heapq.heappop(heap)
        for v, tv, cv in adj[u]:
            if t + tv > max_time:
                continue
            if cost[v] > c + cv:
                cost[v] = c + cv
                time[v] = t + tv
                heapq.heappush(heap, (cost[v], time[v], v))
            elif time[v] > t + tv:
                time[v] = t + tv
                heapq.heappush(heap, (c + cv, time[v], v))
    result = cost[n - 1]
    return None if result == math.inf else result


def can_finish(num_courses: int, prerequisites: Sequence[Sequence[int]]) -> bool:
    """Return whether all courses can be taken; ``[a, b]`` means b comes before a."""
    graph = Graph(num_courses)
    for course, required in prerequisites:
        graph.add_edge(required, course)
    try:
        topological_sort(graph)
    except ValueError:
        return False
    return True