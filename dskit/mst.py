"""Minimum spanning trees by Kruskal's algorithm and edge classification."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, Iterable, Optional, Sequence

from dskit.disjoint_set import DisjointSet

__all__ = [
    "SpanningTree",
    "kruskal_mst",
    "merge_sort",
    "critical_and_pseudo_critical_edges",
]


@dataclass(frozen=True)
class SpanningTree:
    """Edges ``(u, v, weight)`` chosen for a spanning forest and their total weight."""

    edges: tuple[tuple[int, int, Any], ...]
    weight: Any


def merge_sort(items: Iterable[Any]) -> list[Any]:
    """Return a new list with ``items`` sorted ascending by merge sort."""
    values = list(items)
    if len(values) <= 1:
        return values
    mid = len(values) // 2
    left, right = merge_sort(values[:mid]), merge_sort(values[mid:])
    merged: list[Any] = []
    i = j = 0
    while i < len(left) and j < len(right):
        if right[j] < left[i]:
            merged.append(right[j])
            j += 1
        else:
            merged.append(left[i])
            i += 1
    merged.extend(left[i:])
    merged.extend(right[j:])
    return merged


def kruskal_mst(vertices: int, edges: Iterable[tuple[int, int, Any]]) -> SpanningTree:
    """Build a minimum spanning forest from undirected ``(u, v, weight)`` edges.

    Edges are taken in order of weight, then endpoints.
    """
    ordered = merge_sort((w, u, v) for u, v, w in edges)
    sets = DisjointSet(vertices)
    chosen: list[tuple[int, int, Any]] = []
    total: Any = 0
    for w, u, v in ordered:
        if sets.union(u, v):
            chosen.append((u, v, w))
            total += w
    return SpanningTree(tuple(chosen), total)


def _mst_weight(
    n: int,
    edges: Sequence[tuple[int, int, int, Any]],
    include: Optional[int],
    exclude: Optional[int],
) -> float:
    """Weight of the MST forced to use ``include`` and avoid ``exclude``; inf if disconnected."""
    sets = DisjointSet(n)
    total: Any = 0
    if include is not None:
        _, u, v, w = next(edge for edge in edges if edge[0] == include)
        if sets.union(u, v):
            total += w
    for index, u, v, w in edges:
        if index != exclude and sets.union(u, v):
            total += w
    if n and len({sets.find(i) for i in range(n)}) > 1:
        return math.inf
    return total


def critical_and_pseudo_critical_edges(
    n: int, edges: Sequence[Sequence[Any]]
) -> tuple[list[int], list[int]]:
    """Classify edges ``[u, v, weight]`` of a graph on ``n`` vertices.

    Returns the indices of critical edges (in every MST) and of pseudo-critical
    edges (in some but not every MST), each listed in order of edge weight.
    """
    indexed = sorted(
        ((index, edge[0], edge[1], edge[2]) for index, edge in enumerate(edges)),
        key=lambda edge: edge[3],
    )
    best = _mst_weight(n, indexed, None, None)
    critical: list[int] = []
    pseudo: list[int] = []
    for index, _, _, _ in indexed:
        if best < _mst_weight(n, indexed, None, index):
            critical.append(index)
        elif best == _mst_weight(n, indexed, index, None):
            pseudo.append(index)
    return critical, pseudo