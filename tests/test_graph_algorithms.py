import pytest

from dskit.graph import Graph
from dskit.graph_algorithms import (
    can_finish,
    dijkstra,
    min_cost_within_time,
    shortest_path_length,
    strongly_connected_components,
    topological_sort,
)


def _build(vertices, edges, undirected=False):
    graph = Graph(vertices, undirected)
    for edge in edges:
        graph.add_edge(*edge)
    return graph


SHORTEST_EDGES = [(0, 1), (0, 2), (0, 3), (3, 5), (5, 4), (2, 4)]
DIJKSTRA_EDGES = [(0, 1, 1), (1, 2, 1), (0, 2, 4), (0, 3, 7), (3, 2, 2), (3, 4, 3)]
TOPO_EDGES = [(0, 3), (1, 3), (2, 3), (3, 4), (4, 5)]
ROADS = [[0, 1, 10], [1, 2, 10], [2, 5, 10], [0, 3, 1], [3, 4, 10], [4, 5, 15]]
FEES = [5, 1, 2, 20, 20, 3]


def test_shortest_path_matches_unit_weight_dijkstra():
    graph = _build(6, SHORTEST_EDGES)
    for target in range(6):
        assert shortest_path_length(graph, 0, target) == dijkstra(graph, 0, target)


def test_shortest_path_to_self_is_zero():
    graph = _build(6, SHORTEST_EDGES)
    assert shortest_path_length(graph, 3, 3) == 0


def test_shortest_path_unreachable_is_none():
    graph = _build(6, SHORTEST_EDGES)
    assert shortest_path_length(graph, 4, 0) is None


def test_shortest_path_rejects_bad_vertex():
    graph = _build(3, [(0, 1)])
    with pytest.raises(IndexError):
        shortest_path_length(graph, 0, 3)


def test_topological_sort_source_example():
    graph = _build(6, TOPO_EDGES)
    assert topological_sort(graph) == [0, 1, 2, 3, 4, 5]


def test_topological_sort_respects_every_edge():
    edges = [(5, 2), (5, 0), (4, 0), (4, 1), (2, 3), (3, 1)]
    graph = _build(6, edges)
    order = topological_sort(graph)
    assert sorted(order) == list(range(6))
    position = {v: i for i, v in enumerate(order)}
    assert all(position[u] < position[v] for u, v in edges)


def test_topological_sort_cycle_raises():
    graph = _build(3, [(0, 1), (1, 2), (2, 0)])
    with pytest.raises(ValueError):
        topological_sort(graph)


def test_strongly_connected_components_source_example():
    graph = _build(5, [(1, 0), (0, 2), (2, 1), (0, 3), (3, 4)])
    components = strongly_connected_components(graph)
    assert {frozenset(c) for c in components} == {
        frozenset({0, 1, 2}),
        frozenset({3}),
        frozenset({4}),
    }


def test_strongly_connected_components_partition_vertices():
    graph = _build(6, [(0, 1), (1, 0), (2, 3), (3, 4), (4, 2), (5, 5)])
    components = strongly_connected_components(graph)
    flat = [v for c in components for v in c]
    assert sorted(flat) == list(range(6))
    assert len(components) == len({frozenset(c) for c in components})


def test_dag_components_are_singletons():
    graph = _build(6, TOPO_EDGES)
    components = strongly_connected_components(graph)
    assert all(len(c) == 1 for c in components)
    assert len(components) == 6


def test_dijkstra_source_example():
    graph = _build(5, DIJKSTRA_EDGES, undirected=True)
    assert dijkstra(graph, 0, 4) == 7


def test_dijkstra_is_symmetric_on_undirected_graph():
    graph = _build(5, DIJKSTRA_EDGES, undirected=True)
    for a in range(5):
        for b in range(5):
            assert dijkstra(graph, a, b) == dijkstra(graph, b, a)


def test_dijkstra_triangle_inequality():
    graph = _build(5, DIJKSTRA_EDGES, undirected=True)
    for u in range(5):
        for v, w in graph.weighted_neighbors(u):
            assert dijkstra(graph, 0, v) <= dijkstra(graph, 0, u) + w


def test_dijkstra_unreachable_is_none():
    graph = _build(3, [(0, 1, 4)])
    assert dijkstra(graph, 0, 2) is None
    assert dijkstra(graph, 0, 0) == 0


def test_min_cost_takes_cheapest_path_in_time():
    expected = FEES[0] + FEES[1] + FEES[2] + FEES[5]
    assert min_cost_within_time(30, ROADS, FEES) == expected


def test_min_cost_falls_back_to_faster_path():
    expected = FEES[0] + FEES[3] + FEES[4] + FEES[5]
    assert min_cost_within_time(29, ROADS, FEES) == expected


def test_min_cost_unreachable_in_time_is_none():
    assert min_cost_within_time(25, ROADS, FEES) is None


def test_min_cost_single_city_pays_own_fee():
    assert min_cost_within_time(0, [], [FEES[0]]) == FEES[0]


def test_min_cost_requires_cities():
    with pytest.raises(ValueError):
        min_cost_within_time(10, [], [])


def test_can_finish_source_example():
    assert can_finish(5, [[1, 4], [2, 4], [3, 1], [3, 2]]) is True


def test_can_finish_detects_cycle():
    assert can_finish(2, [[1, 0], [0, 1]]) is False


def test_can_finish_rejects_unknown_course():
    with pytest.raises(IndexError):
        can_finish(2, [[2, 0]])