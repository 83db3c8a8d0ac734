import pytest

from dskit.disjoint_set import (
    DisjointSet,
    KeyedDisjointSet,
    count_provinces,
    has_cycle,
)


def test_new_elements_are_their_own_roots():
    sets = DisjointSet(4)
    assert [sets.find(i) for i in range(4)] == [0, 1, 2, 3]
    assert [sets.rank(i) for i in range(4)] == [0, 0, 0, 0]


def test_union_joins_sets():
    sets = DisjointSet(5)
    assert sets.union(0, 1) is True
    assert sets.union(1, 2) is True
    assert sets.find(0) == sets.find(2)
    assert sets.find(3) != sets.find(0)


def test_union_of_joined_elements_returns_false():
    sets = DisjointSet(3)
    sets.union(0, 1)
    assert sets.union(1, 0) is False


def test_root_rank_exceeds_child_rank():
    sets = DisjointSet(2)
    sets.union(0, 1)
    root = sets.find(0)
    other = 1 if root == 0 else 0
    assert sets.rank(root) > sets.rank(other)


def test_out_of_range_raises():
    sets = DisjointSet(3)
    with pytest.raises(IndexError):
        sets.find(3)
    with pytest.raises(IndexError):
        sets.find(-1)


def test_keyed_rank_from_worked_example():
    sets = KeyedDisjointSet()
    for item in range(1, 8):
        sets.make_set(item)
    for a, b in [(1, 2), (2, 3), (4, 5), (6, 7), (5, 6), (3, 7)]:
        sets.union(a, b)
    for item in (11, 12, 13, 14):
        sets.make_set(item)
    for a, b in [(11, 12), (11, 13), (14, 12)]:
        sets.union(a, b)
    assert sets.rank(4) == 2
    assert len({sets.find(i) for i in range(1, 8)}) == 1
    assert sets.find(14) == sets.find(11)
    assert sets.find(11) != sets.find(1)


def test_keyed_unknown_key_raises():
    sets = KeyedDisjointSet()
    sets.make_set("a")
    with pytest.raises(KeyError):
        sets.find("b")
    with pytest.raises(KeyError):
        sets.union("a", "b")


def test_keyed_duplicate_make_set_raises():
    sets = KeyedDisjointSet()
    sets.make_set("a")
    with pytest.raises(ValueError):
        sets.make_set("a")


def test_has_cycle_triangle():
    assert has_cycle(3, [(0, 1), (1, 2), (2, 0)]) is True


def test_has_cycle_path():
    assert has_cycle(3, [(0, 1), (1, 2)]) is False


def test_count_provinces_example():
    assert count_provinces([[1, 1, 0], [1, 1, 0], [0, 0, 1]]) == 2


def test_count_provinces_identity_matrix():
    matrix = [[1 if i == j else 0 for j in range(5)] for i in range(5)]
    assert count_provinces(matrix) == len(matrix)


def test_count_provinces_rejects_ragged_matrix():
    with pytest.raises(ValueError):
        count_provinces([[1, 0], [0]])