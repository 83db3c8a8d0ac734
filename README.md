# dskit

A small library of classic data structures and algorithms in plain Python,
with no third-party dependencies.

## What is inside

| Module | Contents |
| --- | --- |
| `dskit.bst` | `Node`, `BinarySearchTree`: iterative and recursive insert and delete, search and `in`, in/pre/post-order, level and zigzag level order, iteration in sorted order |
| `dskit.tree_algorithms` | `min_value`, `kth_largest`, `kth_smallest`, `ancestors`, `height`, `diameter`, `nodes_at_distance` |
| `dskit.trie` | `TrieNode`, `Trie`: insert, search and `in`, delete, `word_count`, `words`, `can_form` |
| `dskit.disjoint_set` | `DisjointSet` (integers `0 .. n-1`), `KeyedDisjointSet` (any hashable keys), `has_cycle`, `count_provinces` |
| `dskit.mst` | `SpanningTree`, `kruskal_mst`, `merge_sort`, `critical_and_pseudo_critical_edges` |
| `dskit.graph` | `Graph`: weighted or unweighted, directed or undirected; BFS, recursive-order and stack-based DFS, cycle detection, mother vertex, edge count, path check, tree check, transpose, text rendering |
| `dskit.graph_algorithms` | `shortest_path_length`, `topological_sort`, `strongly_connected_components`, `dijkstra`, `min_cost_within_time`, `can_finish` |

Errors are raised rather than signalled by return values: for example
`Graph.add_edge` raises `IndexError` for a vertex out of range,
`Trie.delete` raises `KeyError` for a word that is not stored, and
`topological_sort` raises `ValueError` on a cyclic graph. Functions that look
for something that may not exist (`dijkstra`, `shortest_path_length`,
`min_cost_within_time`, `Graph.mother_vertex`) return `None` in that case.

## Installation

```
pip install .
```

## Examples

Binary search tree:

```python
from dskit.bst import BinarySearchTree
from dskit.tree_algorithms import height, kth_smallest

tree = BinarySearchTree()
for value in (20, 10, 25, 8, 15, 22, 27):
    tree.insert(value)

print(tree.inorder())              # [8, 10, 15, 20, 22, 25, 27]
print(tree.level_order())          # [[20], [10, 25], [8, 15, 22, 27]]
print(15 in tree)                  # True
print(kth_smallest(tree.root, 3))  # 15
print(height(tree.root))           # 2
```

Trie (words of the letters a-z, case-insensitive):

```python
from dskit.trie import Trie

trie = Trie(["apple", "pen"])
print("apple" in trie)            # True
print(trie.can_form("applepen"))  # True
print(trie.words())               # ['apple', 'pen']
```

Disjoint sets:

```python
from dskit.disjoint_set import DisjointSet, has_cycle

sets = DisjointSet(4)
sets.union(0, 1)
print(sets.find(1) == sets.find(0))            # True
print(has_cycle(3, [(0, 1), (1, 2), (2, 0)]))  # True
```

Graphs:

```python
from dskit.graph import Graph
from dskit.graph_algorithms import topological_sort

graph = Graph(7)
for u, v in [(0, 1), (0, 2), (1, 3), (1, 4), (2, 5), (2, 6)]:
    graph.add_edge(u, v)

print(graph.bfs(0))              # [0, 1, 2, 3, 4, 5, 6]
print(graph.dfs(0))              # [0, 1, 3, 4, 2, 5, 6]
print(graph.has_cycle())         # False
print(topological_sort(graph))   # [0, 1, 2, 3, 4, 5, 6]
print(graph.format())
```

Minimum spanning tree:

```python
from dskit.mst import kruskal_mst

tree = kruskal_mst(5, [(0, 1, 1), (0, 2, 2), (1, 2, 3), (1, 4, 2),
                       (1, 3, 8), (2, 3, 6), (3, 4, 4)])
print(tree.edges)   # ((0, 1, 1), (0, 2, 2), (1, 4, 2), (3, 4, 4))
print(tree.weight)  # 9
```

## What it does not include

There is no heap or priority-queue type and no heap sort; for those, use the
standard library's `heapq`. The package is a library only and installs no
command-line program.

## Running the tests

```
pip install .[test]
pytest
```