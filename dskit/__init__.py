"""Search trees, tries, disjoint sets, spanning trees and graph algorithms."""

__version__ = "0.1.0"

__all__ = [
    "bst",
    "tree_algorithms",
    "trie",
    "disjoint_set",
    "mst",
    "graph",
    "graph_algorithms",
]