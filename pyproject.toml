[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "dskit"
version = "0.1.0"
description = "Classic data structures and graph algorithms: search trees, tries, disjoint sets, spanning trees, graph traversals and shortest paths."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "data-structures",
    "algorithms",
    "binary-search-tree",
    "trie",
    "union-find",
    "graph",
    "kruskal",
    "dijkstra",
    "topological-sort",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Software Development :: Libraries",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["dskit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
