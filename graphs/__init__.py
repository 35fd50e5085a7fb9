"""
Graph algorithms over adjacency mappings.

Graphs are mappings from integer node identifiers to neighbour lists, with
optional ``(neighbour, weight)`` entries. No algorithm mutates its input.

**Adjacency** (adjacency.py)
    - neighbours, weighted_edges, all_nodes

**Traversal** (traversal.py)
    - dfs: recursive depth-first preorder
    - dfs_iterative: explicit-stack depth-first preorder
    - bfs: breadth-first order, mark-on-enqueue

**Shortest paths** (shortest_path.py)
    - dijkstra: single-source distances with lazy deletion

**Topological ordering** (topological.py)
    - topological_sort_dfs: reverse finishing order, no cycle detection
    - topological_sort_kahn: Kahn's algorithm, raises CycleDetectedError

**Components** (components.py)
    - connected_components: weak connectivity
"""

from .adjacency import all_nodes, neighbours, weighted_edges
from .components import connected_components
from .shortest_path import InvalidWeightError, dijkstra
from .topological import (
    CycleDetectedError,
    topological_sort_dfs,
    topological_sort_kahn,
)
from .traversal import bfs, dfs, dfs_iterative

__all__ = [
    # Adjacency
    "neighbours",
    "weighted_edges",
    "all_nodes",
    # Traversal
    "dfs",
    "dfs_iterative",
    "bfs",
    # Shortest paths
    "InvalidWeightError",
    "dijkstra",
    # Topological ordering
    "CycleDetectedError",
    "topological_sort_dfs",
    "topological_sort_kahn",
    # Components
    "connected_components",
]
