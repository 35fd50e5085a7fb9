"""
Topological ordering of directed acyclic graphs.

Functions:
    topological_sort_dfs(graph)  - Reverse finishing order of a depth-first search
    topological_sort_kahn(graph) - Kahn's algorithm, raising on cycles

Both functions include nodes that only appear as neighbours.
"""

import logging
from collections import deque
from collections.abc import Iterator

from localtypes import Graph, NodeId, Order

from .adjacency import all_nodes, neighbours

logger = logging.getLogger(__name__)


class CycleDetectedError(ValueError):
    """Raised when a graph that must be acyclic contains a cycle."""

    def __init__(self, unordered: frozenset[NodeId]) -> None:
        super().__init__(f"Graph contains a cycle through {sorted(unordered)}")
        self.unordered = unordered


def topological_sort_dfs(graph: Graph) -> Order:
    """
    Returns nodes so that every edge points forward, by reverse finish time.

    A node finishes once all of its descendants have finished. The search
    uses an explicit stack of neighbour iterators, which reproduces the
    finish order of the recursive formulation without its depth limit.

    This variant performs no cycle detection: on a cyclic graph it still
    returns every node once, but the order is not a valid linearization.
    Use ``topological_sort_kahn`` when the input may be cyclic.
    """
    visited: set[NodeId] = set()
    finished: list[NodeId] = []

    for root in all_nodes(graph):
        if root in visited:
            continue
        visited.add(root)
        stack: list[tuple[NodeId, Iterator[NodeId]]] = [
            (root, neighbours(graph, root))
        ]
        while stack:
            node, children = stack[-1]
            for child in children:
                if child not in visited:
                    visited.add(child)
                    stack.append((child, neighbours(graph, child)))
                    break
            else:
                stack.pop()
                finished.append(node)

    return tuple(reversed(finished))


def topological_sort_kahn(graph: Graph) -> Order:
    """
    Returns nodes in topological order using Kahn's algorithm.

    Args:
        graph: Adjacency mapping (node -> dependents). Weights are ignored.

    Returns:
        Nodes ordered so parents come before children. An empty graph gives
        an empty tuple.

    Raises:
        CycleDetectedError: If the graph contains a cycle (self-loops
            included). The error lists the nodes left unordered.
    """
    nodes = all_nodes(graph)

    in_degree: dict[NodeId, int] = {node: 0 for node in nodes}
    for node in graph:
        for child in neighbours(graph, node):
            in_degree[child] += 1

    queue = deque(node for node in nodes if in_degree[node] == 0)
    sorted_list: list[NodeId] = []

    while queue:
        node = queue.popleft()
        sorted_list.append(node)

        for child in neighbours(graph, node):
            in_degree[child] -= 1
            if in_degree[child] == 0:
                queue.append(child)

    if len(sorted_list) != len(nodes):
        unordered = frozenset(nodes) - frozenset(sorted_list)
        logger.debug(f"Kahn: {len(unordered)} of {len(nodes)} nodes on or behind a cycle")
        raise CycleDetectedError(unordered)

    return tuple(sorted_list)


__all__ = [
    "CycleDetectedError",
    "topological_sort_dfs",
    "topological_sort_kahn",
]
