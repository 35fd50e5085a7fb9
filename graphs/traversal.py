"""
Graph traversals over adjacency mappings.

Functions:
    dfs(graph, start)           - Recursive depth-first preorder
    dfs_iterative(graph, start) - Explicit-stack depth-first preorder
    bfs(graph, start)           - Breadth-first order, layer by layer

Both depth-first forms visit the same set of nodes. Their exact sequences
can differ: the explicit stack pops the last pushed neighbour first, so
siblings are expanded in the reverse of their listed order. That
divergence is part of the contract, not a defect.

The recursive form uses one Python frame per node on the current path and
will hit the interpreter recursion limit on very deep graphs; prefer
``dfs_iterative`` there.
"""

import logging
from collections import deque

from localtypes import Graph, NodeId, Order

from .adjacency import neighbours

logger = logging.getLogger(__name__)


def dfs(graph: Graph, start: NodeId) -> Order:
    """Yields nodes reachable from start in natural depth-first preorder."""
    visited: set[NodeId] = set()
    order: list[NodeId] = []

    def explore(node: NodeId) -> None:
        visited.add(node)
        order.append(node)
        for neighbour in neighbours(graph, node):
            if neighbour not in visited:
                explore(neighbour)

    explore(start)
    logger.debug(f"dfs from {start}: visited {len(order)} nodes")
    return tuple(order)


def dfs_iterative(graph: Graph, start: NodeId) -> Order:
    """
    Depth-first preorder driven by an explicit stack.

    Nodes are marked when popped, so a node can sit on the stack several
    times; later copies are skipped.
    """
    visited: set[NodeId] = set()
    stack = [start]
    order: list[NodeId] = []

    while stack:
        node = stack.pop()
        if node in visited:
            continue
        visited.add(node)
        order.append(node)
        for neighbour in neighbours(graph, node):
            if neighbour not in visited:
                stack.append(neighbour)

    logger.debug(f"dfs_iterative from {start}: visited {len(order)} nodes")
    return tuple(order)


def bfs(graph: Graph, start: NodeId) -> Order:
    """
    Yields nodes reachable from start in non-decreasing distance layers.

    Nodes are marked on enqueue, so each is queued at most once.
    """
    visited: set[NodeId] = {start}
    queue = deque([start])
    order: list[NodeId] = []

    while queue:
        node = queue.popleft()
        order.append(node)
        for neighbour in neighbours(graph, node):
            if neighbour not in visited:
                visited.add(neighbour)
                queue.append(neighbour)

    logger.debug(f"bfs from {start}: visited {len(order)} nodes")
    return tuple(order)


__all__ = [
    "dfs",
    "dfs_iterative",
    "bfs",
]
