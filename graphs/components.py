"""
Functions related to graph connectivity
"""

from collections import deque

from localtypes import Component, Graph, NodeId

from .adjacency import all_nodes, neighbours


def connected_components(graph: Graph) -> frozenset[Component]:
    """
    Extract weakly connected components from an adjacency mapping.

    Every edge is treated as undirected and every node, including nodes
    that only appear as neighbours, lands in exactly one component.

    Args:
        graph: Adjacency mapping, weighted or not.

    Returns:
        frozenset[frozenset[NodeId]]: set of connected components of the graph
    """
    undirected: dict[NodeId, set[NodeId]] = {node: set() for node in all_nodes(graph)}
    for node in graph:
        for neighbour in neighbours(graph, node):
            undirected[node].add(neighbour)
            undirected[neighbour].add(node)

    seen: set[NodeId] = set()
    components = set()

    # Guarantees all the nodes are at least visited once
    for node in undirected:
        if node in seen:
            continue

        component = set()
        # Breadth-first traversal
        queue = deque([node])
        while queue:
            current = queue.popleft()

            # Avoid cycles
            if current in seen:
                continue

            component.add(current)
            queue.extend(undirected[current])
            seen.add(current)

        components.add(frozenset(component))
    return frozenset(components)
