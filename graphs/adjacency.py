"""
Helpers shared by every graph algorithm.

A graph is a mapping from node identifier to an ordered sequence of
neighbour entries. An entry is either a bare identifier or a
``(neighbour, weight)`` pair, so the same helpers serve unweighted and
weighted graphs. A node that only ever appears as a neighbour is an
isolated leaf with no outgoing edges.
"""

from collections.abc import Iterator

from localtypes import Edge, Graph, NodeId, Weight

UNIT_WEIGHT: Weight = 1


def _split(entry: NodeId | Edge) -> Edge:
    """Normalise an adjacency entry into a ``(neighbour, weight)`` pair."""
    if isinstance(entry, (tuple, list)):
        neighbour, weight = entry
        return neighbour, weight
    return entry, UNIT_WEIGHT


def neighbours(graph: Graph, node: NodeId) -> Iterator[NodeId]:
    """Yields the neighbours of node in listed order, dropping any weights."""
    for entry in graph.get(node, ()):
        yield _split(entry)[0]


def weighted_edges(graph: Graph, node: NodeId) -> Iterator[Edge]:
    """Yields ``(neighbour, weight)`` pairs; plain entries get a unit weight."""
    for entry in graph.get(node, ()):
        yield _split(entry)


def all_nodes(graph: Graph) -> tuple[NodeId, ...]:
    """
    Returns every node appearing as a key or as a neighbour.

    Keys come first in mapping order, followed by neighbour-only nodes in
    the order they are first met.
    """
    seen: dict[NodeId, None] = dict.fromkeys(graph)
    for node in graph:
        for neighbour in neighbours(graph, node):
            seen.setdefault(neighbour, None)
    return tuple(seen)
