"""
Single-source shortest paths with Dijkstra's algorithm.

Complexity: O((V + E) log V) with a binary heap.
"""

import heapq
import logging

from constants import INFINITY
from localtypes import Distances, Graph, NodeId, Weight

from .adjacency import all_nodes, weighted_edges

logger = logging.getLogger(__name__)


class InvalidWeightError(ValueError):
    """Raised when an edge carries a negative weight."""

    def __init__(self, source: NodeId, target: NodeId, weight: Weight) -> None:
        super().__init__(f"Negative weight {weight} on edge {source} -> {target}")
        self.source = source
        self.target = target
        self.weight = weight


def _validate_weights(graph: Graph) -> None:
    for node in graph:
        for neighbour, weight in weighted_edges(graph, node):
            if weight < 0:
                raise InvalidWeightError(node, neighbour, weight)


def dijkstra(graph: Graph, start: NodeId) -> Distances:
    """
    Computes the minimum distance from start to every node of the graph.

    Uses a min-heap with lazy deletion: an improved estimate is pushed as a
    new entry, and entries whose distance exceeds the recorded best are
    skipped when popped instead of being removed from the heap.

    Args:
        graph: Adjacency mapping of ``(neighbour, weight)`` pairs. Plain
            neighbour entries count as unit weight.
        start: Source node. It need not be a key of the graph.

    Returns:
        Distance for every node appearing as a key or a neighbour (and for
        start). Unreachable nodes map to ``INFINITY``.

    Raises:
        InvalidWeightError: If any edge weight is negative. Checked before
            the search starts.
    """
    _validate_weights(graph)

    distances: Distances = {node: INFINITY for node in all_nodes(graph)}
    distances[start] = 0
    heap: list[tuple[Weight, NodeId]] = [(0, start)]
    stale = 0

    while heap:
        distance, node = heapq.heappop(heap)
        if distance > distances[node]:
            stale += 1
            continue

        for neighbour, weight in weighted_edges(graph, node):
            candidate = distance + weight
            if candidate < distances[neighbour]:
                distances[neighbour] = candidate
                heapq.heappush(heap, (candidate, neighbour))

    logger.debug(
        f"dijkstra from {start}: {len(distances)} nodes, {stale} stale entries skipped"
    )
    return distances


__all__ = [
    "InvalidWeightError",
    "dijkstra",
]
