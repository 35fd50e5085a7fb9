"""Tests for graphs/shortest_path.py"""

import math
import random

import pytest

from constants import INFINITY
from graphs import InvalidWeightError, all_nodes, dijkstra, weighted_edges


def brute_force_distances(graph, start):
    """Minimum cost over every simple path leaving start."""
    best = {node: math.inf for node in all_nodes(graph)}
    best[start] = 0

    def extend(node, cost, on_path):
        for neighbour, weight in weighted_edges(graph, node):
            if neighbour in on_path:
                continue
            total = cost + weight
            best[neighbour] = min(best[neighbour], total)
            extend(neighbour, total, on_path | {neighbour})

    extend(start, 0, {start})
    return best


def random_dag(rng: random.Random, size: int) -> dict[int, list[tuple[int, int]]]:
    """Edges only go from lower to higher ids, with weights in [0, 9]."""
    return {
        node: [
            (other, rng.randint(0, 9))
            for other in range(node + 1, size)
            if rng.random() < 0.4
        ]
        for node in range(size)
    }


class TestDijkstra:
    def test_prefers_cheaper_longer_path(self):
        graph = {0: [(1, 10), (2, 1)], 1: [], 2: [(1, 1)]}
        assert dijkstra(graph, 0) == {0: 0, 1: 2, 2: 1}

    def test_unreachable_nodes_are_infinite(self):
        graph = {0: [(1, 2)], 1: [], 2: [(0, 1)]}
        distances = dijkstra(graph, 0)
        assert distances[2] == INFINITY
        assert set(distances) == {0, 1, 2}

    def test_neighbour_only_nodes_are_reported(self):
        assert dijkstra({0: [(5, 3)]}, 0) == {0: 0, 5: 3}

    def test_start_absent_from_graph(self):
        distances = dijkstra({0: [(1, 1)]}, 9)
        assert distances == {0: INFINITY, 1: INFINITY, 9: 0}

    def test_zero_weights_and_self_loops(self):
        graph = {0: [(0, 0), (1, 0)], 1: [(2, 0)], 2: []}
        assert dijkstra(graph, 0) == {0: 0, 1: 0, 2: 0}

    def test_cycle(self):
        graph = {0: [(1, 1)], 1: [(2, 1)], 2: [(0, 1)]}
        assert dijkstra(graph, 1) == {0: 2, 1: 0, 2: 1}

    def test_unweighted_entries_count_as_unit(self):
        graph = {0: [1, 2], 1: [3], 2: [3], 3: []}
        assert dijkstra(graph, 0) == {0: 0, 1: 1, 2: 1, 3: 2}

    def test_float_weights(self):
        graph = {0: [(1, 0.5), (2, 2.0)], 1: [(2, 0.25)]}
        assert dijkstra(graph, 0)[2] == pytest.approx(0.75)

    def test_matches_brute_force_on_small_dags(self):
        rng = random.Random(2024)
        for _ in range(200):
            graph = random_dag(rng, rng.randint(1, 8))
            start = rng.choice(list(graph))
            assert dijkstra(graph, start) == brute_force_distances(graph, start)


class TestInvalidWeight:
    def test_negative_weight_is_rejected(self):
        graph = {0: [(1, 2)], 1: [(2, -1)], 2: []}
        with pytest.raises(InvalidWeightError) as excinfo:
            dijkstra(graph, 0)
        assert (excinfo.value.source, excinfo.value.target) == (1, 2)
        assert excinfo.value.weight == -1

    def test_unreachable_negative_weight_is_still_rejected(self):
        """Weights are validated before the search starts."""
        graph = {0: [], 1: [(2, -5)]}
        with pytest.raises(ValueError, match="Negative weight"):
            dijkstra(graph, 0)
