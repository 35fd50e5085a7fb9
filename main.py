"""
Runs a short demonstration of every algorithm and structure.

Usage:
    python main.py [--debug]
"""

import logging

from constants import DEBUG, LOG_FORMAT
from graphs import (
    CycleDetectedError,
    bfs,
    dfs,
    dfs_iterative,
    dijkstra,
    topological_sort_dfs,
    topological_sort_kahn,
)
from structures import (
    BinaryNode,
    DisjointSetUnion,
    PrefixTree,
    RangeQueryTree,
    TraversalOrder,
    traverse,
)

logging.basicConfig(
    level=logging.DEBUG if DEBUG else logging.INFO,
    format=LOG_FORMAT,
)
logger = logging.getLogger(__name__)


def demo_graphs() -> None:
    diamond = {0: [1, 2], 1: [3], 2: [3], 3: []}
    logger.info(f"bfs: {bfs(diamond, 0)}")
    logger.info(f"dfs: {dfs(diamond, 0)}")
    logger.info(f"dfs_iterative: {dfs_iterative(diamond, 0)}")
    logger.info(f"topological (dfs): {topological_sort_dfs(diamond)}")
    logger.info(f"topological (kahn): {topological_sort_kahn(diamond)}")

    weighted = {0: [(1, 4), (2, 1)], 1: [(3, 1)], 2: [(1, 2), (3, 5)], 3: [], 4: []}
    logger.info(f"dijkstra: {dijkstra(weighted, 0)}")

    try:
        topological_sort_kahn({0: [1], 1: [2], 2: [0]})
    except CycleDetectedError as error:
        logger.info(f"kahn on a cycle: {error}")


def demo_structures() -> None:
    dsu = DisjointSetUnion(5)
    dsu.union(0, 1)
    dsu.union(1, 2)
    logger.info(
        f"dsu: connected(0, 2)={dsu.connected(0, 2)} "
        f"connected(0, 3)={dsu.connected(0, 3)} sets={dsu.count}"
    )

    trie = PrefixTree.from_words(["tree", "trie", "try"])
    logger.info(f"trie: search('tri')={trie.search('tri')} starts_with('tri')={trie.starts_with('tri')}")

    tree = RangeQueryTree([1, 3, 5, 7, 9, 11])
    logger.info(f"range_sum(1, 3): {tree.range_sum(1, 3)}")

    root = BinaryNode(2, BinaryNode(1), BinaryNode(3))
    for order in TraversalOrder:
        logger.info(f"{order.value}: {traverse(root, order)}")


if __name__ == "__main__":
    import argparse

    parser = argparse.ArgumentParser(description="Algorithm toolkit demonstration")
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")
    args = parser.parse_args()

    if args.debug:
        logging.getLogger().setLevel(logging.DEBUG)

    demo_graphs()
    demo_structures()
