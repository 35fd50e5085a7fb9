"""
Union-Find (Disjoint Set Union) data structure.

Efficient data structure for tracking disjoint sets over a fixed universe
of elements 0..n-1:
- find(x): Which set contains x? - O(α(n)) amortized
- union(x, y): Merge sets containing x and y - O(α(n)) amortized
- connected(x, y): Are x and y in the same set? - O(α(n)) amortized

Where α(n) is the inverse Ackermann function (effectively constant ≤ 4).

``find`` compresses paths, so even queries mutate the structure. Callers
sharing one instance across threads must serialise every operation.
"""

import logging

from .bounds import check_index

logger = logging.getLogger(__name__)


class DisjointSetUnion:
    """
    Union-Find with path compression and union by rank.

    The universe is fixed at construction and never shrinks.

    Example:
        >>> dsu = DisjointSetUnion(5)
        >>> dsu.union(0, 1)
        True
        >>> dsu.union(1, 2)
        True
        >>> dsu.connected(0, 2)
        True
        >>> dsu.connected(0, 3)
        False
    """

    def __init__(self, size: int) -> None:
        if size < 0:
            raise ValueError(f"Universe size must be non-negative, got {size}")
        self._parent: list[int] = list(range(size))
        self._rank: list[int] = [0] * size
        self._count = size

    def __len__(self) -> int:
        return len(self._parent)

    @property
    def count(self) -> int:
        """Number of disjoint sets currently tracked."""
        return self._count

    def find(self, element: int) -> int:
        """
        Find the representative (root) of the set containing element.

        Uses path compression: flattens the tree by pointing all nodes
        along the path directly to the root.
        """
        check_index(element, len(self._parent))

        # Find root
        root = element
        while self._parent[root] != root:
            root = self._parent[root]

        # Path compression: point all nodes to root
        current = element
        while self._parent[current] != root:
            next_node = self._parent[current]
            self._parent[current] = root
            current = next_node

        return root

    def union(self, x: int, y: int) -> bool:
        """
        Merge the sets containing x and y.

        Uses union by rank: attaches the shorter tree under the taller one
        to keep trees balanced. On equal ranks y's root goes under x's root,
        whose rank grows by one.

        Returns False if x and y were already in the same set.
        """
        root_x = self.find(x)
        root_y = self.find(y)

        if root_x == root_y:
            return False

        if self._rank[root_x] < self._rank[root_y]:
            self._parent[root_x] = root_y
        elif self._rank[root_x] > self._rank[root_y]:
            self._parent[root_y] = root_x
        else:
            self._parent[root_y] = root_x
            self._rank[root_x] += 1

        self._count -= 1
        logger.debug(f"union({x}, {y}): {self._count} sets remain")
        return True

    def connected(self, x: int, y: int) -> bool:
        """Check if x and y are in the same set."""
        return self.find(x) == self.find(y)

    def rank(self, element: int) -> int:
        """Upper bound on the height of the tree rooted at element."""
        check_index(element, len(self._rank))
        return self._rank[element]

    def sets(self) -> dict[int, set[int]]:
        """
        Get all disjoint sets as a dictionary.

        Returns:
            Mapping from each set's representative to its members.
        """
        sets: dict[int, set[int]] = {}
        for element in range(len(self._parent)):
            root = self.find(element)
            if root not in sets:
                sets[root] = set()
            sets[root].add(element)
        return sets
