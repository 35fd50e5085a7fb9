"""
Static range-sum tree (segment tree) stored as an implicit binary tree.

Node ``i`` covers an index range; its children live at ``2i + 1`` and
``2i + 2`` and split that range at the midpoint. Every internal node holds
the sum of its children and every leaf holds one input element. A flat
list of ``4n`` cells is enough for any ``n``, power of two or not.

Build and query walk the tree with explicit stacks rather than recursion.
The tree is immutable after construction: there is no point update.
"""

import logging
from collections.abc import Sequence

from constants import SUM_IDENTITY
from localtypes import Number

from .bounds import check_range

logger = logging.getLogger(__name__)


class RangeQueryTree:
    """
    Answers inclusive range sums over a fixed sequence in O(log n).

    Example:
        >>> tree = RangeQueryTree([1, 3, 5, 7, 9, 11])
        >>> tree.range_sum(1, 3)
        15
    """

    def __init__(self, values: Sequence[Number]) -> None:
        self._size = len(values)
        self._tree: list[Number] = [SUM_IDENTITY] * (4 * self._size)
        if self._size:
            self._build(values)
        logger.debug(f"Built range tree over {self._size} elements")

    def __len__(self) -> int:
        return self._size

    def _build(self, values: Sequence[Number]) -> None:
        """Fills leaves first, then each parent once both children are set."""
        stack: list[tuple[int, int, int, bool]] = [(0, 0, self._size - 1, False)]
        while stack:
            node, start, end, children_done = stack.pop()
            if start == end:
                self._tree[node] = values[start]
            elif children_done:
                self._tree[node] = self._tree[2 * node + 1] + self._tree[2 * node + 2]
            else:
                mid = (start + end) // 2
                stack.append((node, start, end, True))
                stack.append((2 * node + 1, start, mid, False))
                stack.append((2 * node + 2, mid + 1, end, False))

    def range_sum(self, left: int, right: int) -> Number:
        """
        Sum of the elements at indices left..right inclusive.

        Nodes entirely outside the range contribute nothing and are not
        descended into; nodes entirely inside contribute their stored sum.

        Raises:
            IndexOutOfRangeError: If left > right or either bound lies
                outside [0, n).
        """
        check_range(left, right, self._size)

        total: Number = SUM_IDENTITY
        stack = [(0, 0, self._size - 1)]
        while stack:
            node, start, end = stack.pop()
            if right < start or end < left:
                continue
            if left <= start and end <= right:
                total += self._tree[node]
                continue
            mid = (start + end) // 2
            stack.append((2 * node + 1, start, mid))
            stack.append((2 * node + 2, mid + 1, end))
        return total

    def total(self) -> Number:
        """Sum of every element, 0 for an empty tree."""
        return self._tree[0] if self._size else SUM_IDENTITY
