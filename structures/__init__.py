"""
Indexed data structures with a construct-once, query-many lifecycle.

**Bounds** (bounds.py)
    - IndexOutOfRangeError, check_index, check_range

**Union-Find** (union_find.py)
    - DisjointSetUnion: path compression and union by rank over 0..n-1

**Prefix tree** (trie.py)
    - PrefixTree: exact and prefix membership over inserted strings

**Range tree** (segment_tree.py)
    - RangeQueryTree: static inclusive range sums

**Binary trees** (binary_tree.py)
    - TraversalOrder, BinaryNode, traverse, level_order

Mutating operations (``union``, ``find``, ``insert``) need exclusive
access. Pure reads may be shared while no writer is active.
"""

from .binary_tree import BinaryNode, TraversalOrder, level_order, traverse
from .bounds import IndexOutOfRangeError, check_index, check_range
from .segment_tree import RangeQueryTree
from .trie import PrefixTree, TrieNode
from .union_find import DisjointSetUnion

__all__ = [
    # Bounds
    "IndexOutOfRangeError",
    "check_index",
    "check_range",
    # Union-Find
    "DisjointSetUnion",
    # Prefix tree
    "TrieNode",
    "PrefixTree",
    # Range tree
    "RangeQueryTree",
    # Binary trees
    "TraversalOrder",
    "BinaryNode",
    "traverse",
    "level_order",
]
