"""
Type definitions shared by the graph algorithms and indexed structures.

Graphs are plain adjacency mappings keyed by integer node identifiers,
never linked node objects. Neighbour entries are either bare identifiers
(unweighted) or ``(neighbour, weight)`` pairs (weighted).
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence

# Node identifiers are non-negative integers, not necessarily contiguous
type NodeId = int
type Weight = int | float

# Adjacency representations
type Edge = tuple[NodeId, Weight]
type UnweightedGraph = Mapping[NodeId, Sequence[NodeId]]
type WeightedGraph = Mapping[NodeId, Sequence[Edge]]
type Graph = UnweightedGraph | WeightedGraph

# Algorithm outputs
type Order = tuple[NodeId, ...]
type Distances = dict[NodeId, Weight]
type Component = frozenset[NodeId]

# Range aggregation
type Number = int | float
