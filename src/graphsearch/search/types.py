"""Callback and graph type aliases shared by the search routines.

None of the search functions take a concrete graph class.  The caller
describes the graph through plain callables (or, for the routines that
need the whole graph upfront, a nested mapping), so any hashable value
can act as a node.
"""
from __future__ import annotations

from typing import Callable, Hashable, Iterable, Mapping, Optional, TypeAlias, TypeVar

T = TypeVar("T", bound=Hashable)

# node -> {neighbor: edge weight}.  Returning None means "no neighbors".
NeighborWeights: TypeAlias = Callable[[T], Optional[Mapping[T, int]]]

# node -> neighbors, unweighted (BFS / DFS)
NeighborList: TypeAlias = Callable[[T], Iterable[T]]

# node -> estimated remaining cost to the goal (A* only)
Heuristic: TypeAlias = Callable[[T], int]

GoalTest: TypeAlias = Callable[[T], bool]

# the full directed graph: node -> {successor: edge weight}
WeightedGraph: TypeAlias = Mapping[T, Mapping[T, int]]
