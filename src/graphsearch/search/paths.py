"""Path helpers shared by the search routines.

Every weighted search records a predecessor map (``came_from``) while it
relaxes edges: ``came_from[v] = u`` means the best path found so far
reaches v through u.  The start node never gets an entry, so walking the
links backward from the goal stops exactly at the start.
"""
from __future__ import annotations

from typing import Hashable, Mapping, Sequence, TypeVar

from graphsearch.search.types import NeighborWeights

T = TypeVar("T", bound=Hashable)


def reconstruct_path(came_from: Mapping[T, T], goal: T) -> list[T]:
    """Walk *came_from* backward from *goal* and return the forward path.

    A goal with no predecessor entry comes back as ``[goal]`` -- callers
    must check reachability before trusting the result.
    """
    path: list[T] = [goal]
    cur = goal
    while cur in came_from:
        cur = came_from[cur]
        path.append(cur)
    path.reverse()
    return path


def path_weight(path: Sequence[T], neighbors: NeighborWeights[T]) -> int:
    """Sum the edge weights along *path*.

    Raises ValueError if two consecutive nodes are not connected by an
    edge that *neighbors* reports.  An empty or single-node path weighs 0.
    """
    total = 0
    for src, dst in zip(path, path[1:]):
        edges = neighbors(src) or {}
        if dst not in edges:
            raise ValueError(f"Edge {src!r} -> {dst!r} not found")
        total += edges[dst]
    return total
