"""A* and Dijkstra shortest-path search over caller-supplied neighbors.

Both routines share one frontier loop.  Dijkstra is A* with a heuristic
that always returns 0, so its priority key degenerates to the
accumulated cost g(n).

The frontier is a binary heap of (f, seq, g, node) tuples:

  f     -- priority, g + h(node)
  seq   -- insertion counter, so ties never fall through to comparing
           nodes (nodes only need to be hashable, not orderable)
  g     -- the cost snapshot the entry was pushed with
  node  -- the node itself

When a cheaper path to a node already on the frontier is found, we push
a fresh entry instead of re-keying the old one.  The old entry stays in
the heap and is dropped when popped, because its g snapshot no longer
matches best_cost[node].  Without this, a node could leave the frontier
ordered by a stale, higher key.

Correctness assumes non-negative edge weights.  An admissible heuristic
keeps A* optimal even when it is not consistent: a node whose cost
improves after it was expanded simply gets pushed (and expanded) again.
"""
from __future__ import annotations

import heapq
import logging
from itertools import count
from typing import Hashable, TypeVar

from graphsearch.search.paths import reconstruct_path
from graphsearch.search.types import Heuristic, NeighborWeights

log = logging.getLogger(__name__)

T = TypeVar("T", bound=Hashable)


def _zero(node: object) -> int:
    return 0


def astar_search(
    start: T,
    goal: T,
    neighbors: NeighborWeights[T],
    heuristic: Heuristic[T],
) -> list[T]:
    """Find a minimum-weight path from *start* to *goal* using A*.

    *neighbors* maps a node to ``{neighbor: weight}``; *heuristic*
    estimates the remaining cost from a node to *goal*.  Returns the
    node list start..goal, or ``[]`` if *goal* is unreachable.
    """
    best_cost: dict[T, int] = {start: 0}
    came_from: dict[T, T] = {}
    seq = count()
    frontier: list[tuple[int, int, int, T]] = [
        (heuristic(start), next(seq), 0, start)
    ]
    expanded = 0

    while frontier:
        _, _, g, current = heapq.heappop(frontier)
        if g > best_cost[current]:
            # superseded by a cheaper entry pushed later
            continue

        if current == goal:
            log.debug(
                "goal %r reached at cost %d after expanding %d node(s)",
                goal, g, expanded,
            )
            return reconstruct_path(came_from, goal)

        expanded += 1
        for nbr, weight in (neighbors(current) or {}).items():
            tentative = g + weight
            known = best_cost.get(nbr)
            if known is None or tentative < known:
                best_cost[nbr] = tentative
                came_from[nbr] = current
                heapq.heappush(
                    frontier,
                    (tentative + heuristic(nbr), next(seq), tentative, nbr),
                )

    log.debug(
        "frontier exhausted after expanding %d node(s); %r unreachable",
        expanded, goal,
    )
    return []


def dijkstra_search(
    start: T,
    goal: T,
    neighbors: NeighborWeights[T],
) -> list[T]:
    """Find a minimum-weight path from *start* to *goal* using Dijkstra.

    Same contract as astar_search() without a heuristic.
    """
    return astar_search(start, goal, neighbors, _zero)
