"""Longest (maximum-weight) simple path between two nodes.

Two variants, for two kinds of graph:

longest_path_dag() -- directed acyclic graphs, given as a full mapping.
  1.  Topologically sort the DAG.
  2.  Set dist[start] = 0 and every other node to -inf.
  3.  Walk nodes in topological order.  For each reachable node v, for
      each successor w, relax: if dist[v] + weight(v, w) > dist[w],
      update dist[w] and record v as the predecessor of w.
  4.  Walk predecessors backward from the goal to rebuild the path.
  This is the standard DAG longest-path algorithm and runs in O(V + E).
  Topological order guarantees every predecessor of w is final before
  w is relaxed, which is what makes "maximize" as safe as "minimize".

longest_path() -- anything else (cyclic or undirected graphs), driven by
  a neighbor callback.  Longest simple path is NP-hard in general, so
  this is exhaustive backtracking: try every simple path from start to
  goal and keep the heaviest.  The visited set holds exactly the nodes
  on the current path; a node is released when its frame is popped so
  sibling branches may route through it.  Exponential in the worst case.
"""
from __future__ import annotations

import logging
from typing import Hashable, Iterator, TypeVar

from graphsearch.search.paths import reconstruct_path
from graphsearch.search.topological import successors, topological_sort
from graphsearch.search.types import NeighborWeights, WeightedGraph

log = logging.getLogger(__name__)

T = TypeVar("T", bound=Hashable)

NEG_INF = float("-inf")


def longest_path_dag(start: T, goal: T, graph: WeightedGraph[T]) -> list[T]:
    """Return the maximum-weight path from *start* to *goal* in a DAG.

    *graph* maps each node to ``{successor: weight}``.  Returns ``[]``
    if the graph has a cycle or *goal* is not reachable from *start*.
    """
    order = topological_sort(graph)
    if not order or goal not in set(order):
        log.debug("no topological order containing %r (cyclic or absent)", goal)
        return []

    dist: dict[T, float] = {n: NEG_INF for n in order}
    dist[start] = 0
    came_from: dict[T, T] = {}

    for node in order:
        d = dist[node]
        if d == NEG_INF:
            # not reachable from start
            continue
        for succ, weight in successors(graph, node).items():
            new_dist = d + weight
            if new_dist > dist[succ]:
                dist[succ] = new_dist
                came_from[succ] = node

    if dist[goal] == NEG_INF:
        log.debug("%r unreachable from %r", goal, start)
        return []
    log.debug("longest path %r -> %r weighs %s", start, goal, dist[goal])
    return reconstruct_path(came_from, goal)


def longest_path(start: T, goal: T, neighbors: NeighborWeights[T]) -> list[T]:
    """Return a maximum-weight simple path from *start* to *goal*.

    Works on cyclic and undirected graphs (an undirected edge is just
    reported from both ends by *neighbors*).  Among equally heavy paths
    the last one discovered wins.  Returns ``[]`` if *goal* is
    unreachable.
    """
    if start == goal:
        return [start]

    best: list[T] = []
    best_weight: int | None = None
    explored = 0

    path: list[T] = [start]
    visited: set[T] = {start}
    # one frame per node on the current path: (weight so far, edges left)
    stack: list[tuple[int, Iterator[tuple[T, int]]]] = [
        (0, iter((neighbors(start) or {}).items()))
    ]

    while stack:
        weight, pending = stack[-1]
        for nbr, edge_weight in pending:
            if nbr in visited:
                continue
            total = weight + edge_weight
            if nbr == goal:
                explored += 1
                if best_weight is None or total >= best_weight:
                    best_weight = total
                    best = path + [nbr]
                continue
            visited.add(nbr)
            path.append(nbr)
            stack.append((total, iter((neighbors(nbr) or {}).items())))
            break
        else:
            # backtrack: release the node so other branches can use it
            stack.pop()
            visited.discard(path.pop())

    log.debug(
        "explored %d complete path(s) %r -> %r, best weight %s",
        explored, start, goal, best_weight,
    )
    return best
