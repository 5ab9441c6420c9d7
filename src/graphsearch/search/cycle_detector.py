"""Cycle detection in directed graphs using DFS three-color marking.

The three colors:
  WHITE  -- node not yet visited
  GRAY   -- node is on the current DFS path (ancestors of current node)
  BLACK  -- node fully explored (all descendants visited)

A back edge (an edge to a GRAY node) means the graph has a cycle.
topological_sort() only reports *that* a cycle exists by returning [];
detect_cycle() walks the parent links back to the GRAY node so callers
can see exactly which nodes form the loop.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, Hashable, Iterator, TypeVar

from graphsearch.search.topological import successors
from graphsearch.search.types import WeightedGraph

T = TypeVar("T", bound=Hashable)

WHITE, GRAY, BLACK = 0, 1, 2


@dataclass(slots=True)
class CycleResult(Generic[T]):
    """Result of cycle detection."""
    has_cycle: bool
    cycle_path: list[T] | None = None


def detect_cycle(graph: WeightedGraph[T]) -> CycleResult[T]:
    """Detect whether *graph* contains a directed cycle.

    Returns a CycleResult with has_cycle=True and the cycle path if one
    exists.  The cycle path is a list [v0, v1, ..., vk, v0] where each
    consecutive pair is a directed edge.
    """
    color: dict[T, int] = {}
    parent: dict[T, T] = {}

    for root in graph:
        if color.get(root, WHITE) != WHITE:
            continue
        color[root] = GRAY
        stack: list[tuple[T, Iterator[T]]] = [
            (root, iter(successors(graph, root)))
        ]
        while stack:
            node, pending = stack[-1]
            for succ in pending:
                state = color.get(succ, WHITE)
                if state == GRAY:
                    # back edge -> walk parents from node up to succ
                    path = [succ, node]
                    cur = node
                    while cur != succ:
                        cur = parent[cur]
                        path.append(cur)
                    path.reverse()
                    return CycleResult(has_cycle=True, cycle_path=path)
                if state == WHITE:
                    color[succ] = GRAY
                    parent[succ] = node
                    stack.append((succ, iter(successors(graph, succ))))
                    break
            else:
                stack.pop()
                color[node] = BLACK

    return CycleResult(has_cycle=False, cycle_path=None)
