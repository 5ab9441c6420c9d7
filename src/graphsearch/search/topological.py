"""Topological sort via DFS post-order reversal, with cycle detection.

The algorithm:
  1.  Start a depth-first walk from every node not yet visited, in the
      mapping's iteration order.
  2.  Track two sets: *visited* (ever entered) and *on_path* (entered
      but not yet finished -- the current chain of ancestors).
  3.  An edge to a node that is still on_path is a back edge, which
      means the graph has a cycle.  Stop and return [].
  4.  When a node finishes (all successors done), push it onto the
      output stack.  Popping the stack top to bottom -- reverse
      post-order -- is a valid topological order.

Kahn's algorithm (repeatedly peel in-degree-0 nodes) would work too, but
it needs in-degrees for every node upfront.  The DFS version only ever
asks a node for its successors.

The walk uses an explicit stack of (node, successor-iterator) frames
instead of recursion, so long chains don't hit the interpreter's
recursion limit.  Frame order matches what the recursive version would
do, edge for edge.

Successors that never appear as keys are treated as nodes with no
outgoing edges and are included in the result.
"""
from __future__ import annotations

import logging
from typing import Hashable, Iterator, Mapping, TypeVar

from graphsearch.search.types import WeightedGraph

log = logging.getLogger(__name__)

T = TypeVar("T", bound=Hashable)


def successors(graph: WeightedGraph[T], node: T) -> Mapping[T, int]:
    """Outgoing edges of *node*, or an empty mapping for sinks/unknowns."""
    return graph.get(node) or {}


def topological_sort(graph: WeightedGraph[T]) -> list[T]:
    """Return the nodes of *graph* so every edge points forward.

    *graph* maps each node to ``{successor: weight}``; weights are
    ignored.  Returns ``[]`` if the graph contains a cycle (and, trivially,
    for an empty graph).
    """
    visited: set[T] = set()
    on_path: set[T] = set()
    finished: list[T] = []

    for root in graph:
        if root in visited:
            continue
        visited.add(root)
        on_path.add(root)
        stack: list[tuple[T, Iterator[T]]] = [
            (root, iter(successors(graph, root)))
        ]
        while stack:
            node, pending = stack[-1]
            for succ in pending:
                if succ in on_path:
                    log.debug("cycle detected: back edge %r -> %r", node, succ)
                    return []
                if succ not in visited:
                    visited.add(succ)
                    on_path.add(succ)
                    stack.append((succ, iter(successors(graph, succ))))
                    break
            else:
                # every successor done -> post-order finish
                stack.pop()
                on_path.discard(node)
                finished.append(node)

    finished.reverse()
    return finished
