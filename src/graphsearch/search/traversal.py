"""Unweighted traversal: breadth-first and depth-first search.

BFS keeps whole paths on the queue rather than bare nodes, so the path
to the first goal it dequeues is already built.  Nodes are marked
visited when they are *enqueued*, not when they are dequeued, which is
what keeps the queue free of duplicates and the returned path minimal in
edge count.

DFS only answers reachability.  It uses an explicit stack (no recursion
limit to worry about) and marks nodes visited when they are popped, so
a node pushed twice from different parents is expanded once.
"""
from __future__ import annotations

import logging
from collections import deque
from typing import Hashable, TypeVar

from graphsearch.search.types import GoalTest, NeighborList

log = logging.getLogger(__name__)

T = TypeVar("T", bound=Hashable)


def bfs(start: T, is_goal: GoalTest[T], neighbors: NeighborList[T]) -> list[T]:
    """Return the fewest-edges path from *start* to a node passing *is_goal*.

    *start* itself is tested first, so a matching start yields
    ``[start]``.  Returns ``[]`` if no reachable node matches.
    """
    queue: deque[list[T]] = deque([[start]])
    visited: set[T] = {start}

    while queue:
        path = queue.popleft()
        current = path[-1]
        if is_goal(current):
            log.debug("bfs matched %r after %d step(s)", current, len(path) - 1)
            return path
        for nbr in neighbors(current):
            if nbr not in visited:
                visited.add(nbr)
                queue.append(path + [nbr])

    log.debug("bfs exhausted %d node(s) without a match", len(visited))
    return []


def dfs(start: T, is_goal: GoalTest[T], neighbors: NeighborList[T]) -> bool:
    """Return True if some node passing *is_goal* is reachable from *start*."""
    stack: list[T] = [start]
    visited: set[T] = set()

    while stack:
        current = stack.pop()
        if current in visited:
            continue
        visited.add(current)
        if is_goal(current):
            return True
        for nbr in neighbors(current):
            if nbr not in visited:
                stack.append(nbr)

    log.debug("dfs exhausted %d node(s) without a match", len(visited))
    return False
