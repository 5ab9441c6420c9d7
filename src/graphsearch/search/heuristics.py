"""Stock A* heuristics."""
from __future__ import annotations

from typing import Callable, Sequence

Point = Sequence[int]


def manhattan_distance(a: Point, b: Point) -> int:
    """L1 distance between two 2-D integer points.

    Admissible and consistent for 4-directional grids whose steps all
    cost at least 1.
    """
    return abs(a[0] - b[0]) + abs(a[1] - b[1])


def manhattan_to(goal: Point) -> Callable[[Point], int]:
    """Bind *goal* so the result can be passed straight to astar_search()."""
    def heuristic(node: Point) -> int:
        return manhattan_distance(node, goal)
    return heuristic
