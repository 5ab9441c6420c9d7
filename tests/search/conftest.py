"""Shared fixtures for graph search tests."""
from __future__ import annotations

import pytest

from graphsearch.search.adjacency import Graph


@pytest.fixture
def empty_graph() -> Graph[str]:
    return Graph()


@pytest.fixture
def linear_graph() -> Graph[str]:
    """A -> B -> C -> D, unit weights"""
    g: Graph[str] = Graph()
    for src, dst in [("A", "B"), ("B", "C"), ("C", "D")]:
        g.add_edge(src, dst)
    return g


@pytest.fixture
def diamond_graph() -> Graph[str]:
    """
    A -1-> B -1-> D
    A -5-> C -1-> D
    """
    g: Graph[str] = Graph()
    for src, dst, w in [("A", "B", 1), ("A", "C", 5), ("B", "D", 1), ("C", "D", 1)]:
        g.add_edge(src, dst, w)
    return g


@pytest.fixture
def cycle_graph() -> Graph[str]:
    """A -> B -> C -> D -> A, unit weights"""
    g: Graph[str] = Graph()
    for src, dst in [("A", "B"), ("B", "C"), ("C", "D"), ("D", "A")]:
        g.add_edge(src, dst)
    return g


@pytest.fixture
def grid_graph() -> Graph[tuple[int, int]]:
    """3x3 grid (0,0)..(2,2), 4-directional, unit weights, two-way."""
    g: Graph[tuple[int, int]] = Graph(directed=False)
    for x in range(3):
        for y in range(3):
            g.add_node((x, y))
            if x + 1 < 3:
                g.add_edge((x, y), (x + 1, y))
            if y + 1 < 3:
                g.add_edge((x, y), (x, y + 1))
    return g


@pytest.fixture
def weighted_graph() -> Graph[str]:
    """Directed graph with a cheap detour and a cycle.

    S -7-> T directly, or S -1-> A -1-> B -1-> T (cost 3).
    B -1-> A closes a cycle.
    """
    g: Graph[str] = Graph()
    for src, dst, w in [
        ("S", "T", 7), ("S", "A", 1), ("A", "B", 1),
        ("B", "T", 1), ("B", "A", 1), ("A", "C", 4), ("C", "T", 1),
    ]:
        g.add_edge(src, dst, w)
    return g
