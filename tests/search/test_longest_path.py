"""Tests for longest-path search on DAGs and general graphs."""
from __future__ import annotations

import random

from graphsearch.search.adjacency import Graph
from graphsearch.search.longest_path import longest_path, longest_path_dag
from graphsearch.search.paths import path_weight

from brute_force import assert_valid_path, max_cost, random_dag, random_graph

SEED = 42


class TestLongestPathDAG:
    def test_diamond_picks_heavier_branch(self, diamond_graph: Graph[str]) -> None:
        path = longest_path_dag("A", "D", diamond_graph.as_mapping())
        assert path == ["A", "C", "D"]
        assert path_weight(path, diamond_graph.neighbors) == 6

    def test_start_is_goal(self, diamond_graph: Graph[str]) -> None:
        assert longest_path_dag("B", "B", diamond_graph.as_mapping()) == ["B"]

    def test_cyclic_graph_returns_empty(self, cycle_graph: Graph[str]) -> None:
        assert longest_path_dag("A", "C", cycle_graph.as_mapping()) == []

    def test_cycle_elsewhere_still_fails(self) -> None:
        graph = {"A": {"B": 1}, "B": {}, "X": {"Y": 1}, "Y": {"X": 1}}
        assert longest_path_dag("A", "B", graph) == []

    def test_goal_absent_returns_empty(self, diamond_graph: Graph[str]) -> None:
        assert longest_path_dag("A", "Z", diamond_graph.as_mapping()) == []

    def test_goal_unreachable_returns_empty(self, diamond_graph: Graph[str]) -> None:
        assert longest_path_dag("D", "A", diamond_graph.as_mapping()) == []
        assert longest_path_dag("B", "C", diamond_graph.as_mapping()) == []

    def test_unreachable_predecessor_does_not_leak(self) -> None:
        """X -> B is heavy but X is not reachable from A."""
        graph = {"A": {"B": 1}, "X": {"B": 100}, "B": {"C": 1}, "C": {}}
        assert longest_path_dag("A", "C", graph) == ["A", "B", "C"]

    def test_parallel_paths_finds_longest(self) -> None:
        """
        S -> A -> B -> E  (1 + 10 + 1 = 12)
        S -> C -> D -> E  (2 + 2 + 2 = 6)
        S -> E            (5)
        """
        g: Graph[str] = Graph()
        for s, d, w in [
            ("S", "A", 1), ("A", "B", 10), ("B", "E", 1),
            ("S", "C", 2), ("C", "D", 2), ("D", "E", 2), ("S", "E", 5),
        ]:
            g.add_edge(s, d, w)
        path = longest_path_dag("S", "E", g.as_mapping())
        assert path == ["S", "A", "B", "E"]
        assert path_weight(path, g.neighbors) == 12

    def test_matches_brute_force_random(self) -> None:
        rng = random.Random(SEED)
        for _ in range(60):
            n = rng.randint(2, 10)
            g = random_dag(rng, n, edge_prob=0.4)
            start, goal = rng.randrange(n), rng.randrange(n)
            path = longest_path_dag(start, goal, g.as_mapping())
            expected = max_cost(g, start, goal)
            if expected is None:
                assert path == []
            else:
                assert_valid_path(g, path, start, goal)
                assert path_weight(path, g.neighbors) == expected


class TestLongestPathGeneral:
    def test_diamond(self, diamond_graph: Graph[str]) -> None:
        path = longest_path("A", "D", diamond_graph.neighbors)
        assert path == ["A", "C", "D"]

    def test_start_is_goal(self, grid_graph: Graph[tuple[int, int]]) -> None:
        assert longest_path((0, 0), (0, 0), grid_graph.neighbors) == [(0, 0)]

    def test_unreachable_returns_empty(self, linear_graph: Graph[str]) -> None:
        assert longest_path("D", "A", linear_graph.neighbors) == []

    def test_cyclic_graph(self, weighted_graph: Graph[str]) -> None:
        # direct S -> T (7) outweighs S -> A -> C -> T (6) and S -> A -> B -> T (3)
        path = longest_path("S", "T", weighted_graph.neighbors)
        assert path == ["S", "T"]
        assert path_weight(path, weighted_graph.neighbors) == 7

    def test_undirected_grid_visits_every_cell(
        self, grid_graph: Graph[tuple[int, int]]
    ) -> None:
        """On a 3x3 unit grid the longest simple corner-to-corner path is
        a Hamiltonian path: 9 cells, 8 edges."""
        path = longest_path((0, 0), (2, 2), grid_graph.neighbors)
        assert_valid_path(grid_graph, path, (0, 0), (2, 2))
        assert len(path) == 9
        assert len(set(path)) == 9

    def test_nodes_reused_across_branches(self) -> None:
        """B is on both candidate paths; backtracking must release it."""
        g: Graph[str] = Graph(directed=False)
        for s, d, w in [("S", "B", 1), ("B", "G", 1), ("S", "X", 1), ("X", "B", 5)]:
            g.add_edge(s, d, w)
        path = longest_path("S", "G", g.neighbors)
        assert path == ["S", "X", "B", "G"]

    def test_goal_is_not_passed_through(self) -> None:
        """A path may not continue past the goal and come back."""
        edges = {"S": {"G": 1}, "G": {"X": 50}, "X": {"G": 50}}
        assert longest_path("S", "G", edges.get) == ["S", "G"]

    def test_matches_dag_variant_on_dags(self) -> None:
        rng = random.Random(SEED + 1)
        for _ in range(40):
            n = rng.randint(2, 9)
            g = random_dag(rng, n, edge_prob=0.4)
            start, goal = rng.randrange(n), rng.randrange(n)
            general = longest_path(start, goal, g.neighbors)
            dag = longest_path_dag(start, goal, g.as_mapping())
            assert bool(general) == bool(dag)
            if general:
                assert (
                    path_weight(general, g.neighbors)
                    == path_weight(dag, g.neighbors)
                )

    def test_matches_brute_force_random_undirected(self) -> None:
        rng = random.Random(SEED + 2)
        for _ in range(40):
            n = rng.randint(2, 7)
            g = random_graph(rng, n, edge_prob=0.4, directed=False)
            start, goal = rng.randrange(n), rng.randrange(n)
            path = longest_path(start, goal, g.neighbors)
            expected = max_cost(g, start, goal)
            if expected is None:
                assert path == []
            else:
                assert_valid_path(g, path, start, goal)
                assert path_weight(path, g.neighbors) == expected
