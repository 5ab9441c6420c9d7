"""Generic graph search over caller-supplied neighbor callbacks."""

from graphsearch.search.adjacency import Graph
from graphsearch.search.cycle_detector import CycleResult, detect_cycle
from graphsearch.search.heuristics import manhattan_distance, manhattan_to
from graphsearch.search.longest_path import longest_path, longest_path_dag
from graphsearch.search.paths import path_weight, reconstruct_path
from graphsearch.search.shortest_path import astar_search, dijkstra_search
from graphsearch.search.topological import topological_sort
from graphsearch.search.traversal import bfs, dfs

__all__ = [
    "CycleResult",
    "Graph",
    "astar_search",
    "bfs",
    "detect_cycle",
    "dfs",
    "dijkstra_search",
    "longest_path",
    "longest_path_dag",
    "manhattan_distance",
    "manhattan_to",
    "path_weight",
    "reconstruct_path",
    "topological_sort",
]
