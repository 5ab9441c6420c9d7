"""graphsearch CLI entry point.

Usage: graphsearch [--undirected] [-v] <command> FILE ...

Every command reads a JSON graph file (see graphsearch.loader) and runs
one search over it.  Exit status: 0 on success, 1 when there is no path
(or the graph has a cycle), 2 for unusable input.
"""
from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import Hashable, Sequence

from graphsearch.loader import GraphFormatError, load_graph, parse_node_arg
from graphsearch.search import (
    astar_search,
    bfs,
    detect_cycle,
    dijkstra_search,
    longest_path,
    longest_path_dag,
    manhattan_distance,
    manhattan_to,
    path_weight,
    topological_sort,
)
from graphsearch.search.adjacency import Graph

log = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_NOT_FOUND = 1
EXIT_BAD_INPUT = 2


def _format_node(node: Hashable) -> str:
    if isinstance(node, str):
        return node
    return json.dumps(node)


def _print_path(path: Sequence[Hashable], graph: Graph[Hashable]) -> None:
    print(" -> ".join(_format_node(n) for n in path))
    print(f"weight: {path_weight(path, graph.neighbors)}  edges: {len(path) - 1}")


def _no_estimate(node: Hashable) -> int:
    return 0


def _is_point(node: Hashable) -> bool:
    return (
        isinstance(node, tuple)
        and len(node) == 2
        and all(isinstance(c, int) for c in node)
    )


def _manhattan_admissible(graph: Graph[Hashable], goal: Hashable) -> bool:
    """True when Manhattan distance can never overestimate a path cost.

    Every node must be an [x, y] point and every edge must join two
    4-adjacent points with a weight of at least 1.
    """
    if not _is_point(goal) or not all(_is_point(n) for n in graph.nodes()):
        return False
    return all(
        w >= 1 and manhattan_distance(src, dst) == 1
        for src, dst, w in graph.edges()
    )


def _add_search_args(p: argparse.ArgumentParser) -> None:
    p.add_argument("file", help="JSON graph file")
    p.add_argument("start", type=parse_node_arg, help="Start node (JSON or plain string)")
    p.add_argument("goal", type=parse_node_arg, help="Goal node (JSON or plain string)")


def _add_parsers(subparsers: argparse._SubParsersAction) -> None:
    p = subparsers.add_parser(
        "shortest",
        help="Minimum-weight path between two nodes.",
    )
    _add_search_args(p)
    p.add_argument(
        "--algorithm", choices=("dijkstra", "astar"), default="dijkstra",
        help="Search algorithm (default: dijkstra). astar uses Manhattan "
             "distance on grids (every edge joins 4-adjacent [x, y] points "
             "with weight >= 1), otherwise a zero heuristic.",
    )

    p = subparsers.add_parser(
        "longest",
        help="Maximum-weight simple path between two nodes.",
    )
    _add_search_args(p)
    p.add_argument(
        "--dag", action="store_true",
        help="Use the linear-time DAG algorithm (fails on cyclic graphs).",
    )

    p = subparsers.add_parser(
        "bfs",
        help="Fewest-edges path between two nodes (weights ignored).",
    )
    _add_search_args(p)

    p = subparsers.add_parser("toposort", help="Print a topological order.")
    p.add_argument("file", help="JSON graph file")

    p = subparsers.add_parser("cycle", help="Report a directed cycle, if any.")
    p.add_argument("file", help="JSON graph file")


def _run_shortest(args: argparse.Namespace, graph: Graph[Hashable]) -> int:
    if args.algorithm == "astar":
        if _manhattan_admissible(graph, args.goal):
            heuristic = manhattan_to(args.goal)
        else:
            log.info("graph is not a unit-step grid; A* falls back to h = 0")
            heuristic = _no_estimate
        path = astar_search(args.start, args.goal, graph.neighbors, heuristic)
    else:
        path = dijkstra_search(args.start, args.goal, graph.neighbors)
    return _report_path(path, graph)


def _run_longest(args: argparse.Namespace, graph: Graph[Hashable]) -> int:
    if args.dag:
        path = longest_path_dag(args.start, args.goal, graph.as_mapping())
    else:
        path = longest_path(args.start, args.goal, graph.neighbors)
    return _report_path(path, graph)


def _run_bfs(args: argparse.Namespace, graph: Graph[Hashable]) -> int:
    goal = args.goal
    path = bfs(args.start, lambda node: node == goal, graph.successors)
    return _report_path(path, graph)


def _report_path(path: Sequence[Hashable], graph: Graph[Hashable]) -> int:
    if not path:
        print("no path found")
        return EXIT_NOT_FOUND
    _print_path(path, graph)
    return EXIT_OK


def _run_toposort(args: argparse.Namespace, graph: Graph[Hashable]) -> int:
    order = topological_sort(graph.as_mapping())
    if not order and graph.node_count:
        print("graph contains a cycle")
        return EXIT_NOT_FOUND
    for node in order:
        print(_format_node(node))
    return EXIT_OK


def _run_cycle(args: argparse.Namespace, graph: Graph[Hashable]) -> int:
    result = detect_cycle(graph.as_mapping())
    if not result.has_cycle:
        print("no cycle")
        return EXIT_OK
    print(" -> ".join(_format_node(n) for n in result.cycle_path or []))
    return EXIT_NOT_FOUND


_COMMANDS = {
    "shortest": _run_shortest,
    "longest": _run_longest,
    "bfs": _run_bfs,
    "toposort": _run_toposort,
    "cycle": _run_cycle,
}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="graphsearch",
        description="Run graph searches over a JSON graph file.",
    )
    parser.add_argument(
        "--undirected", action="store_true",
        help="Treat every edge as two-way.",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true",
        help="Shorthand for --log-level DEBUG.",
    )
    parser.add_argument(
        "--log-level", default="WARNING",
        choices=("DEBUG", "INFO", "WARNING", "ERROR"),
        help="Logging level (default: WARNING)",
    )
    subparsers = parser.add_subparsers(dest="command")
    _add_parsers(subparsers)
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.command is None:
        parser.print_help()
        return EXIT_OK

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else getattr(logging, args.log_level),
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        graph = load_graph(args.file, directed=not args.undirected)
    except (GraphFormatError, OSError) as exc:
        print(f"graphsearch: {exc}", file=sys.stderr)
        return EXIT_BAD_INPUT

    log.debug("loaded %r from %s", graph, args.file)
    return _COMMANDS[args.command](args, graph)


if __name__ == "__main__":
    sys.exit(main())
