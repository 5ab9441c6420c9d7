"""JSON graph files for the command line.

Format::

    {
      "nodes": ["A", "B", [0, 1]],
      "edges": [["A", "B", 3], ["B", [0, 1]]]
    }

"nodes" is optional (edge endpoints are added implicitly) and is only
needed for isolated nodes.  Each edge is [src, dst] or [src, dst, weight];
the weight defaults to 1 and must be a non-negative integer.  Nodes are
strings, integers, or JSON arrays of those -- arrays become tuples so
they stay hashable, which is how grid coordinates are written.
"""
from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Hashable

from graphsearch.search.adjacency import Graph


class GraphFormatError(ValueError):
    """Raised when a graph file does not match the expected format."""


def parse_node(raw: Any) -> Hashable:
    """Convert a decoded JSON value into a node."""
    if isinstance(raw, bool) or raw is None:
        raise GraphFormatError(f"Invalid node: {raw!r}")
    if isinstance(raw, (str, int)):
        return raw
    if isinstance(raw, list):
        return tuple(parse_node(part) for part in raw)
    raise GraphFormatError(f"Invalid node: {raw!r}")


def parse_node_arg(text: str) -> Hashable:
    """Parse a node given on the command line.

    JSON is tried first so "[0, 0]" and "7" become (0, 0) and 7;
    anything that isn't valid JSON is taken as a plain string.
    """
    try:
        raw = json.loads(text)
    except json.JSONDecodeError:
        return text
    return parse_node(raw)


def parse_graph(data: Any, directed: bool = True) -> Graph[Hashable]:
    """Build a Graph from a decoded JSON document."""
    if not isinstance(data, dict):
        raise GraphFormatError("Graph document must be a JSON object")

    graph: Graph[Hashable] = Graph(directed=directed)
    nodes = data.get("nodes", [])
    if not isinstance(nodes, list):
        raise GraphFormatError('"nodes" must be a list')
    for raw in nodes:
        graph.add_node(parse_node(raw))

    edges = data.get("edges", [])
    if not isinstance(edges, list):
        raise GraphFormatError('"edges" must be a list')
    for i, edge in enumerate(edges):
        if not isinstance(edge, list) or len(edge) not in (2, 3):
            raise GraphFormatError(
                f"Edge #{i} must be [src, dst] or [src, dst, weight], got {edge!r}"
            )
        weight = edge[2] if len(edge) == 3 else 1
        if isinstance(weight, bool) or not isinstance(weight, int) or weight < 0:
            raise GraphFormatError(
                f"Edge #{i} weight must be a non-negative integer, got {weight!r}"
            )
        graph.add_edge(parse_node(edge[0]), parse_node(edge[1]), weight)
    return graph


def load_graph(path: str | Path, directed: bool = True) -> Graph[Hashable]:
    """Read and parse a graph file.

    Raises GraphFormatError for undecodable bytes and invalid JSON as
    well as a bad layout.  OSError from reading the file propagates
    unchanged.
    """
    try:
        text = Path(path).read_text(encoding="utf-8")
    except UnicodeDecodeError as exc:
        raise GraphFormatError(f"{path}: not UTF-8 ({exc.reason})") from exc
    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        raise GraphFormatError(f"{path}: invalid JSON ({exc.msg})") from exc
    return parse_graph(data, directed=directed)
