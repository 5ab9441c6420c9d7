"""Weighted graph backed by adjacency dicts.

The search functions never require this class -- they only take
callbacks or a plain ``{node: {neighbor: weight}}`` mapping.  Graph is a
convenience for callers who would otherwise build those by hand: it
stores nodes of any hashable type T and exposes bound methods that plug
straight into the search API.

    g = Graph(directed=False)
    g.add_edge("a", "b", 3)
    dijkstra_search("a", "b", g.neighbors)
    bfs("a", lambda n: n == "b", g.successors)
    topological_sort(g.as_mapping())

An undirected graph stores each edge in both directions.
"""
from __future__ import annotations

from typing import Generic, Hashable, Iterator, TypeVar

T = TypeVar("T", bound=Hashable)


class Graph(Generic[T]):
    """Directed (default) or undirected graph with integer edge weights."""

    __slots__ = ("_adj", "_directed")

    def __init__(self, directed: bool = True) -> None:
        self._adj: dict[T, dict[T, int]] = {}
        self._directed = directed

    @property
    def directed(self) -> bool:
        return self._directed

    # ---- mutation --------------------------------------------------------

    def add_node(self, node: T) -> None:
        """Add *node* if it does not already exist."""
        if node not in self._adj:
            self._adj[node] = {}

    def add_edge(self, src: T, dst: T, weight: int = 1) -> None:
        """Add an edge src -> dst (and dst -> src if undirected).

        Creates both nodes if they are missing.  Re-adding an existing
        edge overwrites its weight.
        """
        self.add_node(src)
        self.add_node(dst)
        self._adj[src][dst] = weight
        if not self._directed:
            self._adj[dst][src] = weight

    def remove_edge(self, src: T, dst: T) -> None:
        """Remove edge src -> dst (both directions if undirected).

        Raises ValueError if the edge does not exist.
        """
        try:
            del self._adj[src][dst]
            if not self._directed:
                del self._adj[dst][src]
        except KeyError:
            raise ValueError(f"Edge {src!r} -> {dst!r} not found") from None

    def remove_node(self, node: T) -> None:
        """Remove *node* and all edges touching it."""
        if node not in self._adj:
            raise ValueError(f"Node {node!r} not found")
        del self._adj[node]
        for edges in self._adj.values():
            edges.pop(node, None)

    # ---- queries ---------------------------------------------------------

    def has_node(self, node: T) -> bool:
        return node in self._adj

    def has_edge(self, src: T, dst: T) -> bool:
        return src in self._adj and dst in self._adj[src]

    def weight(self, src: T, dst: T) -> int:
        """Weight of edge src -> dst.  Raises ValueError if absent."""
        if not self.has_edge(src, dst):
            raise ValueError(f"Edge {src!r} -> {dst!r} not found")
        return self._adj[src][dst]

    def neighbors(self, node: T) -> dict[T, int]:
        """Outgoing edges as ``{neighbor: weight}`` (weighted callback)."""
        return dict(self._adj.get(node, {}))

    def successors(self, node: T) -> list[T]:
        """Outgoing neighbors only (unweighted callback)."""
        return list(self._adj.get(node, {}))

    def nodes(self) -> Iterator[T]:
        return iter(self._adj)

    def edges(self) -> Iterator[tuple[T, T, int]]:
        """Yield (src, dst, weight).  Undirected edges appear once per direction."""
        for src, dsts in self._adj.items():
            for dst, w in dsts.items():
                yield src, dst, w

    def as_mapping(self) -> dict[T, dict[T, int]]:
        """Copy of the adjacency as ``{node: {neighbor: weight}}``."""
        return {n: dict(dsts) for n, dsts in self._adj.items()}

    @property
    def node_count(self) -> int:
        return len(self._adj)

    @property
    def edge_count(self) -> int:
        total = sum(len(dsts) for dsts in self._adj.values())
        if self._directed:
            return total
        # self-loops are stored once, every other edge twice
        loops = sum(1 for n, dsts in self._adj.items() if n in dsts)
        return (total - loops) // 2 + loops

    # ---- dunder ----------------------------------------------------------

    def __contains__(self, node: T) -> bool:  # type: ignore[override]
        return self.has_node(node)

    def __len__(self) -> int:
        return self.node_count

    def __repr__(self) -> str:
        kind = "directed" if self._directed else "undirected"
        return f"Graph({kind}, nodes={self.node_count}, edges={self.edge_count})"
