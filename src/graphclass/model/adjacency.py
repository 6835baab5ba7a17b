from __future__ import annotations

from contextlib import contextmanager
from typing import Dict, Iterable, Iterator, List, Sequence, Tuple

import networkx as nx


class AdjacencyGraph:
    """
    Undirected graph over string labels stored as ordered adjacency lists.

    Every edge appears in both endpoints' lists. Parallel edges are kept:
    adding the same edge twice doubles its multiplicity on both sides.
    Isolated vertices exist as keys with an empty list.
    """

    def __init__(self) -> None:
        self._adj: Dict[str, List[str]] = {}

    def add_vertex(self, v: str) -> None:
        """Insert *v* with no neighbors unless it is already present."""
        if v not in self._adj:
            self._adj[v] = []

    def add_edge(self, u: str, w: str) -> None:
        self.add_vertex(u)
        self.add_vertex(w)
        self._adj[u].append(w)
        self._adj[w].append(u)

    def remove_edge(self, u: str, w: str) -> None:
        """Remove one multiplicity of the edge (first occurrence on each side)."""
        self._adj[u].remove(w)
        self._adj[w].remove(u)

    def are_connected(self, u: str, w: str) -> bool:
        return w in self._adj[u]

    def neighbors(self, v: str) -> Tuple[str, ...]:
        """Neighbors of *v* in insertion order, as a read-only tuple."""
        return tuple(self._adj[v])

    def vertices(self) -> List[str]:
        return list(self._adj)

    def vertex_count(self) -> int:
        return len(self._adj)

    def edge_count(self) -> int:
        # half the total list length; relies on the symmetry invariant
        return sum(len(neigh) for neigh in self._adj.values()) // 2

    def edges(self) -> List[Tuple[str, str]]:
        """
        Return every undirected edge once, in first-seen order.
        Parallel edges are listed once per multiplicity.
        """
        seen: Dict[Tuple[str, str], int] = {}
        eds: List[Tuple[str, str]] = []
        for u, neigh in self._adj.items():
            for w in neigh:
                key = (u, w) if u <= w else (w, u)
                seen[key] = seen.get(key, 0) + 1
        for (u, w), twice in seen.items():
            eds.extend([(u, w)] * (twice // 2))
        return eds

    def snapshot(self) -> Dict[str, List[str]]:
        """Independent copy of the adjacency mapping."""
        return {v: list(neigh) for v, neigh in self._adj.items()}

    @contextmanager
    def temporary_edge(self, u: str, w: str) -> Iterator[None]:
        """
        Add the edge (u, w) for the duration of the block.

        The edge is removed on every exit path, including early return
        and exceptions raised inside the block.
        """
        if u == w:
            raise ValueError(f"temporary edge needs two distinct vertices, got {u!r} twice.")
        self.add_edge(u, w)
        try:
            yield
        finally:
            self.remove_edge(u, w)

    def to_networkx(self) -> nx.Graph:
        """
        Convert to a NetworkX graph, keeping isolated vertices.
        A MultiGraph is returned when parallel edges are present.
        """
        eds = self.edges()
        G = nx.MultiGraph() if len(set(eds)) != len(eds) else nx.Graph()
        G.add_nodes_from(self._adj)
        G.add_edges_from(eds)
        return G

    def __contains__(self, v: object) -> bool:
        return v in self._adj

    def __iter__(self) -> Iterator[str]:
        return iter(self._adj)

    def __len__(self) -> int:
        return len(self._adj)

    def __repr__(self) -> str:
        return f"AdjacencyGraph(|V|={self.vertex_count()}, |E|={self.edge_count()})"


def build_graph(
    edges: Iterable[Sequence[str]],
    isolated: Iterable[str] = (),
) -> AdjacencyGraph:
    """
    Build an AdjacencyGraph from (u, w) pairs and lone vertex labels.
    Vertices are created in order of first mention.
    """
    g = AdjacencyGraph()
    for u, w in edges:
        g.add_edge(u, w)
    for v in isolated:
        g.add_vertex(v)
    return g
