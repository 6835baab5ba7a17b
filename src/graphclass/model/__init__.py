from .adjacency import AdjacencyGraph, build_graph

__all__ = [
    "AdjacencyGraph",
    "build_graph",
]
