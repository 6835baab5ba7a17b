"""
Structural classification of an undirected graph: acyclic, subcyclic,
tree and numbered tree.

Predicates report failures through an ``emit`` callable that receives one
human-readable line per situation (found cycle, excluded shape, failing
chord pair).
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from itertools import combinations
from typing import Callable, List, Optional, Set, Tuple

from graphclass.cycles.simple import simple_cycles
from graphclass.model.adjacency import AdjacencyGraph

logger = logging.getLogger(__name__)

Emit = Callable[[str], None]

TRIANGLE_WITH_EDGE = "triangle with a dangling edge"
TRIANGLE_WITH_ISOLATED_VERTEX = "triangle with an isolated vertex"


def _discard(_msg: str) -> None:
    pass


@dataclass(frozen=True)
class GraphProperties:
    is_acyclic: bool
    is_subcyclic: bool
    is_tree: bool
    is_numbered_tree: bool


def is_acyclic(graph: AdjacencyGraph, emit: Emit = _discard) -> bool:
    record = simple_cycles(graph)
    if record.count > 0:
        emit(f"Acyclicity violated. Found cycle: {record.path}")
        return False
    return True


def _triangle_and_edge_vertices(graph: AdjacencyGraph) -> Tuple[Set[str], Set[str]]:
    triangle: Set[str] = set()
    edge: Set[str] = set()
    for v in graph:
        neigh = graph.neighbors(v)
        if len(neigh) >= 2:
            for a, b in combinations(neigh, 2):
                if graph.are_connected(a, b):
                    triangle.update((v, a, b))
        if len(neigh) <= 1:
            edge.add(v)
            if neigh:
                edge.add(neigh[0])
    return triangle, edge


def excluded_shape(graph: AdjacencyGraph) -> Optional[str]:
    """
    Name of the degenerate shape *graph* matches, or None.

    Triangle vertices are the corners of any triangle; edge vertices are
    the vertices of degree 0 or 1 together with the sole neighbor of each
    degree-1 vertex.
    """
    triangle, edge = _triangle_and_edge_vertices(graph)
    if len(triangle) < 3:
        return None
    if len(edge) >= 2:
        return TRIANGLE_WITH_EDGE
    if len(edge) == 1:
        return TRIANGLE_WITH_ISOLATED_VERTEX
    return None


def is_subcyclic_exception(graph: AdjacencyGraph) -> bool:
    """False iff *graph* is one of the excluded triangle-based shapes."""
    return excluded_shape(graph) is None


def is_subcyclic(graph: AdjacencyGraph, emit: Emit = _discard) -> bool:
    """
    Subcyclic: not an excluded shape, and adding any single missing edge
    between two distinct vertices creates exactly one simple cycle.

    Every probe edge is removed again before returning, including when
    the check stops at the first failing pair.
    """
    shape = excluded_shape(graph)
    if shape is not None:
        emit(f"Subcyclicity violated. The graph is an excluded shape ({shape}).")
        return False

    for v, w in combinations(graph.vertices(), 2):
        if graph.are_connected(v, w):
            continue
        with graph.temporary_edge(v, w):
            count = simple_cycles(graph).count
        logger.debug("chord %s-%s -> %d cycle(s)", v, w, count)
        if count != 1:
            emit(f"Subcyclicity violated at vertices {v}-{w}")
            return False
    return True


def is_numbered_tree(graph: AdjacencyGraph, acyclic: bool, subcyclic: bool) -> bool:
    if acyclic:
        return subcyclic
    if subcyclic:
        return False
    # cyclic and not subcyclic: fall back to the tree edge count
    return graph.edge_count() == graph.vertex_count() - 1


def set_properties(graph: AdjacencyGraph, emit: Emit = _discard) -> GraphProperties:
    """Compute all four properties from scratch, in dependency order."""
    acyclic = is_acyclic(graph, emit)
    subcyclic = is_subcyclic(graph, emit)
    props = GraphProperties(
        is_acyclic=acyclic,
        is_subcyclic=subcyclic,
        is_tree=acyclic and subcyclic,
        is_numbered_tree=is_numbered_tree(graph, acyclic, subcyclic),
    )
    logger.info("classified %r: %s", graph, props)
    return props


def classify(graph: AdjacencyGraph) -> Tuple[GraphProperties, List[str]]:
    """Return the properties of *graph* and the diagnostics produced on the way."""
    diagnostics: List[str] = []
    props = set_properties(graph, diagnostics.append)
    return props, diagnostics


def recompute(graph: AdjacencyGraph) -> GraphProperties:
    """Recompute the properties, discarding diagnostics."""
    return set_properties(graph)
