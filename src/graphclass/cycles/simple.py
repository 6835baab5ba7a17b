"""Enumeration of simple cycles, deduplicated by vertex set."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Set, Tuple

from graphclass.model.adjacency import AdjacencyGraph

logger = logging.getLogger(__name__)

Signature = Tuple[str, ...]


@dataclass(frozen=True)
class CycleRecord:
    """Number of distinct simple cycles and one of them rendered as a path."""

    count: int
    path: str = ""


def cycle_signature(path: List[str]) -> Signature:
    """
    Canonical key of a cycle: its vertices sorted lexicographically.

    Two cycles through the same vertex set share a signature even if
    their edges differ.
    """
    return tuple(sorted(path))


def format_signature(sig: Signature, sep: str = "-") -> str:
    """Render a signature as a closed path, e.g. ('A','B','C') -> 'A-B-C-A'."""
    if not sig:
        return ""
    return sep.join(sig + (sig[0],))


def _scan_from(
    graph: AdjacencyGraph,
    start: str,
    visited: Set[str],
    signatures: Set[Signature],
) -> None:
    """
    Depth-first scan from *start* collecting cycles that close back on it.

    Each stack entry carries its own copy of the path used to reach the
    vertex, so sibling branches never share partial paths.
    """
    stack: List[Tuple[str, List[str]]] = [(start, [])]
    path: List[str] = []
    while stack:
        v, prefix = stack.pop()
        if v in visited:
            continue
        visited.add(v)
        path = prefix + [v]

        for nbr in graph.neighbors(v):
            if nbr == start and len(path) > 2:
                signatures.add(cycle_signature(path))
            elif nbr not in visited:
                stack.append((nbr, path))

    # release the vertices still on the last in-progress path
    visited.difference_update(path)


def simple_cycles(graph: AdjacencyGraph) -> CycleRecord:
    """
    Count distinct simple cycles of length >= 3 in *graph*.

    Every vertex is used as a start with fresh traversal state; the
    signatures found from all starts are unioned. The representative
    path is the smallest signature, so the result is deterministic.
    """
    signatures: Set[Signature] = set()
    for start in graph:
        before = len(signatures)
        _scan_from(graph, start, set(), signatures)
        if len(signatures) != before:
            logger.debug("scan from %r found %d new cycle(s)", start, len(signatures) - before)

    if not signatures:
        return CycleRecord(0, "")
    return CycleRecord(len(signatures), format_signature(min(signatures)))
