from __future__ import annotations

import os
from pathlib import Path
from typing import Iterable

from graphclass.model.adjacency import AdjacencyGraph


INPUT_DIR = os.environ.get("GRAPHCLASS_INPUT_DIR", "input")


class ResourceOpenError(RuntimeError):
    """An input or output resource could not be opened."""


def parse_edge_lines(lines: Iterable[str]) -> AdjacencyGraph:
    """
    Build a graph from edge-list lines.

    'u w' adds an edge, a lone 'u' adds an isolated vertex if it is not
    present yet, blank lines are skipped. Tokens after the second are
    ignored.
    """
    g = AdjacencyGraph()
    for line in lines:
        tokens = line.split()
        if not tokens:
            continue
        if len(tokens) >= 2:
            g.add_edge(tokens[0], tokens[1])
        else:
            g.add_vertex(tokens[0])
    return g


def load_edgelist(name: str, input_dir: str | os.PathLike[str] | None = None) -> AdjacencyGraph:
    """Read the graph stored as *name* under *input_dir* (default INPUT_DIR)."""
    path = Path(INPUT_DIR if input_dir is None else input_dir) / name
    try:
        with open(path, encoding="utf-8") as fh:
            return parse_edge_lines(fh)
    except OSError as exc:
        raise ResourceOpenError(f"cannot open input file {str(path)!r}: {exc.strerror}") from exc
