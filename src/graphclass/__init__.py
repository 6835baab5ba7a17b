"""
graphclass: classification of small undirected graphs as acyclic, subcyclic,
tree and numbered tree, built on vertex-set-deduplicated simple cycle counting.
"""

from .model.adjacency import AdjacencyGraph, build_graph
from .cycles.simple import CycleRecord, cycle_signature, simple_cycles
from .properties.predicates import (
    GraphProperties,
    classify,
    is_acyclic,
    is_numbered_tree,
    is_subcyclic,
    is_subcyclic_exception,
    recompute,
)

# Loader / reporter
from .io.edgelist import ResourceOpenError, load_edgelist, parse_edge_lines
from .io.report import format_report, write_report

# Shared utilities
from .utils.naming import describe_graph
from .bench.timing import time_recompute
from .viz.draw import draw_classified

__all__ = [
    # Model
    "AdjacencyGraph",
    "build_graph",
    # Cycles
    "CycleRecord",
    "cycle_signature",
    "simple_cycles",
    # Properties
    "GraphProperties",
    "classify",
    "is_acyclic",
    "is_numbered_tree",
    "is_subcyclic",
    "is_subcyclic_exception",
    "recompute",
    # IO
    "ResourceOpenError",
    "load_edgelist",
    "parse_edge_lines",
    "format_report",
    "write_report",
    # Utils
    "describe_graph",
    "time_recompute",
    # Viz
    "draw_classified",
]
