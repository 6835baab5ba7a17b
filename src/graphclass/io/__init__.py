from .edgelist import ResourceOpenError, load_edgelist, parse_edge_lines
from .report import format_report, open_sink, verdict_lines, write_report

__all__ = [
    "ResourceOpenError",
    "load_edgelist",
    "parse_edge_lines",
    "format_report",
    "open_sink",
    "verdict_lines",
    "write_report",
]
