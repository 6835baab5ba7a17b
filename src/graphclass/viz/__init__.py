from .draw import base_layout, cycle_edges, draw_classified

__all__ = [
    "base_layout",
    "cycle_edges",
    "draw_classified",
]
