from .naming import describe_graph

__all__ = [
    "describe_graph",
]
