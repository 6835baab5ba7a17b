from .predicates import (
    GraphProperties,
    classify,
    excluded_shape,
    is_acyclic,
    is_numbered_tree,
    is_subcyclic,
    is_subcyclic_exception,
    recompute,
    set_properties,
)

__all__ = [
    "GraphProperties",
    "classify",
    "excluded_shape",
    "is_acyclic",
    "is_numbered_tree",
    "is_subcyclic",
    "is_subcyclic_exception",
    "recompute",
    "set_properties",
]
