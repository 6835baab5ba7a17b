from .simple import CycleRecord, cycle_signature, format_signature, simple_cycles

__all__ = [
    "CycleRecord",
    "cycle_signature",
    "format_signature",
    "simple_cycles",
]
