from .timing import BENCH_REPEATS, Timing, time_recompute, write_timing

__all__ = [
    "BENCH_REPEATS",
    "Timing",
    "time_recompute",
    "write_timing",
]
