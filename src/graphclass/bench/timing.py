"""Repeat-and-time harness for the classifier."""
from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from typing import List, TextIO

from graphclass.model.adjacency import AdjacencyGraph
from graphclass.properties.predicates import recompute

logger = logging.getLogger(__name__)

BENCH_REPEATS = 10


@dataclass
class Timing:
    durations_ms: List[float]

    @property
    def average_ms(self) -> float:
        return sum(self.durations_ms) / len(self.durations_ms)


def time_recompute(graph: AdjacencyGraph, repeats: int = BENCH_REPEATS) -> Timing:
    """Run a full recompute *repeats* times and record each wall time in ms."""
    if repeats < 1:
        raise ValueError("repeats must be >= 1.")
    durations: List[float] = []
    for i in range(repeats):
        t0 = time.perf_counter()
        recompute(graph)
        dt = (time.perf_counter() - t0) * 1000.0
        logger.debug("run %d/%d: %.3f ms", i + 1, repeats, dt)
        durations.append(dt)
    return Timing(durations)


def write_timing(timing: Timing, log: TextIO) -> None:
    for dt in timing.durations_ms:
        log.write(f"{dt:.3f}ms\n")
    log.write(f"Average time: {timing.average_ms:.3f}ms\n")
