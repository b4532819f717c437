# state_search/core/metrics.py
from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Optional
import time, tracemalloc

from .node import WorkItem


@dataclass
class SearchResult:
    algo: str
    success: bool
    data: Any
    item: Optional[WorkItem]
    nodes_expanded: int
    visited: int
    time_s: float
    peak_kb: Optional[int]
    error: Optional[str] = None
    aborted: bool = False

    def as_row(self) -> dict:
        """Flat, JSON-friendly summary (the payload itself is left out)."""
        return {
            "algo": self.algo,
            "success": self.success,
            "distance": None if self.item is None else self.item.depth,
            "nodes_expanded": self.nodes_expanded,
            "visited": self.visited,
            "time_s": self.time_s,
            "peak_kb": self.peak_kb,
            "error": self.error,
        }


class MeasuredRun:
    """
    Times a search and, when ``trace_memory`` is set, records its peak allocation
    with tracemalloc. Tracing slows a search down several times over, so only the
    benchmarks ask for it; otherwise ``peak_kb`` stays None.
    Safe to query .elapsed and .peak_kb *inside* the with-block.
    """
    def __init__(self, trace_memory: bool = False) -> None:
        self.trace_memory = trace_memory
        self.t0: Optional[float] = None
        self.t1: Optional[float] = None
        self._peak_kb: Optional[int] = None
        self._owns_tracer: bool = False
        self._tracing: bool = False

    def __enter__(self) -> "MeasuredRun":
        if self.trace_memory:
            self._peak_kb = 0
            if not tracemalloc.is_tracing():
                tracemalloc.start()
                self._owns_tracer = True
            self._tracing = True
        self.t0 = time.perf_counter()
        return self

    def __exit__(self, exc_type, exc, tb) -> bool:
        self.t1 = time.perf_counter()
        if self.trace_memory:
            self._peak_kb = self.peak_kb
            self._tracing = False
            if self._owns_tracer:
                tracemalloc.stop()
                self._owns_tracer = False
        return False  # don't suppress exceptions

    @property
    def elapsed(self) -> float:
        """Seconds elapsed. Works before and after __exit__."""
        if self.t0 is None:
            return 0.0
        if self.t1 is None:
            return time.perf_counter() - self.t0
        return self.t1 - self.t0

    @property
    def peak_kb(self) -> Optional[int]:
        """Approx peak KB while tracing, None when memory was not traced."""
        if not self._tracing:
            return self._peak_kb
        return max(self._peak_kb, tracemalloc.get_traced_memory()[1] // 1024)
