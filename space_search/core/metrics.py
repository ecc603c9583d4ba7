# space_search/core/metrics.py
from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Callable, List, Optional, Sequence
import time, tracemalloc

@dataclass
class SearchResult:
    algo: str
    success: bool
    route: List[Any]
    cost: Optional[float]
    nodes_expanded: int
    time_s: float
    peak_kb: int
    error: Optional[str] = None
    truncated: bool = field(default=False)
    generated: int = 0  # successors produced, before deduplication

    @property
    def solution(self) -> Any:
        """Final state of the route, or None when the search failed."""
        return self.route[-1] if self.route else None

def route_cost(route: Sequence[Any], step_cost: Callable[[Any, Any], Any], zero: Any = 0) -> Any:
    """Sum of step_cost(s, s') over consecutive states of a route."""
    total = zero
    for s, s2 in zip(route, route[1:]):
        total = total + step_cost(s, s2)
    return total

class MeasuredRun:
    """
    Context manager for timing and (approximate) peak memory.
    Safe to query .elapsed and .peak_kb *inside* the with-block.
    With trace_memory=False only time is measured (tracemalloc slows searches down a lot).
    """
    def __init__(self, trace_memory: bool = True) -> None:
        self.trace_memory = trace_memory
        self.t0: Optional[float] = None
        self.t1: Optional[float] = None
        self._peak_kb: int = 0
        self._tracing: bool = False

    def __enter__(self) -> "MeasuredRun":
        if self.trace_memory:
            self._tracing = True
            tracemalloc.start()
        self.t0 = time.perf_counter()
        return self

    def __exit__(self, exc_type, exc, tb) -> bool:
        self.t1 = time.perf_counter()
        if self._tracing:
            _, peak = tracemalloc.get_traced_memory()
            tracemalloc.stop()
            self._tracing = False
            self._peak_kb = max(self._peak_kb, peak // 1024)
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
    def peak_kb(self) -> int:
        """Approx peak KB. Works before and after __exit__."""
        if self._tracing:
            _, peak = tracemalloc.get_traced_memory()
            return max(self._peak_kb, peak // 1024)
        return self._peak_kb
