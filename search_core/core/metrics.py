# search_core/core/metrics.py
from __future__ import annotations
from dataclasses import asdict, dataclass, field
from typing import Any, Dict, List, Optional
import math, time, tracemalloc


@dataclass
class SearchResult:
    """What every search returns: a solution (success=True) or a failure.

    On failure ``actions`` is empty and ``cost`` is infinite; ``error`` says why
    when the search stopped for a reason other than exhausting the space.
    """
    algo: str
    success: bool
    actions: List[Any] = field(default_factory=list)
    cost: float = math.inf
    nodes_expanded: int = 0
    time_s: float = 0.0
    peak_kb: int = 0
    error: Optional[str] = None

    @property
    def failed(self) -> bool:
        return not self.success

    def to_row(self) -> Dict[str, Any]:
        row = asdict(self)
        row["actions"] = [repr(a) if not isinstance(a, (str, int, float)) else a for a in self.actions]
        if math.isinf(self.cost):
            row["cost"] = None
        return row


class MeasuredRun:
    """
    Context manager for timing and (approximate) peak memory.
    Safe to query .elapsed and .peak_kb *inside* the with-block.
    """
    def __init__(self) -> None:
        self.t0: Optional[float] = None
        self.t1: Optional[float] = None
        self._peak_kb: int = 0
        self._tracing: bool = False
        self._owns_tracing: bool = False

    def __enter__(self) -> "MeasuredRun":
        # Nested runs (or a caller already tracing) share the outer trace.
        self._owns_tracing = not tracemalloc.is_tracing()
        if self._owns_tracing:
            tracemalloc.start()
        self._tracing = True
        self.t0 = time.perf_counter()
        return self

    def __exit__(self, exc_type, exc, tb) -> bool:
        self.t1 = time.perf_counter()
        current, peak = tracemalloc.get_traced_memory()
        if self._owns_tracing:
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
            current, peak = tracemalloc.get_traced_memory()
            return max(self._peak_kb, peak // 1024)
        return self._peak_kb
