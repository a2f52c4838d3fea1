# informed_search/core/metrics.py
from __future__ import annotations
from dataclasses import asdict, dataclass, field
from typing import Any, Dict, Generic, List, Optional, TypeVar
import time, tracemalloc

S = TypeVar("S")


@dataclass(frozen=True)
class Solution(Generic[S]):
    """Cheapest cost found, the goal state it ended on, and the states along the way."""
    cost: float
    final_state: S
    path: List[S] = field(default_factory=list, compare=False)


@dataclass
class SearchStats:
    expanded: int = 0       # states finalized and passed to successors()
    generated: int = 0      # frontier pushes, seeds included
    skipped: int = 0        # stale entries discarded on pop
    max_frontier: int = 0


@dataclass
class RunRecord:
    """One benchmark row: how a named algorithm did on a named problem."""
    problem: str
    algo: str
    success: bool
    cost: Optional[float]
    nodes_expanded: Optional[int]
    time_s: Optional[float]
    peak_kb: Optional[int]
    error: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


class MeasuredRun:
    """Wall time and approximate peak traced memory of the with-block, read after exit."""
    def __init__(self) -> None:
        self.elapsed: float = 0.0
        self.peak_kb: int = 0

    def __enter__(self) -> "MeasuredRun":
        tracemalloc.start()
        self._t0 = time.perf_counter()
        return self

    def __exit__(self, exc_type, exc, tb) -> bool:
        self.elapsed = time.perf_counter() - self._t0
        self.peak_kb = tracemalloc.get_traced_memory()[1] // 1024
        tracemalloc.stop()
        return False
