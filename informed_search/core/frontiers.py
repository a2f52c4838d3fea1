# informed_search/core/frontiers.py
from __future__ import annotations
import heapq
from typing import Generic, List, NamedTuple, Optional, TypeVar

T = TypeVar("T")


class FrontierEntry(NamedTuple):
    priority: float       # g + h
    seq: int              # insertion order, breaks priority ties
    cost: float           # g
    state: object
    parent: Optional[object]


class PriorityQueue(Generic[T]):
    """Min-heap of FrontierEntry ordered by (g + h, insertion sequence).

    ``seq`` is unique per queue, so heap comparisons never reach the state:
    states only need equality and hashing, not ordering.
    """
    def __init__(self) -> None:
        self.h: List[FrontierEntry] = []
        self.counter = 0  # tie-breaker for stability
        self.max_len = 0

    def push(self, priority: float, cost: float, state: T, parent: Optional[T] = None) -> None:
        heapq.heappush(self.h, FrontierEntry(priority, self.counter, cost, state, parent))
        self.counter += 1
        if len(self.h) > self.max_len:
            self.max_len = len(self.h)

    def pop(self) -> FrontierEntry:
        return heapq.heappop(self.h)

    def peek(self) -> FrontierEntry:
        return self.h[0]

    def __len__(self) -> int: return len(self.h)
    def __bool__(self) -> bool: return bool(self.h)
