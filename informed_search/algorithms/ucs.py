# Uniform Cost Search (Dijkstra) on the same best-first loop, heuristic pinned to zero.
# informed_search/algorithms/ucs.py
from __future__ import annotations
from typing import Iterable, Optional, TypeVar
from .best_first import best_first_search
from ..core.metrics import SearchStats, Solution
from ..core.problem import Searchable

S = TypeVar("S", bound=Searchable)


def uniform_cost_solve(start_states: Iterable[S], stats: Optional[SearchStats] = None) -> Optional[Solution[S]]:
    return best_first_search(start_states, h=lambda s: 0.0, name="UCS", stats=stats)
