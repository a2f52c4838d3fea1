# informed_search/algorithms/astar.py
from __future__ import annotations
from typing import Iterable, Optional, TypeVar
from .best_first import best_first_search
from ..core.metrics import SearchStats, Solution
from ..core.problem import Searchable

S = TypeVar("S", bound=Searchable)


def _heuristic(state: Searchable) -> float:
    return state.heuristic()


def solve(start_states: Iterable[S], stats: Optional[SearchStats] = None) -> Optional[Solution[S]]:
    """A*: minimum-cost path from any of ``start_states`` to a goal state, or None."""
    return best_first_search(start_states, h=_heuristic, name="A*", stats=stats)
