"""Generic best-first (A*) search over caller-defined state types."""
from .algorithms.astar import solve
from .algorithms.best_first import best_first_search
from .algorithms.ucs import uniform_cost_solve
from .core.metrics import SearchStats, Solution
from .core.problem import Searchable

__all__ = [
    "Searchable",
    "SearchStats",
    "Solution",
    "best_first_search",
    "solve",
    "uniform_cost_solve",
]
