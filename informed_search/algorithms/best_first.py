from __future__ import annotations
import logging
from typing import Callable, Dict, Iterable, Optional, TypeVar
from ..core.frontiers import PriorityQueue
from ..core.metrics import SearchStats, Solution
from ..core.problem import Searchable
from ..core.utils import reconstruct_path

logger = logging.getLogger(__name__)

S = TypeVar("S", bound=Searchable)


def best_first_search(
    start_states: Iterable[S],
    h: Callable[[S], float],
    name: str = "BestFirst",
    stats: Optional[SearchStats] = None,
) -> Optional[Solution[S]]:
    """Multi-source best-first search ordered by g + h(state).

    Every start is seeded at g = 0 into one shared frontier, so the answer is
    the cheapest over all starts. A state is finalized the first time it is
    popped and never expanded again; the goal test runs on pop, so the first
    goal popped is the cheapest one when ``h`` is admissible and edge costs
    are non-negative. Finalizing on first pop also assumes ``h`` is consistent
    (h(s) <= cost(s, s') + h(s')); every grid-distance heuristic is.

    Returns None when the frontier runs dry without popping a goal.
    Raises ValueError if ``start_states`` is empty.
    """
    starts = list(start_states)
    if not starts:
        raise ValueError(f"{name}: at least one start state is required")
    if stats is None:
        stats = SearchStats()

    frontier: PriorityQueue[S] = PriorityQueue()
    came_from: Dict[S, Optional[S]] = {}  # finalized states -> predecessor

    for s in starts:
        frontier.push(float(h(s)), 0.0, s)
    stats.generated += len(starts)

    solution: Optional[Solution[S]] = None
    while frontier:
        entry = frontier.pop()
        state = entry.state
        if state in came_from:
            stats.skipped += 1
            continue

        came_from[state] = entry.parent
        if state.is_goal():
            solution = Solution(entry.cost, state, reconstruct_path(came_from, state))
            break

        stats.expanded += 1
        g = entry.cost
        for edge_cost, nxt in state.successors():
            if nxt in came_from:
                continue
            next_g = g + edge_cost
            frontier.push(next_g + h(nxt), next_g, nxt, state)
            stats.generated += 1

    stats.max_frontier = max(stats.max_frontier, frontier.max_len)
    if solution is None:
        logger.debug("%s: no goal reachable (expanded=%d)", name, stats.expanded)
    else:
        logger.debug("%s: cost=%s expanded=%d generated=%d", name, solution.cost, stats.expanded, stats.generated)
    return solution
