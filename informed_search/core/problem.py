# Defines the contract a caller's state type must satisfy to be searched (heuristic, successors, goal test, identity).
# informed_search/core/problem.py
from __future__ import annotations
from typing import Iterable, Protocol, Tuple

Cost = float


class Searchable(Protocol):
    """Capability set a state must provide to be searched by the engine.

    A state is a value: two states that denote the same point of the problem's
    state space must compare equal and hash equal, no matter which path reached
    them. Frozen dataclasses and tuples are the natural fit. The engine keeps
    many live states in its frontier, so they should be cheap to hold.

    Optimality holds only if the caller keeps two promises the engine never
    checks:

    - ``heuristic()`` never overestimates the true remaining cost to a goal,
    - every edge cost yielded by ``successors()`` is >= 0.

    Breaking either gives a possibly non-minimal answer, never an exception.
    """

    def heuristic(self) -> Cost:
        """Admissible estimate of the cheapest remaining cost to any goal."""
        ...

    def successors(self) -> Iterable[Tuple[Cost, "Searchable"]]:
        """(edge_cost, next_state) for every state one step away; may be empty."""
        ...

    def is_goal(self) -> bool:
        """Checked when the state is popped, not when it is generated."""
        ...

    def __eq__(self, other: object) -> bool: ...
    def __hash__(self) -> int: ...
