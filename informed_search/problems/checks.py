from __future__ import annotations
from collections import deque
from typing import Iterable


def check_contract(start_states: Iterable, max_states: int = 10_000) -> str:
    """Walks states breadth-first and checks the search contract holds locally.

    Flags negative or missing edge costs, negative heuristics, malformed
    successor pairs and unhashable states. Admissibility itself cannot be
    checked without solving the problem, so it is not.
    """
    seen = set()
    q = deque(start_states)
    steps = 0
    while q and steps < max_states:
        s = q.popleft()
        try:
            if s in seen:
                continue
        except TypeError as e:
            raise ValueError(f"state {s!r} is not hashable") from e
        seen.add(s)
        h = s.heuristic()
        if h is None or h < 0:
            raise ValueError(f"heuristic is {h!r} for s={s!r}; must be a number >= 0")
        for pair in s.successors():
            try:
                cost, s2 = pair
            except (TypeError, ValueError) as e:
                raise ValueError(f"successor of {s!r} is not an (edge_cost, state) pair: {pair!r}") from e
            if cost is None or cost < 0:
                raise ValueError(f"edge cost is {cost!r} for (s={s!r}, s'={s2!r}); must be >= 0")
            q.append(s2)
        steps += 1
    return f"OK: visited {len(seen)} states; no contract violations."
