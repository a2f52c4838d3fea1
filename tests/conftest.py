from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, FrozenSet, List, Tuple

import pytest


@dataclass(eq=False)
class Graph:
    """Explicit weighted digraph for engine tests; records which nodes got expanded."""
    edges: Dict[str, List[Tuple[float, str]]]
    goals: FrozenSet[str]
    h: Dict[str, float] = field(default_factory=dict)
    expanded: List[str] = field(default_factory=list)

    def state(self, name: str) -> "GraphState":
        return GraphState(name, self)


@dataclass(frozen=True)
class GraphState:
    name: str
    graph: Graph = field(compare=False, repr=False)

    def successors(self):
        self.graph.expanded.append(self.name)
        return [(cost, GraphState(nxt, self.graph)) for cost, nxt in self.graph.edges.get(self.name, [])]

    def heuristic(self) -> float:
        return self.graph.h.get(self.name, 0.0)

    def is_goal(self) -> bool:
        return self.name in self.graph.goals


@pytest.fixture
def make_graph():
    def _make(edges, goals, h=None):
        return Graph(edges=edges, goals=frozenset(goals), h=dict(h or {}))
    return _make
