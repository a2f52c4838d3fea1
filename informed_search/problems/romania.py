# informed_search/problems/romania.py
from __future__ import annotations
from dataclasses import dataclass, field
from typing import Dict, Iterator, Mapping, Tuple


# --- Data --------------------------------------------------------------------

# Road distances (bidirectional) from AIMA Fig. 3.1
_GRAPH: Dict[str, Dict[str, int]] = {
    "Arad": {"Zerind": 75, "Sibiu": 140, "Timisoara": 118},
    "Zerind": {"Arad": 75, "Oradea": 71},
    "Oradea": {"Zerind": 71, "Sibiu": 151},
    "Sibiu": {"Arad": 140, "Oradea": 151, "Fagaras": 99, "Rimnicu Vilcea": 80},
    "Timisoara": {"Arad": 118, "Lugoj": 111},
    "Lugoj": {"Timisoara": 111, "Mehadia": 70},
    "Mehadia": {"Lugoj": 70, "Drobeta": 75},
    "Drobeta": {"Mehadia": 75, "Craiova": 120},
    "Craiova": {"Drobeta": 120, "Rimnicu Vilcea": 146, "Pitesti": 138},
    "Rimnicu Vilcea": {"Sibiu": 80, "Craiova": 146, "Pitesti": 97},
    "Fagaras": {"Sibiu": 99, "Bucharest": 211},
    "Pitesti": {"Rimnicu Vilcea": 97, "Craiova": 138, "Bucharest": 101},
    "Bucharest": {"Fagaras": 211, "Pitesti": 101, "Giurgiu": 90, "Urziceni": 85},
    "Giurgiu": {"Bucharest": 90},
    "Urziceni": {"Bucharest": 85, "Vaslui": 142, "Hirsova": 98},
    "Hirsova": {"Urziceni": 98, "Eforie": 86},
    "Eforie": {"Hirsova": 86},
    "Vaslui": {"Urziceni": 142, "Iasi": 92},
    "Iasi": {"Vaslui": 92, "Neamt": 87},
    "Neamt": {"Iasi": 87},
}

# Straight-line distance to Bucharest (AIMA Fig. 3.16)
_SLD: Dict[str, int] = {
    "Arad": 366, "Zerind": 374, "Oradea": 380, "Sibiu": 253, "Timisoara": 329,
    "Lugoj": 244, "Mehadia": 241, "Drobeta": 242, "Craiova": 160, "Rimnicu Vilcea": 193,
    "Fagaras": 176, "Pitesti": 100, "Bucharest": 0, "Giurgiu": 77, "Urziceni": 80,
    "Hirsova": 151, "Eforie": 161, "Vaslui": 199, "Iasi": 226, "Neamt": 234,
}


@dataclass(frozen=True, eq=False)
class RoadMap:
    """Weighted road graph plus, optionally, straight-line distances to ``goal``.

    Without distances the heuristic is 0, which keeps it admissible for any goal.
    """
    graph: Mapping[str, Mapping[str, float]]
    goal: str
    sld: Mapping[str, float] = field(default_factory=dict)


@dataclass(frozen=True)
class RouteState:
    city: str
    roads: RoadMap = field(compare=False, repr=False)

    def successors(self) -> Iterator[Tuple[float, "RouteState"]]:
        for neighbour, dist in self.roads.graph.get(self.city, {}).items():
            yield float(dist), RouteState(neighbour, self.roads)

    def is_goal(self) -> bool:
        return self.city == self.roads.goal

    def heuristic(self) -> float:
        return float(self.roads.sld.get(self.city, 0))


def romania_problem(start: str = "Arad", goal: str = "Bucharest") -> RouteState:
    """
    Standard AIMA Romania route-finding problem; the SLD table only
    applies when heading for Bucharest.
    """
    if start not in _GRAPH or goal not in _GRAPH:
        raise ValueError(f"unknown city: {start if start not in _GRAPH else goal!r}")
    sld = _SLD if goal == "Bucharest" else {}
    return RouteState(start, RoadMap(graph=_GRAPH, goal=goal, sld=sld))
