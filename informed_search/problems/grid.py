# informed_search/problems/grid.py
from __future__ import annotations
import random
from dataclasses import dataclass, field
from typing import FrozenSet, Iterable, Iterator, Tuple

Coord = Tuple[int, int]

_MOVES = {
    "Up": (-1, 0),
    "Down": (1, 0),
    "Left": (0, -1),
    "Right": (0, 1),
}


@dataclass(frozen=True)
class Grid:
    rows: int
    cols: int
    goal: Coord
    walls: FrozenSet[Coord] = frozenset()

    def passable(self, pos: Coord) -> bool:
        r, c = pos
        return 0 <= r < self.rows and 0 <= c < self.cols and pos not in self.walls


@dataclass(frozen=True)
class GridState:
    """
    4-neighbor grid pathfinding with unit costs.

    - identity: (row, col); the grid rides along but is left out of eq/hash
    - successors: in-bounds, non-wall neighbours among Up/Down/Left/Right, cost 1.0
    - is_goal: pos == grid.goal
    - heuristic: Manhattan distance (admissible on a 4-neighbor grid)
    """
    pos: Coord
    grid: Grid = field(compare=False, repr=False)

    def successors(self) -> Iterator[Tuple[float, "GridState"]]:
        r, c = self.pos
        for dr, dc in _MOVES.values():
            nxt = (r + dr, c + dc)
            if self.grid.passable(nxt):
                yield 1.0, GridState(nxt, self.grid)

    def is_goal(self) -> bool:
        return self.pos == self.grid.goal

    def heuristic(self) -> float:
        r, c = self.pos
        gr, gc = self.grid.goal
        return float(abs(r - gr) + abs(c - gc))


def grid_starts(grid: Grid, starts: Iterable[Coord]) -> list:
    return [GridState(s, grid) for s in starts]


def random_grid(size: int, wall_p: float = 0.25, seed: int = 0) -> GridState:
    """Square grid with random walls; corners (0,0) and (size-1,size-1) are kept open."""
    rng = random.Random(seed)
    corners = {(0, 0), (size - 1, size - 1)}
    walls = frozenset(
        (r, c) for r in range(size) for c in range(size)
        if (r, c) not in corners and rng.random() < wall_p
    )
    return GridState((0, 0), Grid(size, size, goal=(size - 1, size - 1), walls=walls))


def make_grid_problem(rows: int = 5, cols: int = 7) -> GridState:
    # Example: a few walls forcing a detour around column 3
    walls = frozenset({(1, 3), (2, 3), (3, 3), (3, 4)})
    grid = Grid(rows=rows, cols=cols, goal=(rows - 1, cols - 1), walls=walls)
    return GridState((0, 0), grid)
