# informed_search/problems/crucible.py
# Heat-loss grid traversal: a crucible must keep going straight for a minimum run
# before it may turn or stop, and must turn after a maximum run.
from __future__ import annotations
import random
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional, Tuple

from ..algorithms.astar import solve

Position = Tuple[int, int]  # (x, y), x grows east, y grows south


class Direction(Enum):
    NORTH = (0, -1)
    EAST = (1, 0)
    SOUTH = (0, 1)
    WEST = (-1, 0)

    def turn_left(self) -> "Direction":
        return _CLOCKWISE[(_CLOCKWISE.index(self) - 1) % 4]

    def turn_right(self) -> "Direction":
        return _CLOCKWISE[(_CLOCKWISE.index(self) + 1) % 4]


_CLOCKWISE: List[Direction] = [Direction.NORTH, Direction.EAST, Direction.SOUTH, Direction.WEST]


@dataclass(frozen=True)
class Crucible:
    min_run: int
    max_run: int

    def can_turn(self, run: int) -> bool:
        return run >= self.min_run

    def must_turn(self, run: int) -> bool:
        return run >= self.max_run

    def can_stop(self, run: int) -> bool:
        return run >= self.min_run


CRUCIBLE = Crucible(min_run=0, max_run=3)
ULTRA_CRUCIBLE = Crucible(min_run=4, max_run=10)

SAMPLE_HEAT_GRID = """\
2413432311323
3215453535623
3255245654254
3446585845452
4546657867536
1438598798454
4457876987766
3637877979653
4654967986887
4564679986453
1224686865563
2546548887735
4322674655533
"""


@dataclass(frozen=True, eq=False)
class HeatGrid:
    heat_loss: Dict[Position, int]
    width: int
    height: int
    min_loss: int = field(init=False)

    def __post_init__(self) -> None:
        # cheapest single step: min_loss * manhattan never exceeds the remaining loss
        object.__setattr__(self, "min_loss", min(self.heat_loss.values(), default=0))

    @classmethod
    def parse(cls, text: str) -> "HeatGrid":
        heat_loss: Dict[Position, int] = {}
        lines = [line.strip() for line in text.strip().splitlines() if line.strip()]
        for y, line in enumerate(lines):
            for x, ch in enumerate(line):
                if ch not in "0123456789":
                    raise ValueError(f"Invalid digit {ch!r} at line {y + 1}, column {x + 1}")
                heat_loss[(x, y)] = int(ch)
        if not heat_loss:
            raise ValueError("empty heat-loss grid")
        width = max(x for x, _ in heat_loss) + 1
        height = max(y for _, y in heat_loss) + 1
        return cls(heat_loss, width, height)

    @classmethod
    def random(cls, size: int, seed: int = 0) -> "HeatGrid":
        rng = random.Random(seed)
        heat_loss = {(x, y): rng.randint(1, 9) for y in range(size) for x in range(size)}
        return cls(heat_loss, size, size)

    @property
    def target(self) -> Position:
        return (self.width - 1, self.height - 1)


@dataclass(frozen=True)
class CrucibleState:
    """Identity is (position, direction, run); grid and crucible are context."""
    position: Position
    direction: Direction
    run: int
    grid: HeatGrid = field(compare=False, repr=False)
    crucible: Crucible = field(compare=False, repr=False)

    def step(self, direction: Direction) -> "CrucibleState":
        x, y = self.position
        dx, dy = direction.value
        run = self.run + 1 if direction == self.direction else 1
        return CrucibleState((x + dx, y + dy), direction, run, self.grid, self.crucible)

    def successors(self) -> List[Tuple[float, "CrucibleState"]]:
        moves = []
        if not self.crucible.must_turn(self.run):
            moves.append(self.step(self.direction))
        if self.crucible.can_turn(self.run):
            moves.append(self.step(self.direction.turn_left()))
            moves.append(self.step(self.direction.turn_right()))
        # steps off the grid have no heat-loss entry and are dropped
        return [
            (self.grid.heat_loss[s.position], s)
            for s in moves
            if s.position in self.grid.heat_loss
        ]

    def heuristic(self) -> float:
        x, y = self.position
        tx, ty = self.grid.target
        return float(self.grid.min_loss * (abs(tx - x) + abs(ty - y)))

    def is_goal(self) -> bool:
        return self.position == self.grid.target and self.crucible.can_stop(self.run)


def crucible_starts(grid: HeatGrid, crucible: Crucible) -> List[CrucibleState]:
    """Top-left corner, heading either east or south, nothing travelled yet."""
    return [
        CrucibleState((0, 0), direction, 0, grid, crucible)
        for direction in (Direction.EAST, Direction.SOUTH)
    ]


def find_min_heat_loss(grid: HeatGrid, crucible: Crucible) -> Optional[int]:
    solution = solve(crucible_starts(grid, crucible))
    if solution is None:
        return None
    return int(solution.cost)


def solve_heat_loss(text: str) -> Tuple[Optional[int], Optional[int]]:
    """Minimum heat loss for the standard and the ultra crucible."""
    grid = HeatGrid.parse(text)
    return find_min_heat_loss(grid, CRUCIBLE), find_min_heat_loss(grid, ULTRA_CRUCIBLE)
