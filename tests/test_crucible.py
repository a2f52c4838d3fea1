import random

import pytest

from informed_search.problems.crucible import (
    CRUCIBLE,
    SAMPLE_HEAT_GRID,
    ULTRA_CRUCIBLE,
    Crucible,
    CrucibleState,
    Direction,
    HeatGrid,
    crucible_starts,
    find_min_heat_loss,
    solve_heat_loss,
)
from informed_search import uniform_cost_solve

UNFORTUNATE = """\
111111111111
999999999991
999999999991
999999999991
999999999991
"""


@pytest.fixture
def sample():
    return HeatGrid.parse(SAMPLE_HEAT_GRID)


def test_sample_answers():
    assert solve_heat_loss(SAMPLE_HEAT_GRID) == (102, 94)


def test_ultra_crucible_cannot_stop_early():
    assert find_min_heat_loss(HeatGrid.parse(UNFORTUNATE), ULTRA_CRUCIBLE) == 71


def test_parse_dimensions(sample):
    assert (sample.width, sample.height) == (13, 13)
    assert sample.target == (12, 12)
    assert sample.heat_loss[(0, 0)] == 2
    assert sample.heat_loss[(12, 12)] == 3


def test_parse_rejects_non_digits():
    with pytest.raises(ValueError, match="Invalid digit 'x'"):
        HeatGrid.parse("12\n3x\n")


def test_parse_rejects_empty():
    with pytest.raises(ValueError):
        HeatGrid.parse("\n\n")


def test_turns():
    assert Direction.EAST.turn_left() is Direction.NORTH
    assert Direction.EAST.turn_right() is Direction.SOUTH
    assert Direction.NORTH.turn_left() is Direction.WEST
    assert Direction.WEST.turn_right() is Direction.NORTH


def test_crucible_rules():
    c = Crucible(min_run=4, max_run=10)
    assert not c.can_turn(3) and c.can_turn(4)
    assert not c.must_turn(9) and c.must_turn(10)
    assert not c.can_stop(3) and c.can_stop(4)


def test_successors_respect_max_run(sample):
    state = CrucibleState((5, 5), Direction.EAST, 3, sample, CRUCIBLE)
    dirs = sorted(s.direction.name for _, s in state.successors())
    assert dirs == ["NORTH", "SOUTH"]


def test_successors_respect_min_run(sample):
    state = CrucibleState((5, 5), Direction.EAST, 2, sample, ULTRA_CRUCIBLE)
    [(cost, nxt)] = state.successors()
    assert nxt.position == (6, 5) and nxt.run == 3
    assert cost == sample.heat_loss[(6, 5)]


def test_successors_drop_off_grid_steps(sample):
    state = CrucibleState((0, 0), Direction.EAST, 0, sample, CRUCIBLE)
    positions = sorted(s.position for _, s in state.successors())
    assert positions == [(0, 1), (1, 0)]


def test_state_identity_ignores_context(sample):
    other = HeatGrid.parse("11\n11\n")
    a = CrucibleState((1, 1), Direction.SOUTH, 2, sample, CRUCIBLE)
    b = CrucibleState((1, 1), Direction.SOUTH, 2, other, ULTRA_CRUCIBLE)
    assert a == b and hash(a) == hash(b)
    assert a != CrucibleState((1, 1), Direction.SOUTH, 1, sample, CRUCIBLE)


def test_two_starts(sample):
    starts = crucible_starts(sample, CRUCIBLE)
    assert {s.direction for s in starts} == {Direction.EAST, Direction.SOUTH}
    assert all(s.position == (0, 0) and s.run == 0 for s in starts)


def test_single_cell_grid():
    grid = HeatGrid.parse("5")
    assert find_min_heat_loss(grid, CRUCIBLE) == 0
    assert find_min_heat_loss(grid, ULTRA_CRUCIBLE) is None


ZERO_HEAVY = """\
000100
900000
000000
000000
900011
000000
"""


def _zero_heavy_grid(seed, size=6):
    rng = random.Random(seed)
    return HeatGrid({(x, y): rng.choice([0, 0, 0, 1, 9]) for y in range(size) for x in range(size)}, size, size)


def test_min_loss_tracks_cheapest_cell(sample):
    assert sample.min_loss == 1
    assert HeatGrid.parse(ZERO_HEAVY).min_loss == 0


def test_zero_loss_cells_keep_heuristic_admissible():
    grid = HeatGrid.parse(ZERO_HEAVY)
    assert crucible_starts(grid, CRUCIBLE)[0].heuristic() == 0.0
    assert find_min_heat_loss(grid, CRUCIBLE) == 0


@pytest.mark.parametrize("seed", range(40))
@pytest.mark.parametrize("crucible", [CRUCIBLE, ULTRA_CRUCIBLE])
def test_astar_matches_uniform_cost_on_zero_heavy_grids(seed, crucible):
    grid = _zero_heavy_grid(seed)
    u = uniform_cost_solve(crucible_starts(grid, crucible))
    assert find_min_heat_loss(grid, crucible) == (None if u is None else int(u.cost))
