import pytest

from informed_search import SearchStats, solve, uniform_cost_solve
from informed_search.problems.grid import Grid, GridState, grid_starts, make_grid_problem, random_grid


def _grid3(walls=()):
    return Grid(rows=3, cols=3, goal=(2, 2), walls=frozenset(walls))


def test_open_3x3_corner_to_corner_costs_4():
    sol = solve([GridState((0, 0), _grid3())])
    assert sol.cost == 4
    assert sol.final_state.pos == (2, 2)
    assert len(sol.path) == 5


def test_one_goal_neighbour_blocked_still_costs_4():
    sol = solve([GridState((0, 0), _grid3(walls={(1, 2), (1, 1)}))])
    assert sol.cost == 4
    assert [s.pos for s in sol.path] == [(0, 0), (1, 0), (2, 0), (2, 1), (2, 2)]


def test_both_goal_neighbours_blocked_is_unreachable():
    assert solve([GridState((0, 0), _grid3(walls={(1, 2), (2, 1)}))]) is None


def test_states_equal_by_position_only():
    g1, g2 = _grid3(), _grid3(walls={(1, 1)})
    assert GridState((0, 1), g1) == GridState((0, 1), g2)
    assert hash(GridState((0, 1), g1)) == hash(GridState((0, 1), g2))


def test_successors_stay_in_bounds_and_off_walls():
    state = GridState((0, 0), _grid3(walls={(0, 1)}))
    assert [(c, s.pos) for c, s in state.successors()] == [(1.0, (1, 0))]


def test_manhattan_heuristic():
    assert GridState((0, 0), _grid3()).heuristic() == 4.0
    assert GridState((2, 2), _grid3()).heuristic() == 0.0


def test_path_moves_are_unit_steps():
    sol = solve([make_grid_problem()])
    for a, b in zip(sol.path, sol.path[1:]):
        assert abs(a.pos[0] - b.pos[0]) + abs(a.pos[1] - b.pos[1]) == 1
        assert b.pos not in a.grid.walls
    assert sol.cost == len(sol.path) - 1


@pytest.mark.parametrize("seed", range(10))
def test_heuristic_only_changes_exploration_order(seed):
    start = random_grid(25, wall_p=0.3, seed=seed)
    a_stats, u_stats = SearchStats(), SearchStats()
    a = solve([start], stats=a_stats)
    u = uniform_cost_solve([start], stats=u_stats)
    assert (a is None) == (u is None)
    if a is not None:
        assert a.cost == u.cost
        assert a_stats.expanded <= u_stats.expanded


@pytest.mark.parametrize("seed", range(5))
def test_grid_multi_start_equivalence(seed):
    start = random_grid(20, wall_p=0.2, seed=seed)
    grid = start.grid
    cells = [(0, 0), (0, 19), (19, 0)]
    cells = [c for c in cells if grid.passable(c)]
    singles = [solve([GridState(c, grid)]) for c in cells]
    costs = [s.cost for s in singles if s is not None]
    both = solve(grid_starts(grid, cells))
    assert (both is None) == (not costs)
    if costs:
        assert both.cost == min(costs)
