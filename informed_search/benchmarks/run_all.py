# informed_search/benchmarks/run_all.py
from __future__ import annotations

import argparse
import json
import logging
import os
import time
from pathlib import Path
from typing import Callable, List, Optional, Tuple

from ..algorithms.astar import solve
from ..algorithms.ucs import uniform_cost_solve
from ..core.metrics import MeasuredRun, RunRecord, SearchStats, Solution
from ..problems.crucible import CRUCIBLE, SAMPLE_HEAT_GRID, ULTRA_CRUCIBLE, HeatGrid, crucible_starts
from ..problems.grid import make_grid_problem, random_grid
from ..problems.romania import romania_problem

# ---- Tunables (overridable via environment variables) -----------------------
GRID_SIZE = int(os.getenv("BENCH_GRID_SIZE", "60"))    # side of the random wall grid
HEAT_SIZE = int(os.getenv("BENCH_HEAT_SIZE", "40"))    # side of the random heat-loss grid
SEED      = int(os.getenv("BENCH_SEED", "7"))          # seed for both random grids
REPEATS   = int(os.getenv("BENCH_REPEATS", "1"))       # runs per (problem, algo); best time kept
LOG_LEVEL = os.getenv("BENCH_LOG_LEVEL", "WARNING")    # DEBUG shows one engine line per search

Solver = Callable[..., Optional[Solution]]

# ---- Helpers ----------------------------------------------------------------
def _fmt_time(x):
    try:
        return f"{float(x):.4f}"
    except (TypeError, ValueError):
        return "n/a"

def _load_problems(grid_size: int = GRID_SIZE, heat_size: int = HEAT_SIZE,
                   seed: int = SEED) -> List[Tuple[str, Callable[[], list]]]:
    """Each entry builds a fresh list of start states."""
    sample = HeatGrid.parse(SAMPLE_HEAT_GRID)
    heat = HeatGrid.random(heat_size, seed=seed)
    return [
        ("grid-5x7", lambda: [make_grid_problem()]),
        (f"grid-{grid_size}-random", lambda: [random_grid(grid_size, seed=seed)]),
        ("romania", lambda: [romania_problem()]),
        ("crucible-sample", lambda: crucible_starts(sample, CRUCIBLE)),
        ("ultra-crucible-sample", lambda: crucible_starts(sample, ULTRA_CRUCIBLE)),
        (f"crucible-{heat_size}-random", lambda: crucible_starts(heat, CRUCIBLE)),
    ]

def _load_algos() -> List[Tuple[str, Solver]]:
    return [("A*", solve), ("UCS", uniform_cost_solve)]

def run_one(problem_name: str, make_starts: Callable[[], list], algo_name: str, fn: Solver,
            repeats: int = REPEATS) -> RunRecord:
    best_time = None
    peak_kb = 0
    for _ in range(max(1, repeats)):
        stats = SearchStats()
        starts = make_starts()
        with MeasuredRun() as meter:
            solution = fn(starts, stats=stats)
        best_time = meter.elapsed if best_time is None else min(best_time, meter.elapsed)
        peak_kb = max(peak_kb, meter.peak_kb)
    return RunRecord(
        problem=problem_name,
        algo=algo_name,
        success=solution is not None,
        cost=None if solution is None else solution.cost,
        nodes_expanded=stats.expanded,
        time_s=best_time,
        peak_kb=peak_kb,
    )

def main(argv=None):
    ap = argparse.ArgumentParser(description="Benchmark A* against uniform-cost search on the sample problems.")
    ap.add_argument("--grid-size", type=int, default=GRID_SIZE, help="side of the random wall grid")
    ap.add_argument("--heat-size", type=int, default=HEAT_SIZE, help="side of the random heat-loss grid")
    ap.add_argument("--seed", type=int, default=SEED, help="seed for the random grids")
    ap.add_argument("--repeats", type=int, default=REPEATS, help="runs per (problem, algo); best time kept")
    ap.add_argument("--only", default=None, help="run only problems whose name contains this text")
    ap.add_argument("--out", default=str(Path(__file__).with_name("results.json")), help="where to save the JSON")
    ap.add_argument("--log-level", default=LOG_LEVEL, help="logging level, e.g. DEBUG")
    args = ap.parse_args(argv)

    logging.basicConfig(level=args.log_level.upper(), format="%(levelname)s %(name)s: %(message)s")

    rows = []
    for pname, make_starts in _load_problems(args.grid_size, args.heat_size, args.seed):
        if args.only and args.only not in pname:
            continue
        for name, fn in _load_algos():
            print(f"→ Running {name} on {pname} ...")
            try:
                r = run_one(pname, make_starts, name, fn, repeats=args.repeats)
                print(
                    f"  {r.algo}: "
                    f"{'OK' if r.success else 'NO PATH'} "
                    f"cost={r.cost} "
                    f"expanded={r.nodes_expanded}, "
                    f"time={_fmt_time(r.time_s)}s"
                )
            except Exception as e:
                print(f"  {name}: ERROR {repr(e)}")
                r = RunRecord(pname, name, False, None, None, None, None, error=repr(e))
            rows.append(r.to_dict())

    out = {"results": rows, "ts": time.time()}
    print(json.dumps(out, indent=2))

    out_path = Path(args.out)
    try:
        out_path.write_text(json.dumps(out, indent=2))
    except OSError as e:
        print(f"  Could not write {out_path}: {e!r}")
    return out

if __name__ == "__main__":
    main()
