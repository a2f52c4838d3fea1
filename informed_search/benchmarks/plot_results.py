# informed_search/benchmarks/plot_results.py
from __future__ import annotations
import argparse
import json
from collections import defaultdict
from pathlib import Path

from ..plots.plotting import bar_compare
import matplotlib.pyplot as plt

HERE = Path(__file__).parent
RESULTS_JSON = HERE / "results.json"
OUT_DIR = HERE

def load_rows(path: Path = RESULTS_JSON):
    if not path.exists():
        raise SystemExit(f"Missing {path}. Run: python -m informed_search.benchmarks.run_all")
    data = json.loads(path.read_text())
    # Keep only successful runs
    rows = [r for r in data.get("results", []) if r.get("success")]
    if not rows:
        raise SystemExit("No successful rows to plot.")
    return rows

def fmt_table(rows):
    # Markdown table
    lines = [
        "| Problem | Algorithm | Cost | Nodes Expanded | Time (s) | Peak KB |",
        "|---|---|---:|---:|---:|---:|",
    ]
    def fnum(x):
        if isinstance(x, (int, float)):
            return f"{x:.6f}" if isinstance(x, float) else f"{x}"
        return "n/a"
    for r in rows:
        lines.append(
            f"| {r['problem']} | {r['algo']} | {fnum(r.get('cost'))} | {fnum(r.get('nodes_expanded'))} | "
            f"{fnum(r.get('time_s'))} | {fnum(r.get('peak_kb'))} |"
        )
    return "\n".join(lines)

def main(argv=None):
    ap = argparse.ArgumentParser(description="Render benchmark results as a markdown table and bar charts.")
    ap.add_argument("--results", default=str(RESULTS_JSON), help="JSON written by run_all")
    ap.add_argument("--out-dir", default=str(OUT_DIR), help="folder for results.md and the PNGs")
    args = ap.parse_args(argv)
    plt.switch_backend("Agg")  # writes PNGs only

    rows = load_rows(Path(args.results))
    out_dir = Path(args.out_dir)

    md_path = out_dir / "results.md"
    md_path.write_text(fmt_table(rows))
    print(f"Wrote {md_path}")

    by_problem = defaultdict(list)
    for r in rows:
        by_problem[r["problem"]].append(r)

    for problem, group in by_problem.items():
        fig = bar_compare(group, title=problem)
        png = out_dir / f"{problem}.png"
        fig.savefig(png, dpi=160)
        plt.close(fig)
        print(f"Wrote {png}")

if __name__ == "__main__":
    main()
