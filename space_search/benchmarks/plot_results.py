# space_search/benchmarks/plot_results.py
from __future__ import annotations
import io
import json
import math
from pathlib import Path

import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt

HERE = Path(__file__).parent
RESULTS_JSON = HERE / "results.json"
OUT_DIR = HERE

METRICS = [
    ("nodes_expanded", "Nodes Expanded (lower is better)", "nodes"),
    ("time_s", "Median Wall Time (lower is better)", "seconds"),
    ("cost", "Route Cost (lower is better)", "cost"),
]

def _load_rows(path: Path = RESULTS_JSON):
    if not path.exists():
        raise SystemExit(f"Missing {path}. Run: python -m space_search.benchmarks.run_all")
    data = json.loads(path.read_text())
    rows = data.get("results", [])
    # Keep only successful runs
    rows = [r for r in rows if r.get("success")]
    if not rows:
        raise SystemExit("No successful rows to plot.")
    return rows

def _sorted(rows, key):
    def key_fn(r):
        v = r.get(key)
        if v is None:
            return math.inf
        return v
    return sorted(rows, key=key_fn)

def _by_problem(rows):
    groups = {}
    for r in rows:
        groups.setdefault(r.get("problem", "all"), []).append(r)
    return groups

def _bar(ax, rows, metric, title, ylabel):
    algos = [r["algo"] for r in rows]
    vals = [r.get(metric) for r in rows]
    heights = [0 if v is None else v for v in vals]

    x = list(range(len(algos)))
    ax.bar(x, heights)
    ax.set_title(title)
    ax.set_ylabel(ylabel)
    ax.set_xticks(x)
    ax.set_xticklabels(algos, rotation=20, ha="right")

    top = max(heights) or 1
    for xi, v, y in zip(x, vals, heights):
        if v is None:
            label = "n/a"
        elif isinstance(v, float) and v < 0.01:
            label = f"{v:.4f}"
        elif isinstance(v, float):
            label = f"{v:.3f}"
        else:
            label = f"{v}"
        ax.text(xi, y + 0.01 * top, label, ha="center", va="bottom", fontsize=8)

def _fmt_table(rows):
    # Markdown table
    lines = [
        "| Problem | Algorithm | Cost | Steps | Nodes Expanded | Time (s) | Peak KB |",
        "|---|---|---:|---:|---:|---:|---:|",
    ]
    def fnum(x):
        if isinstance(x, float):
            return f"{x:.6f}"
        if isinstance(x, int):
            return f"{x}"
        return "n/a"
    for r in rows:
        lines.append(
            f"| {r.get('problem', '')} | {r['algo']} | {fnum(r.get('cost'))} | {fnum(r.get('steps'))} | "
            f"{fnum(r.get('nodes_expanded'))} | {fnum(r.get('time_s'))} | {fnum(r.get('peak_kb'))} |"
        )
    return "\n".join(lines)

def fig_to_png_bytes(fig):
    buf = io.BytesIO()
    fig.savefig(buf, format="png", dpi=160)
    return buf.getvalue()

def main(results_path: Path = RESULTS_JSON, out_dir: Path = OUT_DIR):
    rows = _load_rows(Path(results_path))
    out_dir = Path(out_dir)
    written = []

    md_path = out_dir / "results.md"
    md_path.write_text(_fmt_table(rows))
    print(f"Wrote {md_path}")
    written.append(md_path)

    # one figure per problem, one panel per metric (sorted for readability)
    for problem, group in _by_problem(rows).items():
        fig, axs = plt.subplots(1, len(METRICS), figsize=(6 * len(METRICS), 4))
        for ax, (metric, title, ylabel) in zip(axs, METRICS):
            _bar(ax, _sorted(group, metric), metric, title, ylabel)
        fig.suptitle(problem)
        fig.tight_layout()
        png = out_dir / f"{problem}.png"
        png.write_bytes(fig_to_png_bytes(fig))
        plt.close(fig)
        print(f"Wrote {png}")
        written.append(png)
    return written

if __name__ == "__main__":
    main()
