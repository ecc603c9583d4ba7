# space_search/benchmarks/run_all.py
from __future__ import annotations

import json
import os
import time
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional, Tuple

import numpy as np

from ..algorithms.astar import a_star_search
from ..algorithms.bfs import breadth_first_search
from ..algorithms.dfs import depth_first_search
from ..algorithms.greedy import greedy_best_first_search
from ..problems.grid import make_walled_grid
from ..problems.romania import romania_start

# ---- Tunables (overridable via environment variables) -----------------------
REPEATS        = int(os.getenv("BENCH_REPEATS", "5"))       # timing repeats per algorithm
GRID_SIZE      = int(os.getenv("GRID_SIZE", "10"))          # side of the walled grid
MAX_EXPANSIONS = int(os.getenv("MAX_EXPANSIONS", "100000")) or None  # 0 = no budget

RESULTS_JSON = Path(__file__).with_name("results.json")

# ---- Helpers ----------------------------------------------------------------
def _fmt_time(x):
    try:
        return f"{float(x):.4f}"
    except (TypeError, ValueError):
        return "n/a"

def _load_problems() -> List[Tuple[str, Any]]:
    grid = make_walled_grid(GRID_SIZE)
    return [
        ("romania", romania_start("Arad")),
        (f"grid{GRID_SIZE}", grid.at(0, 0)),
    ]

def _load_algos() -> List[Tuple[str, Callable[[Any], Any]]]:
    """
    Each entry takes a start state and returns a SearchResult.
    """
    budget = MAX_EXPANSIONS
    return [
        ("BFS", lambda s: breadth_first_search(s, max_expansions=budget)),
        ("DFS", lambda s: depth_first_search(s, max_expansions=budget)),
        ("Greedy", lambda s: greedy_best_first_search(s, max_expansions=budget)),
        ("A*", lambda s: a_star_search(s, max_expansions=budget)),
        ("A*(exact)", lambda s: a_star_search(s, hashable=False, max_expansions=budget)),
    ]

def run_one(name: str, fn: Callable[[Any], Any], start: Any, repeats: Optional[int] = None) -> Dict[str, Any]:
    repeats = REPEATS if repeats is None else repeats
    r = fn(start)
    times = [r.time_s]
    for _ in range(max(repeats - 1, 0)):
        times.append(fn(start).time_s)
    return {
        "algo": r.algo,
        "success": r.success,
        "cost": r.cost if r.success else None,
        "steps": len(r.route) - 1 if r.success else None,
        "nodes_expanded": r.nodes_expanded,
        "generated": r.generated,
        "time_s": float(np.median(times)),
        "time_std": float(np.std(times)),
        "peak_kb": r.peak_kb,
        "truncated": r.truncated,
        "error": r.error,
    }

def main(out_path: Optional[Path] = RESULTS_JSON) -> Dict[str, Any]:
    problems = _load_problems()
    algos = _load_algos()

    rows = []
    for problem_name, start in problems:
        print(f"== {problem_name}")
        for name, fn in algos:
            print(f"→ Running {name} ...")
            try:
                row = run_one(name, fn, start)
                print(
                    f"  {row['algo']}: "
                    f"{'OK' if row['success'] else 'FAIL'} "
                    f"cost={row['cost']} "
                    f"expanded={row['nodes_expanded']}, "
                    f"time={_fmt_time(row['time_s'])}s"
                )
            except Exception as e:
                print(f"  {name}: ERROR {repr(e)}")
                row = {
                    "algo": name,
                    "success": False,
                    "error": repr(e),
                    "nodes_expanded": None,
                    "generated": None,
                    "cost": None,
                    "time_s": None,
                    "peak_kb": None,
                }
            row["problem"] = problem_name
            rows.append(row)

    out = {"results": rows, "ts": time.time()}
    print(json.dumps(out, indent=2))

    if out_path is not None:
        try:
            Path(out_path).write_text(json.dumps(out, indent=2))
        except OSError as e:
            print(f"  Could not write {out_path}: {e!r}")
    return out

if __name__ == "__main__":
    main()
