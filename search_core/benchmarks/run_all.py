# search_core/benchmarks/run_all.py
from __future__ import annotations

import argparse
import json
import logging
import os
import time
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional, Tuple

from ..algorithms.rbfs import recursive_best_first_search
from ..algorithms.ucs import uniform_cost_search
from ..core.metrics import SearchResult
from ..problems.checks import sanity_check_problem
from ..problems.grid import make_grid_problem
from ..problems.romania import romania_problem

logger = logging.getLogger(__name__)

# ---- Tunables (overridable via environment variables) -----------------------
PROBLEM        = os.getenv("SEARCH_PROBLEM", "romania")
MAX_EXPANSIONS = int(os.getenv("SEARCH_MAX_EXPANSIONS", "0")) or None   # 0 = unbounded
LOG_LEVEL      = os.getenv("SEARCH_LOG_LEVEL", "WARNING")

PROBLEMS: Dict[str, Callable[[], Any]] = {
    "romania": romania_problem,
    "grid": make_grid_problem,
}

# ---- Helpers ----------------------------------------------------------------
def _fmt_time(x):
    try:
        return f"{float(x):.4f}"
    except (TypeError, ValueError):
        return "n/a"

def _load_problem(name: str):
    try:
        return PROBLEMS[name]()
    except KeyError:
        raise SystemExit(f"Unknown problem {name!r}; choose from {sorted(PROBLEMS)}")

def _load_algos(max_expansions: Optional[int]) -> List[Tuple[str, Callable[[Any], SearchResult]]]:
    return [
        ("UCS", lambda p: uniform_cost_search(p, max_expansions=max_expansions)),
        ("RBFS", lambda p: recursive_best_first_search(p, max_expansions=max_expansions)),
    ]

def run(problem, algos) -> List[Dict[str, Any]]:
    rows = []
    for name, fn in algos:
        print(f"→ Running {name} ...")
        try:
            r = fn(problem)
        except (RecursionError, ValueError) as e:
            # a broken problem or a blown stack is reported, the other algorithms still run
            logger.exception("%s failed", name)
            print(f"  {name}: ERROR {e!r}")
            rows.append({"algo": name, "success": False, "error": repr(e), "actions": [],
                         "nodes_expanded": None, "cost": None, "time_s": None, "peak_kb": None})
            continue
        print(
            f"  {r.algo}: "
            f"{'OK' if r.success else 'FAIL'} "
            f"cost={r.cost} "
            f"expanded={r.nodes_expanded}, "
            f"time={_fmt_time(r.time_s)}s"
        )
        rows.append(r.to_row())
    return rows

def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(description="Run uniform-cost search and RBFS on a sample problem.")
    ap.add_argument("--problem", default=PROBLEM, choices=sorted(PROBLEMS))
    ap.add_argument("--max-expansions", type=int, default=MAX_EXPANSIONS,
                    help="stop a search after this many expansions (default: unbounded)")
    ap.add_argument("--out", type=Path, default=Path(__file__).with_name("results.json"))
    ap.add_argument("--log-level", default=LOG_LEVEL)
    ap.add_argument("--no-check", action="store_true", help="skip the problem sanity check")
    return ap

def main(argv: Optional[List[str]] = None) -> Dict[str, Any]:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=args.log_level.upper(),
                        format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    problem = _load_problem(args.problem)
    if not args.no_check:
        print(sanity_check_problem(problem))

    rows = run(problem, _load_algos(args.max_expansions))
    out = {"problem": args.problem, "results": rows, "ts": time.time()}
    print(json.dumps(out, indent=2))

    try:
        args.out.write_text(json.dumps(out, indent=2))
    except OSError as e:
        logger.warning("could not write %s: %s", args.out, e)
    return out

if __name__ == "__main__":
    main()
