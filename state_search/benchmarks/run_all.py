# state_search/benchmarks/run_all.py
# Runs every search variant on the same height map and reports expansions, time and memory.
from __future__ import annotations

import argparse
import json
import os
import time
from pathlib import Path
from typing import Any, Callable, List, Optional, Tuple

from ..algorithms.best_first import best_first_search
from ..config import optional_int
from ..core.metrics import SearchResult
from ..core.node import distance_item, linked_item, path_item
from ..inputs import read_lines
from ..problems import samples
from ..problems.heightmap import HeightMap, can_climb

# ---- Tunables (overridable via environment variables) -----------------------
MAX_EXPANSIONS = os.getenv("BENCH_MAX_EXPANSIONS", "")   # empty = unlimited


def _fmt_time(x):
    try:
        return f"{float(x):.4f}"
    except (TypeError, ValueError):
        return "n/a"


def _load_problem(path: Path | None) -> HeightMap:
    if path is None:
        return HeightMap.parse(samples.HEIGHTMAP.splitlines())
    return HeightMap.parse(read_lines(path))


def _load_algos(hm: HeightMap, cap: Optional[int] = None) -> List[Tuple[str, Callable[[], SearchResult]]]:
    goal = lambda p: p == hm.end
    algos: List[Tuple[str, Callable[[], SearchResult]]] = []

    for label, factory in (("BFS distance", distance_item), ("BFS path", path_item), ("BFS linked", linked_item)):
        algos.append((label, lambda factory=factory: hm.search(
            hm.start, goal, can_climb, make_item=factory, max_expansions=cap, measure=True)))

    algos.append(("Best-first (depth + Manhattan)", lambda: best_first_search(
        hm.start,
        lambda pos, visited: hm.neighbours(pos, can_climb, visited),
        goal,
        key=lambda item: item.depth + item.state.manhattan(hm.end),
        max_expansions=cap,
        measure=True,
    )))
    return algos


def run(hm: HeightMap, cap: Optional[int] = None) -> List[dict[str, Any]]:
    rows = []
    for name, fn in _load_algos(hm, cap):
        print(f"→ Running {name} ...")
        r = fn()
        print(
            f"  {name}: "
            f"{'OK' if r.success else 'FAIL'} "
            f"distance={r.item.depth if r.item is not None else None} "
            f"expanded={r.nodes_expanded}, "
            f"time={_fmt_time(r.time_s)}s"
        )
        row = r.as_row()
        row["algo"] = name
        rows.append(row)
    return rows


def main(argv=None):
    p = argparse.ArgumentParser(description="Compare search variants on a height map.")
    p.add_argument("--input", type=Path, help="height map file (default: the worked example)")
    args = p.parse_args(argv)
    try:
        cap = optional_int(MAX_EXPANSIONS, "BENCH_MAX_EXPANSIONS")
    except ValueError as e:
        p.error(str(e))

    rows = run(_load_problem(args.input), cap)
    out = {"results": rows, "ts": time.time()}
    print(json.dumps(out, indent=2))

    # Save JSON next to this script
    out_path = Path(__file__).with_name("results.json")
    try:
        out_path.write_text(json.dumps(out, indent=2))
    except OSError:
        pass
    return out


if __name__ == "__main__":
    main()
