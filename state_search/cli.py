# state_search/cli.py
# `python -m state_search day12` -> reads inputs/day12.txt, prints both answers.
from __future__ import annotations
import argparse
import logging
import sys
from dataclasses import replace
from pathlib import Path
from typing import List, Optional

from .algorithms.bfs import raise_for_result
from .config import LOG_LEVELS, Settings
from .core.errors import SearchError
from .core.node import linked_item
from .core.observers import SearchRecorder
from .core.utils import reconstruct_path
from .inputs import load_day
from .problems.basin import Basin
from .problems.heightmap import HeightMap, can_climb

logger = logging.getLogger(__name__)

PUZZLES = {
    "day12": (12, HeightMap),
    "day24": (24, Basin),
}


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="state_search", description="Solve a search puzzle and print both parts.")
    p.add_argument("day", choices=sorted(PUZZLES))
    p.add_argument("--input", type=Path, help="input file (default: <input-dir>/dayNN.txt)")
    p.add_argument("--input-dir", type=Path, help="directory holding dayNN.txt files")
    p.add_argument("--max-expansions", type=int, help="give up after this many expansions per search")
    p.add_argument("--plot", type=Path, help="write a PNG of the part 1 search (day12 only)")
    p.add_argument("--log-level", choices=LOG_LEVELS)
    return p


def plot_climb(heightmap: HeightMap, out: Path) -> Path:
    import matplotlib
    matplotlib.use("Agg")
    from .plots.plotting import plot_search, save_figure

    recorder = SearchRecorder(every_layer=True)
    result = heightmap.search(heightmap.start, lambda p: p == heightmap.end, can_climb,
                              make_item=linked_item, observer=recorder)
    raise_for_result(result)
    path = reconstruct_path(result.item)
    fig = plot_search(heightmap, recorder.last, path, title=f"Part 1: {len(path) - 1} steps")
    return save_figure(fig, out)


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.plot is not None and args.day != "day12":
        parser.error("--plot is only available for day12")
    if args.max_expansions is not None and args.max_expansions < 0:
        parser.error("--max-expansions must not be negative")

    try:
        settings = Settings.from_env()
    except ValueError as e:
        print(f"error: {e}", file=sys.stderr)
        return 2

    overrides = {}
    if args.input_dir is not None:
        overrides["input_dir"] = args.input_dir
    if args.max_expansions is not None:
        overrides["max_expansions"] = args.max_expansions
    if args.log_level is not None:
        overrides["log_level"] = args.log_level
    settings = replace(settings, **overrides)

    logging.basicConfig(level=settings.log_level, format="%(levelname)s %(name)s: %(message)s")

    day, puzzle_type = PUZZLES[args.day]
    try:
        puzzle = puzzle_type.parse(load_day(day, args.input, settings.input_dir))
        part1, part2 = puzzle.solve(settings.max_expansions)
        print(f"Part 1: {part1}")
        print(f"Part 2: {part2}")
        if args.plot is not None:
            written = plot_climb(puzzle, args.plot)
            logger.info("wrote %s", written)
    except (SearchError, OSError) as e:
        print(f"error: {e}", file=sys.stderr)
        return 1
    return 0
