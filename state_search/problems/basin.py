# state_search/problems/basin.py
# Crossing a valley full of blizzards. Each blizzard moves one cell per minute in
# its direction and wraps around inside the walls, so the whole valley repeats
# every lcm(inner width, inner height) minutes. A search state is a position plus
# the minute modulo that period, which keeps the state space finite.
from __future__ import annotations
import logging
import math
from dataclasses import dataclass
from typing import Iterable, List, Optional, Tuple

import numpy as np

from ..algorithms.bfs import breadth_first_search, raise_for_result
from ..core.errors import InputError
from ..core.metrics import SearchResult
from ..core.node import ItemFactory, distance_item
from ..core.problem import ProgressObserver
from .grid import Pos

logger = logging.getLogger(__name__)

WALL = "#"
FLOOR = "."
WINDS = {">": (1, 0), "v": (0, 1), "<": (-1, 0), "^": (0, -1)}

# right, down, left, up, then stay put
_MOVES = ((1, 0), (0, 1), (-1, 0), (0, -1), (0, 0))


@dataclass(frozen=True, order=True)
class BasinState:
    pos: Pos
    phase: int


@dataclass(frozen=True)
class Blizzard:
    pos: Pos
    wind: str


class Basin:
    """
    Valley of ``width`` x ``height`` open cells surrounded by walls. Coordinates
    include the walls, so open cells run from 1..width and 1..height; the entry sits
    in the top wall (y=0) and the exit in the bottom wall (y=height+1).
    """

    def __init__(self, width: int, height: int, blizzards: Iterable[Blizzard], entry: Pos, exit: Pos):
        self.width = width
        self.height = height
        self.blizzards = list(blizzards)
        self.entry = entry
        self.exit = exit
        self.period = math.lcm(width, height)
        self.occupied = self._occupancy()

    @classmethod
    def parse(cls, lines: Iterable[str]) -> "Basin":
        text = [line.rstrip("\r\n") for line in lines]
        while text and not text[-1]:
            text.pop()
        if len(text) < 3:
            raise InputError("basin needs at least three rows")

        cols = len(text[0])
        if cols < 3:
            raise InputError("basin needs at least three columns")
        for y, line in enumerate(text):
            if len(line) != cols:
                raise InputError(f"row {y + 1} has {len(line)} cells, expected {cols}")

        entry = cls._gap(text[0], 0)
        exit = cls._gap(text[-1], len(text) - 1)

        blizzards = []
        for y, line in enumerate(text[1:-1], start=1):
            if line[0] != WALL or line[-1] != WALL:
                raise InputError(f"row {y + 1} is not closed by walls")
            for x, c in enumerate(line[1:-1], start=1):
                if c in WINDS:
                    blizzards.append(Blizzard(Pos(x, y), c))
                elif c != FLOOR:
                    raise InputError(f"unexpected character {c!r} at row {y + 1}, column {x + 1}")

        logger.debug("parsed %dx%d basin with %d blizzards", cols - 2, len(text) - 2, len(blizzards))
        return cls(cols - 2, len(text) - 2, blizzards, entry, exit)

    @staticmethod
    def _gap(line: str, y: int) -> Pos:
        gaps = [x for x, c in enumerate(line) if c != WALL]
        if len(gaps) != 1 or line[gaps[0]] != FLOOR:
            raise InputError(f"row {y + 1} must be wall with exactly one open cell")
        return Pos(gaps[0], y)

    def _occupancy(self) -> np.ndarray:
        """occupied[phase, y, x] is True when some blizzard covers (x, y) at that phase."""
        occupied = np.zeros((self.period, self.height + 2, self.width + 2), dtype=bool)
        minutes = np.arange(self.period)
        for b in self.blizzards:
            dx, dy = WINDS[b.wind]
            xs = 1 + (b.pos.x - 1 + dx * minutes) % self.width
            ys = 1 + (b.pos.y - 1 + dy * minutes) % self.height
            occupied[minutes, ys, xs] = True
        return occupied

    def is_open(self, x: int, y: int) -> bool:
        if 1 <= x <= self.width and 1 <= y <= self.height:
            return True
        return (x, y) in ((self.entry.x, self.entry.y), (self.exit.x, self.exit.y))

    def neighbours(self, state: BasinState, visited=()) -> List[BasinState]:
        """Where we can be one minute later: a free neighbouring cell, or the same cell."""
        phase = (state.phase + 1) % self.period
        out = []
        for dx, dy in _MOVES:
            x, y = state.pos.x + dx, state.pos.y + dy
            if not self.is_open(x, y) or self.occupied[phase, y, x]:
                continue
            nxt = BasinState(Pos(x, y), phase)
            if nxt not in visited:
                out.append(nxt)
        return out

    def search(
        self,
        minute: int,
        origin: Pos,
        target: Pos,
        make_item: ItemFactory = distance_item,
        observer: Optional[ProgressObserver] = None,
        max_expansions: Optional[int] = None,
        measure: bool = False,
    ) -> SearchResult:
        return breadth_first_search(
            BasinState(origin, minute % self.period),
            self.neighbours,
            lambda s: s.pos == target,
            make_item=make_item,
            observer=observer,
            max_expansions=max_expansions,
            measure=measure,
        )

    def crossing(self, minute: int, origin: Pos, target: Pos, max_expansions: Optional[int] = None) -> int:
        """Minute of arrival at ``target`` when leaving ``origin`` at ``minute``."""
        steps = raise_for_result(self.search(minute, origin, target, max_expansions=max_expansions))
        logger.debug("crossed %r -> %r in %d minutes", origin, target, steps)
        return minute + steps

    def solve(self, max_expansions: Optional[int] = None) -> Tuple[int, int]:
        there = self.crossing(0, self.entry, self.exit, max_expansions)
        back = self.crossing(there, self.exit, self.entry, max_expansions)
        again = self.crossing(back, self.entry, self.exit, max_expansions)
        return there, again
