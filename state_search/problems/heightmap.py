# state_search/problems/heightmap.py
# Hill-climbing on a map of letter heights: 'a' is lowest, 'z' highest, 'S' is the
# start (height a) and 'E' the best-signal end (height z).
from __future__ import annotations
import logging
from typing import Iterable, List, Optional, Tuple

import numpy as np

from ..algorithms.bfs import breadth_first_search, raise_for_result
from ..core.errors import InputError
from ..core.metrics import SearchResult
from ..core.node import ItemFactory, distance_item
from ..core.problem import AdmissibilityPredicate, ProgressObserver, TerminationPredicate
from .grid import Pos, grid_neighbours

logger = logging.getLogger(__name__)

LOWEST = 0
HIGHEST = 25


def can_climb(current: int, candidate: int) -> bool:
    """At most one step up; any drop is fine."""
    return candidate <= current + 1


def can_descend(current: int, candidate: int) -> bool:
    """The same rule walked backwards: at most one step down."""
    return candidate >= current - 1


class HeightMap:
    def __init__(self, heights: np.ndarray, start: Pos, end: Pos):
        self.heights = heights
        self.start = start
        self.end = end

    @classmethod
    def parse(cls, lines: Iterable[str]) -> "HeightMap":
        rows: List[List[int]] = []
        start: Optional[Pos] = None
        end: Optional[Pos] = None

        text = [line.rstrip("\r\n") for line in lines]
        while text and not text[-1]:
            text.pop()
        if not text:
            raise InputError("height map is empty")

        width = len(text[0])
        for y, line in enumerate(text):
            if len(line) != width:
                raise InputError(f"row {y + 1} has {len(line)} cells, expected {width}")
            row = []
            for x, c in enumerate(line):
                if c == "S":
                    if start is not None:
                        raise InputError(f"second start marker at row {y + 1}, column {x + 1}")
                    start = Pos(x, y)
                    row.append(LOWEST)
                elif c == "E":
                    if end is not None:
                        raise InputError(f"second end marker at row {y + 1}, column {x + 1}")
                    end = Pos(x, y)
                    row.append(HIGHEST)
                elif "a" <= c <= "z":
                    row.append(ord(c) - ord("a"))
                else:
                    raise InputError(f"unexpected character {c!r} at row {y + 1}, column {x + 1}")
            rows.append(row)

        if start is None:
            raise InputError("no start position (S) in height map")
        if end is None:
            raise InputError("no end position (E) in height map")

        logger.debug("parsed %dx%d height map, start=%r end=%r", width, len(rows), start, end)
        return cls(np.array(rows, dtype=np.uint8), start, end)

    @property
    def width(self) -> int:
        return self.heights.shape[1]

    @property
    def height(self) -> int:
        return self.heights.shape[0]

    def height_at(self, pos: Pos) -> int:
        # plain int so predicates can do arithmetic without uint8 wrap-around
        return int(self.heights[pos.y, pos.x])

    def neighbours(self, pos: Pos, admit: AdmissibilityPredicate, visited=()) -> List[Pos]:
        """Unvisited grid neighbours (left, right, up, down) the predicate lets us step onto."""
        here = self.height_at(pos)
        return [
            n for n in grid_neighbours(pos, self.width, self.height)
            if admit(here, self.height_at(n)) and n not in visited
        ]

    def search(
        self,
        start: Pos,
        terminate: TerminationPredicate,
        admit: AdmissibilityPredicate,
        make_item: ItemFactory = distance_item,
        observer: Optional[ProgressObserver] = None,
        max_expansions: Optional[int] = None,
        measure: bool = False,
    ) -> SearchResult:
        return breadth_first_search(
            start,
            lambda pos, visited: self.neighbours(pos, admit, visited),
            terminate,
            make_item=make_item,
            observer=observer,
            max_expansions=max_expansions,
            measure=measure,
        )

    def shortest_path(self, start: Pos, terminate: TerminationPredicate, admit: AdmissibilityPredicate, **kwargs):
        """Distance (or path, with a path-building ``make_item``) to the nearest cell
        satisfying ``terminate``. Raises NotFound when there is none."""
        return raise_for_result(self.search(start, terminate, admit, **kwargs))

    def climb(self, **kwargs):
        """Fewest steps from S to E going up at most one level per step."""
        return self.shortest_path(self.start, lambda p: p == self.end, can_climb, **kwargs)

    def descend(self, **kwargs):
        """Fewest steps from any lowest cell to E, found by walking down from E."""
        return self.shortest_path(self.end, lambda p: self.height_at(p) == LOWEST, can_descend, **kwargs)

    def solve(self, max_expansions: Optional[int] = None) -> Tuple[int, int]:
        return self.climb(max_expansions=max_expansions), self.descend(max_expansions=max_expansions)
