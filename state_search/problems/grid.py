# state_search/problems/grid.py
from __future__ import annotations
from dataclasses import dataclass
from typing import Iterator

from ..core.errors import InvalidState


@dataclass(frozen=True, order=True)
class Pos:
    """A cell on a grid; x is the column, y the row (0 is the top)."""
    x: int
    y: int

    def __post_init__(self):
        if self.x < 0 or self.y < 0:
            raise InvalidState(f"negative coordinate ({self.x}, {self.y})")

    def manhattan(self, other: "Pos") -> int:
        return abs(self.x - other.x) + abs(self.y - other.y)


def grid_neighbours(pos: Pos, width: int, height: int) -> Iterator[Pos]:
    """
    4-neighbours of ``pos`` inside a width x height grid, always in the order
    left, right, up, down. Cells off the edge are skipped, not reported.
    """
    if pos.x > 0:
        yield Pos(pos.x - 1, pos.y)
    if pos.x < width - 1:
        yield Pos(pos.x + 1, pos.y)
    if pos.y > 0:
        yield Pos(pos.x, pos.y - 1)
    if pos.y < height - 1:
        yield Pos(pos.x, pos.y + 1)
