# state_search/core/node.py
# A WorkItem is a queued state plus whatever the search accumulates on the way to it
# (a distance, the full path, or just a back-pointer to the item it was reached from).
from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Callable, Optional, Tuple
from .problem import State


@dataclass(frozen=True, eq=False, repr=False)
class WorkItem:
    """Immutable once built; observers can read it but not rewrite the answer."""
    state: State
    data: Any = None
    depth: int = 0
    parent: Optional["WorkItem"] = None

    def __repr__(self) -> str:
        return f"WorkItem(state={self.state!r}, depth={self.depth}, data={self.data!r})"


ItemFactory = Callable[[State, Optional[WorkItem]], WorkItem]


def distance_item(state: State, parent: Optional[WorkItem] = None) -> WorkItem:
    """Payload is the number of edges from the start."""
    depth = 0 if parent is None else parent.depth + 1
    return WorkItem(state, depth, depth)


def path_item(state: State, parent: Optional[WorkItem] = None) -> WorkItem:
    """Payload is the tuple of states from the start (inclusive) to ``state``.
    Copies the parent's path, so memory is quadratic in the path length."""
    if parent is None:
        return WorkItem(state, (state,), 0)
    path: Tuple[State, ...] = parent.data + (state,)
    return WorkItem(state, path, parent.depth + 1)


def linked_item(state: State, parent: Optional[WorkItem] = None) -> WorkItem:
    """Payload is the distance; the path is kept as parent pointers (see utils.reconstruct_path)."""
    depth = 0 if parent is None else parent.depth + 1
    return WorkItem(state, depth, depth, parent)
