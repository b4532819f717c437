# state_search/core/observers.py
# Progress observers: the hook the search drivers call once per dequeued WorkItem.
# They only look; the frontier and visited set are handed over as read-only views.
from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, FrozenSet, List, Optional, Tuple

from .frontiers import ReadOnlyView
from .node import WorkItem
from .problem import State, TerminationPredicate


class SearchProgress:
    """What an observer gets to see for one dequeue.

    Assigning ``result`` (or calling ``set_result``) fills the early-result slot; a driver that is told to stop
    (observer returned ``False``) returns that result instead of failing.
    """
    def __init__(self, item: WorkItem, frontier: ReadOnlyView, visited: ReadOnlyView, expanded: int):
        self.item = item
        self.frontier = frontier
        self.visited = visited
        self.expanded = expanded
        self._result: Any = None
        self.has_result = False

    @property
    def result(self) -> Any:
        return self._result

    @result.setter
    def result(self, value: Any) -> None:
        self._result = value
        self.has_result = True

    def set_result(self, value: Any) -> None:
        self.result = value


@dataclass(frozen=True)
class Frame:
    current: State
    depth: int
    frontier: Tuple[State, ...]
    visited: FrozenSet[State]


@dataclass
class SearchRecorder:
    """Snapshots the search as it runs.

    With ``every_layer`` set only the first item of each new depth is recorded,
    which is enough to draw the search growing one ring at a time.
    """
    every_layer: bool = False
    frames: List[Frame] = field(default_factory=list)

    def __call__(self, progress: SearchProgress) -> Optional[bool]:
        item = progress.item
        if self.every_layer and self.frames and self.frames[-1].depth == item.depth:
            return True
        self.frames.append(Frame(
            current=item.state,
            depth=item.depth,
            frontier=tuple(queued.state for queued in progress.frontier),
            visited=frozenset(progress.visited),
        ))
        return True

    @property
    def last(self) -> Optional[Frame]:
        return self.frames[-1] if self.frames else None


class FirstMatch:
    """Stops at the first dequeued item whose state satisfies ``terminate`` and
    hands its payload back through the result slot."""
    def __init__(self, terminate: TerminationPredicate):
        self.terminate = terminate
        self.matched: Optional[WorkItem] = None

    def __call__(self, progress: SearchProgress) -> Optional[bool]:
        if self.terminate(progress.item.state):
            self.matched = progress.item
            progress.set_result(progress.item.data)
            return False
        return True


class ExpansionLimit:
    """Stops the search once ``limit`` items have been dequeued."""
    def __init__(self, limit: int):
        if limit < 0:
            raise ValueError("limit must be non-negative")
        self.limit = limit
        self.seen = 0

    def __call__(self, progress: SearchProgress) -> Optional[bool]:
        self.seen += 1
        return self.seen <= self.limit


class ObserverChain:
    """Runs several observers in order; the first one that says stop wins."""
    def __init__(self, *observers):
        self.observers = [o for o in observers if o is not None]

    def __call__(self, progress: SearchProgress) -> Optional[bool]:
        for observer in self.observers:
            if observer(progress) is False:
                return False
        return True
