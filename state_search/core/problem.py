# Defines the callable interfaces the search drivers are parameterised with.
# state_search/core/problem.py
from __future__ import annotations
from typing import Any, Hashable, Iterable, Optional, Protocol, TYPE_CHECKING

if TYPE_CHECKING:
    from .observers import SearchProgress

State = Hashable


class AdmissibilityPredicate(Protocol):
    """Decides whether moving from an attribute value to another one is legal,
    e.g. ``lambda cur, cand: cand <= cur + 1`` for heights."""
    def __call__(self, current: Any, candidate: Any) -> bool: ...


class TerminationPredicate(Protocol):
    def __call__(self, state: State) -> bool: ...


class NeighbourGenerator(Protocol):
    """Yields the admissible, not-yet-visited successors of ``state`` in a fixed order."""
    def __call__(self, state: State, visited: Any) -> Iterable[State]: ...


class ProgressObserver(Protocol):
    """Called once per dequeued item. Returning ``False`` stops the search."""
    def __call__(self, progress: "SearchProgress") -> Optional[bool]: ...
