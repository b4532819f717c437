# state_search/core/frontiers.py
from __future__ import annotations
import heapq
from collections import deque
from typing import Any, Callable, Iterable

from .errors import InvalidState


class FIFOQueue:
    def __init__(self, items: Iterable = ()):
        self.q = deque(items)
    def push(self, x): self.q.append(x)
    def pop(self): return self.q.popleft()
    def __len__(self): return len(self.q)
    def __iter__(self): return iter(self.q)
    def peek(self): return self.q[0]


class PriorityQueue:
    """Min-heap by key(x). Equal keys pop in insertion order."""
    def __init__(self, key: Callable[[Any], Any]):
        self.key = key
        self.h = []
        self.counter = 0  # tie-breaker for stability
    def push(self, x):
        self.counter += 1
        heapq.heappush(self.h, (self.key(x), self.counter, x))
    def pop(self):
        return heapq.heappop(self.h)[2]
    def __len__(self): return len(self.h)
    def __iter__(self): return (entry[2] for entry in sorted(self.h))
    def peek(self):
        return self.h[0][2]


class VisitedSet:
    """Every state that has ever been enqueued. A state may be added only once."""
    def __init__(self, states: Iterable = ()):
        self.s = set()
        for state in states:
            self.add(state)

    def add(self, state) -> None:
        if state in self.s:
            raise InvalidState(f"state {state!r} was enqueued twice")
        self.s.add(state)

    def __contains__(self, state) -> bool: return state in self.s
    def __len__(self): return len(self.s)
    def __iter__(self): return iter(self.s)


class ReadOnlyView:
    """Iteration, length and membership over a container, nothing else.
    This is how observers get to look at the frontier and the visited set."""
    __slots__ = ("_target",)

    def __init__(self, target):
        self._target = target

    def __iter__(self): return iter(self._target)
    def __len__(self): return len(self._target)
    def __contains__(self, x) -> bool: return x in self._target

    def __repr__(self) -> str:
        return f"ReadOnlyView(len={len(self._target)})"
