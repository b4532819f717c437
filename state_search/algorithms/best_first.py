from __future__ import annotations
import logging
from typing import Callable, Optional

from ..core.frontiers import PriorityQueue, ReadOnlyView
from ..core.metrics import SearchResult, MeasuredRun
from ..core.node import ItemFactory, WorkItem, distance_item
from ..core.observers import SearchProgress
from ..core.problem import NeighbourGenerator, ProgressObserver, State, TerminationPredicate

logger = logging.getLogger(__name__)

# Handed to the neighbour generator so it never filters anything out: best-first
# may reach a state again at a smaller depth and has to be allowed to requeue it.
_NOTHING_VISITED = ReadOnlyView(frozenset())


def best_first_search(
    start: State,
    neighbours: NeighbourGenerator,
    terminate: TerminationPredicate,
    key: Callable[[WorkItem], float],
    make_item: ItemFactory = distance_item,
    observer: Optional[ProgressObserver] = None,
    max_expansions: Optional[int] = None,
    measure: bool = False,
    name: str = "BestFirst",
) -> SearchResult:
    """
    Pops the item with the smallest ``key(item)`` first. With ``key`` = depth, or
    depth plus a consistent heuristic, the first goal popped is a nearest one.
    """
    root = make_item(start, None)
    frontier = PriorityQueue(key=key)
    frontier.push(root)

    reached = {start: root.depth}
    expanded = 0

    with MeasuredRun(trace_memory=measure) as meter:
        while frontier:
            # expansion cap
            if max_expansions is not None and expanded >= max_expansions:
                return SearchResult(name, False, None, None, expanded, len(reached), meter.elapsed, meter.peak_kb,
                                    f"expansion cap of {max_expansions} reached", True)

            node = frontier.pop()
            if node.depth > reached[node.state]:
                continue  # superseded by a shallower copy

            if observer is not None:
                progress = SearchProgress(node, ReadOnlyView(frontier), ReadOnlyView(reached), expanded)
                if observer(progress) is False:
                    if progress.has_result:
                        return SearchResult(name, True, progress.result, node, expanded, len(reached),
                                            meter.elapsed, meter.peak_kb)
                    return SearchResult(name, False, None, None, expanded, len(reached), meter.elapsed,
                                        meter.peak_kb, "aborted by observer", True)

            if terminate(node.state):
                logger.debug("%s: reached %r at depth %d after %d expansions",
                             name, node.state, node.depth, expanded)
                return SearchResult(name, True, node.data, node, expanded, len(reached),
                                    meter.elapsed, meter.peak_kb)

            expanded += 1
            for state in neighbours(node.state, _NOTHING_VISITED):
                prev = reached.get(state)
                if prev is None or node.depth + 1 < prev:
                    reached[state] = node.depth + 1
                    frontier.push(make_item(state, node))

    logger.info("%s: frontier exhausted after reaching %d states", name, len(reached))
    return SearchResult(name, False, None, None, expanded, len(reached), meter.elapsed, meter.peak_kb,
                        f"no state reachable from {start!r} satisfies the goal")
