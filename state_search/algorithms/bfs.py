# state_search/algorithms/bfs.py
# Breadth-first search over an arbitrary state graph. Edges are unweighted, so the
# first dequeued item that satisfies the termination test is a nearest goal.
from __future__ import annotations
import logging
from typing import Any, Optional

from ..core.errors import NotFound, SearchAborted
from ..core.frontiers import FIFOQueue, ReadOnlyView, VisitedSet
from ..core.metrics import SearchResult, MeasuredRun
from ..core.node import ItemFactory, WorkItem, distance_item
from ..core.observers import SearchProgress
from ..core.problem import NeighbourGenerator, ProgressObserver, State, TerminationPredicate

logger = logging.getLogger(__name__)


def breadth_first_search(
    start: State,
    neighbours: NeighbourGenerator,
    terminate: TerminationPredicate,
    make_item: ItemFactory = distance_item,
    observer: Optional[ProgressObserver] = None,
    max_expansions: Optional[int] = None,
    measure: bool = False,
    name: str = "BFS",
) -> SearchResult:
    """
    Runs BFS from ``start`` and reports the outcome as a SearchResult; it does not raise
    when nothing is found (see ``shortest_path`` for the raising form).

    ``neighbours(state, visited)`` yields successor states in a fixed order.
    ``make_item`` decides what each WorkItem carries (distance, path, back-pointer).
    ``observer`` is called with a SearchProgress for every dequeued item before the
    termination test; returning ``False`` stops the search.
    ``measure`` adds tracemalloc peak-memory figures to the result (slow; benchmarks only).
    """
    root = make_item(start, None)
    frontier = FIFOQueue([root])
    reached = VisitedSet([start])
    frontier_view = ReadOnlyView(frontier)
    reached_view = ReadOnlyView(reached)
    expanded = 0

    def done(node: Optional[WorkItem], data: Any = None, error: Optional[str] = None, aborted: bool = False):
        return SearchResult(name, node is not None and error is None, data, node, expanded, len(reached),
                            meter.elapsed, meter.peak_kb, error, aborted)

    with MeasuredRun(trace_memory=measure) as meter:
        logger.debug("%s: starting from %r", name, start)
        while frontier:
            if max_expansions is not None and expanded >= max_expansions:
                logger.info("%s: stopped after %d expansions", name, expanded)
                return done(None, error=f"expansion cap of {max_expansions} reached", aborted=True)

            node = frontier.pop()

            if observer is not None:
                progress = SearchProgress(node, frontier_view, reached_view, expanded)
                if observer(progress) is False:
                    if progress.has_result:
                        logger.debug("%s: observer supplied the result after %d expansions", name, expanded)
                        return done(node, progress.result)
                    logger.info("%s: aborted by observer after %d expansions", name, expanded)
                    return done(None, error="aborted by observer", aborted=True)

            if terminate(node.state):
                logger.debug("%s: reached %r at depth %d after %d expansions",
                             name, node.state, node.depth, expanded)
                return done(node, node.data)

            expanded += 1
            for state in neighbours(node.state, reached_view):
                if state in reached:
                    continue
                reached.add(state)
                frontier.push(make_item(state, node))

        logger.info("%s: frontier exhausted after visiting %d states", name, len(reached))
        return done(None, error=f"no state reachable from {start!r} satisfies the goal")


def raise_for_result(result: SearchResult) -> Any:
    """Returns the payload of a successful search, or raises the matching error."""
    if result.success:
        return result.data
    if result.aborted:
        raise SearchAborted(result.error)
    raise NotFound(result.error)


def shortest_path(
    start: State,
    neighbours: NeighbourGenerator,
    terminate: TerminationPredicate,
    make_item: ItemFactory = distance_item,
    observer: Optional[ProgressObserver] = None,
    max_expansions: Optional[int] = None,
) -> Any:
    """Distance (or path, depending on ``make_item``) to the nearest goal.
    Raises NotFound if no goal is reachable, SearchAborted if the search was cut short."""
    result = breadth_first_search(start, neighbours, terminate, make_item, observer, max_expansions)
    return raise_for_result(result)
