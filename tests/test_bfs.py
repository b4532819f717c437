"""
Tests for the breadth-first engine (algorithms/bfs.py) on small abstract graphs.

Groups:
- distances and payload kinds (distance / path / back-pointer)
- boundaries: start is a goal, unreachable goals, cycles
- bookkeeping: no state expanded twice, visited bounded by reachable states
"""
from collections import Counter

import pytest

from state_search.algorithms.bfs import breadth_first_search, shortest_path
from state_search.core.errors import NotFound, SearchAborted
from state_search.core.node import linked_item, path_item
from state_search.core.utils import reconstruct_path

from conftest import line_neighbours


# ========== Distances and payloads ==========

def test_distance_on_diamond(diamond):
    assert shortest_path("a", diamond, lambda s: s == "d") == 2


def test_path_payload_includes_start_and_follows_neighbour_order(diamond):
    assert shortest_path("a", diamond, lambda s: s == "d", make_item=path_item) == ("a", "b", "d")


def test_linked_payload_reconstructs_same_path(diamond):
    result = breadth_first_search("a", diamond, lambda s: s == "d", make_item=linked_item)
    assert result.success
    assert result.data == 2
    assert reconstruct_path(result.item) == ["a", "b", "d"]


def test_nearest_of_several_goals_wins():
    # from 5, goal 8 is three steps away, goal 1 four
    neighbours = line_neighbours(0, 10)
    assert shortest_path(5, neighbours, lambda n: n in (1, 8)) == 3
    assert shortest_path(5, neighbours, lambda n: n in (1, 8), make_item=path_item)[-1] == 8


def test_repeated_calls_agree(diamond):
    first = breadth_first_search("a", diamond, lambda s: s == "d", make_item=path_item)
    second = breadth_first_search("a", diamond, lambda s: s == "d", make_item=path_item)
    assert (first.data, first.nodes_expanded, first.visited) == (second.data, second.nodes_expanded, second.visited)


# ========== Boundaries ==========

def test_start_that_is_a_goal_expands_nothing(diamond):
    result = breadth_first_search("a", diamond, lambda s: s == "a", make_item=path_item)
    assert result.success
    assert result.data == ("a",)
    assert result.item.depth == 0
    assert result.nodes_expanded == 0


def test_unreachable_goal_reports_failure(diamond):
    result = breadth_first_search("a", diamond, lambda s: s == "e")
    assert not result.success
    assert not result.aborted
    assert result.data is None
    assert result.visited == 4
    assert "no state reachable" in result.error


def test_unreachable_goal_raises_not_found(diamond):
    with pytest.raises(NotFound):
        shortest_path("a", diamond, lambda s: s == "e")


def test_cycle_terminates():
    graph = {"x": ["y"], "y": ["x", "y"]}
    with pytest.raises(NotFound):
        shortest_path("x", lambda s, v: graph[s], lambda s: False)


def test_expansion_cap_aborts():
    result = breadth_first_search(0, line_neighbours(0, 100), lambda n: n == 100, max_expansions=10)
    assert not result.success
    assert result.aborted
    assert result.nodes_expanded == 10
    with pytest.raises(SearchAborted):
        shortest_path(0, line_neighbours(0, 100), lambda n: n == 100, max_expansions=10)


# ========== Bookkeeping ==========

def test_each_state_expanded_at_most_once():
    calls = Counter()
    grid = line_neighbours(0, 20)

    def neighbours(n, visited):
        calls[n] += 1
        return grid(n, visited)

    result = breadth_first_search(10, neighbours, lambda n: False)
    assert not result.success
    assert max(calls.values()) == 1
    assert result.visited == 21
    assert result.nodes_expanded == 21


def test_generator_ignoring_visited_is_still_deduplicated():
    # every state claims every other state as a neighbour
    states = list(range(6))
    result = breadth_first_search(0, lambda s, v: states, lambda s: s == 5)
    assert result.success
    assert result.data == 1
    assert result.visited <= len(states)
