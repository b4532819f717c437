"""
Tests for the height-map climbing domain: parsing, neighbour generation and
the two searches (S up to E, E down to the nearest lowest cell).
"""
import numpy as np
import pytest

from state_search.core.errors import InputError, NotFound
from state_search.core.node import linked_item, path_item
from state_search.core.utils import reconstruct_path
from state_search.problems.grid import Pos
from state_search.problems.heightmap import HeightMap, can_climb, can_descend


# ========== Parsing ==========

def test_parse_sample(heightmap):
    assert (heightmap.width, heightmap.height) == (8, 5)
    assert heightmap.start == Pos(0, 0)
    assert heightmap.end == Pos(5, 2)
    assert heightmap.heights.dtype == np.uint8
    assert heightmap.height_at(heightmap.start) == 0
    assert heightmap.height_at(heightmap.end) == 25
    assert heightmap.height_at(Pos(3, 1)) == ord("r") - ord("a")


def test_trailing_blank_lines_are_ignored():
    hm = HeightMap.parse(["SbE", "", ""])
    assert hm.width == 3 and hm.height == 1


@pytest.mark.parametrize("lines, message", [
    ([], "empty"),
    (["Sa1E"], "unexpected character"),
    (["SaE", "ab"], "row 2"),
    (["Sab"], "no end"),
    (["aaE"], "no start"),
    (["SSE"], "second start"),
    (["SEE"], "second end"),
])
def test_malformed_maps(lines, message):
    with pytest.raises(InputError, match=message):
        HeightMap.parse(lines)


# ========== Neighbours ==========

def test_neighbours_follow_fixed_order(heightmap):
    anything = lambda cur, cand: True
    assert heightmap.neighbours(Pos(1, 1), anything) == [Pos(0, 1), Pos(2, 1), Pos(1, 0), Pos(1, 2)]
    assert heightmap.neighbours(Pos(0, 0), anything) == [Pos(1, 0), Pos(0, 1)]


def test_neighbours_apply_predicate(heightmap):
    # 'r' at (3, 1): 'y' to the right is too steep
    assert heightmap.neighbours(Pos(3, 1), can_climb) == [Pos(2, 1), Pos(3, 0), Pos(3, 2)]


def test_neighbours_skip_visited(heightmap):
    assert heightmap.neighbours(Pos(0, 0), lambda cur, cand: True, {Pos(1, 0)}) == [Pos(0, 1)]


# ========== Searches ==========

def test_climb_sample(heightmap):
    assert heightmap.climb() == 31


def test_descend_sample(heightmap):
    assert heightmap.descend() == 29


def test_solve(heightmap):
    assert heightmap.solve() == (31, 29)


def test_climb_path_is_legal(heightmap):
    path = heightmap.climb(make_item=path_item)
    assert len(path) == 32
    assert path[0] == heightmap.start and path[-1] == heightmap.end
    for a, b in zip(path, path[1:]):
        assert a.manhattan(b) == 1
        assert can_climb(heightmap.height_at(a), heightmap.height_at(b))


def test_descend_ends_on_lowest_cell(heightmap):
    result = heightmap.search(heightmap.end, lambda p: heightmap.height_at(p) == 0, can_descend,
                              make_item=linked_item)
    path = reconstruct_path(result.item)
    assert len(path) == 30
    assert heightmap.height_at(path[-1]) == 0


def test_single_cell_map_where_start_is_goal():
    hm = HeightMap(np.zeros((1, 1), dtype=np.uint8), Pos(0, 0), Pos(0, 0))
    result = hm.search(Pos(0, 0), lambda p: p == Pos(0, 0), can_climb)
    assert result.data == 0
    assert result.nodes_expanded == 0


def test_walled_off_summit():
    hm = HeightMap.parse(["SazE"])
    with pytest.raises(NotFound):
        hm.climb()
    with pytest.raises(NotFound):
        hm.descend()


def test_expansion_cap_is_passed_through(heightmap):
    result = heightmap.search(heightmap.start, lambda p: p == heightmap.end, can_climb, max_expansions=3)
    assert result.aborted
