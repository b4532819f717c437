import pytest

from state_search.problems import samples
from state_search.problems.basin import Basin
from state_search.problems.heightmap import HeightMap


@pytest.fixture
def heightmap():
    """The 5x8 worked example: 31 steps up, 29 steps down."""
    return HeightMap.parse(samples.HEIGHTMAP.splitlines())


@pytest.fixture
def basin():
    """The 6x4 worked example: 18 minutes across, 54 for the round trip."""
    return Basin.parse(samples.BASIN.splitlines())


@pytest.fixture
def diamond():
    """a -> b, c -> d ; e is unreachable."""
    graph = {"a": ["b", "c"], "b": ["d"], "c": ["d"], "d": [], "e": ["a"]}
    return lambda state, visited: graph[state]


def line_neighbours(lo, hi):
    """Integers lo..hi, each linked to its predecessor and successor (in that order)."""
    def neighbours(n, visited):
        return [m for m in (n - 1, n + 1) if lo <= m <= hi]
    return neighbours
