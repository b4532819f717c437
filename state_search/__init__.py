"""Breadth-first / best-first search over puzzle state graphs."""
from .algorithms import best_first_search, breadth_first_search, shortest_path
from .core import (
    InputError, InvalidState, NotFound, SearchAborted, SearchError,
    SearchRecorder, SearchResult, WorkItem, distance_item, linked_item, path_item, reconstruct_path,
)
from .problems import Basin, HeightMap, Pos

__version__ = "0.1.0"
