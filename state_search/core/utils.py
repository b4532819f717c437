# state_search/core/utils.py
# Rebuilds the state sequence of a search from the back-pointers of its final WorkItem.
from __future__ import annotations
from typing import List
from .node import WorkItem


def reconstruct_path(item: WorkItem) -> List:
    states = []
    cur = item
    while cur is not None:
        states.append(cur.state)
        cur = cur.parent
    states.reverse()
    return states
