# state_search/core/errors.py
# Exception types raised by the search engine and the puzzle domains built on it.
from __future__ import annotations


class SearchError(Exception):
    """Base class for everything this package raises on purpose."""


class NotFound(SearchError):
    """The frontier ran dry before any state satisfied the termination test."""


class SearchAborted(SearchError):
    """A progress observer (or an expansion cap) stopped the search without a result."""


class InvalidState(SearchError):
    """A state was malformed, or the visited set saw the same state twice."""


class InputError(SearchError):
    """Puzzle input could not be read or parsed."""
