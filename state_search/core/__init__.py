from .errors import InputError, InvalidState, NotFound, SearchAborted, SearchError
from .frontiers import FIFOQueue, PriorityQueue, ReadOnlyView, VisitedSet
from .metrics import MeasuredRun, SearchResult
from .node import WorkItem, distance_item, linked_item, path_item
from .observers import ExpansionLimit, FirstMatch, Frame, ObserverChain, SearchProgress, SearchRecorder
from .utils import reconstruct_path
