from .best_first import best_first_search
from .bfs import breadth_first_search, raise_for_result, shortest_path
