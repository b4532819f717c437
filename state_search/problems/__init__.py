from .basin import Basin, BasinState
from .grid import Pos, grid_neighbours
from .heightmap import HeightMap, can_climb, can_descend
