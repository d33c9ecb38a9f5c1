"""
Tilepath - tile grids, clustered obstacles and A* pathfinding.

Build a grid, seed organic-looking blocked regions from a deterministic
random source, and search cost-optimal 4-connected paths between tiles.

No global grid. Every grid is an explicit value passed to the generator
and the search, so any number of grids can coexist in one process.
"""

__version__ = "0.1.0"

# Errors
from .errors import (
    TilePathError,
    InvalidDimensionError,
    OutOfBoundsError,
    InvalidEndpointError,
    PathNotFoundError,
)

# Grid model
from .grid import Grid, Tile, TileType

# Generation
from .schemas import ForestSettings, GridLayout, LayoutTile
from .generation import ForestGenerator, randomize_blocked_tiles

# Search
from .pathfinding import (
    GridPath,
    SearchState,
    expand_tile,
    find_path,
    require_path,
    manhattan_distance,
)

# Callers
from .rendering import VisualizationMode, render_ascii
from .layout import LayoutLoader

__all__ = [
    # Errors
    "TilePathError",
    "InvalidDimensionError",
    "OutOfBoundsError",
    "InvalidEndpointError",
    "PathNotFoundError",
    # Grid model
    "Grid",
    "Tile",
    "TileType",
    # Generation
    "ForestSettings",
    "GridLayout",
    "LayoutTile",
    "ForestGenerator",
    "randomize_blocked_tiles",
    # Search
    "GridPath",
    "SearchState",
    "expand_tile",
    "find_path",
    "require_path",
    "manhattan_distance",
    # Callers
    "VisualizationMode",
    "render_ascii",
    "LayoutLoader",
]
