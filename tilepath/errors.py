"""Exception types raised by tilepath.

Every error is local to the call that raised it and never leaves a grid in a
partially updated state. Each class also derives from the closest builtin so
callers can catch ``ValueError``/``IndexError`` without importing this module.
"""

from __future__ import annotations


class TilePathError(Exception):
    """Base class for all tilepath errors."""


class InvalidDimensionError(TilePathError, ValueError):
    """Grid constructed with a non-positive width or height."""


class OutOfBoundsError(TilePathError, IndexError):
    """Coordinate or index accessor called outside the grid."""


class InvalidEndpointError(TilePathError, ValueError):
    """Search requested with a blocked or out-of-bounds start/end tile."""


class PathNotFoundError(TilePathError, LookupError):
    """Search exhausted its frontier without reaching the end tile.

    Only raised by :func:`tilepath.pathfinding.require_path`; ``find_path``
    reports the same outcome by returning ``None``.
    """

    def __init__(self, start_index: int, end_index: int):
        super().__init__(f"No path from tile {start_index} to tile {end_index}")
        self.start_index = start_index
        self.end_index = end_index
