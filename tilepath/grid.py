"""Rectangular tile grid with per-tile type and blocked state.

Tiles are stored densely and addressed by ``index = x + y * width``. The same
``width`` is used for both directions of the conversion so that
``from_index(to_index(x, y)) == (x, y)`` holds for every in-bounds tile.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterator, List, Tuple

from .errors import InvalidDimensionError, OutOfBoundsError

Coord = Tuple[int, int]


class TileType(str, Enum):
    """Descriptive tile category. Does not affect traversal cost."""

    EMPTY = "empty"
    ROAD = "road"
    BUILDING = "building"


@dataclass
class Tile:
    """State of a single grid cell."""

    type: TileType = TileType.EMPTY
    blocked: bool = False


def _check_int(value: int, name: str) -> None:
    # bool is an int subclass; True/False are never valid coordinates
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} must be an int, got {type(value).__name__}")


class Grid:
    """Fixed-size grid of tiles.

    Dimensions are set at construction and never change. All accessors are
    bounds-checked and raise :class:`OutOfBoundsError` instead of clamping.
    """

    def __init__(self, width: int, height: int):
        _check_int(width, "width")
        _check_int(height, "height")
        if width <= 0 or height <= 0:
            raise InvalidDimensionError(
                f"Grid dimensions must be positive, got {width}x{height}"
            )
        self._width = width
        self._height = height
        self.tiles: List[Tile] = [Tile() for _ in range(width * height)]

    def __repr__(self) -> str:
        return f"Grid(width={self._width}, height={self._height})"

    def __len__(self) -> int:
        return len(self.tiles)

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    @property
    def size(self) -> int:
        return self._width * self._height

    # ------------------------------------------------------------------
    # Coordinate <-> index
    # ------------------------------------------------------------------

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self._width and 0 <= y < self._height

    def to_index(self, x: int, y: int) -> int:
        _check_int(x, "x")
        _check_int(y, "y")
        if not self.in_bounds(x, y):
            raise OutOfBoundsError(
                f"Tile ({x}, {y}) outside {self._width}x{self._height} grid"
            )
        return x + y * self._width

    def from_index(self, index: int) -> Coord:
        self._check_index(index)
        return index % self._width, index // self._width

    def _check_index(self, index: int) -> None:
        _check_int(index, "index")
        if not 0 <= index < self.size:
            raise OutOfBoundsError(
                f"Tile index {index} outside [0, {self.size})"
            )

    # ------------------------------------------------------------------
    # Tile state
    # ------------------------------------------------------------------

    def get_type(self, index: int) -> TileType:
        self._check_index(index)
        return self.tiles[index].type

    def set_type(self, index: int, tile_type: TileType) -> None:
        self._check_index(index)
        self.tiles[index].type = TileType(tile_type)

    def is_blocked(self, index: int) -> bool:
        self._check_index(index)
        return self.tiles[index].blocked

    def is_unblocked(self, index: int) -> bool:
        return not self.is_blocked(index)

    def set_blocked(self, index: int, blocked: bool) -> None:
        self._check_index(index)
        self.tiles[index].blocked = bool(blocked)

    def get_type_at(self, x: int, y: int) -> TileType:
        return self.get_type(self.to_index(x, y))

    def set_type_at(self, x: int, y: int, tile_type: TileType) -> None:
        self.set_type(self.to_index(x, y), tile_type)

    def is_blocked_at(self, x: int, y: int) -> bool:
        return self.is_blocked(self.to_index(x, y))

    def set_blocked_at(self, x: int, y: int, blocked: bool) -> None:
        self.set_blocked(self.to_index(x, y), blocked)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def neighbors(self, index: int) -> Tuple[int, ...]:
        """Return orthogonally adjacent in-bounds indices in ascending order."""
        x, y = self.from_index(index)
        found: List[int] = []
        if y > 0:
            found.append(index - self._width)
        if x > 0:
            found.append(index - 1)
        if x < self._width - 1:
            found.append(index + 1)
        if y < self._height - 1:
            found.append(index + self._width)
        return tuple(found)

    def blocked_indices(self) -> List[int]:
        return [i for i, tile in enumerate(self.tiles) if tile.blocked]

    def count_blocked(self) -> int:
        return sum(1 for tile in self.tiles if tile.blocked)

    def clear_blocked(self) -> None:
        for tile in self.tiles:
            tile.blocked = False

    def iter_coords(self) -> Iterator[Coord]:
        """Yield every (x, y) in index order."""
        for index in range(self.size):
            yield index % self._width, index // self._width
