"""Plain-text views of a grid for terminals and debugging."""

from __future__ import annotations

from enum import Enum
from typing import Dict, Iterable, List, Optional

from .grid import Grid, TileType


class VisualizationMode(str, Enum):
    """What a rendered tile shows."""

    BLOCKED = "blocked"
    TYPES = "types"


_DEFAULT_SYMBOLS: Dict[str, str] = {
    "blocked": "#",
    "open": ".",
    TileType.EMPTY.value: ".",
    TileType.ROAD.value: "=",
    TileType.BUILDING.value: "B",
    "path": "*",
    "start": "S",
    "end": "E",
}


def render_ascii(
    grid: Grid,
    *,
    mode: VisualizationMode = VisualizationMode.BLOCKED,
    path: Optional[Iterable[int]] = None,
    symbols: Optional[Dict[str, str]] = None,
) -> str:
    """Render ``grid`` one character per tile, highest row first.

    ``path`` is overlaid on top of the tile symbols with its first and last
    tiles marked as start and end. Unknown keys in ``symbols`` are ignored.
    """

    mapping = {**_DEFAULT_SYMBOLS}
    if symbols:
        mapping.update(symbols)
    mode = VisualizationMode(mode)

    overlay: Dict[int, str] = {}
    if path is not None:
        indices = list(path)
        for index in indices:
            overlay[index] = mapping["path"]
        if indices:
            overlay[indices[0]] = mapping["start"]
            overlay[indices[-1]] = mapping["end"]

    lines: List[str] = []
    for y in range(grid.height - 1, -1, -1):
        row: List[str] = []
        for x in range(grid.width):
            index = grid.to_index(x, y)
            if index in overlay:
                row.append(overlay[index])
            elif mode is VisualizationMode.TYPES:
                row.append(mapping[grid.get_type(index).value])
            else:
                row.append(mapping["blocked"] if grid.is_blocked(index) else mapping["open"])
        lines.append("".join(row))

    return "\n".join(lines)
