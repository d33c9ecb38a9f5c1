"""
Layout loading for JSON-defined grids.

This module provides LayoutLoader for converting JSON layout files into
configured Grid instances. A layout defines the starting conditions for a grid:
- Grid dimensions (width, height)
- Optional explicit tiles (type and/or blocked flag per coordinate)
- Optional forest generation settings (seed, origins, growth, spread)

Layouts are configuration input only. Grids are never written back to disk.

Layout file structure:
```json
{
  "name": "demo",
  "description": "...",
  "width": 16,
  "height": 12,
  "forest": {"seed": 7, "origin_count": 4, "growth_iterations": 3, "spread_probability": 0.4},
  "tiles": [{"x": 3, "y": 0, "type": "road"}, {"x": 5, "y": 5, "blocked": true}]
}
```

Usage:
    loader = LayoutLoader()
    grid = loader.load_grid("demo")
"""

import json
from pathlib import Path
from typing import Any, Dict, Optional

from .config import Config
from .generation import ForestGenerator
from .grid import Grid
from .logging_utils import log_generation
from .schemas import GridLayout


class LayoutLoader:
    """Load and validate grid layouts from JSON files.

    Directory structure:
    - Default: Config.LAYOUTS_DIR ({PROJECT_ROOT}/examples/layouts/)
    - Override via constructor: LayoutLoader(Path("/custom/layouts"))
    - Layout files: {layout_name}.json (e.g., "demo.json")

    Validation:
    - Required fields: name, width, height
    - Field types and ranges are checked by the GridLayout schema
    - Explicit tiles must fall inside the grid (OutOfBoundsError otherwise)
    """

    def __init__(self, layouts_dir: Optional[Path] = None):
        """Initialize layout loader.

        Args:
            layouts_dir: Directory containing layout files.
                         Defaults to Config.LAYOUTS_DIR
        """
        self.layouts_dir = Path(layouts_dir) if layouts_dir is not None else Config.LAYOUTS_DIR

    def load(self, layout_name: str) -> GridLayout:
        """Load a layout by name from JSON file.

        Raises:
            FileNotFoundError: If layout file doesn't exist in layouts_dir
            ValueError: If layout JSON is missing required fields
            pydantic.ValidationError: If field values are out of range
            json.JSONDecodeError: If file contains invalid JSON
        """
        layout_path = self.layouts_dir / f"{layout_name}.json"

        if not layout_path.exists():
            raise FileNotFoundError(
                f"Layout '{layout_name}' not found at {layout_path}"
            )

        data = json.loads(layout_path.read_text())
        self._validate_layout(data)
        return GridLayout(**data)

    def build(self, layout: GridLayout) -> Grid:
        """Construct a grid from a layout.

        Explicit tiles are applied first so that hand-placed blocked tiles also
        act as growth sources for forest generation.
        """
        grid = Grid(layout.width, layout.height)

        for tile in layout.tiles:
            index = grid.to_index(tile.x, tile.y)
            if tile.type is not None:
                grid.set_type(index, tile.type)
            if tile.blocked is not None:
                grid.set_blocked(index, tile.blocked)

        if layout.forest is not None:
            generator = ForestGenerator.from_settings(layout.forest)
            blocked = generator.generate(grid)
            log_generation(
                f"Layout '{layout.name}': forest seed={layout.forest.seed} "
                f"blocked {len(set(blocked))} tiles"
            )

        return grid

    def load_grid(self, layout_name: str) -> Grid:
        """Load a layout and build its grid in one step."""
        return self.build(self.load(layout_name))

    def _validate_layout(self, data: Dict[str, Any]) -> None:
        """Validate layout data has required fields.

        Raises:
            ValueError: If required fields are missing
        """
        if not isinstance(data, dict):
            raise ValueError("Layout file must contain a JSON object")

        required = ["name", "width", "height"]
        missing = [field for field in required if field not in data]

        if missing:
            raise ValueError(f"Layout missing required fields: {missing}")
