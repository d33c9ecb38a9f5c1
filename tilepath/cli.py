"""Command line runner: build a grid, grow forests, search a path.

RUN:
    python -m tilepath --width 20 --height 10 --seed 3 --start 0 0 --end 19 9
    python -m tilepath --layout demo --start 0 0 --end 15 11 --mode types
"""

from __future__ import annotations

import argparse
from pathlib import Path
from typing import List, Optional

from pydantic import ValidationError

from .config import Config
from .errors import TilePathError
from .generation import ForestGenerator
from .grid import Grid
from .layout import LayoutLoader
from .logging_utils import log_error, log_generation, log_info, log_search, log_success
from .pathfinding import GridPath, find_path
from .rendering import VisualizationMode, render_ascii
from .schemas import ForestSettings

EXIT_OK = 0
EXIT_INVALID = 2


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        prog="tilepath", description="Grid obstacle generation and A* pathfinding"
    )
    parser.add_argument("--layout", help="Layout name to load instead of a generated grid")
    parser.add_argument("--layouts-dir", type=Path, help="Directory containing layout files")
    parser.add_argument("--width", type=int, default=Config.GRID_WIDTH, help="Grid width in tiles")
    parser.add_argument("--height", type=int, default=Config.GRID_HEIGHT, help="Grid height in tiles")
    forest = Config.forest_settings()
    parser.add_argument("--seed", type=int, default=forest.seed, help="Random seed for reproducibility")
    parser.add_argument("--origins", type=int, default=forest.origin_count, help="Number of forest origins")
    parser.add_argument("--growth", type=int, default=forest.growth_iterations, help="Forest growth iterations")
    parser.add_argument("--spread", type=float, default=forest.spread_probability, help="Forest spread probability")
    parser.add_argument("--start", type=int, nargs=2, metavar=("X", "Y"), help="Search start tile")
    parser.add_argument("--end", type=int, nargs=2, metavar=("X", "Y"), help="Search end tile")
    parser.add_argument(
        "--mode",
        choices=[mode.value for mode in VisualizationMode],
        default=VisualizationMode.BLOCKED.value,
        help="What the printed grid shows",
    )
    parser.add_argument("--show-config", action="store_true", help="Print the active configuration first")
    return parser.parse_args(argv)


def build_grid(args: argparse.Namespace) -> Grid:
    """Build the grid described by the parsed arguments."""
    if args.layout:
        loader = LayoutLoader(layouts_dir=args.layouts_dir)
        return loader.load_grid(args.layout)

    grid = Grid(args.width, args.height)
    settings = ForestSettings(
        seed=args.seed,
        origin_count=args.origins,
        growth_iterations=args.growth,
        spread_probability=args.spread,
    )
    ForestGenerator.from_settings(settings).generate(grid)
    log_generation(
        f"Generated {grid.width}x{grid.height} grid (seed={settings.seed}): "
        f"{grid.count_blocked()} of {grid.size} tiles blocked"
    )
    return grid


def run(args: argparse.Namespace) -> int:
    if args.show_config:
        log_info(Config.display())

    grid = build_grid(args)

    path: Optional[GridPath] = None
    if args.start and args.end:
        start_index = grid.to_index(*args.start)
        end_index = grid.to_index(*args.end)
        log_search(f"Searching {tuple(args.start)} -> {tuple(args.end)}")
        path = find_path(grid, start_index, end_index)
        if path is None:
            log_info("No path found")
        else:
            log_success(
                f"Path found: {len(path)} tiles, cost {path.cost}, "
                f"{path.expanded} tiles expanded"
            )
    elif args.start or args.end:
        log_info("Both --start and --end are needed to search; printing grid only")

    print(render_ascii(grid, mode=VisualizationMode(args.mode), path=path))
    return EXIT_OK


def main(argv: Optional[List[str]] = None) -> int:
    try:
        Config.validate()
        args = parse_args(argv)
        return run(args)
    except (TilePathError, ValidationError, ValueError, FileNotFoundError) as exc:
        log_error(str(exc))
        return EXIT_INVALID
