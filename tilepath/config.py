"""
Tilepath Configuration

Loads grid and generation defaults from environment variables with sensible defaults.
"""

import os
from pathlib import Path
from dotenv import load_dotenv

from .schemas import ForestSettings

# Load .env file if it exists
load_dotenv()


class Config:
    """Application configuration loaded from environment variables."""

    # Grid dimensions
    GRID_WIDTH: int = int(os.getenv("TILEPATH_GRID_WIDTH", "32"))
    GRID_HEIGHT: int = int(os.getenv("TILEPATH_GRID_HEIGHT", "32"))

    # Forest generation
    SEED: int = int(os.getenv("TILEPATH_SEED", "0"))
    FOREST_ORIGINS: int = int(os.getenv("TILEPATH_FOREST_ORIGINS", "6"))
    FOREST_GROWTH: int = int(os.getenv("TILEPATH_FOREST_GROWTH", "3"))
    FOREST_SPREAD: float = float(os.getenv("TILEPATH_FOREST_SPREAD", "0.45"))

    # Logging
    LOG_LEVEL: str = os.getenv("TILEPATH_LOG_LEVEL", "INFO")
    LOG_LEVELS = ("INFO", "QUIET")

    # Project Paths
    PROJECT_ROOT: Path = Path(__file__).parent.parent
    LAYOUTS_DIR: Path = Path(
        os.getenv("TILEPATH_LAYOUTS_DIR", str(PROJECT_ROOT / "examples" / "layouts"))
    )

    @classmethod
    def validate(cls) -> None:
        """Validate configuration and raise errors for out-of-range values."""
        if cls.GRID_WIDTH <= 0 or cls.GRID_HEIGHT <= 0:
            raise ValueError(
                f"TILEPATH_GRID_WIDTH and TILEPATH_GRID_HEIGHT must be positive "
                f"(got {cls.GRID_WIDTH}x{cls.GRID_HEIGHT})"
            )

        if cls.FOREST_ORIGINS < 0 or cls.FOREST_GROWTH < 0:
            raise ValueError(
                "TILEPATH_FOREST_ORIGINS and TILEPATH_FOREST_GROWTH must not be negative"
            )

        if not 0.0 <= cls.FOREST_SPREAD <= 1.0:
            raise ValueError(
                f"TILEPATH_FOREST_SPREAD must be between 0 and 1 (got {cls.FOREST_SPREAD})"
            )

        if cls.LOG_LEVEL.upper() not in cls.LOG_LEVELS:
            raise ValueError(
                f"TILEPATH_LOG_LEVEL must be one of {cls.LOG_LEVELS} (got {cls.LOG_LEVEL!r})"
            )

    @classmethod
    def forest_settings(cls) -> ForestSettings:
        """Return generation settings built from the configured values."""
        return ForestSettings(
            seed=cls.SEED,
            origin_count=cls.FOREST_ORIGINS,
            growth_iterations=cls.FOREST_GROWTH,
            spread_probability=cls.FOREST_SPREAD,
        )

    @classmethod
    def display(cls) -> str:
        """Return a formatted string showing current configuration."""
        lines = [
            "Tilepath Configuration:",
            f"  Grid: {cls.GRID_WIDTH}x{cls.GRID_HEIGHT}",
            f"  Seed: {cls.SEED}",
            f"  Forest Origins: {cls.FOREST_ORIGINS}",
            f"  Forest Growth: {cls.FOREST_GROWTH}",
            f"  Forest Spread: {cls.FOREST_SPREAD}",
            f"  Layouts: {cls.LAYOUTS_DIR}",
            f"  Log Level: {cls.LOG_LEVEL}",
        ]
        return "\n".join(lines)
