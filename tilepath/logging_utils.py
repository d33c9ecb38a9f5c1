"""Logging utilities for tilepath runs.

Provides color-coded output to distinguish grid mutation from search results.
The grid, generator and search never log; callers such as the CLI and the
layout loader do. ``Config.LOG_LEVEL == "QUIET"`` silences everything except
errors.
"""

import os
from enum import Enum
from typing import Optional

from .config import Config


class Color(Enum):
    """ANSI color codes for terminal output."""

    # Colors for operation types
    BLUE = "\033[94m"      # Grid generation and mutation
    YELLOW = "\033[93m"    # Path searches
    RED = "\033[91m"       # Errors
    GREEN = "\033[92m"     # Success/completion
    CYAN = "\033[96m"      # Info/metadata

    # Formatting
    BOLD = "\033[1m"
    RESET = "\033[0m"


# Markers for operation types (color-blind accessible)
MARK_GENERATION = "[•]"
MARK_SEARCH = "[A*]"
MARK_ERROR = "[!]"
MARK_SUCCESS = "[✓]"
MARK_INFO = "[i]"


def colored(text: str, color: Color, *, marker: Optional[str] = None, bold: bool = False) -> str:
    """Format one log line, prefixed by ``marker`` and wrapped in ANSI codes.

    The marker survives TILEPATH_NO_COLOR so the operation type stays readable
    on terminals without color.
    """
    line = f"{marker} {text}" if marker else text
    if os.getenv("TILEPATH_NO_COLOR"):
        return line

    prefix = Color.BOLD.value + color.value if bold else color.value
    return f"{prefix}{line}{Color.RESET.value}"


def _quiet() -> bool:
    return Config.LOG_LEVEL.upper() == "QUIET"


def log_generation(message: str) -> None:
    """Log a grid generation step (blue)."""
    if not _quiet():
        print(colored(message, Color.BLUE, marker=MARK_GENERATION))


def log_search(message: str) -> None:
    """Log a path search (yellow)."""
    if not _quiet():
        print(colored(message, Color.YELLOW, marker=MARK_SEARCH))


def log_error(message: str) -> None:
    """Log an error (red). Never suppressed."""
    print(colored(message, Color.RED, marker=MARK_ERROR, bold=True))


def log_success(message: str) -> None:
    """Log a success (green)."""
    if not _quiet():
        print(colored(message, Color.GREEN, marker=MARK_SUCCESS))


def log_info(message: str) -> None:
    """Log metadata/info (cyan)."""
    if not _quiet():
        print(colored(message, Color.CYAN, marker=MARK_INFO))
