"""Pydantic schemas for grid configuration.

These models validate the values a configuration layer hands to the core:
forest generation parameters and declarative grid layouts. The ``Grid``
itself stays a plain class in ``grid.py``; these schemas only describe how
to build one.
"""

from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, Field

from .grid import TileType


class ForestSettings(BaseModel):
    """Parameters for clustered obstacle ("forest") generation."""

    seed: int = Field(0, description="Seed for the deterministic random source")
    origin_count: int = Field(
        0, ge=0, description="Number of random tiles blocked as cluster origins",
    )
    growth_iterations: int = Field(
        0, ge=0, description="Rounds of outward growth from blocked tiles",
    )
    spread_probability: float = Field(
        0.0, ge=0.0, le=1.0,
        description="Chance that a candidate neighbour becomes blocked per round",
    )


class LayoutTile(BaseModel):
    """Explicit state for one tile in a layout file."""

    x: int = Field(..., ge=0)
    y: int = Field(..., ge=0)
    type: Optional[TileType] = Field(None, description="Tile type; unchanged when omitted")
    blocked: Optional[bool] = Field(None, description="Blocked flag; unchanged when omitted")


class GridLayout(BaseModel):
    """Declarative description of a grid to construct."""

    name: str
    description: str = ""
    width: int = Field(..., gt=0)
    height: int = Field(..., gt=0)
    forest: Optional[ForestSettings] = Field(
        None, description="Obstacle generation run after explicit tiles are applied",
    )
    tiles: List[LayoutTile] = Field(default_factory=list)
