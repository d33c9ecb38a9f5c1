"""Clustered obstacle ("forest") generation.

Generation runs in two phases against an existing grid:

1. ``generate_origins`` blocks ``origin_count`` uniformly random tiles.
2. ``grow_clusters`` repeatedly spreads blocked state into neighbouring
   tiles, one Bernoulli trial per candidate per round.

Every random draw comes from a private ``random.Random`` seeded at
construction, and candidates are always visited in ascending index order, so
the same settings on the same grid size always block the same tiles.
"""

from __future__ import annotations

import random
from typing import List, Optional, Set

from .grid import Grid
from .schemas import ForestSettings


class ForestGenerator:
    """Seeds and grows blocked regions on a grid.

    Growth is bounded: each round only considers unblocked tiles adjacent to a
    tile that is already blocked, and only tiles that win their roll join the
    growth set. After ``k`` rounds no grown tile lies more than ``k`` steps
    from a tile that was blocked when growth started.
    """

    def __init__(
        self,
        seed: int = 0,
        origin_count: int = 0,
        growth_iterations: int = 0,
        spread_probability: float = 0.0,
    ):
        self.settings = ForestSettings(
            seed=seed,
            origin_count=origin_count,
            growth_iterations=growth_iterations,
            spread_probability=spread_probability,
        )
        self._rng = random.Random(self.settings.seed)

    @classmethod
    def from_settings(cls, settings: ForestSettings) -> "ForestGenerator":
        return cls(**settings.model_dump())

    def reseed(self) -> None:
        """Restart the random sequence from the configured seed."""
        self._rng = random.Random(self.settings.seed)

    def generate_origins(self, grid: Grid) -> List[int]:
        """Block ``origin_count`` random tiles and return them in draw order.

        Draws are made with replacement; a repeated index is simply blocked
        again.
        """
        origins: List[int] = []
        for _ in range(self.settings.origin_count):
            index = self._rng.randrange(grid.size)
            grid.set_blocked(index, True)
            origins.append(index)
        return origins

    def grow_clusters(
        self,
        grid: Grid,
        growth_iterations: Optional[int] = None,
        spread_probability: Optional[float] = None,
    ) -> List[int]:
        """Spread blocked state outward; return newly blocked tiles in order.

        Overrides fall back to the configured settings when omitted.
        """
        overrides = {}
        if growth_iterations is not None:
            overrides["growth_iterations"] = growth_iterations
        if spread_probability is not None:
            overrides["spread_probability"] = spread_probability
        settings = ForestSettings(**{**self.settings.model_dump(), **overrides})

        growth: Set[int] = set(grid.blocked_indices())
        grown: List[int] = []

        for _ in range(settings.growth_iterations):
            candidates = sorted(
                {
                    neighbor
                    for index in growth
                    for neighbor in grid.neighbors(index)
                    if not grid.is_blocked(neighbor)
                }
            )
            if not candidates:
                break
            # Roll every candidate before the next round's candidates are
            # collected; tiles blocked this round spread only next round.
            for index in candidates:
                if self._rng.random() < settings.spread_probability:
                    grid.set_blocked(index, True)
                    growth.add(index)
                    grown.append(index)

        return grown

    def generate(self, grid: Grid) -> List[int]:
        """Run both phases; return every tile this call blocked."""
        origins = self.generate_origins(grid)
        grown = self.grow_clusters(grid)
        return origins + grown


def randomize_blocked_tiles(
    grid: Grid,
    seed: int = 0,
    origin_count: int = 0,
    growth_iterations: int = 0,
    spread_probability: float = 0.0,
) -> List[int]:
    """Seed and grow forests on ``grid`` in place."""
    generator = ForestGenerator(
        seed=seed,
        origin_count=origin_count,
        growth_iterations=growth_iterations,
        spread_probability=spread_probability,
    )
    return generator.generate(grid)
