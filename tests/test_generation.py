"""Tests for clustered obstacle generation."""

import pytest
from pydantic import ValidationError

from tilepath.generation import ForestGenerator, randomize_blocked_tiles
from tilepath.grid import Grid
from tilepath.schemas import ForestSettings


def generate_blocked(seed, width=20, height=15, origins=5, growth=3, spread=0.45):
    grid = Grid(width, height)
    randomize_blocked_tiles(
        grid,
        seed=seed,
        origin_count=origins,
        growth_iterations=growth,
        spread_probability=spread,
    )
    return grid.blocked_indices()


def test_same_settings_give_same_blocked_tiles():
    assert generate_blocked(seed=11) == generate_blocked(seed=11)


def test_different_seeds_differ():
    assert generate_blocked(seed=1) != generate_blocked(seed=2)


def test_reseed_restarts_sequence():
    generator = ForestGenerator(seed=3, origin_count=4)
    first = generator.generate_origins(Grid(10, 10))
    generator.reseed()
    second = generator.generate_origins(Grid(10, 10))
    assert first == second


def test_origins_are_blocked():
    grid = Grid(12, 12)
    generator = ForestGenerator(seed=5, origin_count=6)
    origins = generator.generate_origins(grid)
    assert len(origins) == 6
    assert all(grid.is_blocked(index) for index in origins)
    # Duplicate draws collapse into a single blocked tile
    assert grid.blocked_indices() == sorted(set(origins))


def test_zero_origins_block_nothing():
    grid = Grid(6, 6)
    assert randomize_blocked_tiles(grid, seed=9, origin_count=0, growth_iterations=4, spread_probability=1.0) == []
    assert grid.count_blocked() == 0


def test_zero_spread_only_blocks_origins():
    grid = Grid(10, 10)
    generator = ForestGenerator(seed=2, origin_count=3, growth_iterations=5, spread_probability=0.0)
    origins = generator.generate_origins(grid)
    assert generator.grow_clusters(grid) == []
    assert grid.blocked_indices() == sorted(set(origins))


def test_full_spread_grows_diamond():
    grid = Grid(9, 9)
    grid.set_blocked_at(4, 4, True)
    generator = ForestGenerator(seed=0, growth_iterations=2, spread_probability=1.0)
    grown = generator.grow_clusters(grid)

    expected = {
        grid.to_index(x, y)
        for x in range(9)
        for y in range(9)
        if abs(x - 4) + abs(y - 4) <= 2
    }
    assert set(grid.blocked_indices()) == expected
    assert len(grown) == len(expected) - 1


def test_growth_is_bounded_by_iteration_count():
    grid = Grid(30, 30)
    generator = ForestGenerator(seed=21, origin_count=4, growth_iterations=3, spread_probability=0.6)
    origins = generator.generate_origins(grid)
    generator.grow_clusters(grid)

    origin_coords = [grid.from_index(index) for index in origins]
    for index in grid.blocked_indices():
        x, y = grid.from_index(index)
        assert min(abs(x - ox) + abs(y - oy) for ox, oy in origin_coords) <= 3


def test_grown_tiles_touch_existing_blocked_tiles():
    grid = Grid(16, 16)
    generator = ForestGenerator(seed=8, origin_count=3, growth_iterations=1, spread_probability=0.5)
    origins = set(generator.generate_origins(grid))
    for index in generator.grow_clusters(grid):
        assert origins.intersection(grid.neighbors(index))


def test_grow_clusters_overrides():
    grid = Grid(7, 7)
    grid.set_blocked_at(3, 3, True)
    generator = ForestGenerator(seed=0, growth_iterations=0, spread_probability=0.0)
    assert generator.grow_clusters(grid) == []
    grown = generator.grow_clusters(grid, growth_iterations=1, spread_probability=1.0)
    assert sorted(grown) == sorted(grid.neighbors(grid.to_index(3, 3)))


def test_growth_stops_when_grid_is_full():
    grid = Grid(3, 3)
    generator = ForestGenerator(seed=1, origin_count=1, growth_iterations=10, spread_probability=1.0)
    generator.generate(grid)
    assert grid.count_blocked() == 9


def test_pre_blocked_tiles_seed_growth():
    grid = Grid(5, 1)
    grid.set_blocked(0, True)
    ForestGenerator(seed=0, growth_iterations=2, spread_probability=1.0).grow_clusters(grid)
    assert grid.blocked_indices() == [0, 1, 2]


def test_from_settings_matches_keyword_construction():
    settings = ForestSettings(seed=13, origin_count=4, growth_iterations=2, spread_probability=0.3)
    grid_a = Grid(12, 9)
    grid_b = Grid(12, 9)
    ForestGenerator.from_settings(settings).generate(grid_a)
    ForestGenerator(seed=13, origin_count=4, growth_iterations=2, spread_probability=0.3).generate(grid_b)
    assert grid_a.blocked_indices() == grid_b.blocked_indices()


@pytest.mark.parametrize(
    "kwargs",
    [
        {"spread_probability": 1.5},
        {"spread_probability": -0.1},
        {"origin_count": -1},
        {"growth_iterations": -2},
    ],
)
def test_invalid_settings_rejected(kwargs):
    with pytest.raises(ValidationError):
        ForestGenerator(**kwargs)


def test_invalid_override_rejected():
    generator = ForestGenerator(seed=0)
    with pytest.raises(ValidationError):
        generator.grow_clusters(Grid(3, 3), spread_probability=2.0)
