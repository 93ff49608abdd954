"""Tests for the FoodSpawner module."""

import numpy as np
import pytest

from serpentine.food import FoodSpawner
from serpentine.grid import all_cells, in_bounds
from serpentine.snake import Snake


class _StuckRng:
    """Always draws the top-left cell, then the first free cell."""

    def integers(self, high, size=None):
        if size is None:
            return 0
        return np.zeros(size, dtype=np.int64)


class TestFoodSpawnerInit:
    def test_invalid_max_attempts(self):
        with pytest.raises(ValueError, match="at least 1"):
            FoodSpawner(max_attempts=0)

    def test_default_rng(self):
        spawner = FoodSpawner()
        assert isinstance(spawner.rng, np.random.Generator)


class TestFoodSpawning:
    def test_spawn_off_snake(self):
        snake = Snake([(10, 10), (9, 10), (8, 10)])
        spawner = FoodSpawner(np.random.default_rng(0))
        for _ in range(200):
            cell = spawner.spawn(snake)
            assert in_bounds(cell)
            assert not snake.occupies(cell)

    def test_spawn_deterministic(self):
        snake = Snake([(0, 0)])
        a = FoodSpawner(np.random.default_rng(42))
        b = FoodSpawner(np.random.default_rng(42))
        assert [a.spawn(snake) for _ in range(5)] == [b.spawn(snake) for _ in range(5)]

    def test_spawn_covers_grid(self):
        snake = Snake([(0, 0)])
        spawner = FoodSpawner(np.random.default_rng(3))
        seen = {spawner.spawn(snake) for _ in range(4000)}
        # Uniform draws over 399 free cells reach nearly all of them.
        assert len(seen) > 390

    def test_rejects_draws_on_snake(self):
        snake = Snake([(0, 0)])
        spawner = FoodSpawner(_StuckRng(), max_attempts=5)
        # Every draw hits the snake, so the free-cell fallback decides.
        assert spawner.spawn(snake) == (1, 0)

    def test_fallback_picks_the_only_free_cell(self):
        free = (7, 3)
        snake = Snake([c for c in all_cells() if c != free])
        spawner = FoodSpawner(np.random.default_rng(1), max_attempts=1)
        assert spawner.spawn(snake) == free

    def test_fallback_logs_warning(self, caplog):
        snake = Snake([c for c in all_cells() if c != (5, 5)])
        spawner = FoodSpawner(_StuckRng(), max_attempts=3)
        with caplog.at_level("WARNING", logger="serpentine.food"):
            assert spawner.spawn(snake) == (5, 5)
        assert "gave up after 3 draws" in caplog.text

    def test_full_grid_raises(self):
        snake = Snake(all_cells())
        spawner = FoodSpawner(np.random.default_rng(0), max_attempts=5)
        with pytest.raises(RuntimeError, match="No free cell"):
            spawner.spawn(snake)
