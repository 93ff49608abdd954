"""Food placement logic."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import numpy as np

from serpentine.grid import GRID_SIZE, Cell, all_cells

if TYPE_CHECKING:
    from serpentine.snake import Snake

logger = logging.getLogger(__name__)


class FoodSpawner:
    """Places the single food cell uniformly at random off the snake.

    Draws cells uniformly from the whole grid and rejects any that land
    on the snake. After *max_attempts* rejected draws it samples directly
    from the free cells instead, which keeps placement uniform while
    bounding the work for a long snake.

    A snake covering all ``GRID_SIZE ** 2`` cells leaves nowhere to put
    food. No rule currently lets a snake grow that long, so this case is
    not handled as game state: :meth:`spawn` raises ``RuntimeError``.
    """

    def __init__(
        self,
        rng: np.random.Generator | None = None,
        max_attempts: int = 1000,
    ) -> None:
        if max_attempts < 1:
            raise ValueError("max_attempts must be at least 1.")
        self.rng = rng if rng is not None else np.random.default_rng()
        self.max_attempts = max_attempts

    def spawn(self, snake: Snake) -> Cell:
        """Return a uniformly random cell not occupied by *snake*."""
        occupied = set(snake)
        for _ in range(self.max_attempts):
            x, y = self.rng.integers(GRID_SIZE, size=2).tolist()
            cell = Cell(x, y)
            if cell not in occupied:
                return cell

        free = [cell for cell in all_cells() if cell not in occupied]
        if not free:
            raise RuntimeError("No free cell left for food placement.")
        logger.warning(
            "Food rejection sampling gave up after %d draws; "
            "choosing from %d free cells.",
            self.max_attempts, len(free),
        )
        return free[int(self.rng.integers(len(free)))]
