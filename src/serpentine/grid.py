"""Fixed-size grid geometry for the snake game."""

from __future__ import annotations

import enum
from collections.abc import Iterable
from typing import NamedTuple

import numpy as np

GRID_SIZE = 20


class Cell(NamedTuple):
    """An integer ``(x, y)`` grid coordinate. ``y`` grows downward."""

    x: int
    y: int


class CellType(enum.IntEnum):
    """Integer codes stored in a rendered grid array."""

    EMPTY = 0
    SNAKE = 1
    HEAD = 2
    FOOD = 3


def in_bounds(cell: tuple[int, int]) -> bool:
    """Check whether a coordinate lies within the grid."""
    x, y = cell
    return 0 <= x < GRID_SIZE and 0 <= y < GRID_SIZE


def all_cells() -> list[Cell]:
    """Return every grid cell in row-major order."""
    return [Cell(x, y) for y in range(GRID_SIZE) for x in range(GRID_SIZE)]


def render_cells(
    snake: Iterable[tuple[int, int]],
    food: tuple[int, int] | None,
) -> np.ndarray:
    """Paint a snake and a food cell onto a fresh ``int8`` array.

    The array is indexed ``[y, x]`` so that rows match screen rows.
    Out-of-bounds cells are ignored.
    """
    cells = np.zeros((GRID_SIZE, GRID_SIZE), dtype=np.int8)
    if food is not None and in_bounds(food):
        cells[food[1], food[0]] = CellType.FOOD
    for i, (x, y) in enumerate(snake):
        if in_bounds((x, y)):
            cells[y, x] = CellType.HEAD if i == 0 else CellType.SNAKE
    return cells
