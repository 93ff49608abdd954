"""Snake body representation and movement."""

from __future__ import annotations

import enum
from collections import deque
from collections.abc import Iterable, Iterator

from serpentine.grid import Cell


class Direction(enum.Enum):
    """Cardinal movement directions with ``(dx, dy)`` values."""

    UP = (0, -1)
    DOWN = (0, 1)
    LEFT = (-1, 0)
    RIGHT = (1, 0)

    @property
    def delta(self) -> tuple[int, int]:
        return self.value

    @property
    def opposite(self) -> Direction:
        """The direction that would cause an instant 180° reversal."""
        return _OPPOSITES[self]


_OPPOSITES: dict[Direction, Direction] = {
    Direction.UP: Direction.DOWN,
    Direction.DOWN: Direction.UP,
    Direction.LEFT: Direction.RIGHT,
    Direction.RIGHT: Direction.LEFT,
}


class Snake:
    """A snake represented as an ordered deque of ``(x, y)`` segments.

    The head is ``body[0]``; the tail is ``body[-1]``.
    """

    def __init__(self, body: Iterable[tuple[int, int]]) -> None:
        self.body: deque[Cell] = deque(Cell(x, y) for x, y in body)
        if not self.body:
            raise ValueError("Snake length must be at least 1.")

    def __len__(self) -> int:
        return len(self.body)

    def __iter__(self) -> Iterator[Cell]:
        return iter(self.body)

    @property
    def head(self) -> Cell:
        """Return the head coordinate."""
        return self.body[0]

    @property
    def tail(self) -> Cell:
        """Return the tail coordinate."""
        return self.body[-1]

    def next_head(self, direction: Direction) -> Cell:
        """Compute the next head position without moving."""
        dx, dy = direction.delta
        return Cell(self.head.x + dx, self.head.y + dy)

    def advance(self, new_head: Cell, grow: bool = False) -> Cell | None:
        """Push *new_head* onto the front of the body.

        Returns the vacated tail cell, or ``None`` if the snake grew.
        """
        self.body.appendleft(new_head)
        if grow:
            return None
        return self.body.pop()

    def occupies(self, cell: tuple[int, int]) -> bool:
        """Check whether the snake occupies a given cell."""
        return cell in self.body

    def has_overlap(self) -> bool:
        """Check whether any two segments share a cell."""
        return len(set(self.body)) != len(self.body)

    def cells(self) -> tuple[Cell, ...]:
        return tuple(self.body)
