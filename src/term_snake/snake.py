"""Snake representation and direction logic."""

from __future__ import annotations

import enum
from collections import deque
from collections.abc import Iterable, Iterator

Coordinate = tuple[int, int]


class Direction(enum.Enum):
    """Cardinal movement directions with (dx, dy) values."""

    UP = (0, -1)
    DOWN = (0, 1)
    LEFT = (-1, 0)
    RIGHT = (1, 0)

    @property
    def opposite(self) -> Direction:
        """Return the direction that would cause a 180° reversal."""
        return _OPPOSITES[self]

    def step(self, coord: Coordinate) -> Coordinate:
        """Offset *coord* by one cell in this direction."""
        dx, dy = self.value
        x, y = coord
        return x + dx, y + dy


_OPPOSITES: dict[Direction, Direction] = {
    Direction.UP: Direction.DOWN,
    Direction.DOWN: Direction.UP,
    Direction.LEFT: Direction.RIGHT,
    Direction.RIGHT: Direction.LEFT,
}


class Snake:
    """A snake represented as an ordered deque of (x, y) body segments.

    The head is ``body[0]``; the tail is ``body[-1]``.
    """

    def __init__(self, segments: Iterable[Coordinate]) -> None:
        self.body: deque[Coordinate] = deque(segments)
        if not self.body:
            raise ValueError("Snake length must be at least 1.")

    def __len__(self) -> int:
        return len(self.body)

    def __iter__(self) -> Iterator[Coordinate]:
        return iter(self.body)

    @property
    def head(self) -> Coordinate:
        """Return the head coordinate."""
        return self.body[0]

    @property
    def tail(self) -> Coordinate:
        """Return the tail coordinate."""
        return self.body[-1]

    def occupies(self, coord: Coordinate) -> bool:
        """Check whether the snake occupies a given cell."""
        return coord in self.body

    def body_without_head(self) -> set[Coordinate]:
        """Return every segment except the head."""
        it = iter(self.body)
        next(it)
        return set(it)

    def advance(self, new_head: Coordinate) -> Coordinate:
        """Push *new_head* and drop the tail.

        Returns the vacated tail cell.
        """
        self.body.appendleft(new_head)
        return self.body.pop()

    def regrow(self, cell: Coordinate) -> None:
        """Re-append a vacated tail cell, growing the snake by one."""
        self.body.append(cell)

    def to_dict(self) -> dict:
        """Serialize snake state to a dictionary."""
        return {"body": [list(seg) for seg in self.body]}
