"""Playfield dimensions and the static wall border."""

from __future__ import annotations

from collections.abc import Iterable
from typing import TYPE_CHECKING

import numpy as np

if TYPE_CHECKING:
    from term_snake.snake import Coordinate
    from term_snake.terminal import Style, Terminal


def build_walls(width: int, height: int) -> frozenset[Coordinate]:
    """Return the border cells of a ``width`` x ``height`` playfield.

    Full top and bottom rows, plus the leftmost and rightmost columns of
    every interior row.
    """
    cells: set[Coordinate] = set()
    for x in range(width):
        cells.add((x, 0))
        cells.add((x, height - 1))
    for y in range(1, height - 1):
        cells.add((0, y))
        cells.add((width - 1, y))
    return frozenset(cells)


class Grid:
    """Playfield of fixed size whose border is a wall.

    The wall set is computed once at construction and never changes for
    the lifetime of the grid. Coordinates are ``(x, y)``.
    """

    def __init__(self, width: int, height: int) -> None:
        if width < 3 or height < 3:
            raise ValueError("Grid dimensions must be at least 3×3.")
        self.width = width
        self.height = height
        self.walls = build_walls(width, height)

    @property
    def center(self) -> Coordinate:
        """Return the board centre, where the snake starts."""
        return self.width // 2, self.height // 2

    @property
    def interior_size(self) -> int:
        """Number of non-wall cells."""
        return (self.width - 2) * (self.height - 2)

    def is_wall(self, coord: Coordinate) -> bool:
        """Check whether a coordinate is part of the border."""
        return coord in self.walls

    def is_interior(self, coord: Coordinate) -> bool:
        """Check whether a coordinate lies inside the border."""
        x, y = coord
        return 1 <= x <= self.width - 2 and 1 <= y <= self.height - 2

    def free_cells(self, occupied: Iterable[Coordinate]) -> list[Coordinate]:
        """Return every interior cell not present in *occupied*."""
        mask = np.zeros((self.height, self.width), dtype=bool)
        mask[1:-1, 1:-1] = True
        for x, y in occupied:
            if self.is_interior((x, y)):
                mask[y, x] = False
        ys, xs = np.nonzero(mask)
        return list(zip(xs.tolist(), ys.tolist(), strict=True))

    def draw_walls(self, terminal: Terminal, glyph: str, style: Style) -> None:
        """Render every wall cell once."""
        for x, y in sorted(self.walls):
            terminal.set_cell(x, y, glyph, style)
        terminal.flush()

    def to_dict(self) -> dict:
        """Serialize grid dimensions to a dictionary."""
        return {"width": self.width, "height": self.height}
