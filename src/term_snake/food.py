"""Food spawning logic."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import numpy as np

from term_snake.terminal import Color, Style

if TYPE_CHECKING:
    from term_snake.grid import Grid
    from term_snake.snake import Coordinate
    from term_snake.terminal import Terminal
    from term_snake.world import WorldState

logger = logging.getLogger(__name__)


class SpawnBlockedError(RuntimeError):
    """Raised when no interior cell is free for a new food item."""


class FoodSpawner:
    """Places food on random interior cells not covered by the snake.

    Uses a NumPy RNG so placement is reproducible for a given seed.
    Sampling is bounded: after ``max_attempts`` misses the spawner picks
    from the remaining free cells, and a full board raises
    :class:`SpawnBlockedError` instead of spinning.
    """

    def __init__(
        self,
        grid: Grid,
        terminal: Terminal,
        rng: np.random.Generator | None = None,
        max_attempts: int = 1_000,
        glyph: str = "*",
        style: Style = Style(fg=Color.GREEN),
    ) -> None:
        if max_attempts < 1:
            raise ValueError("max_attempts must be at least 1.")
        self.grid = grid
        self.terminal = terminal
        self.rng = rng if rng is not None else np.random.default_rng()
        self.max_attempts = max_attempts
        self.glyph = glyph
        self.style = style

    def spawn(self, world: WorldState) -> Coordinate:
        """Add one food item to *world* and draw it.

        Returns the chosen coordinate.
        """
        pos = self._pick(world)
        world.food.append(pos)
        self.terminal.set_cell(pos[0], pos[1], self.glyph, self.style)
        logger.debug("Food spawned at %s.", pos)
        return pos

    def _pick(self, world: WorldState) -> Coordinate:
        snake = world.snake
        for _ in range(self.max_attempts):
            pos = (
                int(self.rng.integers(1, self.grid.width - 1)),
                int(self.rng.integers(1, self.grid.height - 1)),
            )
            if not snake.occupies(pos):
                return pos

        free = self.grid.free_cells(snake)
        if not free:
            logger.warning("No free interior cell left for food.")
            raise SpawnBlockedError("Snake covers every interior cell.")
        return free[int(self.rng.integers(len(free)))]
