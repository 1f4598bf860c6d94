"""Shared mutable state for one game session."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from term_snake.snake import Coordinate, Direction, Snake

if TYPE_CHECKING:
    from term_snake.config import GameConfig
    from term_snake.grid import Grid

logger = logging.getLogger(__name__)


@dataclass
class WorldState:
    """Everything the engine and input loops read and write.

    Both loops run on the same event loop, so every mutation happens
    between suspension points and no lock is needed.
    """

    grid: Grid
    snake: Snake
    interval_ms: int
    min_interval_ms: int
    food: list[Coordinate] = field(default_factory=list)
    heading: Direction = Direction.UP
    heading_latched: bool = False
    score: int = 0

    @classmethod
    def new(cls, grid: Grid, config: GameConfig) -> WorldState:
        """Create the starting state: a one-segment snake at the centre."""
        return cls(
            grid=grid,
            snake=Snake([grid.center]),
            interval_ms=config.initial_interval_ms,
            min_interval_ms=config.min_interval_ms,
        )

    def request_heading(self, direction: Direction) -> bool:
        """Apply at most one heading change per tick.

        A direct reversal is refused unless the snake is a single segment.
        Returns whether the request took effect.
        """
        if self.heading_latched:
            return False
        if len(self.snake) > 1 and direction is self.heading.opposite:
            return False
        self.heading = direction
        self.heading_latched = True
        return True

    def clear_latch(self) -> None:
        """Allow the next heading change; called once per tick."""
        self.heading_latched = False

    def speed_up(self, step_ms: int) -> None:
        """Shorten the tick interval, never going below the floor."""
        self.interval_ms = max(self.interval_ms - step_ms, self.min_interval_ms)
        logger.debug("Tick interval now %d ms.", self.interval_ms)

    def slow_down(self, step_ms: int) -> None:
        """Lengthen the tick interval."""
        self.interval_ms += step_ms
        logger.debug("Tick interval now %d ms.", self.interval_ms)
