"""Tick-driven movement, collision, and growth."""

from __future__ import annotations

import asyncio
import enum
import logging
from typing import TYPE_CHECKING

from term_snake.food import SpawnBlockedError
from term_snake.terminal import Color, Style

if TYPE_CHECKING:
    from term_snake.config import GameConfig
    from term_snake.food import FoodSpawner
    from term_snake.terminal import Terminal
    from term_snake.world import WorldState

logger = logging.getLogger(__name__)

SNAKE_STYLE = Style(fg=Color.WHITE)
MESSAGE_STYLE = Style(fg=Color.RED)
_BLANK = Style()


class EngineState(enum.Enum):
    RUNNING = "running"
    OVER = "over"


class TickOutcome(enum.Enum):
    """What a single tick did to the world."""

    MOVED = "moved"
    ATE = "ate"
    CRASHED = "crashed"
    BLOCKED = "blocked"


class GameEngine:
    """Single-snake, tick-based engine.

    :meth:`step` advances the world by one tick; :meth:`run` drives it at
    the world's current tick interval until the snake crashes.
    """

    def __init__(
        self,
        world: WorldState,
        spawner: FoodSpawner,
        terminal: Terminal,
        config: GameConfig,
    ) -> None:
        self.world = world
        self.spawner = spawner
        self.terminal = terminal
        self.config = config
        self.state = EngineState.RUNNING
        self.outcome: TickOutcome | None = None
        self.tick = 0

    def render_snake(self) -> None:
        for x, y in self.world.snake:
            self.terminal.set_cell(x, y, self.config.snake_glyph, SNAKE_STYLE)

    def step(self) -> TickOutcome:
        """Advance the game by one tick."""
        if self.state is EngineState.OVER:
            assert self.outcome is not None  # noqa: S101
            return self.outcome

        world = self.world
        snake = world.snake
        new_head = world.heading.step(snake.head)
        world.clear_latch()
        self.tick += 1

        # Checked against the pre-move body, head excluded.
        if world.grid.is_wall(new_head) or new_head in snake.body_without_head():
            return self._finish(TickOutcome.CRASHED)

        old_tail = snake.advance(new_head)

        if new_head in world.food:
            world.food.remove(new_head)
            snake.regrow(old_tail)
            world.score += 1
            world.speed_up(self.config.speed_step_ms)
            try:
                self.spawner.spawn(world)
            except SpawnBlockedError:
                return self._finish(TickOutcome.BLOCKED)
            return TickOutcome.ATE

        self.terminal.set_cell(old_tail[0], old_tail[1], " ", _BLANK)
        return TickOutcome.MOVED

    async def run(self) -> TickOutcome:
        """Run ticks until the game ends; returns the final outcome."""
        try:
            while True:
                self.render_snake()
                self.terminal.flush()
                await asyncio.sleep(self.world.interval_ms / 1000.0)
                outcome = self.step()
                if self.state is EngineState.OVER:
                    await self.show_end_message(outcome)
                    return outcome
        except asyncio.CancelledError:
            logger.info("Engine loop cancelled at tick %d.", self.tick)
            raise

    def get_state(self) -> dict:
        """Return the full, serializable game state."""
        world = self.world
        return {
            "tick": self.tick,
            "score": world.score,
            "state": self.state.value,
            "grid": world.grid.to_dict(),
            "snake": world.snake.to_dict(),
            "food": [list(p) for p in world.food],
            "heading": world.heading.name,
            "interval_ms": world.interval_ms,
        }

    def _finish(self, outcome: TickOutcome) -> TickOutcome:
        self.state = EngineState.OVER
        self.outcome = outcome
        logger.info(
            "Game ended (%s) at tick %d with score %d.",
            outcome.value, self.tick, self.world.score,
        )
        return outcome

    async def show_end_message(self, outcome: TickOutcome) -> None:
        """Draw the end-of-game message centred on the board, then pause."""
        if outcome is TickOutcome.BLOCKED:
            message = self.config.blocked_message
        else:
            message = self.config.game_over_message
        grid = self.world.grid
        x = max(grid.width // 2 - len(message) // 2, 0)
        self.terminal.draw_text(
            x, grid.height // 2, message[: grid.width - x], MESSAGE_STYLE,
        )
        self.terminal.flush()
        await asyncio.sleep(self.config.game_over_delay)
