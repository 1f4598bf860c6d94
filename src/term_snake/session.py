"""Session wiring: one board, one engine loop, one input loop."""

from __future__ import annotations

import asyncio
import enum
import logging
from typing import TYPE_CHECKING

import numpy as np

from term_snake.controls import InputHandler
from term_snake.engine import GameEngine, TickOutcome
from term_snake.food import FoodSpawner, SpawnBlockedError
from term_snake.grid import Grid
from term_snake.terminal import Color, Style
from term_snake.world import WorldState

if TYPE_CHECKING:
    from term_snake.config import GameConfig
    from term_snake.terminal import Terminal

logger = logging.getLogger(__name__)

WALL_STYLE = Style(fg=Color.RED)
FOOD_STYLE = Style(fg=Color.GREEN)


class SessionOutcome(enum.Enum):
    """How a session ended."""

    QUIT = "quit"
    CRASHED = "crashed"
    BLOCKED = "blocked"


class Session:
    """Runs a single game from the first tick to game over or quit.

    The engine and input loops share one :class:`WorldState`. Whichever
    loop finishes first ends the session; the other is then interrupted
    and awaited before :meth:`run` returns.
    """

    def __init__(
        self,
        terminal: Terminal,
        config: GameConfig,
        rng: np.random.Generator | None = None,
    ) -> None:
        self.terminal = terminal
        self.config = config
        self.rng = rng if rng is not None else np.random.default_rng(config.seed)

        width, height = terminal.size()
        self.grid = Grid(width, height)
        self.world = WorldState.new(self.grid, config)
        self.spawner = FoodSpawner(
            self.grid,
            terminal,
            rng=self.rng,
            max_attempts=config.max_spawn_attempts,
            glyph=config.food_glyph,
            style=FOOD_STYLE,
        )
        self.engine = GameEngine(self.world, self.spawner, terminal, config)
        self.controls = InputHandler(self.world, self.spawner, config)

    async def run(self) -> SessionOutcome:
        """Play the session and return how it ended."""
        logger.info(
            "Session starting on a %dx%d board.",
            self.grid.width, self.grid.height,
        )
        self.grid.draw_walls(self.terminal, self.config.wall_glyph, WALL_STYLE)
        try:
            self.spawner.spawn(self.world)
        except SpawnBlockedError:
            logger.info("No room for the first food item.")
            await self.engine.show_end_message(TickOutcome.BLOCKED)
            return SessionOutcome.BLOCKED

        engine_task = asyncio.create_task(self.engine.run(), name="engine")
        input_task = asyncio.create_task(
            self.controls.run(self.terminal), name="input",
        )
        done, pending = await asyncio.wait(
            {engine_task, input_task}, return_when=asyncio.FIRST_COMPLETED,
        )

        # Unblock whichever loop is still waiting: the input loop on its
        # read, the engine loop on its tick sleep.
        if input_task in pending:
            self.terminal.interrupt()
        if engine_task in pending:
            engine_task.cancel()
        await asyncio.gather(*pending, return_exceptions=True)

        # Prefer the engine's result if both finished in the same pass.
        first = engine_task if engine_task in done else input_task
        outcome = self._to_outcome(first.result())
        logger.info(
            "Session ended (%s) with score %d.",
            outcome.value, self.world.score,
        )
        return outcome

    @staticmethod
    def _to_outcome(result: object) -> SessionOutcome:
        if result is TickOutcome.CRASHED:
            return SessionOutcome.CRASHED
        if result is TickOutcome.BLOCKED:
            return SessionOutcome.BLOCKED
        return SessionOutcome.QUIT
