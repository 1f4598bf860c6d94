"""Keyboard input translation."""

from __future__ import annotations

import enum
import logging
from typing import TYPE_CHECKING

from term_snake.food import SpawnBlockedError
from term_snake.snake import Direction
from term_snake.terminal import EventType, Key

if TYPE_CHECKING:
    from term_snake.config import GameConfig
    from term_snake.food import FoodSpawner
    from term_snake.terminal import Event, Terminal
    from term_snake.world import WorldState

logger = logging.getLogger(__name__)

_HEADINGS: dict[Key, Direction] = {
    Key.UP: Direction.UP,
    Key.DOWN: Direction.DOWN,
    Key.LEFT: Direction.LEFT,
    Key.RIGHT: Direction.RIGHT,
}

SPEED_UP_CHAR = "+"
SLOW_DOWN_CHAR = "-"
SPAWN_FOOD_CHAR = "n"


class Command(enum.Enum):
    NONE = "none"
    QUIT = "quit"


class InputHandler:
    """Applies input events to the shared world state."""

    def __init__(
        self,
        world: WorldState,
        spawner: FoodSpawner,
        config: GameConfig,
    ) -> None:
        self.world = world
        self.spawner = spawner
        self.config = config

    def handle(self, event: Event) -> Command:
        """Dispatch a single event. Returns QUIT when the session should end."""
        if event.type is EventType.INTERRUPT:
            return Command.QUIT
        if event.type is EventType.KEY:
            if event.key is Key.ESC:
                return Command.QUIT
            direction = _HEADINGS.get(event.key)
            if direction is not None and self.world.request_heading(direction):
                logger.debug("Heading set to %s.", direction.name)
        elif event.type is EventType.CHAR:
            self._handle_char(event.char)
        return Command.NONE

    async def run(self, terminal: Terminal) -> Command:
        """Read and handle events until a quit is requested."""
        while True:
            event = await terminal.poll_event()
            if self.handle(event) is Command.QUIT:
                logger.info("Input loop stopping on %s.", event.type.value)
                return Command.QUIT

    def _handle_char(self, char: str | None) -> None:
        if char == SLOW_DOWN_CHAR:
            self.world.slow_down(self.config.slow_step_ms)
        elif char == SPEED_UP_CHAR:
            self.world.speed_up(self.config.speed_step_ms)
        elif char == SPAWN_FOOD_CHAR:
            try:
                self.spawner.spawn(self.world)
            except SpawnBlockedError:
                logger.warning("Extra food requested on a full board.")
