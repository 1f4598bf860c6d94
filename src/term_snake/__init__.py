"""Term Snake: a real-time snake game for the terminal."""

from term_snake.config import GameConfig
from term_snake.controls import Command, InputHandler
from term_snake.engine import EngineState, GameEngine, TickOutcome
from term_snake.food import FoodSpawner, SpawnBlockedError
from term_snake.grid import Grid, build_walls
from term_snake.session import Session, SessionOutcome
from term_snake.snake import Direction, Snake
from term_snake.world import WorldState

__all__ = [
    "Command",
    "Direction",
    "EngineState",
    "FoodSpawner",
    "GameConfig",
    "GameEngine",
    "Grid",
    "InputHandler",
    "Session",
    "SessionOutcome",
    "Snake",
    "SpawnBlockedError",
    "TickOutcome",
    "WorldState",
    "build_walls",
]
