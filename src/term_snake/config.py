"""Tunable game settings."""

from __future__ import annotations

import json
import logging
from dataclasses import asdict, dataclass
from pathlib import Path

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GameConfig:
    """Timing, glyph, and spawn settings for a session.

    Supports JSON serialization so a tuned setup can be replayed.
    """

    # Timing (milliseconds between ticks)
    initial_interval_ms: int = 200
    speed_step_ms: int = 10
    slow_step_ms: int = 10
    min_interval_ms: int = 10
    game_over_delay: float = 3.0
    input_poll_ms: int = 10

    # Food
    max_spawn_attempts: int = 1_000
    seed: int | None = None

    # Glyphs
    wall_glyph: str = "#"
    snake_glyph: str = "@"
    food_glyph: str = "*"
    game_over_message: str = "Game Over!"
    blocked_message: str = "Board full!"

    def __post_init__(self) -> None:
        if self.min_interval_ms < 1:
            raise ValueError("min_interval_ms must be at least 1.")
        if self.initial_interval_ms < self.min_interval_ms:
            raise ValueError(
                "initial_interval_ms must not be below min_interval_ms.",
            )
        if self.speed_step_ms < 0 or self.slow_step_ms < 0:
            raise ValueError("speed steps must be >= 0.")
        if self.game_over_delay < 0:
            raise ValueError("game_over_delay must be >= 0.")
        if self.input_poll_ms < 1:
            raise ValueError("input_poll_ms must be at least 1.")
        if self.max_spawn_attempts < 1:
            raise ValueError("max_spawn_attempts must be at least 1.")
        for name in ("wall_glyph", "snake_glyph", "food_glyph"):
            if len(getattr(self, name)) != 1:
                raise ValueError(f"{name} must be a single character.")

    def to_dict(self) -> dict:
        return asdict(self)

    def save(self, path: str | Path) -> None:
        """Write config to a JSON file."""
        p = Path(path)
        p.parent.mkdir(parents=True, exist_ok=True)
        p.write_text(json.dumps(self.to_dict(), indent=2))
        logger.info("Config saved to %s", p)

    @classmethod
    def load(cls, path: str | Path) -> GameConfig:
        """Load config from a JSON file."""
        raw = json.loads(Path(path).read_text())
        return cls(**raw)
