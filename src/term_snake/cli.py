"""Command-line launcher for the terminal snake game."""

from __future__ import annotations

import argparse
import asyncio
import curses
import logging
import sys

from term_snake.config import GameConfig
from term_snake.session import Session
from term_snake.terminal import CursesTerminal

logger = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="term-snake",
        description=(
            "Play snake in the terminal. Arrow keys steer, Esc quits, "
            "'+'/'-' change speed, 'n' drops extra food."
        ),
    )
    parser.add_argument(
        "--config", type=str, default=None,
        help="Path to a JSON config file.",
    )
    parser.add_argument(
        "--seed", type=int, default=None,
        help="Seed for food placement (overrides the config file).",
    )
    parser.add_argument(
        "--log-file", type=str, default=None,
        help="Write logs to this file; logging is off otherwise.",
    )
    parser.add_argument(
        "--log-level", type=str, default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
    )
    return parser


def _configure_logging(args: argparse.Namespace) -> None:
    # The game owns the screen, so logs never go to stderr.
    if args.log_file:
        logging.basicConfig(
            filename=args.log_file,
            level=getattr(logging, args.log_level),
            format="%(asctime)s %(name)s %(levelname)s %(message)s",
        )
    else:
        logging.basicConfig(handlers=[logging.NullHandler()])


def _load_config(args: argparse.Namespace) -> GameConfig:
    config = GameConfig.load(args.config) if args.config else GameConfig()
    if args.seed is not None:
        d = config.to_dict()
        d["seed"] = args.seed
        config = GameConfig(**d)
    return config


def main(argv: list[str] | None = None) -> int:
    """Entry point for the ``term-snake`` CLI."""
    parser = _build_parser()
    args = parser.parse_args(argv)
    _configure_logging(args)
    config = _load_config(args)

    terminal = CursesTerminal(poll_interval=config.input_poll_ms / 1000.0)
    try:
        terminal.open()
    except curses.error as exc:
        logger.critical("Could not initialise the terminal: %s", exc)
        print(f"term-snake: cannot start terminal: {exc}", file=sys.stderr)  # noqa: T201
        return 1

    try:
        outcome = asyncio.run(Session(terminal, config).run())
    finally:
        terminal.close()
    logger.info("Exiting after %s.", outcome.value)
    return 0


if __name__ == "__main__":
    sys.exit(main())
