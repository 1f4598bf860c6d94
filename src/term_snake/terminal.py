"""Terminal capability used by the engine, plus its curses implementation."""

from __future__ import annotations

import asyncio
import curses
import enum
import logging
from dataclasses import dataclass
from typing import Protocol

logger = logging.getLogger(__name__)

_ESC = 27


class Color(enum.Enum):
    """Foreground/background colours understood by every terminal."""

    DEFAULT = "default"
    RED = "red"
    GREEN = "green"
    WHITE = "white"


@dataclass(frozen=True)
class Style:
    """A foreground/background colour pair for a single cell."""

    fg: Color = Color.DEFAULT
    bg: Color = Color.DEFAULT


class EventType(enum.Enum):
    KEY = "key"
    CHAR = "char"
    RESIZE = "resize"
    INTERRUPT = "interrupt"


class Key(enum.Enum):
    ESC = "esc"
    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"


@dataclass(frozen=True)
class Event:
    """A single input event read from the terminal."""

    type: EventType
    key: Key | None = None
    char: str | None = None


class Terminal(Protocol):
    """Drawing and input capability the game runs against."""

    def open(self) -> None: ...
    def close(self) -> None: ...
    def size(self) -> tuple[int, int]: ...
    def set_cell(self, x: int, y: int, glyph: str, style: Style) -> None: ...
    def draw_text(self, x: int, y: int, text: str, style: Style) -> None: ...
    def flush(self) -> None: ...
    async def poll_event(self) -> Event: ...
    def interrupt(self) -> None: ...


_CURSES_COLORS: dict[Color, int] = {
    Color.DEFAULT: -1,
    Color.RED: curses.COLOR_RED,
    Color.GREEN: curses.COLOR_GREEN,
    Color.WHITE: curses.COLOR_WHITE,
}

_CURSES_KEYS: dict[int, Key] = {
    _ESC: Key.ESC,
    curses.KEY_UP: Key.UP,
    curses.KEY_DOWN: Key.DOWN,
    curses.KEY_LEFT: Key.LEFT,
    curses.KEY_RIGHT: Key.RIGHT,
}


class CursesTerminal:
    """Terminal backed by the standard library ``curses`` module.

    Input is read with a non-blocking ``getch`` polled from the event loop,
    so :meth:`poll_event` blocks its caller without tying up a thread and
    :meth:`interrupt` can wake it on the next poll.
    """

    def __init__(self, poll_interval: float = 0.01) -> None:
        self.poll_interval = poll_interval
        self._screen: curses.window | None = None
        self._pairs: dict[Style, int] = {}
        self._interrupted = False

    def __enter__(self) -> CursesTerminal:
        self.open()
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def open(self) -> None:
        """Take over the terminal. Raises ``curses.error`` on failure."""
        screen = curses.initscr()
        try:
            curses.noecho()
            curses.cbreak()
            screen.keypad(True)
            screen.nodelay(True)
            curses.set_escdelay(25)
            try:
                curses.curs_set(0)
            except curses.error:
                logger.debug("Terminal cannot hide the cursor.")
            if curses.has_colors():
                curses.start_color()
                curses.use_default_colors()
        except curses.error:
            curses.endwin()
            raise
        self._screen = screen
        logger.info("Terminal opened at %dx%d.", *self.size())

    def close(self) -> None:
        """Restore the terminal. Safe to call more than once."""
        if self._screen is None:
            return
        self._screen.keypad(False)
        curses.nocbreak()
        curses.echo()
        curses.endwin()
        self._screen = None
        logger.info("Terminal closed.")

    def size(self) -> tuple[int, int]:
        height, width = self._require_screen().getmaxyx()
        return width, height

    def set_cell(self, x: int, y: int, glyph: str, style: Style) -> None:
        """Draw one glyph; cells outside the screen are silently clipped."""
        width, height = self.size()
        if not (0 <= x < width and 0 <= y < height):
            return
        try:
            self._require_screen().addstr(y, x, glyph, self._attr(style))
        except curses.error:
            # Writing the bottom-right cell moves the cursor off-screen.
            if (x, y) != (width - 1, height - 1):
                raise

    def draw_text(self, x: int, y: int, text: str, style: Style) -> None:
        for offset, ch in enumerate(text):
            self.set_cell(x + offset, y, ch, style)

    def flush(self) -> None:
        self._require_screen().refresh()

    async def poll_event(self) -> Event:
        """Wait for the next key press or an interrupt."""
        screen = self._require_screen()
        while True:
            if self._interrupted:
                self._interrupted = False
                return Event(EventType.INTERRUPT)
            code = screen.getch()
            if code == curses.ERR:
                await asyncio.sleep(self.poll_interval)
                continue
            event = self._translate(code)
            if event is not None:
                return event

    def interrupt(self) -> None:
        """Make the pending or next :meth:`poll_event` return INTERRUPT."""
        self._interrupted = True

    @staticmethod
    def _translate(code: int) -> Event | None:
        if code in _CURSES_KEYS:
            return Event(EventType.KEY, key=_CURSES_KEYS[code])
        if code == curses.KEY_RESIZE:
            return Event(EventType.RESIZE)
        if 32 <= code < 127:
            return Event(EventType.CHAR, char=chr(code))
        logger.debug("Ignoring key code %d.", code)
        return None

    def _attr(self, style: Style) -> int:
        if not curses.has_colors():
            return curses.A_NORMAL
        pair = self._pairs.get(style)
        if pair is None:
            pair = len(self._pairs) + 1
            curses.init_pair(
                pair, _CURSES_COLORS[style.fg], _CURSES_COLORS[style.bg],
            )
            self._pairs[style] = pair
        return curses.color_pair(pair)

    def _require_screen(self) -> curses.window:
        if self._screen is None:
            raise RuntimeError("Terminal is not open.")
        return self._screen
