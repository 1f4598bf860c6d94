"""Tests for the curses terminal adapter that do not need a real tty."""

import curses
from unittest.mock import MagicMock, patch

import pytest

from term_snake.terminal import CursesTerminal, Event, EventType, Key, Style


class TestTranslate:
    @pytest.mark.parametrize(
        ("code", "key"),
        [
            (27, Key.ESC),
            (curses.KEY_UP, Key.UP),
            (curses.KEY_DOWN, Key.DOWN),
            (curses.KEY_LEFT, Key.LEFT),
            (curses.KEY_RIGHT, Key.RIGHT),
        ],
    )
    def test_keys(self, code, key):
        assert CursesTerminal._translate(code) == Event(EventType.KEY, key=key)

    def test_printable(self):
        assert CursesTerminal._translate(ord("+")) == Event(
            EventType.CHAR, char="+",
        )

    def test_resize(self):
        assert CursesTerminal._translate(curses.KEY_RESIZE).type is EventType.RESIZE

    def test_unknown_ignored(self):
        assert CursesTerminal._translate(curses.KEY_F1) is None


class TestCursesTerminal:
    def test_requires_open(self):
        with pytest.raises(RuntimeError, match="not open"):
            CursesTerminal().size()

    def test_close_when_not_open(self):
        CursesTerminal().close()

    def test_size_is_width_height(self):
        terminal = CursesTerminal()
        terminal._screen = MagicMock()
        terminal._screen.getmaxyx.return_value = (24, 80)
        assert terminal.size() == (80, 24)

    @pytest.mark.asyncio
    async def test_poll_returns_key(self):
        terminal = CursesTerminal(poll_interval=0.001)
        terminal._screen = MagicMock()
        terminal._screen.getch.side_effect = [curses.ERR, curses.ERR, ord("n")]
        assert await terminal.poll_event() == Event(EventType.CHAR, char="n")

    @pytest.mark.asyncio
    async def test_interrupt_wakes_poll(self):
        terminal = CursesTerminal(poll_interval=0.001)
        terminal._screen = MagicMock()
        terminal._screen.getch.return_value = curses.ERR
        terminal.interrupt()
        event = await terminal.poll_event()
        assert event.type is EventType.INTERRUPT
        terminal._screen.getch.return_value = ord("x")
        assert (await terminal.poll_event()).char == "x"


class TestCursesClipping:
    @pytest.fixture()
    def terminal(self):
        terminal = CursesTerminal()
        terminal._screen = MagicMock()
        terminal._screen.getmaxyx.return_value = (5, 8)
        return terminal

    def test_off_screen_cells_skipped(self, terminal):
        with patch("term_snake.terminal.curses.has_colors", return_value=False):
            terminal.draw_text(-1, 2, "Game Over!", Style())
        drawn = [c.args[:2] for c in terminal._screen.addstr.call_args_list]
        assert drawn == [(2, x) for x in range(8)]

    def test_bottom_right_error_tolerated(self, terminal):
        terminal._screen.addstr.side_effect = curses.error("ERR")
        with patch("term_snake.terminal.curses.has_colors", return_value=False):
            terminal.set_cell(7, 4, "#", Style())
            with pytest.raises(curses.error):
                terminal.set_cell(3, 2, "#", Style())
