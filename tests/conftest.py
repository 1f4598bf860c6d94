"""Shared fixtures: an in-memory terminal."""

from __future__ import annotations

import asyncio
from collections import deque

import pytest

from term_snake.terminal import Event, EventType, Style


class FakeTerminal:
    """Records drawing calls and replays queued input events."""

    def __init__(self, width: int = 20, height: int = 10, events=()) -> None:
        self.width = width
        self.height = height
        self.cells: dict[tuple[int, int], str] = {}
        self.draw_calls: list[tuple[int, int, str]] = []
        self.texts: list[str] = []
        self.flushes = 0
        self.interrupts = 0
        self.opened = False
        self.closed = False
        self._events: deque[Event] = deque(events)

    def open(self) -> None:
        self.opened = True

    def close(self) -> None:
        self.closed = True

    def size(self) -> tuple[int, int]:
        return self.width, self.height

    def _check_bounds(self, x: int, y: int) -> None:
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise ValueError(f"Cell ({x}, {y}) is off-screen.")

    def set_cell(self, x: int, y: int, glyph: str, style: Style) -> None:
        self._check_bounds(x, y)
        self.cells[(x, y)] = glyph
        self.draw_calls.append((x, y, glyph))

    def draw_text(self, x: int, y: int, text: str, style: Style) -> None:
        self._check_bounds(x, y)
        self._check_bounds(x + len(text) - 1, y)
        self.texts.append(text)
        for offset, ch in enumerate(text):
            self.cells[(x + offset, y)] = ch

    def flush(self) -> None:
        self.flushes += 1

    def push(self, event: Event) -> None:
        self._events.append(event)

    async def poll_event(self) -> Event:
        while not self._events:
            await asyncio.sleep(0.001)
        return self._events.popleft()

    def interrupt(self) -> None:
        self.interrupts += 1
        self._events.append(Event(EventType.INTERRUPT))


@pytest.fixture()
def terminal() -> FakeTerminal:
    return FakeTerminal()


@pytest.fixture()
def make_terminal():
    return FakeTerminal
