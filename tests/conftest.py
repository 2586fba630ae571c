"""Shared test fixtures."""

from __future__ import annotations

from datetime import datetime

import pytest

from datetime_select.keys import Key, KeyEvent

ENTER = KeyEvent(Key.ENTER)
LEFT = KeyEvent(Key.ARROW_LEFT)
RIGHT = KeyEvent(Key.ARROW_RIGHT)
UP = KeyEvent(Key.ARROW_UP)
DOWN = KeyEvent(Key.ARROW_DOWN)
BACKSPACE = KeyEvent(Key.BACKSPACE)


def char(c: str) -> KeyEvent:
    """A printable key press."""
    return KeyEvent(Key.CHAR, c)


def chars(text: str) -> list[KeyEvent]:
    """One printable key press per character of *text*."""
    return [char(c) for c in text]


class FakeTerm:
    """In-memory terminal that replays scripted keys and records output.

    ``lines`` keeps everything ever written; ``visible`` keeps what is
    still on screen after clears.  Running out of keys raises OSError,
    like a closed input stream.
    """

    def __init__(self, keys: list[KeyEvent]) -> None:
        self.keys = list(keys)
        self.lines: list[str] = []
        self.visible: list[str] = []
        self.cleared: list[int] = []

    def read_key(self) -> KeyEvent:
        if not self.keys:
            raise OSError("input closed")
        return self.keys.pop(0)

    def write_line(self, text: str) -> None:
        self.lines.append(text)
        self.visible.append(text)

    def clear_last_lines(self, n: int) -> None:
        self.cleared.append(n)
        if n > 0:
            del self.visible[-n:]


@pytest.fixture
def today() -> datetime:
    """A fixed 'today at midnight' so tests do not depend on the clock."""
    return datetime(2024, 3, 5)
