"""Key events consumed by the selection controller."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Key(Enum):
    """Kinds of key press the selection understands."""

    ENTER = "enter"
    ARROW_LEFT = "left"
    ARROW_RIGHT = "right"
    ARROW_UP = "up"
    ARROW_DOWN = "down"
    BACKSPACE = "backspace"
    CHAR = "char"
    UNKNOWN = "unknown"


@dataclass(frozen=True)
class KeyEvent:
    """A single key press; ``char`` is set only for ``Key.CHAR``."""

    key: Key
    char: str | None = None


# Raw terminal sequences (cbreak/raw mode) to key kinds.
_SEQUENCES: dict[str, Key] = {
    "\r": Key.ENTER,
    "\n": Key.ENTER,
    "\x7f": Key.BACKSPACE,
    "\x08": Key.BACKSPACE,
    "\x1b[A": Key.ARROW_UP,
    "\x1b[B": Key.ARROW_DOWN,
    "\x1b[C": Key.ARROW_RIGHT,
    "\x1b[D": Key.ARROW_LEFT,
    "\x1bOA": Key.ARROW_UP,
    "\x1bOB": Key.ARROW_DOWN,
    "\x1bOC": Key.ARROW_RIGHT,
    "\x1bOD": Key.ARROW_LEFT,
}

_TEXTUAL_KEYS: dict[str, Key] = {
    "enter": Key.ENTER,
    "left": Key.ARROW_LEFT,
    "right": Key.ARROW_RIGHT,
    "up": Key.ARROW_UP,
    "down": Key.ARROW_DOWN,
    "backspace": Key.BACKSPACE,
}


def decode(sequence: str) -> KeyEvent:
    """Translate raw terminal input into a key event.

    Args:
        sequence: One key press as read from a raw-mode terminal, either a
            single character or an escape sequence.

    Raises:
        KeyboardInterrupt: On Ctrl-C, since raw mode suppresses SIGINT.
    """
    if sequence == "\x03":
        raise KeyboardInterrupt
    key = _SEQUENCES.get(sequence)
    if key is not None:
        return KeyEvent(key)
    if len(sequence) == 1 and sequence.isprintable():
        return KeyEvent(Key.CHAR, sequence)
    return KeyEvent(Key.UNKNOWN)


def from_textual(key: str, character: str | None) -> KeyEvent:
    """Translate a Textual key event (``event.key``, ``event.character``)."""
    mapped = _TEXTUAL_KEYS.get(key)
    if mapped is not None:
        return KeyEvent(mapped)
    if character and len(character) == 1 and character.isprintable():
        return KeyEvent(Key.CHAR, character)
    return KeyEvent(Key.UNKNOWN)
