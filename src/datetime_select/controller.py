"""Field-cursor state machine for interactive date/time selection."""

from __future__ import annotations

import logging
from datetime import datetime
from typing import TYPE_CHECKING

from datetime_select import adjust
from datetime_select.errors import InternalConsistencyError
from datetime_select.formatter import (
    format_digits,
    format_fields,
    format_result,
    weekday_name,
)
from datetime_select.keys import Key, KeyEvent
from datetime_select.models import DateType, Field, SelectConfig, today_midnight

if TYPE_CHECKING:
    from datetime_select.terminal import Term
    from datetime_select.theme import ThemeRenderer

logger = logging.getLogger(__name__)

MAX_DIGITS = 4
DIGITS = frozenset("0123456789")


class SelectionController:
    """Mutable selection state driven by key events.

    Holds the current value, the index of the active field and the digits
    typed so far for that field.  The value is kept inside the configured
    range after every event except confirmation.
    """

    def __init__(self, config: SelectConfig, today: datetime | None = None) -> None:
        """Initialize the state from *config*.

        Args:
            config: The session configuration.
            today: Starting value used when ``config.default`` is None.
                Defaults to the current UTC date at midnight.
        """
        self.config = config
        start = config.default
        if start is None:
            start = today if today is not None else today_midnight()
        self.value = self.clamp(start.replace(microsecond=0))
        self.pos = 0
        self.digits: list[int] = []

    @property
    def date_type(self) -> DateType:
        return self.config.date_type

    @property
    def field(self) -> Field:
        """The field under the cursor."""
        return self.date_type.fields[self.pos]

    def clamp(self, value: datetime) -> datetime:
        """Snap *value* into the configured ``[minimum, maximum]`` range."""
        clamped = min(max(value, self.config.minimum), self.config.maximum)
        if clamped != value:
            logger.debug("Clamped %s to %s", value.isoformat(), clamped.isoformat())
        return clamped

    def handle(self, event: KeyEvent) -> bool:
        """Apply one key event.

        Args:
            event: The key press to process.

        Returns:
            True if the event confirmed the selection, False otherwise.
        """
        match event:
            case KeyEvent(Key.ENTER):
                logger.debug("Confirmed %s", self.value.isoformat())
                return True
            case KeyEvent(Key.ARROW_RIGHT) | KeyEvent(Key.CHAR, "l"):
                self.move(1)
            case KeyEvent(Key.ARROW_LEFT) | KeyEvent(Key.CHAR, "h"):
                self.move(-1)
            case KeyEvent(Key.ARROW_UP) | KeyEvent(Key.CHAR, "j"):
                self.step(1)
            case KeyEvent(Key.ARROW_DOWN) | KeyEvent(Key.CHAR, "k"):
                self.step(-1)
            case KeyEvent(Key.CHAR, char) if char in DIGITS:
                self.enter_digit(int(char))
            case KeyEvent(Key.CHAR):
                self.digits.clear()
            case KeyEvent(Key.BACKSPACE):
                self.erase()
        self.value = self.clamp(self.value)
        return False

    def move(self, delta: int) -> None:
        """Move the cursor by *delta* fields, wrapping at both ends."""
        self.pos = (self.pos + delta) % len(self.date_type.fields)
        self.digits.clear()

    def step(self, direction: int) -> None:
        """Increment (``direction > 0``) or decrement the active field."""
        self.value = adjust.step(self.value, self.field, direction)
        self.digits.clear()

    def enter_digit(self, digit: int) -> None:
        """Buffer a typed digit and apply it once the field is complete.

        Four digits complete the year; two digits complete any other field.
        An invalid result (month 13, day 32, ...) is dropped and the
        previous value is kept.  The buffer is cleared once a field
        completes, whether or not the value was accepted.
        """
        self.digits.append(digit)
        if self.pos == 0 and len(self.digits) == MAX_DIGITS:
            if self.date_type is DateType.TIME:
                raise InternalConsistencyError("Time selection has no four digit field")
            d = self.digits
            self._apply(Field.YEAR, d[0] * 1000 + d[1] * 100 + d[2] * 10 + d[3])
        elif len(self.digits) == 2 and self.field is not Field.YEAR:
            self._apply(self.field, self.digits[0] * 10 + self.digits[1])

    def _apply(self, field: Field, number: int) -> None:
        updated = adjust.with_field(self.value, field, number)
        if updated is None:
            logger.debug("Rejected %s=%d for %s", field.value, number, self.value.isoformat())
        else:
            self.value = updated
        self.digits.clear()

    def erase(self) -> None:
        """Drop the most recently typed digit, if any."""
        if self.digits:
            self.digits.pop()

    def render(self) -> str:
        """Return display markup for the current value and cursor."""
        text = format_fields(self.value, self.date_type, self.pos)
        if self.config.weekday:
            text = f"{text}, {weekday_name(self.value)}"
        return text

    def typed(self) -> str:
        """Return the digits typed so far for the active field."""
        return format_digits(self.digits)

    def result(self) -> str:
        """Return the current value formatted for the caller."""
        return format_result(self.value, self.date_type)

    def interact_on(self, term: Term, render: ThemeRenderer) -> str:
        """Run the render/read loop until the user confirms.

        Each turn renders the value, optionally echoes typed digits, blocks
        for one key, applies it and clears the rendered lines.  Errors
        raised by *term* propagate unchanged.

        Args:
            term: Terminal used for key input and for the digit echo line.
            render: Renderer that draws the prompt and value.

        Returns:
            The confirmed value formatted by :meth:`result`.
        """
        while True:
            render.datetime(self.config.prompt, self.render())
            if self.config.show_match:
                term.write_line(self.typed())

            if self.handle(term.read_key()):
                if self.config.clear:
                    render.clear()
                if self.config.show_match:
                    term.clear_last_lines(1)
                return self.result()

            render.clear()
            if self.config.show_match:
                term.clear_last_lines(1)
