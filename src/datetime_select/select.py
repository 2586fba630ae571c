"""Builder-style entry point for interactive date/time selection."""

from __future__ import annotations

from dataclasses import replace
from datetime import datetime

from datetime_select.controller import SelectionController
from datetime_select.models import DateType, SelectConfig, parse_datetime
from datetime_select.terminal import Term
from datetime_select.theme import Theme, ThemeRenderer, get_default_theme


def _coerce(value: str | datetime) -> datetime:
    if isinstance(value, datetime):
        if value.tzinfo is not None:
            value = value.replace(tzinfo=None)
        return value.replace(microsecond=0)
    return parse_datetime(value)


class DateTimeSelect:
    """Renders a date/time selection prompt.

    Every setter validates its input immediately and returns ``self`` so
    calls can be chained::

        value = DateTimeSelect().with_prompt("Start").date_type(DateType.DATE).interact()

    Values can be changed with Up/Down (or ``j``/``k``), fields are picked
    with Left/Right (or ``h``/``l``), and digits can be typed directly:
    four for a year, two for any other field.  Enter confirms.
    """

    def __init__(self, theme: Theme | None = None) -> None:
        """Initialize with default configuration.

        Args:
            theme: Theme used to draw the prompt. Defaults to the plain theme.
        """
        self.theme = theme if theme is not None else get_default_theme()
        self._config = SelectConfig()

    @property
    def config(self) -> SelectConfig:
        """The configuration accumulated so far."""
        return self._config

    def _set(self, **changes) -> DateTimeSelect:
        self._config = replace(self._config, **changes)
        return self

    def with_prompt(self, prompt: str) -> DateTimeSelect:
        """Set the prompt shown before the value."""
        return self._set(prompt=prompt)

    def default(self, value: str | datetime) -> DateTimeSelect:
        """Set the starting value (an RFC 3339 string or a datetime)."""
        return self._set(default=_coerce(value))

    def weekday(self, val: bool) -> DateTimeSelect:
        """Set whether the weekday name is shown after the value."""
        return self._set(weekday=val)

    def date_type(self, val: DateType | str) -> DateTimeSelect:
        """Select a date, a time, or a date-time."""
        if isinstance(val, str):
            val = DateType.parse(val)
        return self._set(date_type=val)

    def min(self, value: str | datetime) -> DateTimeSelect:
        """Set the earliest selectable value.

        Raises:
            ConfigurationError: If the value is malformed or after the maximum.
        """
        return self._set(minimum=_coerce(value))

    def max(self, value: str | datetime) -> DateTimeSelect:
        """Set the latest selectable value.

        Raises:
            ConfigurationError: If the value is malformed or before the minimum.
        """
        return self._set(maximum=_coerce(value))

    def clear(self, val: bool) -> DateTimeSelect:
        """Set whether the prompt is erased once the value is confirmed."""
        return self._set(clear=val)

    def show_match(self, val: bool) -> DateTimeSelect:
        """Set whether typed digits are echoed on a separate line."""
        return self._set(show_match=val)

    def build(self) -> SelectConfig:
        """Return the finished, immutable configuration.

        The range was already validated by each setter, so this cannot fail.
        """
        return self._config

    def interact(self) -> str:
        """Run the selection on stderr and return the confirmed value."""
        return self.interact_on(Term.stderr())

    def interact_on(self, term: Term, today: datetime | None = None) -> str:
        """Like :meth:`interact` but on the given terminal.

        Args:
            term: Terminal to read keys from and draw on.
            today: Starting value when no default was set.
        """
        controller = SelectionController(self.build(), today=today)
        return controller.interact_on(term, ThemeRenderer(term, self.theme))
