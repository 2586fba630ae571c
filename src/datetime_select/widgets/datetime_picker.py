"""Keyboard-driven date/time picker widget."""

from __future__ import annotations

from datetime import datetime

from textual import events
from textual.message import Message
from textual.widgets import Static

from datetime_select.controller import SelectionController
from datetime_select.keys import Key, from_textual
from datetime_select.models import SelectConfig
from datetime_select.theme import Theme, get_default_theme


class DateTimePicker(Static, can_focus=True):
    """A one-line picker that edits a date/time field by field.

    Left/Right (``h``/``l``) pick a field, Up/Down (``j``/``k``) step it,
    digits type it directly, Backspace drops a typed digit and Enter
    confirms, posting :class:`DateTimePicker.Selected`.
    """

    DEFAULT_CSS = """
    DateTimePicker {
        height: auto;
        width: auto;
    }
    """

    class Selected(Message):
        """Posted when the user confirms the value."""

        def __init__(self, picker: DateTimePicker, value: str) -> None:
            """Initialize the message.

            Args:
                picker: The picker that was confirmed.
                value: The formatted result (see ``format_result``).
            """
            super().__init__()
            self.picker = picker
            self.value = value

        @property
        def control(self) -> DateTimePicker:
            return self.picker

    def __init__(
        self,
        config: SelectConfig | None = None,
        theme: Theme | None = None,
        today: datetime | None = None,
        **kwargs,
    ) -> None:
        """Initialize the picker.

        Args:
            config: Selection configuration. Defaults to ``SelectConfig()``.
            theme: Theme for the prompt line.
            today: Starting value when the config has no default.
        """
        super().__init__(**kwargs)
        self.controller = SelectionController(config or SelectConfig(), today=today)
        self.prompt_theme = theme if theme is not None else get_default_theme()

    @property
    def value(self) -> datetime:
        """The value currently shown."""
        return self.controller.value

    def on_mount(self) -> None:
        self._refresh_content()

    def _refresh_content(self) -> None:
        controller = self.controller
        text = self.prompt_theme.format_datetime(controller.config.prompt, controller.render())
        if controller.config.show_match:
            text = f"{text}\n{controller.typed()}"
        self.update(text)

    def on_key(self, event: events.Key) -> None:
        """Feed handled keys to the controller; let the rest bubble."""
        key_event = from_textual(event.key, event.character)
        if key_event.key is Key.UNKNOWN:
            return
        event.stop()
        event.prevent_default()
        if self.controller.handle(key_event):
            self.post_message(self.Selected(self, self.controller.result()))
            return
        self._refresh_content()
