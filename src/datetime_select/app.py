"""Textual application hosting a single date/time picker."""

from __future__ import annotations

from datetime import datetime

from textual import on
from textual.app import App, ComposeResult
from textual.binding import Binding

from datetime_select.models import SelectConfig
from datetime_select.theme import Theme
from datetime_select.widgets.datetime_picker import DateTimePicker


class DateTimeSelectApp(App[str]):
    """Runs a :class:`DateTimePicker` and exits with the confirmed value.

    Escape quits without a value, in which case ``run()`` returns None.
    """

    CSS = """
    Screen {
        height: auto;
    }
    """

    BINDINGS = [
        Binding("escape", "quit", "Quit", show=False, priority=True),
    ]

    def __init__(
        self,
        config: SelectConfig,
        theme: Theme | None = None,
        today: datetime | None = None,
    ) -> None:
        """Initialize the app.

        Args:
            config: Selection configuration.
            theme: Theme for the prompt line.
            today: Starting value when the config has no default.
        """
        super().__init__()
        self.select_config = config
        self._prompt_theme = theme
        self._today = today

    def compose(self) -> ComposeResult:
        """Create the picker."""
        yield DateTimePicker(
            self.select_config, theme=self._prompt_theme, today=self._today, id="picker"
        )

    def on_mount(self) -> None:
        self.query_one("#picker", DateTimePicker).focus()

    @on(DateTimePicker.Selected)
    def _on_selected(self, event: DateTimePicker.Selected) -> None:
        self.exit(event.value)
