"""Prompt themes and the renderer that draws them on a terminal."""

from __future__ import annotations

from typing import TYPE_CHECKING

from rich.markup import escape

if TYPE_CHECKING:
    from datetime_select.terminal import Term


class Theme:
    """Plain theme: ``prompt: value`` with no extra styling."""

    def format_datetime(self, prompt: str | None, value: str) -> str:
        """Combine an optional prompt with the formatted value markup.

        Args:
            prompt: The question shown before the value, or None.
            value: Rich markup for the value, as built by the controller.

        Returns:
            The markup for the whole line.
        """
        if not prompt:
            return value
        return f"{escape(prompt)}: {value}"


class ColorfulTheme(Theme):
    """Theme with a highlighted prompt and an arrow separator."""

    prompt_style = "bold cyan"
    separator = "›"

    def format_datetime(self, prompt: str | None, value: str) -> str:
        if not prompt:
            return value
        return (
            f"[{self.prompt_style}]{escape(prompt)}[/{self.prompt_style}] "
            f"[dim]{self.separator}[/dim] {value}"
        )


THEMES: dict[str, type[Theme]] = {
    "default": Theme,
    "colorful": ColorfulTheme,
}


def get_default_theme() -> Theme:
    return Theme()


class ThemeRenderer:
    """Writes themed lines to a terminal and remembers how many to clear."""

    def __init__(self, term: Term, theme: Theme) -> None:
        self.term = term
        self.theme = theme
        self.height = 0

    def datetime(self, prompt: str | None, value: str) -> None:
        """Write the prompt and value as one line."""
        self.term.write_line(self.theme.format_datetime(prompt, value))
        self.height += 1

    def clear(self) -> None:
        """Erase every line written since the last clear."""
        self.term.clear_last_lines(self.height)
        self.height = 0
