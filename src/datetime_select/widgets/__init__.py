"""Textual widgets for date/time selection."""

from datetime_select.widgets.datetime_picker import DateTimePicker

__all__ = ["DateTimePicker"]
