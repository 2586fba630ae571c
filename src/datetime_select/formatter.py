"""Formatting of date-time values for live display and for final output."""

from __future__ import annotations

from collections.abc import Sequence
from datetime import datetime

from datetime_select.models import DateType, Field

# Fixed English names; selection output is not localized.
WEEKDAY_NAMES: tuple[str, ...] = ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun")

_SEPARATORS: dict[Field, str] = {
    Field.YEAR: "",
    Field.MONTH: "-",
    Field.DAY: "-",
    Field.HOUR: " ",
    Field.MINUTE: ":",
    Field.SECOND: ":",
}


def format_result(value: datetime, date_type: DateType) -> str:
    """Format the confirmed value for the caller.

    Args:
        value: The selected value (naive, interpreted as UTC).
        date_type: The selection granularity.

    Returns:
        ``YYYY-MM-DD`` for dates, ``HH:MM:SS`` for times, and an RFC 3339
        UTC timestamp with second precision (``YYYY-MM-DDTHH:MM:SSZ``) for
        date-times.
    """
    match date_type:
        case DateType.DATE:
            return value.date().isoformat()
        case DateType.TIME:
            return value.time().isoformat(timespec="seconds")
        case DateType.DATETIME:
            return value.replace(microsecond=0).isoformat(timespec="seconds") + "Z"


def format_field(value: datetime, field: Field) -> str:
    """Return one field of *value* zero-padded to its display width."""
    return f"{getattr(value, field.value):0{field.width}d}"


def format_fields(value: datetime, date_type: DateType, pos: int) -> str:
    """Build Rich markup for *value* with the field at *pos* emphasized.

    The active field is bold and all other fields are dim.  The first
    time field is preceded by a space when the date is also shown.

    Args:
        value: The value to display.
        date_type: Which fields to display.
        pos: Index of the active field within ``date_type.fields``.

    Returns:
        A markup string such as ``[bold]2024[/bold]-[dim]03[/dim]-[dim]05[/dim]``.
    """
    parts: list[str] = []
    for index, field in enumerate(date_type.fields):
        if index > 0:
            parts.append(_SEPARATORS[field])
        style = "bold" if index == pos else "dim"
        parts.append(f"[{style}]{format_field(value, field)}[/{style}]")
    return "".join(parts)


def weekday_name(value: datetime) -> str:
    """Return the three-letter English weekday name of *value*."""
    return WEEKDAY_NAMES[value.weekday()]


def format_digits(digits: Sequence[int]) -> str:
    """Join buffered digits into the string the user has typed so far."""
    return "".join(str(d) for d in digits)
