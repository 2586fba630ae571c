"""Calendar-safe single-unit adjustments of a naive datetime.

Every function here takes a valid datetime and returns a valid datetime.
Year and month steps coerce the day of month when the destination has no
such day (February 29 into a common year, the 31st into a 30-day month).
Day, hour, minute and second steps are plain ``timedelta`` arithmetic.

A step that would leave the range Python can represent (year 1 to 9999)
returns the value unchanged.
"""

from __future__ import annotations

import calendar
from collections.abc import Callable
from datetime import MAXYEAR, MINYEAR, datetime, timedelta

from datetime_select.errors import InternalConsistencyError
from datetime_select.models import Field

# Days per month in a common year, indexed 1-12.
MONTH_END_DAYS: tuple[int, ...] = (0, 31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)

_BUG_HINT = "Please open a bug ticket with the current case."


def month_end_day(year: int, month: int) -> int:
    """Return the last valid day of *month* in *year*."""
    if month == 2 and calendar.isleap(year):
        return 29
    return MONTH_END_DAYS[month]


def _shift_year(value: datetime, delta: int) -> datetime:
    year = value.year + delta
    if not MINYEAR <= year <= MAXYEAR:
        return value
    try:
        return value.replace(year=year)
    except ValueError:
        # Only a leap day can fail to exist in another year.
        if (value.month, value.day) != (2, 29):
            raise InternalConsistencyError(
                f"Unexpected failure in year step from {value.isoformat()}. {_BUG_HINT}"
            ) from None
        return value.replace(year=year, day=28)


def _shift_month(value: datetime, delta: int) -> datetime:
    year = value.year
    month = value.month + delta
    if month > 12:
        year, month = year + 1, 1
    elif month < 1:
        year, month = year - 1, 12
    if not MINYEAR <= year <= MAXYEAR:
        return value
    try:
        return value.replace(year=year, month=month)
    except ValueError:
        last_day = month_end_day(year, month)
        if value.day <= last_day:
            raise InternalConsistencyError(
                f"Unexpected failure in month step from {value.isoformat()}. {_BUG_HINT}"
            ) from None
        return value.replace(year=year, month=month, day=last_day)


def _shift(value: datetime, delta: timedelta) -> datetime:
    try:
        return value + delta
    except OverflowError:
        return value


def increment_year(value: datetime) -> datetime:
    """Add one year; February 29 becomes February 28 in a common year."""
    return _shift_year(value, 1)


def decrement_year(value: datetime) -> datetime:
    """Subtract one year; February 29 becomes February 28 in a common year."""
    return _shift_year(value, -1)


def increment_month(value: datetime) -> datetime:
    """Add one month, rolling December into January of the next year.

    The day is clamped to the last day of the destination month, so
    January 31 becomes February 28 (or 29 in a leap year).
    """
    return _shift_month(value, 1)


def decrement_month(value: datetime) -> datetime:
    """Subtract one month, rolling January into December of the previous year."""
    return _shift_month(value, -1)


def increment_day(value: datetime) -> datetime:
    return _shift(value, timedelta(days=1))


def decrement_day(value: datetime) -> datetime:
    return _shift(value, timedelta(days=-1))


def increment_hour(value: datetime) -> datetime:
    return _shift(value, timedelta(hours=1))


def decrement_hour(value: datetime) -> datetime:
    return _shift(value, timedelta(hours=-1))


def increment_minute(value: datetime) -> datetime:
    return _shift(value, timedelta(minutes=1))


def decrement_minute(value: datetime) -> datetime:
    return _shift(value, timedelta(minutes=-1))


def increment_second(value: datetime) -> datetime:
    return _shift(value, timedelta(seconds=1))


def decrement_second(value: datetime) -> datetime:
    return _shift(value, timedelta(seconds=-1))


STEPS: dict[Field, tuple[Callable[[datetime], datetime], Callable[[datetime], datetime]]] = {
    Field.YEAR: (increment_year, decrement_year),
    Field.MONTH: (increment_month, decrement_month),
    Field.DAY: (increment_day, decrement_day),
    Field.HOUR: (increment_hour, decrement_hour),
    Field.MINUTE: (increment_minute, decrement_minute),
    Field.SECOND: (increment_second, decrement_second),
}


def step(value: datetime, field: Field, direction: int) -> datetime:
    """Move *field* of *value* one unit up (``direction > 0``) or down.

    Args:
        value: The current value.
        field: The field to adjust.
        direction: Positive to increment, otherwise decrement.

    Returns:
        The adjusted value, always a valid datetime.
    """
    increment, decrement = STEPS[field]
    return increment(value) if direction > 0 else decrement(value)


def with_field(value: datetime, field: Field, number: int) -> datetime | None:
    """Set *field* of *value* to *number* as typed by the user.

    Args:
        value: The current value.
        field: The field being edited.
        number: The typed number.

    Returns:
        The new value, or None if the result is not a valid date-time
        (e.g. month 13, day 32, February 30).  A typed year on February 29
        that lands in a common year moves the day to February 28.
    """
    if field is Field.YEAR:
        if not MINYEAR <= number <= MAXYEAR:
            return None
        return _shift_year(value, number - value.year)
    try:
        return value.replace(**{field.value: number})
    except ValueError:
        return None
