"""Data models for date/time selection: granularity, fields, and session configuration."""

from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import datetime, timezone
from enum import Enum

from datetime_select.errors import ConfigurationError

MIN_DATETIME = datetime(1, 1, 1, 0, 0, 0)
MAX_DATETIME = datetime(9999, 12, 31, 23, 59, 59)

_RFC3339_RE = re.compile(
    r"^(?P<date>\d{4}-\d{2}-\d{2})[Tt ](?P<time>\d{2}:\d{2}:\d{2})"
    r"(?:\.\d+)?(?P<offset>[Zz]|[+-]\d{2}:\d{2})$"
)


class Field(Enum):
    """A single editable component of a date-time value."""

    YEAR = "year"
    MONTH = "month"
    DAY = "day"
    HOUR = "hour"
    MINUTE = "minute"
    SECOND = "second"

    @property
    def width(self) -> int:
        """Number of digits shown (and typed) for this field."""
        return 4 if self is Field.YEAR else 2


class DateType(Enum):
    """The kind of value being selected."""

    DATE = "date"
    TIME = "time"
    DATETIME = "datetime"

    @property
    def fields(self) -> tuple[Field, ...]:
        """Return the editable fields, in cursor order."""
        match self:
            case DateType.DATE:
                return (Field.YEAR, Field.MONTH, Field.DAY)
            case DateType.TIME:
                return (Field.HOUR, Field.MINUTE, Field.SECOND)
            case DateType.DATETIME:
                return (
                    Field.YEAR,
                    Field.MONTH,
                    Field.DAY,
                    Field.HOUR,
                    Field.MINUTE,
                    Field.SECOND,
                )

    @property
    def max_pos(self) -> int:
        """Return the index of the last field."""
        return len(self.fields) - 1

    @classmethod
    def parse(cls, name: str) -> DateType:
        """Look up a date type by its lowercase name.

        Args:
            name: One of ``date``, ``time`` or ``datetime`` (case-insensitive).

        Raises:
            ConfigurationError: If the name is not a known date type.
        """
        try:
            return cls(name.strip().lower())
        except ValueError:
            choices = ", ".join(member.value for member in cls)
            raise ConfigurationError(
                f"unknown date type {name!r} (expected one of: {choices})"
            ) from None


def parse_datetime(value: str) -> datetime:
    """Parse an RFC 3339 timestamp into a naive wall-clock datetime.

    The offset is validated and then dropped, keeping the local time as
    written.  Fractional seconds are discarded.

    Args:
        value: A timestamp such as ``2019-01-01T00:00:00Z`` or
            ``2020-02-20T02:20:25-05:00``.

    Returns:
        A naive datetime with ``microsecond == 0``.

    Raises:
        ConfigurationError: If the string is not a valid RFC 3339 timestamp.
    """
    match = _RFC3339_RE.match(value.strip())
    if match is None:
        raise ConfigurationError(f"date format must match rfc3339: {value!r}")
    offset = match["offset"]
    if offset in ("Z", "z"):
        offset = "+00:00"
    try:
        parsed = datetime.fromisoformat(f"{match['date']}T{match['time']}{offset}")
    except ValueError as exc:
        raise ConfigurationError(f"invalid date {value!r}: {exc}") from exc
    return parsed.replace(tzinfo=None)


def today_midnight() -> datetime:
    """Return the current UTC date at 00:00:00 as a naive datetime."""
    now = datetime.now(timezone.utc)
    return datetime(now.year, now.month, now.day)


@dataclass(frozen=True)
class SelectConfig:
    """Immutable configuration for one selection session.

    A ``default`` of ``None`` means "today at midnight UTC", resolved when
    the session starts.
    """

    prompt: str | None = None
    default: datetime | None = None
    weekday: bool = True
    date_type: DateType = DateType.DATETIME
    minimum: datetime = MIN_DATETIME
    maximum: datetime = MAX_DATETIME
    clear: bool = True
    show_match: bool = False

    def __post_init__(self) -> None:
        """Reject a range whose maximum lies before its minimum."""
        if self.maximum < self.minimum:
            raise ConfigurationError("maximum must be larger than minimum")
