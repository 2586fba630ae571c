"""Tests for data models and configuration parsing."""

from datetime import datetime

import pytest

from datetime_select.errors import ConfigurationError
from datetime_select.models import (
    MAX_DATETIME,
    MIN_DATETIME,
    DateType,
    Field,
    SelectConfig,
    parse_datetime,
    today_midnight,
)


class TestDateType:
    """Tests for DateType."""

    def test_date_fields(self):
        assert DateType.DATE.fields == (Field.YEAR, Field.MONTH, Field.DAY)

    def test_time_fields(self):
        assert DateType.TIME.fields == (Field.HOUR, Field.MINUTE, Field.SECOND)

    def test_datetime_fields(self):
        assert len(DateType.DATETIME.fields) == 6
        assert DateType.DATETIME.fields[3] is Field.HOUR

    def test_max_pos(self):
        assert DateType.DATE.max_pos == 2
        assert DateType.TIME.max_pos == 2
        assert DateType.DATETIME.max_pos == 5

    def test_parse_is_case_insensitive(self):
        assert DateType.parse("Date") is DateType.DATE
        assert DateType.parse(" datetime ") is DateType.DATETIME

    def test_parse_unknown(self):
        with pytest.raises(ConfigurationError, match="unknown date type"):
            DateType.parse("week")


class TestField:
    """Tests for Field widths."""

    def test_year_width(self):
        assert Field.YEAR.width == 4

    def test_other_widths(self):
        assert {f.width for f in Field if f is not Field.YEAR} == {2}


class TestParseDatetime:
    """Tests for RFC 3339 parsing."""

    def test_negative_zero_offset(self):
        assert parse_datetime("2019-01-01T00:00:00-00:00") == datetime(2019, 1, 1)

    def test_zulu(self):
        assert parse_datetime("2020-02-20T02:20:25Z") == datetime(2020, 2, 20, 2, 20, 25)

    def test_offset_keeps_wall_clock(self):
        assert parse_datetime("2020-02-20T02:20:25+05:30") == datetime(2020, 2, 20, 2, 20, 25)

    def test_fraction_dropped(self):
        assert parse_datetime("2020-01-01T10:00:00.123456Z") == datetime(2020, 1, 1, 10)

    def test_result_is_naive(self):
        assert parse_datetime("2020-01-01T10:00:00Z").tzinfo is None

    def test_missing_offset_rejected(self):
        with pytest.raises(ConfigurationError, match="rfc3339"):
            parse_datetime("2020-01-01T10:00:00")

    def test_date_only_rejected(self):
        with pytest.raises(ConfigurationError):
            parse_datetime("2020-01-01")

    def test_garbage_rejected(self):
        with pytest.raises(ConfigurationError):
            parse_datetime("yesterday")

    def test_impossible_date_rejected(self):
        with pytest.raises(ConfigurationError, match="invalid date"):
            parse_datetime("2019-02-29T00:00:00Z")


class TestSelectConfig:
    """Tests for SelectConfig defaults and validation."""

    def test_defaults(self):
        config = SelectConfig()
        assert config.prompt is None
        assert config.default is None
        assert config.weekday is True
        assert config.date_type is DateType.DATETIME
        assert config.minimum == MIN_DATETIME
        assert config.maximum == MAX_DATETIME
        assert config.clear is True
        assert config.show_match is False

    def test_default_range(self):
        assert MIN_DATETIME == datetime(1, 1, 1)
        assert MAX_DATETIME == datetime(9999, 12, 31, 23, 59, 59)

    def test_max_below_min_rejected(self):
        with pytest.raises(ConfigurationError, match="maximum must be larger than minimum"):
            SelectConfig(minimum=datetime(2022, 1, 1), maximum=datetime(2021, 1, 1))

    def test_equal_bounds_allowed(self):
        config = SelectConfig(minimum=datetime(2022, 1, 1), maximum=datetime(2022, 1, 1))
        assert config.minimum == config.maximum

    def test_frozen(self):
        config = SelectConfig()
        with pytest.raises(AttributeError):
            config.weekday = False


def test_today_midnight_has_no_time():
    value = today_midnight()
    assert (value.hour, value.minute, value.second, value.microsecond) == (0, 0, 0, 0)
    assert value.tzinfo is None
