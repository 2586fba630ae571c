"""Tests for the DateTimeSelectApp."""

from __future__ import annotations

from datetime import datetime

from datetime_select.app import DateTimeSelectApp
from datetime_select.models import DateType, SelectConfig
from datetime_select.widgets.datetime_picker import DateTimePicker


class TestDateTimeSelectApp:
    """Tests for running the picker as an app."""

    async def test_picker_is_focused(self):
        app = DateTimeSelectApp(SelectConfig(), today=datetime(2024, 3, 5))
        async with app.run_test() as pilot:
            await pilot.pause()
            assert isinstance(app.focused, DateTimePicker)

    async def test_enter_exits_with_value(self):
        app = DateTimeSelectApp(SelectConfig(), today=datetime(2024, 3, 5))
        async with app.run_test() as pilot:
            await pilot.pause()
            await pilot.press("right", "right", "up", "enter")
            await pilot.pause()
        assert app.return_value == "2024-03-06T00:00:00Z"

    async def test_escape_exits_without_value(self):
        config = SelectConfig(date_type=DateType.TIME, default=datetime(2024, 3, 5, 9, 15))
        app = DateTimeSelectApp(config)
        async with app.run_test() as pilot:
            await pilot.pause()
            await pilot.press("escape")
            await pilot.pause()
        assert app.return_value is None
