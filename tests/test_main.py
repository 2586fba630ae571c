"""Tests for the command-line entry point."""

from __future__ import annotations

import sys

import pytest

from datetime_select import __main__ as entry
from datetime_select.select import DateTimeSelect


@pytest.fixture(autouse=True)
def _no_config_file(tmp_path, monkeypatch):
    monkeypatch.setattr("datetime_select.config._CONFIG_PATH", tmp_path / "missing.toml")


def test_prints_confirmed_value(monkeypatch, capsys):
    monkeypatch.setattr(sys, "argv", ["datetime-select", "--type", "date"])
    monkeypatch.setattr(DateTimeSelect, "interact", lambda self: "2024-03-05")
    entry.main()
    assert capsys.readouterr().out == "2024-03-05\n"


def test_configuration_error_exits(monkeypatch, capsys):
    monkeypatch.setattr(
        sys,
        "argv",
        ["datetime-select", "--min", "2022-01-01T00:00:00Z", "--max", "2021-01-01T00:00:00Z"],
    )
    with pytest.raises(SystemExit) as exc_info:
        entry.main()
    assert exc_info.value.code == 2
    assert "Error: maximum must be larger than minimum" in capsys.readouterr().err


def test_interrupt_exits(monkeypatch):
    def _interrupt(self):
        raise KeyboardInterrupt

    monkeypatch.setattr(sys, "argv", ["datetime-select"])
    monkeypatch.setattr(DateTimeSelect, "interact", _interrupt)
    with pytest.raises(SystemExit) as exc_info:
        entry.main()
    assert exc_info.value.code == 130
