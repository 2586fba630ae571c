"""Configuration resolution for the datetime-select command.

Priority order (highest to lowest):
1. Command-line options
2. ~/.config/datetime-select/config.toml
3. Built-in defaults
"""

from __future__ import annotations

import argparse
import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path

from datetime_select.errors import ConfigurationError
from datetime_select.models import DateType
from datetime_select.select import DateTimeSelect
from datetime_select.theme import THEMES

_CONFIG_PATH = Path.home() / ".config" / "datetime-select" / "config.toml"

_BOOL_KEYS = ("weekday", "clear", "show_match")


def _load_config_dict() -> dict:
    """Load the full config.toml as a dict, or return empty dict on failure."""
    if not _CONFIG_PATH.exists():
        return {}
    try:
        if sys.version_info >= (3, 11):
            import tomllib
        else:
            import tomli as tomllib

        with open(_CONFIG_PATH, "rb") as f:
            return tomllib.load(f)
    except Exception:
        logging.getLogger(__name__).warning(
            "Unable to read %s", _CONFIG_PATH, exc_info=True
        )
        return {}


def load_defaults() -> dict:
    """Return the recognized settings from config.toml.

    Example config.toml::

        date_type = "date"
        weekday = false
        theme = "colorful"

    Returns:
        A dict with any of the keys ``weekday``, ``clear``, ``show_match``
        (bools), ``date_type`` and ``theme`` (strings).

    Raises:
        ConfigurationError: If a recognized key has the wrong type or an
            unknown value.
    """
    raw = _load_config_dict()
    defaults: dict = {}
    for key in _BOOL_KEYS:
        if key in raw:
            if not isinstance(raw[key], bool):
                raise ConfigurationError(f"config.toml: {key} must be true or false")
            defaults[key] = raw[key]
    if "date_type" in raw:
        defaults["date_type"] = DateType.parse(str(raw["date_type"])).value
    if "theme" in raw:
        theme = str(raw["theme"])
        if theme not in THEMES:
            raise ConfigurationError(f"config.toml: unknown theme {theme!r}")
        defaults["theme"] = theme
    return defaults


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command-line arguments.

    Boolean options default to None so that config.toml values apply
    unless a flag is given.

    Args:
        argv: Arguments to parse. Defaults to sys.argv[1:].

    Returns:
        Parsed namespace.
    """
    parser = argparse.ArgumentParser(
        prog="datetime-select",
        description="Pick a date, a time, or a date-time interactively in the terminal.",
    )
    parser.add_argument("-p", "--prompt", help="Prompt shown before the value.")
    parser.add_argument(
        "-t",
        "--type",
        dest="date_type",
        choices=[member.value for member in DateType],
        default=None,
        help="What to select (default: datetime).",
    )
    parser.add_argument("--default", help="Starting value, RFC 3339 (default: today 00:00 UTC).")
    parser.add_argument("--min", dest="minimum", help="Earliest selectable value, RFC 3339.")
    parser.add_argument("--max", dest="maximum", help="Latest selectable value, RFC 3339.")
    parser.add_argument(
        "--no-weekday",
        dest="weekday",
        action="store_const",
        const=False,
        default=None,
        help="Do not show the weekday name.",
    )
    parser.add_argument(
        "--no-clear",
        dest="clear",
        action="store_const",
        const=False,
        default=None,
        help="Leave the prompt on screen after confirming.",
    )
    parser.add_argument(
        "--show-match",
        dest="show_match",
        action="store_const",
        const=True,
        default=None,
        help="Echo typed digits on a separate line.",
    )
    parser.add_argument("--theme", choices=sorted(THEMES), default=None, help="Prompt theme.")
    parser.add_argument(
        "--textual",
        action="store_true",
        help="Run the picker as an inline Textual app instead of the plain terminal loop.",
    )
    parser.add_argument(
        "--log-level",
        default="ERROR",
        help="File log level (DEBUG, INFO, WARNING, ERROR).",
    )
    parser.add_argument("--log-file", default=None, help="Write logs to this file.")
    return parser.parse_args(argv)


def build_select(args: argparse.Namespace, defaults: dict | None = None) -> DateTimeSelect:
    """Create a configured :class:`DateTimeSelect` from CLI args and file defaults.

    Args:
        args: Namespace returned by :func:`parse_args`.
        defaults: Settings from :func:`load_defaults`. Loaded when omitted.

    Raises:
        ConfigurationError: If any value is malformed or the range is empty.
    """
    if defaults is None:
        defaults = load_defaults()

    theme_name = args.theme or defaults.get("theme", "default")
    select = DateTimeSelect(theme=THEMES[theme_name]())

    if args.prompt:
        select.with_prompt(args.prompt)
    date_type = args.date_type or defaults.get("date_type")
    if date_type:
        select.date_type(date_type)
    for key in _BOOL_KEYS:
        value = getattr(args, key)
        if value is None:
            value = defaults.get(key)
        if value is not None:
            getattr(select, key)(value)
    if args.default:
        select.default(args.default)
    if args.minimum:
        select.min(args.minimum)
    if args.maximum:
        select.max(args.maximum)
    return select


def setup_logging(log_level: str, log_file: str | None) -> None:
    """Send package logs to a rotating file, if one is given.

    The terminal belongs to the picker, so nothing is logged to it.

    Args:
        log_level: Level name such as ``DEBUG``; unknown names mean ``ERROR``.
        log_file: Destination path, or None to disable logging.
    """
    logger = logging.getLogger("datetime_select")
    for handler in list(logger.handlers):
        if isinstance(handler, RotatingFileHandler):
            logger.removeHandler(handler)
            handler.close()
    if not log_file:
        return
    path = Path(log_file).expanduser()
    path.parent.mkdir(parents=True, exist_ok=True)
    handler = RotatingFileHandler(path, maxBytes=1_000_000, backupCount=2, encoding="utf-8")
    handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s %(message)s"))
    level = getattr(logging, log_level.upper(), None)
    if not isinstance(level, int):
        level = logging.ERROR
    logger.setLevel(level)
    handler.setLevel(level)
    logger.addHandler(handler)
