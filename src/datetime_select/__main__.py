"""Entry point for datetime-select."""

import sys

from datetime_select.app import DateTimeSelectApp
from datetime_select.config import build_select, parse_args, setup_logging
from datetime_select.errors import ConfigurationError


def main() -> None:
    """Run the picker and print the confirmed value on stdout."""
    args = parse_args()
    setup_logging(args.log_level, args.log_file)
    try:
        select = build_select(args)
    except ConfigurationError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        sys.exit(2)

    if args.textual:
        config = select.build()
        app = DateTimeSelectApp(config, theme=select.theme)
        result = app.run(inline=True, inline_no_clear=not config.clear)
        if result is None:
            sys.exit(1)
    else:
        try:
            result = select.interact()
        except KeyboardInterrupt:
            sys.exit(130)
    print(result)


if __name__ == "__main__":
    main()
