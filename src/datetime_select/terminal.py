"""Line-oriented terminal surface: single key reads and clearable line output."""

from __future__ import annotations

import os
import select
import sys
from typing import TextIO

from rich.console import Console
from rich.control import Control
from rich.segment import ControlType

from datetime_select.keys import KeyEvent, decode

READ_SIZE = 32
# Seconds to wait for the rest of an escape sequence after ESC.
ESCAPE_TIMEOUT = 0.05


class Term:
    """A terminal that reads one key at a time and writes whole lines.

    Output goes through a Rich console so that markup (``[bold]``,
    ``[dim]``) is rendered as terminal styles.  Input is read from
    ``sys.stdin`` in raw mode.
    """

    def __init__(
        self,
        file: TextIO,
        stdin: TextIO | None = None,
        force_terminal: bool | None = None,
    ) -> None:
        """Initialize the terminal.

        Args:
            file: Stream that lines are written to.
            stdin: Stream keys are read from. Defaults to ``sys.stdin``.
            force_terminal: Emit styles and cursor controls even when
                *file* is not a TTY (None means detect).
        """
        self.console = Console(
            file=file, highlight=False, soft_wrap=True, force_terminal=force_terminal
        )
        self._stdin = stdin
        self._pending = b""

    @classmethod
    def stderr(cls) -> Term:
        return cls(sys.stderr)

    @property
    def stdin(self) -> TextIO:
        return self._stdin if self._stdin is not None else sys.stdin

    def write_line(self, text: str) -> None:
        """Write *text* (Rich markup) followed by a newline."""
        self.console.print(text)

    def clear_last_lines(self, n: int) -> None:
        """Erase the *n* lines above the cursor and move the cursor there."""
        if n <= 0:
            return
        controls: list[Control] = []
        for _ in range(n):
            controls.append(Control.move(0, -1))
            controls.append(Control((ControlType.ERASE_IN_LINE, 2)))
        controls.append(Control.move_to_column(0))
        self.console.control(*controls)

    def read_key(self) -> KeyEvent:
        """Block until one key is pressed and return it as an event.

        Raises:
            OSError: If stdin is not a terminal or reading fails.
            KeyboardInterrupt: On Ctrl-C.
        """
        return decode(self._read_sequence())

    def _read_sequence(self) -> str:
        """Return the next whole key press from the terminal.

        Bytes that arrive together (a pasted value, a fast typist) are
        buffered and handed out one key at a time.
        """
        length = split_key(self._pending)
        if length is None:
            self._fill()
            length = split_key(self._pending) or len(self._pending)
        key, self._pending = self._pending[:length], self._pending[length:]
        return key.decode(errors="replace")

    def _fill(self) -> None:
        """Read until the buffer holds a complete key, or input pauses."""
        import termios
        import tty

        stdin = self.stdin
        if not stdin.isatty():
            raise OSError("cannot read keys: stdin is not a terminal")
        fd = stdin.fileno()
        old_settings = termios.tcgetattr(fd)
        try:
            tty.setraw(fd, termios.TCSANOW)
            if not self._pending:
                self._pending = os.read(fd, READ_SIZE)
                if not self._pending:
                    raise OSError("cannot read keys: end of input")
            # A lone ESC is the Escape key unless the rest of a sequence follows
            while split_key(self._pending) is None:
                ready, _, _ = select.select([fd], [], [], ESCAPE_TIMEOUT)
                chunk = os.read(fd, READ_SIZE) if ready else b""
                if not chunk:
                    break
                self._pending += chunk
        finally:
            termios.tcsetattr(fd, termios.TCSADRAIN, old_settings)


def split_key(data: bytes) -> int | None:
    """Return the byte length of the first key in *data*.

    Returns None when *data* is empty or may be cut short, such as a bare
    ESC or half of a multi-byte UTF-8 character.
    """
    if not data:
        return None
    first = data[0]
    if first == 0x1B:
        if len(data) == 1:
            return None
        if data[1:2] == b"O":
            return 3 if len(data) >= 3 else None
        if data[1:2] == b"[":
            # CSI: parameters run until a final byte in 0x40-0x7E
            for index in range(2, len(data)):
                if 0x40 <= data[index] <= 0x7E:
                    return index + 1
            return None
        return 1
    if first >= 0xF0:
        width = 4
    elif first >= 0xE0:
        width = 3
    elif first >= 0xC0:
        width = 2
    else:
        width = 1
    return width if len(data) >= width else None
