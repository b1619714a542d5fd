"""Console input and output shared by the games."""

from __future__ import annotations

import contextlib
import os
import select
import sys
import time
from typing import Callable, Iterator, Optional, TextIO

try:
    import termios
except ImportError:  # pragma: no cover - non-POSIX systems
    termios = None

CLEAR_SCREEN = "\033[2J\033[1;1H"


class Console:
    """Line, token and single-key input plus output for a terminal."""

    def __init__(
        self,
        stdin: Optional[TextIO] = None,
        stdout: Optional[TextIO] = None,
        sleep: Optional[Callable[[float], None]] = None,
    ) -> None:
        self.stdin = stdin if stdin is not None else sys.stdin
        self.stdout = stdout if stdout is not None else sys.stdout
        self._sleep = sleep if sleep is not None else time.sleep
        self._line = ""
        self._keys = ""

    def write(self, text: str) -> None:
        """Write text and flush it straight away."""
        self.stdout.write(text)
        self.stdout.flush()

    def _next_line(self) -> str:
        pending, self._keys = self._keys, ""
        if "\n" in pending:
            head, _, rest = pending.partition("\n")
            self._keys = rest
            return head.rstrip("\r")
        line = self.stdin.readline()
        if not pending and not line:
            raise EOFError("end of input")
        return (pending + line).rstrip("\r\n")

    def read_token(self) -> str:
        """Return the next whitespace-delimited word, reading lines as needed."""
        while True:
            stripped = self._line.lstrip()
            if stripped:
                parts = stripped.split(maxsplit=1)
                self._line = parts[1] if len(parts) > 1 else ""
                return parts[0]
            self._line = self._next_line()

    def read_line(self) -> str:
        """Return what is left of the current line, or the next whole line."""
        if self._line.strip():
            line, self._line = self._line, ""
            return line
        self._line = ""
        return self._next_line()

    def clear(self) -> None:
        """Clear the screen and move the cursor home."""
        self.write(CLEAR_SCREEN)

    def pause(self, seconds: float) -> None:
        """Wait for the given number of seconds."""
        self._sleep(seconds)

    def _terminal_fd(self) -> Optional[int]:
        try:
            fd = self.stdin.fileno()
        except (AttributeError, OSError, ValueError):
            return None
        return fd if os.isatty(fd) else None

    def key_pressed(self) -> bool:
        """Tell, without blocking, whether a key is waiting to be read."""
        if self._keys:
            return True
        fd = self._terminal_fd()
        if fd is not None:
            ready, _, _ = select.select([fd], [], [], 0)
            return bool(ready)
        ch = self.stdin.read(1)
        if ch:
            self._keys += ch
            return True
        return False

    def read_key(self) -> str:
        """Read a single character."""
        if self._keys:
            ch, self._keys = self._keys[0], self._keys[1:]
            return ch
        fd = self._terminal_fd()
        if fd is not None:
            data = os.read(fd, 1)
            if not data:
                raise EOFError("end of input")
            return data.decode("utf-8", "replace")
        ch = self.stdin.read(1)
        if not ch:
            raise EOFError("end of input")
        return ch

    @contextlib.contextmanager
    def raw_mode(self) -> Iterator["Console"]:
        """Turn off line buffering and echo for the duration of the block."""
        fd = self._terminal_fd()
        if fd is None or termios is None:
            yield self
            return
        saved = termios.tcgetattr(fd)
        raw = termios.tcgetattr(fd)
        raw[3] &= ~(termios.ICANON | termios.ECHO)
        termios.tcsetattr(fd, termios.TCSANOW, raw)
        try:
            yield self
        finally:
            termios.tcsetattr(fd, termios.TCSANOW, saved)