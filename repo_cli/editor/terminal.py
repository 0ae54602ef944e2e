"""Raw-mode terminal handle used by the line editor.

The terminal mode is process-wide state, so a :class:`Terminal` lets at
most one caller hold raw mode at a time and always restores the saved
attributes when the ``raw_mode()`` block exits, whatever the exit path.
"""

from __future__ import annotations

import codecs
import contextlib
import logging
import os
import select
import sys
import termios
import tty
from collections import deque
from typing import IO, Deque, Iterator, List, Optional

from .keys import KeyEvent, KeyParser

logger = logging.getLogger(__name__)

# How long to wait for the rest of an escape sequence before treating a
# lone ESC as its own key.
ESCAPE_TIMEOUT = 0.025

_CLEAR_LINE = "\r\x1b[2K"
_MOVE_TO_COLUMN_FMT = "\x1b[{}G"


class NotATerminalError(OSError):
    """stdin is not a TTY, so it cannot be switched into raw mode."""


class TerminalBusyError(RuntimeError):
    """Raised when raw mode is requested while another session holds it."""


class TerminalRestoreError(OSError):
    """The terminal could not be put back into cooked mode.

    Never recoverable: everything printed afterwards would be garbled.
    """


class Terminal:
    """Key source and output sink backed by the process's stdin/stdout."""

    def __init__(self, stdin: Optional[IO[str]] = None, stdout: Optional[IO[str]] = None) -> None:
        self._stdin = stdin or sys.stdin
        self._stdout = stdout or sys.stdout
        self._saved_attrs: Optional[List] = None
        self._raw = False
        self._parser = KeyParser()
        self._keys: Deque[KeyEvent] = deque()
        self._decoder = codecs.getincrementaldecoder("utf-8")("replace")

    @property
    def is_raw(self) -> bool:
        return self._raw

    # -- mode handling ------------------------------------------------------

    @contextlib.contextmanager
    def raw_mode(self) -> Iterator["Terminal"]:
        """Hold raw mode for the duration of the ``with`` block."""
        if self._raw:
            raise TerminalBusyError("raw mode is already held by another session")
        self.enable_raw_mode()
        self._raw = True
        logger.debug("raw mode enabled")
        try:
            yield self
        except BaseException as exc:
            self._restore(cause=exc)
            raise
        self._restore()

    def _restore(self, cause: Optional[BaseException] = None) -> None:
        self._raw = False
        try:
            self.disable_raw_mode()
        except OSError as err:
            logger.error("failed to restore terminal mode: %s", err)
            raise TerminalRestoreError(f"failed to restore terminal mode: {err}") from (cause or err)
        logger.debug("raw mode disabled")

    def enable_raw_mode(self) -> None:
        fd = self._stdin.fileno()
        if not os.isatty(fd):
            raise NotATerminalError("stdin is not a terminal")
        try:
            self._saved_attrs = termios.tcgetattr(fd)
            tty.setraw(fd, termios.TCSADRAIN)
        except termios.error as err:
            raise OSError(*err.args) from err

    def disable_raw_mode(self) -> None:
        if self._saved_attrs is None:
            return
        try:
            termios.tcsetattr(self._stdin.fileno(), termios.TCSADRAIN, self._saved_attrs)
        except termios.error as err:
            raise OSError(*err.args) from err
        self._saved_attrs = None

    # -- input --------------------------------------------------------------

    def read_key(self) -> KeyEvent:
        """Block until one key event is available and return it."""
        while not self._keys:
            timeout = ESCAPE_TIMEOUT if self._parser.pending else None
            data = self._read(timeout)
            if data is None:
                # Timed out in the middle of an escape sequence
                self._keys.extend(self._parser.flush())
                continue
            if not data:
                raise OSError("end of input while waiting for a key")
            self._keys.extend(self._parser.feed(self._decoder.decode(data)))
        return self._keys.popleft()

    def _read(self, timeout: Optional[float]) -> Optional[bytes]:
        """Read raw bytes from stdin; ``None`` if *timeout* expires first."""
        fd = self._stdin.fileno()
        if timeout is not None:
            ready, _, _ = select.select([fd], [], [], timeout)
            if not ready:
                return None
        return os.read(fd, 1024)

    # -- output -------------------------------------------------------------

    def write(self, text: str) -> None:
        self._stdout.write(text)

    def clear_line(self) -> None:
        self.write(_CLEAR_LINE)

    def move_to_column(self, column: int) -> None:
        """Move the cursor to 0-based *column* on the current line."""
        self.write(_MOVE_TO_COLUMN_FMT.format(column + 1))

    def flush(self) -> None:
        self._stdout.flush()
