"""POSIX terminal driver.

Owns the raw-mode lifecycle through termios/tty. Keys are read from stdin and
the prompt is drawn on stderr so stdout stays clean for the answer.
"""

from __future__ import annotations

import logging
import os
import shutil
import sys
import termios
import tty

from ..errors import NotTTYError, PromptIOError
from .base import Terminal
from .events import Event, InterruptEvent, KeyEvent, ResizeEvent
from .reader import read_key

logger = logging.getLogger(__name__)


class PosixTerminal(Terminal):
    """Raw-mode terminal bound to a pair of file descriptors."""

    def __init__(self, stdin_fd: int, stdout_fd: int) -> None:
        """Capture tty state and bind input/output file descriptors."""
        self.stdin_fd = stdin_fd
        self.stdout_fd = stdout_fd
        try:
            self._saved_tty_state = termios.tcgetattr(stdin_fd)
        except termios.error as exc:
            raise PromptIOError(f"cannot read terminal attributes: {exc}") from exc
        self._raw = False
        self._last_size = self.get_size()

    def read_event(self) -> Event:
        size = self.get_size()
        if size != self._last_size:
            self._last_size = size
            return ResizeEvent(columns=size[0], lines=size[1])

        key = read_key(self.stdin_fd)
        if key == "":
            raise PromptIOError("input stream closed")
        if key == "CTRL_C":
            return InterruptEvent()
        return KeyEvent(key)

    def write(self, text: str) -> None:
        data = text.encode("utf-8")
        while data:
            written = os.write(self.stdout_fd, data)
            data = data[written:]

    def cursor_hide(self) -> None:
        os.write(self.stdout_fd, b"\x1b[?25l")

    def cursor_show(self) -> None:
        os.write(self.stdout_fd, b"\x1b[?25h")

    def enter_raw_mode(self) -> None:
        if self._raw:
            return
        # Raw mode also delivers Ctrl-C as a byte instead of SIGINT.
        tty.setraw(self.stdin_fd, termios.TCSAFLUSH)
        self._raw = True
        logger.debug("entered raw mode on fd %d", self.stdin_fd)

    def leave_raw_mode(self) -> None:
        if not self._raw:
            return
        termios.tcsetattr(self.stdin_fd, termios.TCSAFLUSH, self._saved_tty_state)
        self._raw = False
        logger.debug("restored terminal mode on fd %d", self.stdin_fd)

    def get_size(self) -> tuple[int, int]:
        try:
            size = os.get_terminal_size(self.stdout_fd)
        except OSError:
            size = shutil.get_terminal_size((80, 24))
        return size.columns, size.lines


def get_default_terminal() -> PosixTerminal:
    """Return a terminal on stdin/stderr, failing fast when they are not TTYs."""
    if not sys.stdin.isatty() or not sys.stderr.isatty():
        raise NotTTYError()
    return PosixTerminal(sys.stdin.fileno(), sys.stderr.fileno())


__all__ = ["PosixTerminal", "get_default_terminal"]
