"""Tests for the POSIX terminal driver.

Verifies raw-mode lifecycle safety, event translation and TTY detection.
"""

from __future__ import annotations

import termios
import unittest
from unittest import mock

from lazyinquire.errors import NotTTYError, PromptIOError
from lazyinquire.terminal import InterruptEvent, KeyEvent, ResizeEvent
from lazyinquire.terminal import posix as posix_mod
from lazyinquire.terminal.posix import PosixTerminal, get_default_terminal


def _make_terminal(size: tuple[int, int] = (80, 24)) -> PosixTerminal:
    with mock.patch("lazyinquire.terminal.posix.termios.tcgetattr", return_value=[1, 2, 3]), mock.patch.object(
        PosixTerminal, "get_size", return_value=size
    ):
        return PosixTerminal(stdin_fd=0, stdout_fd=2)


class PosixTerminalTests(unittest.TestCase):
    def test_enter_and_leave_raw_mode_restore_saved_state(self) -> None:
        terminal = _make_terminal()
        with mock.patch("lazyinquire.terminal.posix.tty.setraw") as setraw_mock, mock.patch(
            "lazyinquire.terminal.posix.termios.tcsetattr"
        ) as setattr_mock:
            terminal.enter_raw_mode()
            terminal.enter_raw_mode()
            terminal.leave_raw_mode()
            terminal.leave_raw_mode()

        setraw_mock.assert_called_once_with(0, termios.TCSAFLUSH)
        setattr_mock.assert_called_once_with(0, termios.TCSAFLUSH, [1, 2, 3])

    def test_raw_mode_restores_terminal_after_exception(self) -> None:
        terminal = _make_terminal()
        with mock.patch.object(terminal, "enter_raw_mode") as enter_mock, mock.patch.object(
            terminal, "leave_raw_mode"
        ) as leave_mock:
            with self.assertRaises(RuntimeError):
                with terminal.raw_mode():
                    raise RuntimeError("boom")

        enter_mock.assert_called_once()
        leave_mock.assert_called_once()

    def test_cursor_visibility_sequences(self) -> None:
        terminal = _make_terminal()
        with mock.patch("lazyinquire.terminal.posix.os.write") as write_mock:
            terminal.cursor_hide()
            terminal.cursor_show()

        self.assertEqual(write_mock.call_args_list, [mock.call(2, b"\x1b[?25l"), mock.call(2, b"\x1b[?25h")])

    def test_read_event_translates_ctrl_c_to_interrupt(self) -> None:
        terminal = _make_terminal()
        with mock.patch.object(PosixTerminal, "get_size", return_value=(80, 24)), mock.patch(
            "lazyinquire.terminal.posix.read_key", side_effect=["CTRL_C", "j"]
        ):
            self.assertEqual(terminal.read_event(), InterruptEvent())
            self.assertEqual(terminal.read_event(), KeyEvent("j"))

    def test_read_event_reports_resize_before_reading(self) -> None:
        terminal = _make_terminal(size=(80, 24))
        with mock.patch.object(PosixTerminal, "get_size", return_value=(100, 30)), mock.patch(
            "lazyinquire.terminal.posix.read_key"
        ) as read_mock:
            self.assertEqual(terminal.read_event(), ResizeEvent(columns=100, lines=30))

        read_mock.assert_not_called()

    def test_read_event_fails_when_input_closes(self) -> None:
        terminal = _make_terminal()
        with mock.patch.object(PosixTerminal, "get_size", return_value=(80, 24)), mock.patch(
            "lazyinquire.terminal.posix.read_key", return_value=""
        ):
            with self.assertRaises(PromptIOError):
                terminal.read_event()

    def test_unreadable_tty_state_is_fatal(self) -> None:
        with mock.patch("lazyinquire.terminal.posix.termios.tcgetattr", side_effect=termios.error("nope")):
            with self.assertRaises(PromptIOError):
                PosixTerminal(stdin_fd=0, stdout_fd=2)

    def test_default_terminal_requires_tty(self) -> None:
        with mock.patch.object(posix_mod.sys, "stdin") as stdin_mock:
            stdin_mock.isatty.return_value = False
            with self.assertRaises(NotTTYError):
                get_default_terminal()


if __name__ == "__main__":
    unittest.main()
