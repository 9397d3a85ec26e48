"""Frame assembly and repaint on top of a ``Terminal``.

Every prompt variant talks to the terminal only through ``Backend``. A frame is
built from ``render_*`` calls between ``frame_setup`` and ``frame_finish``;
finishing repaints exactly the region the previous frame occupied.
"""

from __future__ import annotations

import contextlib
import logging
from pathlib import Path

from ..errors import PromptIOError
from ..terminal.base import Terminal
from ..terminal.events import Event
from .ansi import clip_ansi_line, display_width, strip_ansi
from .render_config import RenderConfig, stylize

logger = logging.getLogger(__name__)


class Backend:
    """Couples a terminal with a render config."""

    def __init__(self, terminal: Terminal, render_config: RenderConfig) -> None:
        self.terminal = terminal
        self.render_config = render_config
        self.last_frame: tuple[str, ...] = ()
        self._lines: list[str] = []
        self._drawn_rows = 0

    @contextlib.contextmanager
    def session(self):
        """Enter raw mode with a hidden cursor; always restore on exit."""
        try:
            self.terminal.enter_raw_mode()
        except OSError as exc:
            raise PromptIOError(f"cannot initialize terminal: {exc}") from exc
        try:
            self.terminal.cursor_hide()
            yield self
        finally:
            try:
                if self._drawn_rows:
                    self.terminal.write("\r\n")
                    self.terminal.flush()
                self._drawn_rows = 0
                self.terminal.cursor_show()
            finally:
                self.terminal.leave_raw_mode()

    def read_event(self) -> Event:
        return self.terminal.read_event()

    def frame_setup(self) -> None:
        self._lines = []

    def frame_finish(self) -> None:
        """Repaint the owned screen region with the lines of the current frame."""
        columns, _rows = self.terminal.get_size()
        rows = [clip_ansi_line(line, max(1, columns)) for line in self._lines] or [""]

        out: list[str] = []
        if self._drawn_rows > 1:
            out.append(f"\x1b[{self._drawn_rows - 1}A")
        out.append("\r\x1b[J")
        out.append("\r\n".join(rows))
        self.terminal.write("".join(out))
        self.terminal.flush()

        self._drawn_rows = len(rows)
        self.last_frame = tuple(strip_ansi(row) for row in rows)
        self._lines = []

    def _prefixed_message(self, prefix: str, message: str) -> str:
        config = self.render_config
        return f"{stylize(config.prompt_prefix_style, prefix)} {stylize(config.prompt_style, message)}"

    def render_prompt(self, message: str, input_text: str = "") -> None:
        line = self._prefixed_message(self.render_config.prompt_prefix, message)
        if input_text:
            line += " " + stylize(self.render_config.filter_style, input_text)
        self._lines.append(line)

    def render_error(self, message: str) -> None:
        config = self.render_config
        self._lines.append(stylize(config.error_style, f"{config.error_prefix} {message}"))

    def render_path(self, path: Path) -> None:
        self._lines.append(stylize(self.render_config.path_style, str(path)))

    def _option_prefix(self, highlighted: bool) -> str:
        config = self.render_config
        width = max(
            display_width(config.highlighted_option_prefix),
            display_width(config.unhighlighted_option_prefix),
        )
        prefix = config.highlighted_option_prefix if highlighted else config.unhighlighted_option_prefix
        return prefix + " " * (width - display_width(prefix))

    def render_option(self, label: str, highlighted: bool, role: str = "option") -> None:
        """Render one list row; ``role`` picks the unhighlighted style."""
        config = self.render_config
        prefix = self._option_prefix(highlighted)
        if highlighted:
            self._lines.append(stylize(config.selected_option_style, f"{prefix} {label}"))
            return
        style = {
            "directory": config.directory_style,
            "symlink": config.symlink_style,
        }.get(role, config.option_style)
        self._lines.append(f"{prefix} {stylize(style, label)}")

    def render_scroll_marker(self, up: bool) -> None:
        config = self.render_config
        marker = config.scroll_up_prefix if up else config.scroll_down_prefix
        self._lines.append(stylize(config.scroll_marker_style, marker))

    def render_empty(self, message: str) -> None:
        prefix = " " * display_width(self._option_prefix(False))
        self._lines.append(f"{prefix} {stylize(self.render_config.scroll_marker_style, message)}")

    def render_help(self, message: str) -> None:
        self._lines.append(stylize(self.render_config.help_message_style, f"[{message}]"))

    def render_answer(self, message: str, answer: str) -> None:
        """Draw the final one-line frame for an accepted answer."""
        config = self.render_config
        self.frame_setup()
        line = self._prefixed_message(config.answered_prompt_prefix, message)
        self._lines.append(f"{line} {stylize(config.answer_style, answer)}")
        self.frame_finish()

    def render_canceled(self, message: str) -> None:
        """Draw the final one-line frame for a cancelled prompt."""
        config = self.render_config
        self.frame_setup()
        line = self._prefixed_message(config.prompt_prefix, message)
        self._lines.append(f"{line} {stylize(config.canceled_prompt_style, config.canceled_prompt_indicator)}")
        self.frame_finish()


__all__ = ["Backend"]
