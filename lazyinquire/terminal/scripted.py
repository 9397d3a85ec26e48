"""In-memory terminal that replays a fixed event script.

Used to drive prompts without a TTY: every write is captured and raw-mode
transitions are counted so tests can assert the terminal was restored.
"""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable

from ..errors import PromptIOError
from .base import Terminal
from .events import Event, KeyEvent


class ScriptedTerminal(Terminal):
    """Terminal double fed by a list of events or key tokens."""

    def __init__(self, events: Iterable[Event | str] = (), size: tuple[int, int] = (80, 24)) -> None:
        self._events: deque[Event] = deque(
            KeyEvent(event) if isinstance(event, str) else event for event in events
        )
        self.size = size
        self.writes: list[str] = []
        self.raw_enters = 0
        self.raw_leaves = 0
        self.in_raw_mode = False
        self.cursor_visible = True

    def feed(self, *events: Event | str) -> None:
        """Append more events to the script."""
        for event in events:
            self._events.append(KeyEvent(event) if isinstance(event, str) else event)

    @property
    def pending_events(self) -> int:
        return len(self._events)

    @property
    def output(self) -> str:
        return "".join(self.writes)

    def read_event(self) -> Event:
        if not self._events:
            raise PromptIOError("scripted input exhausted")
        return self._events.popleft()

    def write(self, text: str) -> None:
        self.writes.append(text)

    def cursor_hide(self) -> None:
        self.cursor_visible = False

    def cursor_show(self) -> None:
        self.cursor_visible = True

    def enter_raw_mode(self) -> None:
        self.raw_enters += 1
        self.in_raw_mode = True

    def leave_raw_mode(self) -> None:
        self.raw_leaves += 1
        self.in_raw_mode = False

    def get_size(self) -> tuple[int, int]:
        return self.size


__all__ = ["ScriptedTerminal"]
