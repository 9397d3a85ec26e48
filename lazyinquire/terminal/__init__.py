"""Terminal capability: event types, the driver contract, and drivers.

``PosixTerminal`` is the real TTY driver; ``ScriptedTerminal`` replays a fixed
event list for tests and non-interactive embedding.
"""

from __future__ import annotations

from .base import Terminal
from .events import Event, InterruptEvent, KeyEvent, ResizeEvent
from .posix import PosixTerminal, get_default_terminal
from .reader import ESC_SEQUENCE_TIMEOUT_MS, UNKNOWN_KEY, read_key
from .scripted import ScriptedTerminal

__all__ = [
    "Terminal",
    "Event",
    "KeyEvent",
    "ResizeEvent",
    "InterruptEvent",
    "PosixTerminal",
    "ScriptedTerminal",
    "get_default_terminal",
    "read_key",
    "ESC_SEQUENCE_TIMEOUT_MS",
    "UNKNOWN_KEY",
]
