"""Terminal capability consumed by the prompt backend.

A driver only has to provide the five primitives below plus size and flush;
everything above this layer is agnostic to the concrete terminal.
"""

from __future__ import annotations

import contextlib
from abc import ABC, abstractmethod

from .events import Event


class Terminal(ABC):
    """Abstract terminal driver."""

    @abstractmethod
    def read_event(self) -> Event:
        """Block until one input event is available and return it."""

    @abstractmethod
    def write(self, text: str) -> None:
        """Write styled text or control sequences."""

    def flush(self) -> None:
        """Flush buffered output; drivers writing unbuffered may ignore this."""

    @abstractmethod
    def cursor_hide(self) -> None: ...

    @abstractmethod
    def cursor_show(self) -> None: ...

    @abstractmethod
    def enter_raw_mode(self) -> None: ...

    @abstractmethod
    def leave_raw_mode(self) -> None: ...

    @abstractmethod
    def get_size(self) -> tuple[int, int]:
        """Return ``(columns, lines)``."""

    @contextlib.contextmanager
    def raw_mode(self):
        """Context manager that brackets code with raw-mode enter/leave calls."""
        self.enter_raw_mode()
        try:
            yield self
        finally:
            self.leave_raw_mode()


__all__ = ["Terminal"]
