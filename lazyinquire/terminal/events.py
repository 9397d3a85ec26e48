"""Input events produced by terminal drivers."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class KeyEvent:
    """One decoded key press.

    ``key`` is either a single printable character or a normalized token such
    as ``UP``, ``ENTER``, ``BACKSPACE`` or ``CTRL_U``.
    """

    key: str

    @property
    def is_printable(self) -> bool:
        return len(self.key) == 1 and self.key.isprintable()


@dataclass(frozen=True)
class ResizeEvent:
    """Terminal window changed size."""

    columns: int
    lines: int


@dataclass(frozen=True)
class InterruptEvent:
    """Interrupt request (Ctrl-C in raw mode)."""


Event = KeyEvent | ResizeEvent | InterruptEvent


__all__ = ["KeyEvent", "ResizeEvent", "InterruptEvent", "Event"]
