"""Key tokens to prompt actions.

Arrow/paging keys are always bound; vim mode adds ``h``/``j``/``k``/``l``,
``g``/``G`` and ``/`` (start typing a filter) as aliases.
"""

from __future__ import annotations

import enum
from collections.abc import Callable
from dataclasses import dataclass


class Action(enum.Enum):
    MOVE_UP = "move_up"
    MOVE_DOWN = "move_down"
    PAGE_UP = "page_up"
    PAGE_DOWN = "page_down"
    FIRST = "first"
    LAST = "last"
    DESCEND = "descend"
    ASCEND = "ascend"
    SUBMIT = "submit"
    SELECT = "select"
    BACKSPACE = "backspace"
    CLEAR_FILTER = "clear_filter"
    START_FILTER = "start_filter"
    CANCEL = "cancel"
    INTERRUPT = "interrupt"


DEFAULT_KEYMAP: dict[Action, tuple[str, ...]] = {
    Action.MOVE_UP: ("UP", "CTRL_P"),
    Action.MOVE_DOWN: ("DOWN", "CTRL_N"),
    Action.PAGE_UP: ("PAGE_UP",),
    Action.PAGE_DOWN: ("PAGE_DOWN",),
    Action.FIRST: ("HOME",),
    Action.LAST: ("END",),
    Action.DESCEND: ("RIGHT",),
    Action.ASCEND: ("LEFT",),
    Action.SUBMIT: ("ENTER",),
    Action.SELECT: ("TAB",),
    Action.BACKSPACE: ("BACKSPACE",),
    Action.CLEAR_FILTER: ("CTRL_U",),
    Action.CANCEL: ("ESC",),
    Action.INTERRUPT: ("CTRL_C",),
}

VIM_KEYMAP: dict[Action, tuple[str, ...]] = {
    Action.MOVE_UP: ("k",),
    Action.MOVE_DOWN: ("j",),
    Action.FIRST: ("g",),
    Action.LAST: ("G",),
    Action.DESCEND: ("l",),
    Action.ASCEND: ("h",),
    Action.START_FILTER: ("/",),
}


def build_keymap(vim_mode: bool) -> dict[Action, tuple[str, ...]]:
    """Return the key tokens bound to each action."""
    keymap = dict(DEFAULT_KEYMAP)
    if vim_mode:
        for action, combos in VIM_KEYMAP.items():
            keymap[action] = keymap.get(action, ()) + combos
    return keymap


@dataclass(frozen=True)
class KeyComboBinding:
    """Mapping from one or more key tokens to a single action callback."""

    combos: tuple[str, ...]
    handler: Callable[[], bool | None]


class KeyComboRegistry:
    """Small key-dispatch table."""

    def __init__(self) -> None:
        self._handlers: dict[str, Callable[[], bool | None]] = {}

    def register_binding(self, binding: KeyComboBinding) -> KeyComboRegistry:
        """Register one binding, overwriting existing handlers for same combos."""
        for combo in binding.combos:
            self._handlers[combo] = binding.handler
        return self

    def register_bindings(self, *bindings: KeyComboBinding) -> KeyComboRegistry:
        for binding in bindings:
            self.register_binding(binding)
        return self

    def __contains__(self, key: str) -> bool:
        return key in self._handlers

    def dispatch(self, key: str) -> bool | None:
        """Invoke bound handler for ``key``; ``None`` when nothing is bound."""
        handler = self._handlers.get(key)
        if handler is None:
            return None
        return handler()


__all__ = [
    "Action",
    "DEFAULT_KEYMAP",
    "VIM_KEYMAP",
    "build_keymap",
    "KeyComboBinding",
    "KeyComboRegistry",
]
