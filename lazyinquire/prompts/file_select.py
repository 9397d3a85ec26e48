"""Navigation and selection engine behind the ``Explorer`` prompt.

``FileSelectPrompt`` owns the working state for exactly one prompt call and
runs a blocking read/handle/render loop against a ``Backend``. Listing and
validation failures are absorbed into the error banner; only cancellation
leaves the loop without an answer.
"""

from __future__ import annotations

import enum
import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING

from ..errors import (
    InvalidConfigurationError,
    PromptCancelledError,
    PromptInterruptedError,
    PromptIOError,
)
from ..terminal.events import Event, InterruptEvent, KeyEvent
from ..ui.backend import Backend
from ..validator import as_path_validator, run_validators
from .keys import Action, KeyComboBinding, KeyComboRegistry, build_keymap
from .listing import DirectoryEntry, FileKind, filter_entries_by_prefix, list_directory_entries

if TYPE_CHECKING:
    from .explorer import Explorer

logger = logging.getLogger(__name__)

DIRECTORY_NOT_SELECTABLE = "directories cannot be selected"


class PromptPhase(enum.Enum):
    BROWSING = "browsing"
    CONFIRMING = "confirming"
    VALIDATING = "validating"
    ACCEPTED = "accepted"
    CANCELLED = "cancelled"

    @property
    def is_terminal(self) -> bool:
        return self in (PromptPhase.ACCEPTED, PromptPhase.CANCELLED)


@dataclass
class NavigationState:
    """Mutable working state of one path prompt."""

    current_path: Path
    entries: list[DirectoryEntry] = field(default_factory=list)
    visible: list[DirectoryEntry] = field(default_factory=list)
    cursor: int = 0
    page_start: int = 0
    input_buffer: str = ""
    filter_editing: bool = False
    error_banner: str | None = None
    phase: PromptPhase = PromptPhase.BROWSING
    answer: Path | None = None
    interrupted: bool = False

    @property
    def highlighted(self) -> DirectoryEntry | None:
        if not self.visible:
            return None
        return self.visible[self.cursor]


def _normalize(path: Path) -> Path:
    """Collapse ``.``/``..`` segments without resolving symlinks."""
    return Path(os.path.normpath(path))


def _kind_of(path: Path) -> FileKind | None:
    """Classify ``path`` like a listing would; ``None`` when it does not exist."""
    try:
        if path.is_symlink():
            return FileKind.SYMLINK
        if not path.exists():
            return None
        if path.is_dir():
            return FileKind.DIRECTORY
        if path.is_file():
            return FileKind.FILE
    except OSError:
        return None
    return FileKind.OTHER


class FileSelectPrompt:
    """Stateful directory browser driven by key events."""

    def __init__(self, explorer: Explorer) -> None:
        self.message = explorer.message
        self.filetype_filter = frozenset(explorer.filetype_filter)
        self.validators = tuple(as_path_validator(v) for v in explorer.validators)
        self.vim_mode = explorer.vim_mode
        self.page_size = explorer.page_size
        self.show_hidden = explorer.show_hidden
        self.allow_directory_selection = explorer.allow_directory_selection
        self.help_message = explorer.effective_help_message()

        start = self._resolve_start(explorer.starting_path)
        entries, scan_error = self._list(start)
        if scan_error is not None:
            raise PromptIOError(f"cannot list {start}: {scan_error}") from scan_error
        self.state = NavigationState(current_path=start, entries=entries)
        self._refresh_visible()
        self._keys = self._build_key_registry()

    @staticmethod
    def _resolve_start(starting_path: Path | None) -> Path:
        try:
            if starting_path is None:
                start = Path.cwd()
            else:
                start = Path(starting_path).expanduser().absolute()
        except OSError as exc:
            raise PromptIOError(f"cannot resolve current directory: {exc}") from exc
        start = _normalize(start)
        if not start.is_dir():
            raise InvalidConfigurationError(f"starting path is not a directory: {start}")
        return start

    def _list(self, directory: Path) -> tuple[list[DirectoryEntry], OSError | None]:
        return list_directory_entries(directory, self.filetype_filter, show_hidden=self.show_hidden)

    def _build_key_registry(self) -> KeyComboRegistry:
        handlers = {
            Action.MOVE_UP: lambda: self.move_cursor(-1),
            Action.MOVE_DOWN: lambda: self.move_cursor(1),
            Action.PAGE_UP: lambda: self.move_cursor(-self.page_size),
            Action.PAGE_DOWN: lambda: self.move_cursor(self.page_size),
            Action.FIRST: lambda: self.move_cursor_to(0),
            Action.LAST: lambda: self.move_cursor_to(len(self.state.visible) - 1),
            Action.DESCEND: self.descend,
            Action.ASCEND: self.ascend,
            Action.SUBMIT: self.submit,
            Action.SELECT: self.select_highlighted,
            Action.BACKSPACE: self.backspace,
            Action.CLEAR_FILTER: lambda: self.set_input_buffer(""),
            Action.START_FILTER: self.start_filter_editing,
            Action.CANCEL: self.cancel,
            Action.INTERRUPT: self.interrupt,
        }
        registry = KeyComboRegistry()
        for action, combos in build_keymap(self.vim_mode).items():
            registry.register_binding(KeyComboBinding(combos=combos, handler=handlers[action]))
        return registry

    # Listing and filtering.

    def _typed_path(self) -> Path | None:
        """Return the path typed into the input buffer, if it looks like one."""
        text = self.state.input_buffer
        if not text:
            return None
        separators = {os.sep, os.altsep} - {None}
        if not text.startswith("~") and not any(sep in text for sep in separators):
            return None
        target = Path(text).expanduser()
        if not target.is_absolute():
            target = self.state.current_path / target
        return _normalize(target)

    def _refresh_visible(self) -> None:
        state = self.state
        if self._typed_path() is not None:
            state.visible = list(state.entries)
        else:
            state.visible = filter_entries_by_prefix(state.entries, state.input_buffer)
        state.cursor = 0
        state.page_start = 0

    def change_directory(self, target: Path) -> bool:
        """Enter ``target`` and re-list; on failure keep state and set the banner."""
        state = self.state
        entries, scan_error = self._list(target)
        if scan_error is not None:
            reason = scan_error.strerror or str(scan_error)
            state.error_banner = f"cannot open {target}: {reason}"
            logger.debug("listing %s failed: %s", target, scan_error)
            return False
        state.current_path = target
        state.entries = entries
        state.input_buffer = ""
        state.filter_editing = False
        state.error_banner = None
        self._refresh_visible()
        return True

    def set_input_buffer(self, text: str) -> bool:
        state = self.state
        state.input_buffer = text
        state.error_banner = None
        self._refresh_visible()
        return True

    def _clear_input(self) -> None:
        """Drop the filter without moving; used when navigation has nowhere to go."""
        state = self.state
        state.filter_editing = False
        if state.input_buffer:
            state.input_buffer = ""
            self._refresh_visible()

    # Key handlers.

    def move_cursor(self, delta: int) -> bool:
        state = self.state
        state.filter_editing = False
        if not state.visible:
            return True
        state.cursor = max(0, min(state.cursor + delta, len(state.visible) - 1))
        return True

    def move_cursor_to(self, index: int) -> bool:
        state = self.state
        return self.move_cursor(index - state.cursor)

    def descend(self) -> bool:
        entry = self.state.highlighted
        if entry is None or not entry.is_navigable:
            self._clear_input()
            return True
        self.change_directory(entry.path)
        return True

    def ascend(self) -> bool:
        state = self.state
        parent = state.current_path.parent
        if parent == state.current_path:
            self._clear_input()
            return True
        self.change_directory(parent)
        return True

    def submit(self) -> bool:
        """Enter: open directories, select anything else."""
        typed = self._typed_path()
        if typed is not None:
            if typed.is_dir():
                self.change_directory(typed)
            else:
                self.confirm(typed)
            return True

        self.state.filter_editing = False
        entry = self.state.highlighted
        if entry is None:
            return True
        if entry.is_navigable:
            self.change_directory(entry.path)
            return True
        self.confirm(entry.path)
        return True

    def select_highlighted(self) -> bool:
        """Tab: select the highlighted entry, directories included when allowed."""
        state = self.state
        typed = self._typed_path()
        if typed is not None:
            candidate = typed
            is_directory = typed.is_dir()
        elif state.highlighted is not None:
            candidate = state.highlighted.path
            is_directory = state.highlighted.is_navigable
        else:
            candidate = state.current_path
            is_directory = True

        if is_directory and not self.allow_directory_selection:
            state.error_banner = DIRECTORY_NOT_SELECTABLE
            return True
        self.confirm(candidate)
        return True

    def backspace(self) -> bool:
        state = self.state
        if state.input_buffer:
            return self.set_input_buffer(state.input_buffer[:-1])
        if state.filter_editing:
            state.filter_editing = False
            return True
        return self.ascend()

    def start_filter_editing(self) -> bool:
        self.state.filter_editing = True
        return True

    def cancel(self) -> bool:
        self.state.phase = PromptPhase.CANCELLED
        return True

    def interrupt(self) -> bool:
        self.state.interrupted = True
        self.state.phase = PromptPhase.CANCELLED
        return True

    def confirm(self, candidate: Path) -> None:
        """Run a candidate through the filter check and validator chain."""
        state = self.state
        state.phase = PromptPhase.CONFIRMING
        kind = _kind_of(candidate)
        if self.filetype_filter and kind is not None and kind not in self.filetype_filter:
            state.error_banner = f"{candidate.name or candidate} is a {kind.value}, which cannot be selected"
            state.phase = PromptPhase.BROWSING
            return

        state.phase = PromptPhase.VALIDATING
        failure = run_validators(self.validators, candidate)
        if failure is not None:
            logger.debug("validation rejected %s: %s", candidate, failure)
            state.error_banner = failure
            state.phase = PromptPhase.BROWSING
            return

        state.answer = candidate
        state.phase = PromptPhase.ACCEPTED

    def handle_event(self, event: Event) -> None:
        """Apply at most one state transition for ``event``."""
        if isinstance(event, InterruptEvent):
            self.interrupt()
            return
        if not isinstance(event, KeyEvent):
            # Resize and unknown events only trigger a repaint.
            return

        key = event.key
        typing_text = not self.vim_mode or self.state.filter_editing
        if typing_text and event.is_printable:
            self.set_input_buffer(self.state.input_buffer + key)
            return
        self._keys.dispatch(key)

    # Rendering and the event loop.

    def _entry_label(self, entry: DirectoryEntry, backend: Backend) -> tuple[str, str]:
        config = backend.render_config
        if entry.kind is FileKind.DIRECTORY:
            return entry.name + config.directory_suffix, "directory"
        if entry.kind is FileKind.SYMLINK:
            return entry.name + config.symlink_suffix, "symlink"
        return entry.name, "option"

    def _page_rows(self, backend: Backend) -> int:
        """Entry rows that fit on screen next to the fixed lines and scroll markers."""
        _columns, rows = backend.terminal.get_size()
        fixed = 2 + bool(self.state.error_banner) + bool(self.help_message) + 2
        return max(1, min(self.page_size, rows - fixed))

    def _sync_page_window(self, size: int) -> None:
        state = self.state
        if state.cursor < state.page_start:
            state.page_start = state.cursor
        elif state.cursor >= state.page_start + size:
            state.page_start = state.cursor - size + 1
        state.page_start = max(0, min(state.page_start, max(0, len(state.visible) - size)))

    def render(self, backend: Backend) -> None:
        """Draw one frame for the current state."""
        state = self.state
        backend.frame_setup()
        input_text = state.input_buffer
        if state.filter_editing:
            input_text = f"/{input_text}"
        backend.render_prompt(self.message, input_text)
        if state.error_banner:
            backend.render_error(state.error_banner)
        backend.render_path(state.current_path)

        if not state.visible:
            backend.render_empty("no matching entries" if state.input_buffer else "empty directory")
        else:
            size = self._page_rows(backend)
            self._sync_page_window(size)
            end = min(len(state.visible), state.page_start + size)
            if state.page_start > 0:
                backend.render_scroll_marker(up=True)
            for index in range(state.page_start, end):
                label, role = self._entry_label(state.visible[index], backend)
                backend.render_option(label, highlighted=index == state.cursor, role=role)
            if end < len(state.visible):
                backend.render_scroll_marker(up=False)

        if self.help_message:
            backend.render_help(self.help_message)
        backend.frame_finish()

    def prompt(self, backend: Backend) -> Path:
        """Run the interaction until a path is accepted or the user cancels."""
        state = self.state
        with backend.session():
            self.render(backend)
            while True:
                self.handle_event(backend.read_event())
                if state.phase.is_terminal:
                    break
                self.render(backend)

            if state.phase is PromptPhase.ACCEPTED and state.answer is not None:
                backend.render_answer(self.message, str(state.answer))
                logger.debug("accepted %s", state.answer)
                return state.answer

            backend.render_canceled(self.message)
            logger.debug("prompt %s", "interrupted" if state.interrupted else "cancelled")
            if state.interrupted:
                raise PromptInterruptedError()
            raise PromptCancelledError()


__all__ = [
    "PromptPhase",
    "NavigationState",
    "FileSelectPrompt",
    "DIRECTORY_NOT_SELECTABLE",
]
