"""``Explorer``: prompt the user for a filesystem path.

The builder is immutable; every ``with_*`` call returns an updated copy. The
configured values are consumed by ``FileSelectPrompt`` when ``prompt`` runs.

Keys: Up/Down move, Enter or Right opens a directory, Enter on anything else
selects it, Left (or Backspace with an empty filter) goes to the parent, Tab
selects the highlighted entry (directories only when directory selection is
enabled), typing filters by prefix or types a path, Esc cancels.
"""

from __future__ import annotations

import dataclasses
from collections.abc import Callable
from dataclasses import dataclass, field
from pathlib import Path
from typing import ClassVar

from ..config import load_page_size, load_show_hidden, load_vim_mode
from ..errors import InvalidConfigurationError, PromptCancelledError, PromptInterruptedError
from ..terminal import get_default_terminal
from ..ui.backend import Backend
from ..ui.render_config import RenderConfig, get_global_render_config
from ..validator import PathValidator, as_path_validator
from .file_select import FileSelectPrompt
from .listing import FileKind

ValidatorLike = PathValidator | Callable[[Path], str | None]

HELP_MESSAGE = "↑↓ to move, enter/→ to open, ← to go up, tab to select, type to filter"
VIM_HELP_MESSAGE = "j/k to move, enter/l to open, h to go up, tab to select, / to filter"


def _default_page_size() -> int:
    return load_page_size() or Explorer.DEFAULT_PAGE_SIZE


@dataclass(frozen=True)
class Explorer:
    """Path prompt builder."""

    DEFAULT_VALIDATORS: ClassVar[tuple[PathValidator, ...]] = ()
    DEFAULT_VIM_MODE: ClassVar[bool] = False
    DEFAULT_PAGE_SIZE: ClassVar[int] = 7

    message: str
    filetype_filter: frozenset[FileKind] = frozenset()
    validators: tuple[PathValidator, ...] = DEFAULT_VALIDATORS
    vim_mode: bool = field(default_factory=load_vim_mode)
    render_config: RenderConfig | None = None
    starting_path: Path | None = None
    page_size: int = field(default_factory=_default_page_size)
    help_message: str | None = ""
    show_hidden: bool = field(default_factory=load_show_hidden)
    allow_directory_selection: bool = False

    @classmethod
    def new(cls, message: str) -> Explorer:
        return cls(message)

    def _replace(self, **changes: object) -> Explorer:
        return dataclasses.replace(self, **changes)

    def with_filter(self, *kinds: FileKind | str) -> Explorer:
        """Only list (and allow selecting) entries of ``kinds``; none means all."""
        return self._replace(filetype_filter=frozenset(FileKind.parse(kind) for kind in kinds))

    def with_validators(self, *validators: ValidatorLike) -> Explorer:
        """Replace the validator chain; validators run in the given order."""
        return self._replace(validators=tuple(as_path_validator(v) for v in validators))

    def with_validator(self, validator: ValidatorLike) -> Explorer:
        """Append one validator to the chain."""
        return self._replace(validators=self.validators + (as_path_validator(validator),))

    def with_vim_mode(self, vim_mode: bool) -> Explorer:
        return self._replace(vim_mode=bool(vim_mode))

    def with_render_config(self, render_config: RenderConfig) -> Explorer:
        return self._replace(render_config=render_config)

    def with_starting_path(self, path: str | Path | None) -> Explorer:
        return self._replace(starting_path=None if path is None else Path(path))

    def with_page_size(self, page_size: int) -> Explorer:
        return self._replace(page_size=page_size)

    def with_help_message(self, help_message: str | None) -> Explorer:
        """Set the help line; ``None`` hides it, ``""`` restores the default."""
        return self._replace(help_message=help_message)

    def with_show_hidden(self, show_hidden: bool) -> Explorer:
        return self._replace(show_hidden=bool(show_hidden))

    def with_directory_selection(self, allow: bool) -> Explorer:
        return self._replace(allow_directory_selection=bool(allow))

    def effective_help_message(self) -> str | None:
        if self.help_message is None:
            return None
        if self.help_message:
            return self.help_message
        return VIM_HELP_MESSAGE if self.vim_mode else HELP_MESSAGE

    def effective_render_config(self) -> RenderConfig:
        return self.render_config if self.render_config is not None else get_global_render_config()

    def validate_config(self) -> None:
        """Raise ``InvalidConfigurationError`` for values the prompt cannot run with."""
        if not isinstance(self.message, str) or not self.message.strip():
            raise InvalidConfigurationError("prompt message must not be empty")
        if isinstance(self.page_size, bool) or not isinstance(self.page_size, int) or self.page_size < 1:
            raise InvalidConfigurationError(f"page size must be a positive integer, got {self.page_size!r}")

    def prompt(self) -> Path:
        """Prompt on the default terminal and return the accepted path.

        Raises ``PromptCancelledError`` (or its ``PromptInterruptedError``
        subclass) when the user aborts.
        """
        self.validate_config()
        terminal = get_default_terminal()
        backend = Backend(terminal, self.effective_render_config())
        return self.prompt_with_backend(backend)

    def prompt_skippable(self) -> Path | None:
        """Like ``prompt`` but return ``None`` when the user presses Escape."""
        try:
            return self.prompt()
        except PromptInterruptedError:
            raise
        except PromptCancelledError:
            return None

    def prompt_with_backend(self, backend: Backend) -> Path:
        self.validate_config()
        return FileSelectPrompt(self).prompt(backend)


__all__ = ["Explorer", "HELP_MESSAGE", "VIM_HELP_MESSAGE"]
