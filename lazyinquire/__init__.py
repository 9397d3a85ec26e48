"""Public package surface for lazyinquire.

Interactive terminal prompts; currently the filesystem path prompt
(``Explorer``) together with the backend, render config and validator
contracts it is built on.
"""

from __future__ import annotations

import logging

from .errors import (
    InvalidConfigurationError,
    NotTTYError,
    PromptCancelledError,
    PromptError,
    PromptInterruptedError,
    PromptIOError,
    ValidationError,
)
from .prompts import DirectoryEntry, Explorer, FileKind
from .ui import Backend, RenderConfig, get_global_render_config, set_global_render_config
from .validator import (
    DirectoryValidator,
    ExistsValidator,
    ExtensionValidator,
    FileValidator,
    PathValidator,
    ReadableValidator,
    WritableValidator,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())


def main(*args, **kwargs):
    """Lazily import CLI entrypoint to keep package imports lightweight."""
    from .cli import main as _main

    return _main(*args, **kwargs)


__all__ = [
    "Explorer",
    "FileKind",
    "DirectoryEntry",
    "Backend",
    "RenderConfig",
    "get_global_render_config",
    "set_global_render_config",
    "PathValidator",
    "ExistsValidator",
    "FileValidator",
    "DirectoryValidator",
    "ExtensionValidator",
    "WritableValidator",
    "ReadableValidator",
    "PromptError",
    "NotTTYError",
    "PromptIOError",
    "InvalidConfigurationError",
    "PromptCancelledError",
    "PromptInterruptedError",
    "ValidationError",
    "main",
]
