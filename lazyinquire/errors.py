"""Exception taxonomy raised by prompts.

Fatal errors (terminal or start directory unusable, bad builder values) and
user cancellation propagate to the caller. Navigation and validation failures
never leave the prompt loop; they are rendered as an inline error banner.
"""

from __future__ import annotations


class PromptError(Exception):
    """Base class for every error raised by a prompt."""


class NotTTYError(PromptError):
    """Input or output stream is not an interactive terminal."""

    def __init__(self, message: str = "input device is not a TTY") -> None:
        super().__init__(message)


class PromptIOError(PromptError):
    """Terminal or filesystem I/O failed before the prompt could run."""


class InvalidConfigurationError(PromptError):
    """Prompt builder holds values the prompt cannot run with."""


class PromptCancelledError(PromptError):
    """User deliberately aborted the prompt (Escape)."""

    def __init__(self, message: str = "operation canceled by user") -> None:
        super().__init__(message)


class PromptInterruptedError(PromptCancelledError):
    """User interrupted the prompt (Ctrl-C)."""

    def __init__(self, message: str = "operation interrupted by user") -> None:
        super().__init__(message)


class ValidationError(PromptError):
    """Raised by a path validator to reject a candidate answer.

    ``str(exc)`` is shown verbatim in the prompt's error banner.
    """


__all__ = [
    "PromptError",
    "NotTTYError",
    "PromptIOError",
    "InvalidConfigurationError",
    "PromptCancelledError",
    "PromptInterruptedError",
    "ValidationError",
]
