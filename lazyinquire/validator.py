"""Path validators and the fail-fast validation chain.

A validator is any ``PathValidator`` or a plain callable taking the candidate
``Path``. Callables accept by returning ``None`` (or an empty string) and
reject by returning a message or raising ``ValidationError``.
"""

from __future__ import annotations

import os
from abc import ABC, abstractmethod
from collections.abc import Callable, Iterable
from pathlib import Path

from .errors import ValidationError


class PathValidator(ABC):
    """Check applied to a candidate path before a prompt may return it."""

    @abstractmethod
    def validate(self, path: Path) -> None:
        """Raise ``ValidationError`` when ``path`` is not acceptable."""

    def __call__(self, path: Path) -> None:
        self.validate(path)


class CallableValidator(PathValidator):
    """Adapter for ``fn(path) -> str | None`` callables."""

    def __init__(self, func: Callable[[Path], str | None]) -> None:
        self.func = func

    def validate(self, path: Path) -> None:
        message = self.func(path)
        if message:
            raise ValidationError(str(message))

    def __repr__(self) -> str:
        return f"CallableValidator({self.func!r})"


class ExistsValidator(PathValidator):
    def __init__(self, message: str = "path does not exist") -> None:
        self.message = message

    def validate(self, path: Path) -> None:
        if not path.exists():
            raise ValidationError(self.message)


class FileValidator(PathValidator):
    def __init__(self, message: str = "path is not a file") -> None:
        self.message = message

    def validate(self, path: Path) -> None:
        if not path.is_file():
            raise ValidationError(self.message)


class DirectoryValidator(PathValidator):
    def __init__(self, message: str = "path is not a directory") -> None:
        self.message = message

    def validate(self, path: Path) -> None:
        if not path.is_dir():
            raise ValidationError(self.message)


class ExtensionValidator(PathValidator):
    """Require the file name to end with one of ``suffixes``.

    Suffixes are compared against the full name, so multi-part suffixes such
    as ``.tar.gz`` work. A missing leading dot is added.
    """

    def __init__(self, *suffixes: str, case_sensitive: bool = False, message: str | None = None) -> None:
        if not suffixes:
            raise ValueError("ExtensionValidator needs at least one suffix")
        normalized = tuple(s if s.startswith(".") else f".{s}" for s in suffixes)
        self.case_sensitive = case_sensitive
        self.suffixes = normalized if case_sensitive else tuple(s.lower() for s in normalized)
        self.message = message or f"must end with {' or '.join(normalized)}"

    def validate(self, path: Path) -> None:
        name = path.name if self.case_sensitive else path.name.lower()
        if not name.endswith(self.suffixes):
            raise ValidationError(self.message)


class WritableValidator(PathValidator):
    """Require write access to ``path``, or to its parent when it does not exist yet."""

    def __init__(self, message: str = "path is not writable") -> None:
        self.message = message

    def validate(self, path: Path) -> None:
        target = path if path.exists() else path.parent
        if not os.access(target, os.W_OK):
            raise ValidationError(self.message)


class ReadableValidator(PathValidator):
    def __init__(self, message: str = "path is not readable") -> None:
        self.message = message

    def validate(self, path: Path) -> None:
        if not os.access(path, os.R_OK):
            raise ValidationError(self.message)


def as_path_validator(validator: PathValidator | Callable[[Path], str | None]) -> PathValidator:
    """Return ``validator`` as a ``PathValidator``, wrapping plain callables."""
    if isinstance(validator, PathValidator):
        return validator
    if callable(validator):
        return CallableValidator(validator)
    raise TypeError(f"not a path validator: {validator!r}")


def run_validators(validators: Iterable[PathValidator], path: Path) -> str | None:
    """Run ``validators`` in order and return the first failure message.

    Stops at the first failure; later validators are not executed. Returns
    ``None`` when every validator accepts (including the empty chain).
    """
    for validator in validators:
        try:
            validator.validate(path)
        except ValidationError as exc:
            return str(exc) or "invalid path"
    return None


__all__ = [
    "PathValidator",
    "CallableValidator",
    "ExistsValidator",
    "FileValidator",
    "DirectoryValidator",
    "ExtensionValidator",
    "WritableValidator",
    "ReadableValidator",
    "as_path_validator",
    "run_validators",
]
