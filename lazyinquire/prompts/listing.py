"""Directory listing for the path prompt.

Children are classified without following symlinks, filtered by kind and
sorted directories first, then by case-insensitive name. The sort is stable,
so ties keep the filesystem enumeration order.
"""

from __future__ import annotations

import enum
import os
from collections.abc import Iterable
from dataclasses import dataclass
from pathlib import Path


class FileKind(enum.Enum):
    FILE = "file"
    DIRECTORY = "directory"
    SYMLINK = "symlink"
    OTHER = "other"

    @classmethod
    def parse(cls, value: str | FileKind) -> FileKind:
        """Parse a kind name or short alias (``f``, ``d``, ``dir``, ``l``, ``link``, ``o``)."""
        if isinstance(value, FileKind):
            return value
        key = str(value).strip().lower()
        kind = _KIND_ALIASES.get(key)
        if kind is None:
            raise ValueError(f"unknown file kind: {value!r}")
        return kind


_KIND_ALIASES: dict[str, FileKind] = {
    "file": FileKind.FILE,
    "f": FileKind.FILE,
    "directory": FileKind.DIRECTORY,
    "dir": FileKind.DIRECTORY,
    "d": FileKind.DIRECTORY,
    "symlink": FileKind.SYMLINK,
    "link": FileKind.SYMLINK,
    "l": FileKind.SYMLINK,
    "other": FileKind.OTHER,
    "o": FileKind.OTHER,
}


@dataclass(frozen=True)
class DirectoryEntry:
    """One child of the directory being browsed."""

    name: str
    kind: FileKind
    path: Path

    @property
    def is_directory(self) -> bool:
        return self.kind is FileKind.DIRECTORY

    @property
    def is_navigable(self) -> bool:
        """Directories, plus symlinks whose target is a directory."""
        if self.kind is FileKind.DIRECTORY:
            return True
        if self.kind is FileKind.SYMLINK:
            try:
                return self.path.is_dir()
            except OSError:
                return False
        return False


def _entry_kind(child: os.DirEntry) -> FileKind:
    try:
        if child.is_symlink():
            return FileKind.SYMLINK
        if child.is_dir(follow_symlinks=False):
            return FileKind.DIRECTORY
        if child.is_file(follow_symlinks=False):
            return FileKind.FILE
    except OSError:
        pass
    return FileKind.OTHER


def list_directory_entries(
    directory: Path,
    kinds: Iterable[FileKind] = frozenset(),
    show_hidden: bool = True,
) -> tuple[list[DirectoryEntry], OSError | None]:
    """List children of ``directory`` filtered by ``kinds`` and sorted.

    An empty ``kinds`` keeps every kind. Returns ``(entries, scan_error)``;
    ``scan_error`` is set and ``entries`` is empty when the directory cannot be
    scanned.
    """
    wanted = frozenset(kinds)
    entries: list[DirectoryEntry] = []
    try:
        with os.scandir(directory) as children:
            for child in children:
                name = child.name
                if not show_hidden and name.startswith("."):
                    continue
                kind = _entry_kind(child)
                if wanted and kind not in wanted:
                    continue
                entries.append(DirectoryEntry(name=name, kind=kind, path=directory / name))
    except OSError as exc:
        return [], exc

    entries.sort(key=lambda item: (not item.is_directory, item.name.casefold()))
    return entries, None


def filter_entries_by_prefix(entries: list[DirectoryEntry], query: str) -> list[DirectoryEntry]:
    """Return entries whose name starts with ``query``, ignoring case."""
    if not query:
        return list(entries)
    needle = query.casefold()
    return [entry for entry in entries if entry.name.casefold().startswith(needle)]


__all__ = [
    "FileKind",
    "DirectoryEntry",
    "list_directory_entries",
    "filter_entries_by_prefix",
]
