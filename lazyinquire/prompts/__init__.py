"""Prompt variants built on the shared backend.

Only the filesystem path prompt (``Explorer``) lives here.
"""

from __future__ import annotations

from .explorer import Explorer
from .file_select import FileSelectPrompt, NavigationState, PromptPhase
from .listing import DirectoryEntry, FileKind, list_directory_entries

__all__ = [
    "Explorer",
    "FileSelectPrompt",
    "NavigationState",
    "PromptPhase",
    "DirectoryEntry",
    "FileKind",
    "list_directory_entries",
]
