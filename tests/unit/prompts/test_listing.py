"""Tests for directory listing, kind filters and ordering."""

from __future__ import annotations

import os
import tempfile
import unittest
from pathlib import Path

from lazyinquire.prompts.listing import (
    DirectoryEntry,
    FileKind,
    filter_entries_by_prefix,
    list_directory_entries,
)


class ListDirectoryEntriesTests(unittest.TestCase):
    def setUp(self) -> None:
        self._tmp = tempfile.TemporaryDirectory()
        self.root = Path(self._tmp.name)
        (self.root / "beta.txt").write_text("b", encoding="utf-8")
        (self.root / "Alpha.md").write_text("a", encoding="utf-8")
        (self.root / "zeta").mkdir()
        (self.root / "Docs").mkdir()
        (self.root / ".hidden").write_text("h", encoding="utf-8")
        os.symlink(self.root / "zeta", self.root / "link")

    def tearDown(self) -> None:
        self._tmp.cleanup()

    def test_empty_filter_lists_every_child_once_directories_first(self) -> None:
        entries, error = list_directory_entries(self.root)

        self.assertIsNone(error)
        self.assertEqual(
            [entry.name for entry in entries],
            ["Docs", "zeta", ".hidden", "Alpha.md", "beta.txt", "link"],
        )
        self.assertEqual(sorted(e.name for e in entries), sorted(os.listdir(self.root)))
        self.assertTrue(all(entry.path == self.root / entry.name for entry in entries))

    def test_kind_filter_never_returns_other_kinds(self) -> None:
        for kinds in ({FileKind.FILE}, {FileKind.DIRECTORY}, {FileKind.SYMLINK}, {FileKind.FILE, FileKind.SYMLINK}):
            entries, _error = list_directory_entries(self.root, kinds)
            self.assertTrue(entries)
            self.assertTrue(all(entry.kind in kinds for entry in entries), kinds)

    def test_hidden_entries_can_be_skipped(self) -> None:
        entries, _error = list_directory_entries(self.root, show_hidden=False)
        self.assertNotIn(".hidden", [entry.name for entry in entries])

    def test_symlink_to_directory_is_navigable_but_not_a_directory(self) -> None:
        entries, _error = list_directory_entries(self.root, {FileKind.SYMLINK})
        (link,) = entries
        self.assertIs(link.kind, FileKind.SYMLINK)
        self.assertFalse(link.is_directory)
        self.assertTrue(link.is_navigable)

    def test_missing_directory_returns_error_instead_of_raising(self) -> None:
        entries, error = list_directory_entries(self.root / "missing")
        self.assertEqual(entries, [])
        self.assertIsInstance(error, FileNotFoundError)


class PrefixFilterTests(unittest.TestCase):
    def test_prefix_match_is_case_insensitive(self) -> None:
        root = Path("/r")
        entries = [
            DirectoryEntry("Readme.md", FileKind.FILE, root / "Readme.md"),
            DirectoryEntry("src", FileKind.DIRECTORY, root / "src"),
            DirectoryEntry("README.txt", FileKind.FILE, root / "README.txt"),
        ]
        self.assertEqual(
            [entry.name for entry in filter_entries_by_prefix(entries, "rEaD")],
            ["Readme.md", "README.txt"],
        )
        self.assertEqual(filter_entries_by_prefix(entries, ""), entries)


class FileKindParseTests(unittest.TestCase):
    def test_parse_accepts_names_and_aliases(self) -> None:
        self.assertIs(FileKind.parse("dir"), FileKind.DIRECTORY)
        self.assertIs(FileKind.parse(" F "), FileKind.FILE)
        self.assertIs(FileKind.parse(FileKind.OTHER), FileKind.OTHER)
        with self.assertRaises(ValueError):
            FileKind.parse("socketish")


if __name__ == "__main__":
    unittest.main()
