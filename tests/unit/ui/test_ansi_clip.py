"""Tests for ANSI-aware width and clipping helpers."""

from __future__ import annotations

import unittest

from lazyinquire.ui import ansi as ansi_mod


class AnsiHelperTests(unittest.TestCase):
    def test_strip_and_width_ignore_escape_sequences(self) -> None:
        styled = "\x1b[01m\x1b[36mabc\x1b[39;49;00m"
        self.assertEqual(ansi_mod.strip_ansi(styled), "abc")
        self.assertEqual(ansi_mod.display_width(styled), 3)

    def test_wide_characters_count_two_columns(self) -> None:
        self.assertEqual(ansi_mod.display_width("日本"), 4)
        self.assertEqual(ansi_mod.clip_ansi_line("日本語", 5), "日本")

    def test_clip_keeps_sequences_and_resets_cut_style(self) -> None:
        clipped = ansi_mod.clip_ansi_line("\x1b[31mabcdef\x1b[0m", 3)
        self.assertEqual(ansi_mod.strip_ansi(clipped), "abc")
        self.assertTrue(clipped.startswith("\x1b[31m"))
        self.assertTrue(clipped.endswith("\x1b[0m"))

    def test_clip_leaves_short_lines_untouched(self) -> None:
        self.assertEqual(ansi_mod.clip_ansi_line("abc", 10), "abc")
        self.assertEqual(ansi_mod.clip_ansi_line("abc", 0), "")


if __name__ == "__main__":
    unittest.main()
