"""ANSI-aware text measurement for frame rendering.

Styled prompt lines must be clipped to the terminal width before they are
written, otherwise a wrapped line breaks the repaint line count.
"""

from __future__ import annotations

import re
import unicodedata

ANSI_ESCAPE_RE = re.compile(r"\x1b\[[0-9;?]*[ -/]*[@-~]")


def strip_ansi(text: str) -> str:
    """Return ``text`` with all CSI escape sequences removed."""
    return ANSI_ESCAPE_RE.sub("", text)


def char_display_width(ch: str) -> int:
    """Return terminal column width for one character.

    Combining marks consume no columns and East Asian wide/fullwidth
    characters consume two.
    """
    if unicodedata.combining(ch):
        return 0
    if unicodedata.east_asian_width(ch) in {"W", "F"}:
        return 2
    return 1


def display_width(text: str) -> int:
    """Return terminal column width for ANSI-styled text."""
    return sum(char_display_width(ch) for ch in strip_ansi(text))


def clip_ansi_line(text: str, max_cols: int) -> str:
    """Trim a styled line to at most ``max_cols`` display columns.

    Escape sequences are preserved verbatim and do not count toward width. A
    reset is appended when clipping cut the line inside a styled run.
    """
    if max_cols <= 0 or not text:
        return ""

    out: list[str] = []
    col = 0
    i = 0
    n = len(text)
    clipped = False
    while i < n:
        if text[i] == "\x1b":
            match = ANSI_ESCAPE_RE.match(text, i)
            if match:
                out.append(match.group(0))
                i = match.end()
                continue
        ch = text[i]
        w = char_display_width(ch)
        if col + w > max_cols:
            clipped = True
            break
        out.append(ch)
        col += w
        i += 1

    if clipped and "\x1b" in text:
        out.append("\x1b[0m")
    return "".join(out)


__all__ = [
    "ANSI_ESCAPE_RE",
    "strip_ansi",
    "char_display_width",
    "display_width",
    "clip_ansi_line",
]
