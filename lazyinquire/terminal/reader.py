"""Low-level terminal input decoding.

Reads raw bytes from a file descriptor and translates them into normalized key
tokens. Handles ESC-sequence timing, CSI navigation keys, and UTF-8 input.
"""

from __future__ import annotations

import os
import select

ESC_SEQUENCE_TIMEOUT_MS = 25
# Token for escape sequences that decode to no known key; never bound to an action.
UNKNOWN_KEY = "UNKNOWN"
_PENDING_BYTES: list[bytes] = []

_CONTROL_TOKENS: dict[bytes, str] = {
    b"\x03": "CTRL_C",
    b"\x04": "CTRL_D",
    b"\x0b": "CTRL_K",
    b"\x10": "CTRL_P",
    b"\x0e": "CTRL_N",
    b"\x15": "CTRL_U",
    b"\x17": "CTRL_W",
    b"\t": "TAB",
    b"\x08": "BACKSPACE",
    b"\x7f": "BACKSPACE",
    b"\r": "ENTER",
    b"\n": "ENTER",
}

_CSI_FINAL_TOKENS: dict[bytes, str] = {
    b"A": "UP",
    b"B": "DOWN",
    b"C": "RIGHT",
    b"D": "LEFT",
    b"H": "HOME",
    b"F": "END",
    b"Z": "SHIFT_TAB",
}

_SS3_FINAL_TOKENS: dict[bytes, str] = {
    **_CSI_FINAL_TOKENS,
    b"P": "F1",
    b"Q": "F2",
    b"R": "F3",
    b"S": "F4",
}

_CSI_TILDE_TOKENS: dict[str, str] = {
    "1": "HOME",
    "2": "INSERT",
    "7": "HOME",
    "4": "END",
    "8": "END",
    "3": "DELETE",
    "5": "PAGE_UP",
    "6": "PAGE_DOWN",
    "15": "F5",
    "17": "F6",
    "18": "F7",
    "19": "F8",
    "20": "F9",
    "21": "F10",
    "23": "F11",
    "24": "F12",
}

_MODIFIER_PREFIXES: dict[str, str] = {
    "2": "SHIFT_",
    "3": "ALT_",
    "5": "CTRL_",
    "9": "ALT_",
}


def _read_ready_byte(fd: int, timeout_ms: int) -> bytes | None:
    ready, _, _ = select.select([fd], [], [], max(0.0, timeout_ms / 1000.0))
    if not ready:
        return None
    ch = os.read(fd, 1)
    if not ch:
        return None
    return ch


def _utf8_continuation_count(lead: int) -> int:
    if lead & 0b1110_0000 == 0b1100_0000:
        return 1
    if lead & 0b1111_0000 == 0b1110_0000:
        return 2
    if lead & 0b1111_1000 == 0b1111_0000:
        return 3
    return 0


def _decode_utf8(fd: int, first: bytes) -> str:
    """Read the continuation bytes of a multibyte character started by ``first``."""
    data = bytearray(first)
    for _ in range(_utf8_continuation_count(first[0])):
        part = _read_ready_byte(fd, ESC_SEQUENCE_TIMEOUT_MS)
        if part is None:
            break
        data += part
    return data.decode("utf-8", errors="replace")


def _decode_csi(fd: int) -> str:
    """Decode the remainder of an ``ESC [`` sequence."""
    seq = _read_ready_byte(fd, ESC_SEQUENCE_TIMEOUT_MS)
    if seq is None:
        return UNKNOWN_KEY
    token = _CSI_FINAL_TOKENS.get(seq)
    if token is not None:
        return token
    if not seq.isdigit():
        return UNKNOWN_KEY

    params = bytearray(seq)
    while True:
        part = _read_ready_byte(fd, ESC_SEQUENCE_TIMEOUT_MS)
        if part is None:
            return UNKNOWN_KEY
        if part.isdigit() or part == b";":
            params += part
            if len(params) > 16:
                return UNKNOWN_KEY
            continue
        final = part
        break

    fields = params.decode("ascii").split(";")
    if final == b"~":
        return _CSI_TILDE_TOKENS.get(fields[0], UNKNOWN_KEY)
    base = _CSI_FINAL_TOKENS.get(final)
    if base is None:
        return UNKNOWN_KEY
    if len(fields) == 2:
        prefix = _MODIFIER_PREFIXES.get(fields[1])
        if prefix is not None:
            return prefix + base
    return base


def read_key(fd: int, timeout_ms: int | None = None) -> str:
    """Block for one key press on ``fd`` and return its token.

    Returns ``""`` on timeout or end of input.
    """
    if _PENDING_BYTES:
        ch = _PENDING_BYTES.pop(0)
    else:
        if timeout_ms is not None:
            ready, _, _ = select.select([fd], [], [], max(0.0, timeout_ms / 1000.0))
            if not ready:
                return ""

        ch = os.read(fd, 1)
        if not ch:
            return ""

    token = _CONTROL_TOKENS.get(ch)
    if token is not None:
        return token

    if ch != b"\x1b":
        if ch[0] >= 0x80:
            return _decode_utf8(fd, ch)
        return ch.decode("utf-8", errors="replace")

    # Escape / CSI / SS3 sequences.
    seq = _read_ready_byte(fd, ESC_SEQUENCE_TIMEOUT_MS)
    if seq is None:
        return "ESC"
    if seq == b"[":
        return _decode_csi(fd)
    if seq == b"O":
        final = _read_ready_byte(fd, ESC_SEQUENCE_TIMEOUT_MS)
        if final is None:
            return UNKNOWN_KEY
        return _SS3_FINAL_TOKENS.get(final, UNKNOWN_KEY)
    _PENDING_BYTES.append(seq)
    return "ESC"


__all__ = ["ESC_SEQUENCE_TIMEOUT_MS", "UNKNOWN_KEY", "read_key"]
