"""Low-level terminal input decoding.

Reads raw bytes from stdin and translates them into normalized key tokens.
Handles ESC-sequence timing and SGR mouse reports; any other CSI sequence is
swallowed whole and reported as ``UNKNOWN_KEY``.
"""

from __future__ import annotations

import os
import select

ESC_SEQUENCE_TIMEOUT_MS = 25
# Bytes inside a started sequence may trickle in slowly over ssh.
CSI_CONTINUATION_TIMEOUT_MS = 150
CSI_MAX_LENGTH = 64
UNKNOWN_KEY = "UNKNOWN"
_PENDING_BYTES: list[bytes] = []

_CONTROL_BYTES: dict[bytes, str] = {
    b"\x03": "CTRL_C",
    b"\x11": "CTRL_Q",
    b"\t": "TAB",
    b"\x08": "BACKSPACE",
    b"\x7f": "BACKSPACE",
    b"\r": "ENTER_CR",
    b"\n": "ENTER_LF",
    b" ": "SPACE",
}

_ARROWS: dict[bytes, str] = {
    b"A": "UP",
    b"B": "DOWN",
    b"C": "RIGHT",
    b"D": "LEFT",
}

_MOUSE_MOTION_BIT = 0b0010_0000
_MOUSE_WHEEL_BIT = 0b0100_0000


def _read_ready_byte(fd: int, timeout_ms: int) -> bytes | None:
    ready, _, _ = select.select([fd], [], [], max(0.0, timeout_ms / 1000.0))
    if not ready:
        return None
    ch = os.read(fd, 1)
    if not ch:
        return None
    return ch


def _read_utf8_tail(fd: int, first: bytes) -> str:
    """Complete a multi-byte UTF-8 character started by ``first``."""
    lead = first[0]
    if lead >= 0xF0:
        missing = 3
    elif lead >= 0xE0:
        missing = 2
    elif lead >= 0xC0:
        missing = 1
    else:
        missing = 0
    data = first
    for _ in range(missing):
        nxt = _read_ready_byte(fd, ESC_SEQUENCE_TIMEOUT_MS)
        if nxt is None:
            break
        data += nxt
    return data.decode("utf-8", errors="replace")


def _read_csi(fd: int) -> tuple[bytes, bytes] | None:
    """Consume a CSI body after ``ESC [`` up to its final byte.

    Returns ``(params, final)``, or ``None`` when the sequence was cut short
    or ran past ``CSI_MAX_LENGTH``. Overlong sequences are still drained to
    their final byte so no fragment is replayed as keys.
    """
    params = b""
    for _ in range(CSI_MAX_LENGTH * 4):
        part = _read_ready_byte(fd, CSI_CONTINUATION_TIMEOUT_MS)
        if part is None:
            return None
        if 0x40 <= part[0] <= 0x7E:
            if len(params) > CSI_MAX_LENGTH:
                return None
            return params, part
        params += part
    return None


def _decode_sgr_mouse(payload: bytes, final: bytes) -> str:
    # SGR mouse: ESC [ < btn ; col ; row (M/m)
    try:
        btn_s, col_s, row_s = payload.decode("ascii").split(";")
        btn = int(btn_s)
        col = int(col_s)
        row = int(row_s)
    except ValueError:
        return UNKNOWN_KEY
    if btn & _MOUSE_WHEEL_BIT:
        return "MOUSE"
    if btn & 0b11 != 0:
        return "MOUSE"
    if final == b"m":
        return f"MOUSE_LEFT_UP:{col}:{row}"
    if btn & _MOUSE_MOTION_BIT:
        return f"MOUSE_LEFT_DRAG:{col}:{row}"
    return f"MOUSE_LEFT_DOWN:{col}:{row}"


def _decode_escape(fd: int) -> str:
    seq = _read_ready_byte(fd, ESC_SEQUENCE_TIMEOUT_MS)
    if seq is None:
        return "ESC"
    if seq == b"\x1b":
        _PENDING_BYTES.append(seq)
        return "ESC"
    if seq == b"O":
        # SS3: application-mode arrows and F1-F4.
        final = _read_ready_byte(fd, CSI_CONTINUATION_TIMEOUT_MS)
        return _ARROWS.get(final, UNKNOWN_KEY) if final is not None else UNKNOWN_KEY
    if seq != b"[":
        # Alt chord; the key itself is dropped, multi-byte symbols included.
        _read_utf8_tail(fd, seq)
        return UNKNOWN_KEY
    csi = _read_csi(fd)
    if csi is None:
        return UNKNOWN_KEY
    params, final = csi
    if not params:
        return _ARROWS.get(final, UNKNOWN_KEY)
    if params.startswith(b"<") and final in {b"M", b"m"}:
        return _decode_sgr_mouse(params[1:], final)
    return UNKNOWN_KEY


def read_key(fd: int, timeout_ms: int | None = None) -> str:
    """Read one key token from ``fd``; ``""`` means nothing arrived in time.

    Escape sequences that cannot be decoded yield ``UNKNOWN_KEY``; only a
    lone ESC yields ``"ESC"``.
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

    token = _CONTROL_BYTES.get(ch)
    if token is not None:
        return token

    if ch != b"\x1b":
        return _read_utf8_tail(fd, ch)
    return _decode_escape(fd)
