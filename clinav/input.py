"""Raw tty byte decoding into key tokens.

One call to ``read_key`` consumes one key press. Arrow keys arrive as
``ESC [ A``-style sequences; a lone ESC is told apart from a sequence by
waiting briefly for a follow-up byte. Bytes read ahead but not consumed are
kept for the next call.
"""

from __future__ import annotations

import os
import select
from collections import deque

ESC_SEQUENCE_TIMEOUT_MS = 25

_PENDING_BYTES: deque[bytes] = deque()

_CONTROL_TOKENS = {
    b"\x03": "CTRL_C",
    b"\x08": "BACKSPACE",
    b"\x7f": "BACKSPACE",
    b"\t": "TAB",
    b"\r": "ENTER_CR",
    b"\n": "ENTER_LF",
}
_ARROW_TOKENS = {
    b"A": "UP",
    b"B": "DOWN",
    b"C": "RIGHT",
    b"D": "LEFT",
}
_SEQUENCE_INTRODUCERS = (b"[", b"O")


def _next_byte(fd: int, timeout_ms: int | None) -> bytes | None:
    """Return one byte, or ``None`` on timeout or end of input.

    ``timeout_ms=None`` blocks until a byte is available.
    """
    if _PENDING_BYTES:
        return _PENDING_BYTES.popleft()
    if timeout_ms is not None:
        ready, _, _ = select.select([fd], [], [], max(0, timeout_ms) / 1000.0)
        if not ready:
            return None
    return os.read(fd, 1) or None


def _utf8_length(lead: int) -> int:
    if lead >= 0xF0:
        return 4
    if lead >= 0xE0:
        return 3
    if lead >= 0xC0:
        return 2
    return 1


def _read_char(fd: int, lead: bytes) -> str:
    """Decode one UTF-8 character; malformed input becomes ``UNKNOWN``."""
    data = bytearray(lead)
    for _ in range(_utf8_length(lead[0]) - 1):
        more = _next_byte(fd, ESC_SEQUENCE_TIMEOUT_MS)
        if more is None:
            break
        data += more
    try:
        return data.decode("utf-8")
    except UnicodeDecodeError:
        return "UNKNOWN"


def _read_escape(fd: int) -> str:
    introducer = _next_byte(fd, ESC_SEQUENCE_TIMEOUT_MS)
    if introducer is None:
        return "ESC"
    if introducer not in _SEQUENCE_INTRODUCERS:
        # Alt+key: report ESC now, the key on the next call.
        _PENDING_BYTES.append(introducer)
        return "ESC"

    final = _next_byte(fd, ESC_SEQUENCE_TIMEOUT_MS)
    if final is None:
        return "ESC"
    if final in _ARROW_TOKENS:
        return _ARROW_TOKENS[final]
    # Swallow parameters of sequences we do not bind (Delete, F-keys, ...).
    while final is not None and not b"@" <= final <= b"~":
        final = _next_byte(fd, ESC_SEQUENCE_TIMEOUT_MS)
    return "UNKNOWN"


def read_key(fd: int, timeout_ms: int | None = None) -> str:
    """Read one key token from ``fd``.

    Returns ``""`` when nothing arrived within ``timeout_ms``. Otherwise the
    token is a control name (``UP``, ``ENTER_CR``, ``BACKSPACE``, ...) or a
    single decoded character.
    """
    lead = _next_byte(fd, timeout_ms)
    if lead is None:
        return ""
    if lead in _CONTROL_TOKENS:
        return _CONTROL_TOKENS[lead]
    if lead == b"\x1b":
        return _read_escape(fd)
    return _read_char(fd, lead)
