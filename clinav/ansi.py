"""Fitting ANSI-styled text into fixed-width terminal rows.

Style sequences pass through untouched and occupy no cells. Entry names come
straight from the filesystem, so ``safe_name`` masks control characters
before they reach the screen.
"""

from __future__ import annotations

import re
import unicodedata
from collections.abc import Iterator

ANSI_ESCAPE_RE = re.compile(r"\x1b\[[0-9;?]*[ -/]*[@-~]")
TAB_STOP = 8


def _cells(ch: str, col: int) -> int:
    if ch == "\t":
        return TAB_STOP - col % TAB_STOP
    if unicodedata.combining(ch):
        return 0
    return 2 if unicodedata.east_asian_width(ch) in ("W", "F") else 1


def _segments(text: str) -> Iterator[tuple[str, bool]]:
    """Yield ``(chunk, is_style)`` pairs, one character per text chunk."""
    pos = 0
    for match in ANSI_ESCAPE_RE.finditer(text):
        yield from ((ch, False) for ch in text[pos : match.start()])
        yield match.group(0), True
        pos = match.end()
    yield from ((ch, False) for ch in text[pos:])


def display_width(text: str) -> int:
    col = 0
    for chunk, is_style in _segments(text):
        if not is_style:
            col += _cells(chunk, col)
    return col


def clip_ansi_line(text: str, max_cols: int) -> str:
    """Cut ``text`` to ``max_cols`` cells, keeping styles that come before the cut.

    Tabs become spaces. A wide character that would straddle the edge is
    dropped.
    """
    if max_cols <= 0:
        return ""
    parts: list[str] = []
    col = 0
    for chunk, is_style in _segments(text):
        if is_style:
            parts.append(chunk)
            continue
        width = _cells(chunk, col)
        if col + width > max_cols:
            break
        parts.append(" " * width if chunk == "\t" else chunk)
        col += width
    return "".join(parts)


def pad_ansi_line(text: str, width: int) -> str:
    clipped = clip_ansi_line(text, width)
    return clipped + " " * max(0, width - display_width(clipped))


def safe_name(name: str) -> str:
    """Replace control characters with ``?`` in text headed for the screen."""
    return "".join("?" if unicodedata.category(ch) == "Cc" else ch for ch in name)
