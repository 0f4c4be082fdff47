"""Key events handed from the input decoder to the router."""

from __future__ import annotations

from dataclasses import dataclass

NAMED_KEYS = frozenset({"UP", "DOWN", "LEFT", "RIGHT", "ENTER", "ESC", "BACKSPACE"})


@dataclass(frozen=True)
class KeyEvent:
    """One decoded key press.

    ``key`` is either a named token from ``NAMED_KEYS`` (or another upper-case
    control token such as ``CTRL_C``) or a single character.
    """

    key: str
    shift: bool = False

    @property
    def is_printable(self) -> bool:
        return len(self.key) == 1 and self.key.isprintable()


def key_event_from_token(token: str) -> KeyEvent:
    """Build a ``KeyEvent`` from a ``read_key`` token.

    Raw terminals report shifted letters as upper-case characters with no
    separate modifier, so an upper-case ASCII letter carries ``shift=True``.
    """
    if len(token) == 1 and token.isascii() and token.isupper():
        return KeyEvent(token, shift=True)
    return KeyEvent(token)
