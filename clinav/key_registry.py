"""Key token to handler table used by the navigation router."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass


@dataclass(frozen=True)
class KeyComboBinding:
    """One handler bound to every token in ``combos``."""

    combos: tuple[str, ...]
    handler: Callable[[], None]


class KeyComboRegistry:
    """Small key-dispatch table keyed by exact token."""

    def __init__(self) -> None:
        self._handlers: dict[str, Callable[[], None]] = {}

    def register_bindings(self, *bindings: KeyComboBinding) -> KeyComboRegistry:
        """Register bindings, later ones overwriting earlier combos."""
        for binding in bindings:
            for combo in binding.combos:
                self._handlers[combo] = binding.handler
        return self

    def dispatch(self, key: str) -> bool:
        """Invoke the handler bound to ``key``; return whether one existed."""
        handler = self._handlers.get(key)
        if handler is None:
            return False
        handler()
        return True
