from __future__ import annotations

import time
from dataclasses import dataclass

from .modal import ModalMode
from .view import DirectoryView

STATUS_MESSAGE_SECONDS = 4.0


@dataclass
class AppState:
    view: DirectoryView
    modal: ModalMode = ModalMode.NONE
    input_buffer: str = ""
    should_exit: bool = False
    status_message: str = ""
    status_message_until: float = 0.0
    dirty: bool = True


def set_status_message(state: AppState, message: str) -> None:
    """Show ``message`` on the status row for a fixed short interval."""
    state.status_message = message
    state.status_message_until = time.monotonic() + STATUS_MESSAGE_SECONDS
    state.dirty = True


def clear_status_message(state: AppState) -> None:
    """Remove the status message now."""
    state.status_message = ""
    state.status_message_until = 0.0
    state.dirty = True


def expire_status_message(state: AppState, now: float) -> bool:
    """Drop the status message once its deadline passed; return whether it did."""
    if state.status_message and now >= state.status_message_until:
        clear_status_message(state)
        return True
    return False
