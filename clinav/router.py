"""Keyboard dispatch between navigation and the active prompt.

One key event is consumed per loop iteration. Filesystem errors raised by a
handler are logged and shown on the status row instead of ending the session.
"""

from __future__ import annotations

import logging

from .key_registry import KeyComboBinding, KeyComboRegistry
from .keys import KeyEvent
from .modal import ACTION_LABELS, ModalMode, handle_modal_key, open_modal
from .state import AppState, set_status_message

logger = logging.getLogger(__name__)


def _describe_os_error(exc: OSError) -> str:
    reason = exc.strerror or str(exc)
    if exc.filename is not None:
        return f"{reason}: {exc.filename}"
    return reason


def handle_navigation_key(state: AppState, event: KeyEvent) -> None:
    """Handle one key while no prompt is open."""
    view = state.view

    def request_exit() -> None:
        state.should_exit = True

    def open_create() -> None:
        open_modal(state, ModalMode.CREATE_DIR if event.shift else ModalMode.CREATE_FILE)

    bindings = KeyComboRegistry().register_bindings(
        KeyComboBinding(("ENTER", "ESC"), request_exit),
        KeyComboBinding(("UP",), lambda: view.move_selection(-1)),
        KeyComboBinding(("DOWN",), lambda: view.move_selection(1)),
        KeyComboBinding(("RIGHT",), view.enter_selected),
        KeyComboBinding(("LEFT",), view.leave),
        KeyComboBinding(("n", "N"), open_create),
        KeyComboBinding(("d", "D"), lambda: open_modal(state, ModalMode.DELETE)),
        KeyComboBinding(("r", "R"), lambda: open_modal(state, ModalMode.RENAME)),
    )
    bindings.dispatch(event.key)


def handle_key(state: AppState, event: KeyEvent) -> None:
    """Route ``event`` to the prompt when one is open, else to navigation."""
    mode = state.modal
    try:
        if mode is not ModalMode.NONE:
            handle_modal_key(state, event)
        else:
            handle_navigation_key(state, event)
    except OSError as exc:
        label = ACTION_LABELS.get(mode, "Listing")
        logger.warning("%s failed in %s: %s", label, state.view.focus_dir, exc)
        set_status_message(state, f"{label} failed: {_describe_os_error(exc)}")
    state.dirty = True
