"""Create/rename/delete prompt state machine.

A prompt captures every key until confirmed with Enter or cancelled with Esc.
Confirming runs the action for the active mode, then always closes the prompt,
clears the buffer, and re-lists the focus directory. Actions whose
preconditions fail do nothing; filesystem errors propagate to the router.
"""

from __future__ import annotations

import enum
import logging
import os
import shutil
from collections.abc import Callable
from typing import TYPE_CHECKING

from .entries import entry_is_dir
from .keys import KeyEvent

if TYPE_CHECKING:
    from .state import AppState

logger = logging.getLogger(__name__)

DELETE_CONFIRMATIONS = frozenset({"y", "yes"})


class ModalMode(enum.Enum):
    NONE = ("", "")
    CREATE_FILE = ("Create New File", "Enter filename:")
    CREATE_DIR = ("Create New Directory", "Enter directory name:")
    DELETE = ("Delete Confirmation", "Type 'y' or 'yes' to confirm:")
    RENAME = ("Rename Item", "Enter new name:")

    def __init__(self, title: str, prompt: str) -> None:
        self.title = title
        self.prompt = prompt


def _path_exists(path: os.PathLike[str] | str) -> bool:
    # Dangling symlinks still occupy the name.
    return os.path.lexists(path)


def create_file(state: AppState) -> bool:
    name = state.input_buffer
    if not name.strip():
        return False
    target = state.view.focus_dir / name
    if _path_exists(target):
        return False
    target.touch(exist_ok=False)
    return True


def create_dir(state: AppState) -> bool:
    name = state.input_buffer
    if not name.strip():
        return False
    target = state.view.focus_dir / name
    if _path_exists(target):
        return False
    target.mkdir()
    return True


def delete_selected(state: AppState) -> bool:
    if state.input_buffer.lower() not in DELETE_CONFIRMATIONS:
        return False
    target = state.view.selected_path()
    if target is None:
        return False
    if entry_is_dir(target) and not target.is_symlink():
        shutil.rmtree(target)
    else:
        target.unlink()
    return True


def rename_selected(state: AppState) -> bool:
    name = state.input_buffer
    if not name.strip():
        return False
    old_path = state.view.selected_path()
    if old_path is None:
        return False
    new_path = state.view.focus_dir / name
    if old_path == new_path or _path_exists(new_path):
        return False
    old_path.rename(new_path)
    return True


MODAL_ACTIONS: dict[ModalMode, Callable[[AppState], bool]] = {
    ModalMode.CREATE_FILE: create_file,
    ModalMode.CREATE_DIR: create_dir,
    ModalMode.DELETE: delete_selected,
    ModalMode.RENAME: rename_selected,
}

ACTION_LABELS: dict[ModalMode, str] = {
    ModalMode.CREATE_FILE: "Create file",
    ModalMode.CREATE_DIR: "Create directory",
    ModalMode.DELETE: "Delete",
    ModalMode.RENAME: "Rename",
}


def open_modal(state: AppState, mode: ModalMode) -> bool:
    """Open ``mode`` if its preconditions hold and return whether it opened.

    Delete and rename need a selected entry. Rename seeds the buffer with the
    selected name; every other mode starts empty.
    """
    if mode is ModalMode.NONE:
        return False
    selected = state.view.selected_name()
    if mode in (ModalMode.DELETE, ModalMode.RENAME) and selected is None:
        return False
    state.modal = mode
    state.input_buffer = selected if mode is ModalMode.RENAME and selected is not None else ""
    return True


def close_modal(state: AppState) -> None:
    state.modal = ModalMode.NONE
    state.input_buffer = ""


def confirm_modal(state: AppState) -> bool:
    """Run the active action, then close the prompt and re-list.

    Returns whether the action changed the disk. The prompt is closed, the
    buffer cleared, and the listing refreshed even when the action raises.
    """
    mode = state.modal
    action = MODAL_ACTIONS.get(mode)
    try:
        changed = action(state) if action is not None else False
    finally:
        close_modal(state)
        state.view.refresh()
    logger.debug("%s in %s: changed=%s", mode.name, state.view.focus_dir, changed)
    return changed


def handle_modal_key(state: AppState, event: KeyEvent) -> None:
    """Apply one key to the active prompt."""
    key = event.key
    if key == "ESC":
        close_modal(state)
    elif key == "ENTER":
        confirm_modal(state)
    elif key == "BACKSPACE":
        state.input_buffer = state.input_buffer[:-1]
    elif event.is_printable:
        state.input_buffer += key
