"""Focus-directory view: path, sorted entries, and the selection cursor."""

from __future__ import annotations

import os
from pathlib import Path

from .entries import entry_is_dir, list_entries


class DirectoryView:
    """Navigable listing of one directory.

    ``selected_index`` stays within ``[0, len(entries) - 1]`` and is ``0``
    when there are no entries. Every navigation step lists the target
    directory again; nothing is cached.
    """

    def __init__(self, focus_dir: Path, entries: list[str], selected_index: int = 0) -> None:
        self.focus_dir = focus_dir
        self.entries = entries
        self.selected_index = selected_index
        self._clamp_selection()

    @classmethod
    def open(cls, directory: Path) -> DirectoryView:
        """Build a view for ``directory``, listing it immediately.

        The path is made absolute with ``..`` collapsed so that ``leave`` walks
        up the real parent chain. Symlinks are kept as given.
        """
        focus_dir = Path(os.path.abspath(directory))
        return cls(focus_dir, list_entries(focus_dir))

    def _clamp_selection(self) -> None:
        if not self.entries:
            self.selected_index = 0
            return
        self.selected_index = max(0, min(self.selected_index, len(self.entries) - 1))

    def selected_name(self) -> str | None:
        if not self.entries:
            return None
        return self.entries[self.selected_index]

    def selected_path(self) -> Path | None:
        name = self.selected_name()
        if name is None:
            return None
        return self.focus_dir / name

    def refresh(self) -> None:
        """Re-list ``focus_dir`` keeping the cursor in range."""
        self.entries = list_entries(self.focus_dir)
        self._clamp_selection()

    def move_selection(self, delta: int) -> bool:
        """Move the cursor by ``delta`` without wrapping; return whether it moved."""
        if not self.entries:
            return False
        previous = self.selected_index
        self.selected_index = previous + delta
        self._clamp_selection()
        return self.selected_index != previous

    def enter_selected(self) -> bool:
        """Descend into the selected entry when it is a directory."""
        target = self.selected_path()
        if target is None or not entry_is_dir(target):
            return False
        entries = list_entries(target)
        self.focus_dir = target
        self.entries = entries
        self.selected_index = 0
        return True

    def leave(self) -> bool:
        """Move to the parent directory and return whether the path changed.

        At the filesystem root the path stays put but the listing is still
        refreshed and the cursor reset.
        """
        previous = self.focus_dir
        parent = previous.parent
        entries = list_entries(parent)
        self.focus_dir = parent
        self.entries = entries
        self.selected_index = 0
        return parent != previous

    def snapshot(self) -> tuple[Path, tuple[str, ...], int]:
        return self.focus_dir, tuple(self.entries), self.selected_index
