"""Directory listing for the focus directory.

Lists immediate children by name only; no recursion, no hidden-file filter.
Listing errors are raised to the caller unchanged.
"""

from __future__ import annotations

import os
from pathlib import Path


def list_entries(directory: Path) -> list[str]:
    """Return sorted names of the immediate children of ``directory``.

    Raises ``OSError`` when the directory is missing, unreadable, or not a
    directory.
    """
    with os.scandir(directory) as it:
        names = [child.name for child in it]
    names.sort()
    return names


def entry_is_dir(path: Path) -> bool:
    """Return whether ``path`` is a directory, following symlinks."""
    try:
        return path.is_dir()
    except OSError:
        return False
