"""Browser bootstrap: build state, open the tty, and run the loop.

The UI reads and draws on ``/dev/tty`` so stdout stays free for the ``cd``
hand-off even when it is captured by the shell.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path

from .loop import LoopIO, run_main_loop
from .state import AppState
from .terminal import TerminalController
from .ui_theme import UITheme, resolve_theme
from .view import DirectoryView

logger = logging.getLogger(__name__)

TTY_PATH = "/dev/tty"


def create_state(start_dir: Path) -> AppState:
    """Build initial state for ``start_dir``; raises ``OSError`` if unreadable."""
    return AppState(view=DirectoryView.open(start_dir))


def open_tty() -> int:
    """Open the controlling terminal for reading and drawing."""
    try:
        return os.open(TTY_PATH, os.O_RDWR | os.O_NOCTTY)
    except OSError as exc:
        raise SystemExit(f"clinav needs an interactive terminal: {exc.strerror}") from exc


def tty_size(fd: int) -> tuple[int, int]:
    try:
        size = os.get_terminal_size(fd)
    except OSError:
        return 80, 24
    return size.columns, size.lines


def run_browser(start_dir: Path, theme: UITheme | None = None) -> Path:
    """Run the interactive browser and return the final focus directory."""
    try:
        state = create_state(start_dir)
    except OSError as exc:
        raise SystemExit(f"Cannot list {start_dir}: {exc.strerror or exc}") from exc
    if theme is None:
        theme = resolve_theme(None)

    fd = open_tty()
    try:
        terminal = TerminalController(stdin_fd=fd, stdout_fd=fd)
        loop_io = LoopIO(stdin_fd=fd, stdout_fd=fd, terminal_size=lambda: tty_size(fd))
        logger.info("browsing from %s", state.view.focus_dir)
        run_main_loop(state, terminal, loop_io, theme)
    finally:
        os.close(fd)
    logger.info("finished in %s", state.view.focus_dir)
    return state.view.focus_dir
