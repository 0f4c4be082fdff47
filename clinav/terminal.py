"""Terminal control helpers for the browser session.

Owns raw-mode lifecycle, alternate-screen switching, and cursor visibility.
"""

from __future__ import annotations

import contextlib
import os
import termios
import tty

ENTER_TUI_SEQUENCE = b"\x1b[?1049h\x1b[?25l\x1b[2J"
EXIT_TUI_SEQUENCE = b"\x1b[2J\x1b[H\x1b[?25h\x1b[?1049l"


class TerminalController:
    """Manage terminal mode transitions for one tty."""

    def __init__(self, stdin_fd: int, stdout_fd: int) -> None:
        """Capture tty state and bind input/output file descriptors."""
        self.stdin_fd = stdin_fd
        self.stdout_fd = stdout_fd
        self._saved_tty_state = termios.tcgetattr(stdin_fd)
        self._active = False

    def enable_tui_mode(self) -> None:
        """Enter raw alternate-screen mode with the cursor hidden."""
        tty.setraw(self.stdin_fd, termios.TCSAFLUSH)
        os.write(self.stdout_fd, ENTER_TUI_SEQUENCE)
        self._active = True

    def disable_tui_mode(self) -> None:
        """Show the cursor, leave the alternate screen, restore tty attributes."""
        try:
            os.write(self.stdout_fd, EXIT_TUI_SEQUENCE)
        finally:
            self._active = False
            termios.tcsetattr(self.stdin_fd, termios.TCSAFLUSH, self._saved_tty_state)

    @property
    def active(self) -> bool:
        return self._active

    @contextlib.contextmanager
    def raw_mode(self):
        """Context manager that restores the terminal on every exit path."""
        try:
            self.enable_tui_mode()
            yield
        finally:
            self.disable_tui_mode()
