"""Main interactive event loop.

Each iteration checks the exit flag, redraws when needed, polls for one key,
and routes it. The whole loop runs inside ``TerminalController.raw_mode`` so
the terminal is restored however the loop ends.
"""

from __future__ import annotations

import shutil
import time
from collections.abc import Callable
from dataclasses import dataclass

from .input import read_key
from .keys import key_event_from_token
from .render import build_render_context, list_view_rows, render_frame, scroll_start
from .router import handle_key
from .state import AppState, expire_status_message
from .terminal import TerminalController
from .ui_theme import DEFAULT_THEME, UITheme

POLL_TIMEOUT_MS = 100


@dataclass(frozen=True)
class LoopIO:
    """File descriptors and terminal size source used by ``run_main_loop``."""

    stdin_fd: int
    stdout_fd: int
    terminal_size: Callable[[], tuple[int, int]] = lambda: tuple(shutil.get_terminal_size((80, 24)))


def run_main_loop(
    state: AppState,
    terminal: TerminalController,
    loop_io: LoopIO,
    theme: UITheme = DEFAULT_THEME,
) -> None:
    """Run the browser until ``state.should_exit`` becomes true."""
    list_start = 0
    last_size: tuple[int, int] | None = None
    skip_next_lf = False

    with terminal.raw_mode():
        while not state.should_exit:
            expire_status_message(state, time.monotonic())

            size = loop_io.terminal_size()
            if size != last_size:
                last_size = size
                state.dirty = True
            columns, lines = size

            if state.dirty:
                visible_rows = list_view_rows(lines)
                list_start = scroll_start(
                    list_start,
                    state.view.selected_index,
                    visible_rows,
                    len(state.view.entries),
                )
                context = build_render_context(state, list_start, visible_rows)
                render_frame(loop_io.stdout_fd, context, columns, lines, theme)
                state.dirty = False

            try:
                key = read_key(loop_io.stdin_fd, timeout_ms=POLL_TIMEOUT_MS)
            except KeyboardInterrupt:
                continue
            if key == "":
                continue

            # A CR LF pair from one Enter press must not confirm twice.
            if skip_next_lf and key == "ENTER_LF":
                skip_next_lf = False
                continue
            skip_next_lf = key == "ENTER_CR"
            if key in {"ENTER_CR", "ENTER_LF"}:
                key = "ENTER"

            handle_key(state, key_event_from_token(key))
