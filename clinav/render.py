"""Frame composition for the browser screen.

Builds a read-only ``RenderContext`` from app state and turns it into one
ANSI string: the entry list, current path, key help, status row, and the
active prompt popup. Nothing here mutates state.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path

from pygments.lexers import find_lexer_class_for_filename
from pygments.lexers.special import TextLexer

from .ansi import clip_ansi_line, display_width, pad_ansi_line, safe_name
from .entries import entry_is_dir
from .modal import ModalMode
from .state import AppState
from .ui_theme import DEFAULT_THEME, UITheme

LIST_TITLE = "CLI Navigation"
SELECTION_MARKER = " #  "
# Rows outside the list box: two borders, path, three help rows, status.
CHROME_ROWS = 7


@dataclass(frozen=True)
class EntryRow:
    name: str
    kind: str


@dataclass(frozen=True)
class RenderContext:
    focus_dir: str
    rows: tuple[EntryRow, ...]
    list_start: int
    selected_index: int
    entry_count: int
    modal: ModalMode
    input_buffer: str
    selected_name: str
    status_message: str


@lru_cache(maxsize=4096)
def _is_source_name(name: str) -> bool:
    lexer_cls = find_lexer_class_for_filename(name)
    return lexer_cls is not None and lexer_cls is not TextLexer


def classify_entry(directory: Path, name: str) -> str:
    """Return the style kind for one entry: ``dir``, ``source`` or ``file``."""
    if entry_is_dir(directory / name):
        return "dir"
    if _is_source_name(name):
        return "source"
    return "file"


def list_view_rows(height: int) -> int:
    return max(1, height - CHROME_ROWS)


def scroll_start(previous_start: int, selected: int, visible_rows: int, count: int) -> int:
    """Keep ``selected`` inside the visible window, moving it as little as possible."""
    start = previous_start
    if selected < start:
        start = selected
    elif selected >= start + visible_rows:
        start = selected - visible_rows + 1
    return max(0, min(start, max(0, count - visible_rows)))


def build_render_context(state: AppState, list_start: int, visible_rows: int) -> RenderContext:
    """Snapshot ``state`` for one frame, classifying only the visible entries."""
    view = state.view
    visible = view.entries[list_start : list_start + visible_rows]
    rows = tuple(EntryRow(name, classify_entry(view.focus_dir, name)) for name in visible)
    return RenderContext(
        focus_dir=str(view.focus_dir),
        rows=rows,
        list_start=list_start,
        selected_index=view.selected_index,
        entry_count=len(view.entries),
        modal=state.modal,
        input_buffer=state.input_buffer,
        selected_name=view.selected_name() or "",
        status_message=state.status_message,
    )


def _boxed_title(title: str, inner_w: int, theme: UITheme, color: str) -> str:
    label = clip_ansi_line(f" {title} ", max(0, inner_w - 1))
    rest = max(0, inner_w - 1 - display_width(label))
    return f"{color}╭─{theme.reset}{theme.title}{label}{theme.reset}{color}{'─' * rest}╮{theme.reset}"


def _boxed_row(text: str, inner_w: int, theme: UITheme, color: str) -> str:
    return f"{color}│{theme.reset}{pad_ansi_line(text, inner_w)}{theme.reset}{color}│{theme.reset}"


def _box_bottom(inner_w: int, theme: UITheme, color: str) -> str:
    return f"{color}╰{'─' * inner_w}╯{theme.reset}"


def _entry_line(row: EntryRow, selected: bool, theme: UITheme) -> str:
    if selected:
        return f"{theme.selected}{SELECTION_MARKER}{safe_name(row.name)}{theme.reset}"
    color = {
        "dir": theme.entry_dir,
        "source": theme.entry_source,
    }.get(row.kind, theme.entry_file)
    indent = " " * len(SELECTION_MARKER)
    suffix = "/" if row.kind == "dir" else ""
    return f"{indent}{color}{safe_name(row.name)}{suffix}{theme.reset}"


def help_lines(theme: UITheme) -> tuple[str, str, str]:
    k = theme.help_key
    r = theme.reset
    return (
        f"{theme.help_heading}Navigation:{r} {k}↑/↓{r} Select | {k}←/→{r} Navigate | {k}Enter{r} Exit",
        f"{theme.help_heading}File Ops:{r} {k}N{r} New File | {k}Shift+N{r} New Dir | {k}D{r} Delete",
        f"{k}R{r} Rename | {k}Esc{r} Cancel",
    )


def popup_lines(context: RenderContext, theme: UITheme) -> tuple[str, list[str], str]:
    """Return ``(title, body lines, border color)`` for the active prompt."""
    mode = context.modal
    if mode is ModalMode.DELETE:
        body = [
            f"{theme.danger}WARNING: Delete item?{theme.reset}",
            "",
            f"Item: {theme.popup_input}{safe_name(context.selected_name)}{theme.reset}",
            "",
            mode.prompt,
            f"{theme.danger}>> {theme.reset}{theme.popup_input}{safe_name(context.input_buffer)}{theme.reset}",
            "",
            f"{theme.popup_hint}Press Esc to cancel{theme.reset}",
        ]
        return mode.title, body, theme.danger
    body = [
        mode.prompt,
        f"{theme.popup_input}{safe_name(context.input_buffer)}{theme.reset}",
        "",
        f"{theme.popup_hint}Press Enter to confirm, Esc to cancel{theme.reset}",
    ]
    return mode.title, body, theme.popup_border


def _popup_overlay(context: RenderContext, width: int, height: int, theme: UITheme) -> list[str]:
    title, body, color = popup_lines(context, theme)
    popup_w = min(width, max(40, width // 2))
    inner_w = max(1, popup_w - 2)
    popup_h = min(height, max(len(body) + 2, (height * 3) // 10))
    x = max(0, (width - popup_w) // 2)
    y = max(0, (height - popup_h) // 2)

    rows = [_boxed_title(title, inner_w, theme, color)]
    for i in range(max(0, popup_h - 2)):
        text = f" {body[i]}" if i < len(body) else ""
        rows.append(_boxed_row(text, inner_w, theme, color))
    rows.append(_box_bottom(inner_w, theme, color))

    out: list[str] = []
    for i, line in enumerate(rows[:height]):
        out.append(f"\033[{y + i + 1};{x + 1}H{line}")
    return out


def build_frame(
    context: RenderContext,
    width: int,
    height: int,
    theme: UITheme = DEFAULT_THEME,
) -> str:
    """Compose a full-screen ANSI frame for ``context``."""
    width = max(4, width)
    height = max(CHROME_ROWS + 1, height)
    inner_w = width - 2
    visible_rows = list_view_rows(height)

    lines: list[str] = [_boxed_title(LIST_TITLE, inner_w, theme, theme.border)]
    for offset in range(visible_rows):
        if offset < len(context.rows):
            idx = context.list_start + offset
            text = _entry_line(context.rows[offset], idx == context.selected_index, theme)
        else:
            text = ""
        lines.append(_boxed_row(text, inner_w, theme, theme.border))
    lines.append(_box_bottom(inner_w, theme, theme.border))
    lines.append(f"{theme.title}Path:{theme.reset} {theme.border}{safe_name(context.focus_dir)}{theme.reset}")
    lines.extend(help_lines(theme))
    if context.status_message:
        lines.append(f"{theme.status}{safe_name(context.status_message)}{theme.reset}")
    else:
        lines.append(f"{theme.help_dim}{context.entry_count} entries{theme.reset}")

    out: list[str] = ["\033[H"]
    for row, line in enumerate(lines[:height]):
        out.append(f"\033[{row + 1};1H{pad_ansi_line(line, width)}{theme.reset}")
    if context.modal is not ModalMode.NONE:
        out.extend(_popup_overlay(context, width, height, theme))
    return "".join(out)


def render_frame(
    fd: int,
    context: RenderContext,
    width: int,
    height: int,
    theme: UITheme = DEFAULT_THEME,
) -> None:
    """Write one composed frame to ``fd``."""
    os.write(fd, build_frame(context, width, height, theme).encode("utf-8", errors="replace"))
