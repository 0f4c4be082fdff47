"""Colour palettes for the browser screen.

A palette maps each screen role to an SGR escape string. Every role defaults
to ``""``, so the plain palette used for ``--no-color`` draws no styling.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

logger = logging.getLogger(__name__)


def _sgr(*params: str) -> str:
    return f"\033[{';'.join(params)}m"


RESET = _sgr("0")


@dataclass(frozen=True)
class UITheme:
    name: str
    reset: str = ""
    # Chrome around the entry list.
    border: str = ""
    title: str = ""
    # Entry rows by kind, plus the cursor row.
    entry_dir: str = ""
    entry_source: str = ""
    entry_file: str = ""
    selected: str = ""
    # Key help rows and the entry count.
    help_heading: str = ""
    help_key: str = ""
    help_dim: str = ""
    # Prompt popup.
    popup_border: str = ""
    popup_input: str = ""
    popup_hint: str = ""
    danger: str = ""
    status: str = ""


PLAIN_THEME = UITheme(name="plain")

DEFAULT_THEME = UITheme(
    name="default",
    reset=RESET,
    border=_sgr("32"),
    title=_sgr("1", "32"),
    entry_dir=_sgr("1", "38", "5", "120"),
    entry_source=_sgr("38", "5", "110"),
    entry_file=_sgr("32"),
    selected=_sgr("1", "33"),
    help_heading=_sgr("33"),
    help_key=_sgr("36"),
    help_dim=_sgr("2", "37"),
    popup_border=_sgr("36"),
    popup_input=_sgr("33"),
    popup_hint=_sgr("2", "37"),
    danger=_sgr("1", "31"),
    status=_sgr("1", "38", "5", "214"),
)

OCEAN_THEME = UITheme(
    name="ocean",
    reset=RESET,
    border=_sgr("38", "5", "31"),
    title=_sgr("1", "38", "5", "45"),
    entry_dir=_sgr("1", "38", "5", "81"),
    entry_source=_sgr("38", "5", "117"),
    entry_file=_sgr("38", "5", "252"),
    selected=_sgr("1", "38", "5", "229"),
    help_heading=_sgr("38", "5", "45"),
    help_key=_sgr("38", "5", "153"),
    help_dim=_sgr("2", "38", "5", "110"),
    popup_border=_sgr("38", "5", "39"),
    popup_input=_sgr("38", "5", "229"),
    popup_hint=_sgr("2", "38", "5", "110"),
    danger=_sgr("38", "5", "203"),
    status=_sgr("1", "38", "5", "215"),
)

THEMES: dict[str, UITheme] = {theme.name: theme for theme in (DEFAULT_THEME, OCEAN_THEME)}


def available_theme_names() -> tuple[str, ...]:
    return tuple(sorted(THEMES))


def resolve_theme(name: str | None, *, no_color: bool = False) -> UITheme:
    """Look up a palette by case-insensitive name.

    ``no_color`` wins over ``name``. Unknown names fall back to the default
    palette.
    """
    if no_color:
        return PLAIN_THEME
    if not name:
        return DEFAULT_THEME
    theme = THEMES.get(name.strip().lower())
    if theme is None:
        logger.info("unknown theme %r, using %s", name, DEFAULT_THEME.name)
        return DEFAULT_THEME
    return theme
