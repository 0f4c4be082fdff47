"""Optional read-only preferences file.

``config.json`` in the platform config directory may set ``theme``,
``clipboard`` and ``log_level``. clinav never writes it. A missing or broken
file, or a value of the wrong type, means the built-in default.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import TypeVar

from platformdirs import user_config_dir

APP_NAME = "clinav"
CONFIG_FILENAME = "config.json"
CONFIG_PATH = Path(user_config_dir(APP_NAME, appauthor=False)) / CONFIG_FILENAME

LOG_LEVEL_NAMES = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

_T = TypeVar("_T")


def load_config() -> dict[str, object]:
    """Return the top-level JSON object, or ``{}`` when there is none."""
    try:
        data = json.loads(CONFIG_PATH.read_text(encoding="utf-8"))
    except (OSError, ValueError):
        return {}
    return data if isinstance(data, dict) else {}


def _setting(key: str, kind: type[_T]) -> _T | None:
    value = load_config().get(key)
    return value if isinstance(value, kind) else None


def load_theme_name() -> str | None:
    name = (_setting("theme", str) or "").strip()
    return name or None


def load_clipboard_default() -> bool:
    return _setting("clipboard", bool) is True


def parse_log_level(value: object) -> int | None:
    """Map a level name such as ``"debug"`` to its ``logging`` constant."""
    if not isinstance(value, str):
        return None
    name = value.strip().upper()
    return getattr(logging, name) if name in LOG_LEVEL_NAMES else None


def load_log_level() -> int | None:
    return parse_log_level(_setting("log_level", str))
