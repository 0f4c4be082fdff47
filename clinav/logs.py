"""File logging setup.

The terminal belongs to the UI, so records go to a rotating file under the
user log directory.
"""

from __future__ import annotations

import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path

from platformdirs import user_log_dir

from .config import APP_NAME

LOG_FILENAME = f"{APP_NAME}.log"
MAX_LOG_BYTES = 1024 * 1024
BACKUP_COUNT = 2
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def default_log_path() -> Path:
    return Path(user_log_dir(APP_NAME, appauthor=False)) / LOG_FILENAME


def configure_logging(level: int = logging.WARNING, log_path: Path | None = None) -> logging.Logger:
    """Attach a rotating file handler to the package logger.

    Calling it again replaces the handler installed by an earlier call. When
    the log directory cannot be created, records are dropped.
    """
    logger = logging.getLogger(__package__ or APP_NAME)
    for handler in list(logger.handlers):
        if getattr(handler, "_clinav_handler", False):
            logger.removeHandler(handler)
            handler.close()

    path = log_path if log_path is not None else default_log_path()
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        handler: logging.Handler = RotatingFileHandler(
            path, maxBytes=MAX_LOG_BYTES, backupCount=BACKUP_COUNT, encoding="utf-8"
        )
    except OSError:
        handler = logging.NullHandler()
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))
    handler._clinav_handler = True  # type: ignore[attr-defined]
    logger.addHandler(handler)
    logger.setLevel(level)
    logger.propagate = False
    return logger
