"""Logging setup for the CLI and the lookup session.

Command output goes to stdout, so log records are written to stderr and
to a rotating file under ``~/.lexicology/logs``.
"""

from __future__ import annotations

import logging
import logging.handlers
from pathlib import Path

from lexicology.utils.constants import APP_NAME, USER_DATA_DIR

LOG_FILE_NAME = "lexicology.log"
LOG_FILE_MAX_BYTES = 2 * 1024 * 1024
LOG_FILE_BACKUPS = 3

_FILE_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
_CONSOLE_FORMAT = "%(levelname)s %(name)s: %(message)s"

# requests logs every connection through urllib3 at DEBUG
_NOISY_LOGGERS = ("urllib3",)


def resolve_level(level: int | str) -> int:
    """Turn a config level name (``"debug"``, ``"WARNING"``) into a number.

    Unknown names fall back to ``INFO``.
    """
    if isinstance(level, int):
        return level
    value = logging.getLevelName(level.strip().upper())
    return value if isinstance(value, int) else logging.INFO


def setup_logging(
    level: int | str = logging.INFO,
    log_dir: Path | None = None,
    to_file: bool = True,
) -> logging.Logger:
    """Configure the ``lexicology`` logger tree.

    Calling it again only adjusts the level of the existing handlers.

    Args:
        level: Level number or name, applied to the console handler.
        log_dir: Directory for the log file. Defaults to ~/.lexicology/logs.
        to_file: Also write DEBUG and above to a rotating log file.

    Returns:
        The application's root logger.
    """
    numeric = resolve_level(level)
    app_logger = logging.getLogger(APP_NAME)
    app_logger.setLevel(logging.DEBUG if to_file else numeric)

    for name in _NOISY_LOGGERS:
        logging.getLogger(name).setLevel(max(numeric, logging.WARNING))

    if app_logger.handlers:
        for handler in app_logger.handlers:
            if not isinstance(handler, logging.handlers.RotatingFileHandler):
                handler.setLevel(numeric)
        return app_logger

    console = logging.StreamHandler()
    console.setLevel(numeric)
    console.setFormatter(logging.Formatter(_CONSOLE_FORMAT))
    app_logger.addHandler(console)

    if to_file:
        log_dir = log_dir or (USER_DATA_DIR / "logs")
        try:
            log_dir.mkdir(parents=True, exist_ok=True)
            file_handler = logging.handlers.RotatingFileHandler(
                log_dir / LOG_FILE_NAME,
                maxBytes=LOG_FILE_MAX_BYTES,
                backupCount=LOG_FILE_BACKUPS,
                encoding="utf-8",
            )
        except OSError as exc:
            app_logger.warning("File logging disabled (%s): %s", log_dir, exc)
        else:
            file_handler.setLevel(logging.DEBUG)
            file_handler.setFormatter(logging.Formatter(_FILE_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))
            app_logger.addHandler(file_handler)

    return app_logger


def get_logger(name: str) -> logging.Logger:
    """Child logger in the application namespace, e.g. ``lexicology.core.x``."""
    return logging.getLogger(f"{APP_NAME}.{name}")
