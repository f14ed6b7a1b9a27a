"""Logging infrastructure for gender-condition.

Log files are written to the configured log directory with automatic rotation:
- gender-condition.log: Activity of every condition (configured level and up)
- gender-condition-error.log: Errors only (ERROR+ level)

Usage:
    from gender_condition.logging import setup_logging

    # Initialize once at startup
    setup_logging(log_dir=settings.log_dir, log_level=settings.log_level)

    # Modules keep using their own loggers
    logger = logging.getLogger(__name__)
    logger.warning("Rejected value")  # Goes to gender-condition.log
    logger.error("Something failed")  # Goes to both logs
"""

from __future__ import annotations

import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path

ROOT_LOGGER = "gender_condition"

# Default log directory
DEFAULT_LOG_DIR = Path.home() / ".local" / "state" / "gender-condition"

# Default rotation settings
DEFAULT_MAX_BYTES = 5 * 1024 * 1024  # 5MB
DEFAULT_BACKUP_COUNT = 3

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"

# Module-level state
_handlers: list[logging.Handler] = []
_initialized: bool = False


def _rotating_handler(path: Path, level: int, max_bytes: int, backup_count: int) -> RotatingFileHandler:
    handler = RotatingFileHandler(path, maxBytes=max_bytes, backupCount=backup_count)
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    return handler


def setup_logging(
    log_dir: Path | None = None,
    log_level: str = "INFO",
    max_bytes: int | None = None,
    backup_count: int | None = None,
) -> logging.Logger:
    """Initialize the logging system.

    Calling it again replaces the handlers installed by the previous call.

    Args:
        log_dir: Directory for log files (default: ~/.local/state/gender-condition)
        log_level: Minimum log level (default: INFO)
        max_bytes: Max size per log file before rotation (default: 5MB)
        backup_count: Number of backup files to keep (default: 3)

    Returns:
        The package root logger.
    """
    global _initialized

    if _initialized:
        reset_logging()

    log_dir = log_dir or DEFAULT_LOG_DIR
    max_bytes = max_bytes or DEFAULT_MAX_BYTES
    backup_count = backup_count if backup_count is not None else DEFAULT_BACKUP_COUNT
    level = getattr(logging, log_level.upper(), logging.INFO)

    # Ensure log directory exists
    log_dir.mkdir(parents=True, exist_ok=True)

    root_logger = logging.getLogger(ROOT_LOGGER)
    root_logger.setLevel(level)

    _handlers.append(
        _rotating_handler(log_dir / "gender-condition.log", level, max_bytes, backup_count)
    )
    _handlers.append(
        _rotating_handler(
            log_dir / "gender-condition-error.log", logging.ERROR, max_bytes, backup_count
        )
    )
    for handler in _handlers:
        root_logger.addHandler(handler)

    _initialized = True
    return root_logger


def reset_logging() -> None:
    """Reset logging state (primarily for testing)."""
    global _initialized

    root_logger = logging.getLogger(ROOT_LOGGER)
    for handler in _handlers:
        handler.close()
        root_logger.removeHandler(handler)

    _handlers.clear()
    root_logger.setLevel(logging.NOTSET)
    _initialized = False
