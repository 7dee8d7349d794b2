"""Centralized logging configuration for Gympoint.

Provides rotating file logs with consistent formatting across the API, the
CLI and the mail worker.
"""

from __future__ import annotations

import logging
import re
from logging.handlers import RotatingFileHandler
from pathlib import Path

from gympoint.config import get_settings

DEFAULT_LOG_FILE = "gympoint.log"
DEFAULT_MAX_BYTES = 10 * 1024 * 1024  # 10MB
DEFAULT_BACKUP_COUNT = 5

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

_SENSITIVE_PATTERNS = [
    (re.compile(r"(://[^:/@\s]+:)[^@\s]+@"), r"\1[REDACTED]@"),  # credentials in URLs
    (re.compile(r"(password=)\S+", re.IGNORECASE), r"\1[REDACTED]"),
    (
        re.compile(r"\b([A-Za-z0-9._%+-])[A-Za-z0-9._%+-]*(@[A-Za-z0-9.-]+\.[A-Za-z]{2,})\b"),
        r"\1***\2",
    ),  # e-mail addresses keep their first letter and domain
]


def setup_logging(
    log_dir: str | Path | None = None,
    log_file: str = DEFAULT_LOG_FILE,
    max_bytes: int = DEFAULT_MAX_BYTES,
    backup_count: int = DEFAULT_BACKUP_COUNT,
    level: str | None = None,
    console: bool = True,
) -> logging.Logger:
    """Set up logging with rotating file handler.

    Args:
        log_dir: Directory for log files. Defaults to the GYMPOINT_LOG_DIR setting.
        log_file: Log file name. Defaults to 'gympoint.log'.
        max_bytes: Maximum size per log file before rotation. Defaults to 10MB.
        backup_count: Number of backup files to keep. Defaults to 5.
        level: Log level (DEBUG, INFO, WARNING, ERROR). Defaults to the
               GYMPOINT_LOG_LEVEL setting.
        console: Whether to also log to console. Defaults to True.

    Returns:
        The root gympoint logger.
    """
    settings = get_settings()
    log_dir = Path(log_dir if log_dir is not None else settings.log_dir)
    log_dir.mkdir(parents=True, exist_ok=True)

    if level is None:
        level = settings.log_level
    log_level = getattr(logging, level.upper(), logging.INFO)

    logger = logging.getLogger("gympoint")
    logger.setLevel(log_level)

    # Reconfiguring must not stack handlers
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)

    log_path = log_dir / log_file
    file_handler = RotatingFileHandler(
        log_path,
        maxBytes=max_bytes,
        backupCount=backup_count,
        encoding="utf-8",
    )
    file_handler.setLevel(log_level)
    file_handler.setFormatter(formatter)
    logger.addHandler(file_handler)

    if console:
        console_handler = logging.StreamHandler()
        console_handler.setLevel(log_level)
        console_handler.setFormatter(formatter)
        logger.addHandler(console_handler)

    logger.info("Gympoint logging initialized (level=%s, file=%s)", level, log_path)

    return logger


def get_logger(name: str) -> logging.Logger:
    """Get a logger for a component.

    Args:
        name: Component name (e.g., 'api', 'jobs.tasks').
              Will be prefixed with 'gympoint.'.

    Returns:
        Logger instance for the component.
    """
    if not name.startswith("gympoint."):
        name = f"gympoint.{name}"
    return logging.getLogger(name)


def sanitize_for_log(text: str) -> str:
    """Mask e-mail addresses and credentials before logging.

    Args:
        text: Text that may contain personal or secret data.

    Returns:
        Sanitized text safe for logging.
    """
    result = text
    for pattern, replacement in _SENSITIVE_PATTERNS:
        result = pattern.sub(replacement, result)
    return result
