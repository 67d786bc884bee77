"""Logging setup utilities."""

import logging
from pathlib import Path
from typing import Optional

from daemonctl.utils.paths import ensure_parent_exists

LOG_FORMAT = "[%(asctime)s] %(levelname)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(
    log_file: Optional[Path] = None,
    level: str = "INFO",
    name: str = "daemonctl",
) -> logging.Logger:
    """
    Set up logging with both file and console handlers.

    Args:
        log_file: Path to log file. If None, only console logging is enabled.
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL).
        name: Logger name.

    Returns:
        Configured logger instance.
    """
    logger = logging.getLogger(name)
    logger.setLevel(getattr(logging, level.upper()))

    # Clear existing handlers to avoid duplicates
    logger.handlers.clear()

    formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if log_file:
        log_path = ensure_parent_exists(log_file)
        file_handler = logging.FileHandler(log_path)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    return logger


def get_logger(name: str = "daemonctl") -> logging.Logger:
    """Get an existing logger or create a basic one.

    Child loggers (``daemonctl.service`` and friends) propagate to the
    ``daemonctl`` root once it has been configured, so they only get their
    own handler when nothing above them has one.
    """
    logger = logging.getLogger(name)
    if not logger.handlers and not _has_configured_parent(logger):
        logger.setLevel(logging.INFO)
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
        logger.addHandler(handler)
    return logger


def _has_configured_parent(logger: logging.Logger) -> bool:
    parent = logger.parent
    while parent is not None and parent.name != "root":
        if parent.handlers:
            return True
        parent = parent.parent
    return False
