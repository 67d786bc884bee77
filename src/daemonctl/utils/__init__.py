"""Utility functions and classes."""

from daemonctl.utils.paths import expand_path, write_atomic
from daemonctl.utils.logging import get_logger, setup_logging

__all__ = ["expand_path", "get_logger", "setup_logging", "write_atomic"]
