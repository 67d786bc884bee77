"""Configuration and run-time helpers."""

from daemonctl.core.config import Config, ConfigData, load_config
from daemonctl.core.runner import CommandExecutable
from daemonctl.core.shutdown import ShutdownHandler

__all__ = ["CommandExecutable", "Config", "ConfigData", "ShutdownHandler", "load_config"]
