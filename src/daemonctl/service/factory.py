"""Factory for creating platform-specific service managers."""

from __future__ import annotations

import sys
from typing import Iterable, Optional

from daemonctl.core.config import ConfigData
from daemonctl.service.base import ServiceManager, ServiceRecord
from daemonctl.service.errors import UnsupportedPlatformError
from daemonctl.service.status import CommandRunner

RCD_PLATFORMS = ("freebsd", "dragonfly")


def _platform_key(platform: Optional[str]) -> str:
    platform = platform or sys.platform
    if platform.startswith(RCD_PLATFORMS):
        return "rc.d"
    if platform == "darwin":
        return "launchd"
    if platform.startswith("linux"):
        return "systemd"
    return platform


def new_daemon(
    name: str,
    description: str,
    exec_start_path: str = "",
    dependencies: Iterable[str] = (),
    *,
    platform: Optional[str] = None,
    config: Optional[ConfigData] = None,
    runner: Optional[CommandRunner] = None,
) -> ServiceManager:
    """
    Get the service manager for the current (or given) platform.

    Args:
        name: Service name; determines the descriptor path.
        description: Human readable description used in result messages.
        exec_start_path: Binary to register. Resolved at install time if empty.
        dependencies: Services that must start first.
        platform: ``sys.platform``-style platform string. Defaults to the host.
        config: Directory and logging settings. Defaults to built-in paths.
        runner: Callable used to run service manager commands.

    Returns:
        ServiceManager implementation for the platform.

    Raises:
        UnsupportedPlatformError: If the platform has no implementation.
    """
    record = ServiceRecord(name, description, exec_start_path, tuple(dependencies))
    key = _platform_key(platform)

    if key == "rc.d":
        from daemonctl.service.freebsd import RcdServiceManager
        return RcdServiceManager(record, config, runner)

    elif key == "launchd":
        from daemonctl.service.darwin import LaunchdServiceManager
        return LaunchdServiceManager(record, config, runner)

    elif key == "systemd":
        from daemonctl.service.linux import SystemdServiceManager
        return SystemdServiceManager(record, config, runner)

    raise UnsupportedPlatformError(
        f"Service management not supported on platform: {platform or sys.platform}"
    )


def is_service_supported(platform: Optional[str] = None) -> bool:
    """Check if service management is supported on this platform."""
    return _platform_key(platform) in ("rc.d", "launchd", "systemd")


def get_platform_name(platform: Optional[str] = None) -> str:
    """Get a human-readable platform name."""
    key = _platform_key(platform)
    if key == "rc.d":
        return "BSD (rc.d)"
    elif key == "launchd":
        return "macOS (launchd)"
    elif key == "systemd":
        return "Linux (systemd)"
    else:
        return f"Unknown ({platform or sys.platform})"
