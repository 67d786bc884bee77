"""System service management (rc.d, launchd, systemd)."""

from daemonctl.service.base import ActionResult, Executable, ServiceManager, ServiceRecord
from daemonctl.service.errors import (
    AlreadyInstalledError,
    AlreadyRunningError,
    AlreadyStoppedError,
    DaemonError,
    InvalidExecutionPathError,
    NotInstalledError,
    PrivilegeError,
    TemplateError,
    UnsupportedPlatformError,
)
from daemonctl.service.factory import new_daemon

__all__ = [
    "ActionResult",
    "AlreadyInstalledError",
    "AlreadyRunningError",
    "AlreadyStoppedError",
    "DaemonError",
    "Executable",
    "InvalidExecutionPathError",
    "NotInstalledError",
    "PrivilegeError",
    "ServiceManager",
    "ServiceRecord",
    "TemplateError",
    "UnsupportedPlatformError",
    "new_daemon",
]
