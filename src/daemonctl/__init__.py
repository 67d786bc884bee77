"""
daemonctl - install and control background services

One lifecycle interface (install, remove, start, stop, status, run) over
the host's native service manager: rc.d on FreeBSD, launchd on macOS and
systemd on Linux.
"""

__version__ = "1.0.0"

from daemonctl.service import ActionResult, ServiceManager, ServiceRecord, new_daemon

__all__ = ["ActionResult", "ServiceManager", "ServiceRecord", "new_daemon", "__version__"]
