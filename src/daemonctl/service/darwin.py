"""macOS launchd service manager."""

from __future__ import annotations

from pathlib import Path
from typing import Sequence
from xml.sax.saxutils import escape

from daemonctl.service import templates
from daemonctl.service.base import ServiceManager
from daemonctl.service.status import LAUNCHD_PID_PATTERN, RunningStatus, probe


class LaunchdServiceManager(ServiceManager):
    """
    Service manager for macOS using launchd system daemons.

    Writes a property list to /Library/LaunchDaemons; ``launchctl load``
    starts it and ``launchctl unload`` stops it.
    """

    @property
    def platform_name(self) -> str:
        return "launchd"

    @property
    def service_dir(self) -> Path:
        return Path(self.config.service_dirs.launchd)

    def service_path(self) -> Path:
        return self.service_dir / f"{self.name}.plist"

    def render(self, args: Sequence[str]) -> str:
        program_arguments = "".join(
            f"        <string>{escape(arg)}</string>\n" for arg in args
        )
        return templates.render(
            templates.LAUNCHD_PLIST_TEMPLATE,
            self.record,
            args,
            escape=escape,
            program_arguments=program_arguments,
            working_dir=escape(self.config.launchd.working_dir),
            log_dir=escape(self.config.launchd.log_dir.rstrip("/")),
        )

    def check_running(self) -> RunningStatus:
        return probe(
            ["launchctl", "list", self.name], self.name, LAUNCHD_PID_PATTERN, self._runner
        )

    def start_command(self) -> list[str]:
        return ["launchctl", "load", str(self.service_path())]

    def stop_command(self) -> list[str]:
        return ["launchctl", "unload", str(self.service_path())]
