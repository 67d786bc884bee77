"""FreeBSD rc.d service manager."""

from __future__ import annotations

from pathlib import Path
from typing import Sequence

from daemonctl.service import rcconf, templates
from daemonctl.service.base import ServiceManager
from daemonctl.service.status import RCD_PID_PATTERN, RunningStatus, probe


class RcdServiceManager(ServiceManager):
    """
    Service manager for BSD rc.d scripts.

    Installs a shell script under /usr/local/etc/rc.d and drives it through
    ``service(8)``. Services not enabled in rc.conf are controlled with the
    ``one``-prefixed verbs so start and stop work before the admin enables them.
    """

    DESCRIPTOR_MODE = 0o755
    BASE_REQUIRES = ("networking", "syslog")

    @property
    def platform_name(self) -> str:
        return "rc.d"

    @property
    def service_dir(self) -> Path:
        return Path(self.config.service_dirs.rcd)

    def service_path(self) -> Path:
        return self.service_dir / self.name

    def render(self, args: Sequence[str]) -> str:
        requires = " ".join((*self.BASE_REQUIRES, *self.record.dependencies))
        return templates.render(
            templates.RCD_SCRIPT_TEMPLATE, self.record, args, requires=requires
        )

    def is_enabled(self) -> bool:
        """Whether rc.conf starts this service at boot."""
        return rcconf.is_enabled(self.name, self.config.rc.files)

    def command_verb(self, verb: str) -> str:
        """Pick ``verb`` for enabled services and ``one<verb>`` otherwise."""
        if self.is_enabled():
            return verb
        self._logger.warning(f"Service is not enabled, using one{verb} instead")
        return "one" + verb

    def _service_command(self, verb: str) -> list[str]:
        return ["service", self.name, self.command_verb(verb)]

    def check_running(self) -> RunningStatus:
        return probe(
            self._service_command("status"), self.name, RCD_PID_PATTERN, self._runner
        )

    def start_command(self) -> list[str]:
        return self._service_command("start")

    def stop_command(self) -> list[str]:
        return self._service_command("stop")
