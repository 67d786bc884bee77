"""Linux systemd service manager."""

from __future__ import annotations

import re
import subprocess
from pathlib import Path
from typing import Sequence

from daemonctl.service import templates
from daemonctl.service.base import ServiceManager
from daemonctl.service.status import SYSTEMD_PID_PATTERN, RunningStatus, probe

ACTIVE_PATTERN = re.compile(r"Active: active")

# Characters that force a word on the ExecStart= line into double quotes.
_NEEDS_QUOTES = re.compile(r"[\s\"'\\;]")


def quote_exec_word(word: str) -> str:
    """
    Quote one word of an ExecStart= command line.

    Specifier (``%``) and variable (``$``) characters are doubled so systemd
    passes them through literally.
    """
    word = word.replace("%", "%%").replace("$", "$$")
    if word and not _NEEDS_QUOTES.search(word):
        return word
    return '"' + word.replace("\\", "\\\\").replace('"', '\\"') + '"'


class SystemdServiceManager(ServiceManager):
    """
    Service manager for Linux using systemd system units.

    Unit files go to /etc/systemd/system; systemd is told to re-read them
    after every install and removal.
    """

    @property
    def platform_name(self) -> str:
        return "systemd"

    @property
    def service_dir(self) -> Path:
        return Path(self.config.service_dirs.systemd)

    def service_path(self) -> Path:
        return self.service_dir / f"{self.name}.service"

    def render(self, args: Sequence[str]) -> str:
        words = [self.record.exec_start_path, *args]
        return templates.render(
            templates.SYSTEMD_UNIT_TEMPLATE,
            self.record,
            args,
            exec_start=" ".join(quote_exec_word(word) for word in words),
        )

    def _systemctl(self, *args: str) -> list[str]:
        return ["systemctl", *args]

    def after_install(self) -> None:
        try:
            self._execute(self._systemctl("daemon-reload"))
        except (OSError, subprocess.SubprocessError):
            # A unit systemd never loaded is not installed.
            self.service_path().unlink(missing_ok=True)
            raise

    def after_remove(self) -> None:
        self._execute(self._systemctl("daemon-reload"))

    def check_running(self) -> RunningStatus:
        return probe(
            self._systemctl("status", f"{self.name}.service"),
            self.name,
            SYSTEMD_PID_PATTERN,
            self._runner,
            required=ACTIVE_PATTERN,
        )

    def start_command(self) -> list[str]:
        return self._systemctl("start", f"{self.name}.service")

    def stop_command(self) -> list[str]:
        return self._systemctl("stop", f"{self.name}.service")
