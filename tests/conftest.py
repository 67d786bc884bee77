"""Shared test fixtures and fakes."""

from __future__ import annotations

import subprocess
from pathlib import Path
from typing import Callable, Optional, Sequence

import pytest

from daemonctl.core.config import ConfigData, LaunchdSettings, RcConfig, ServiceDirs

# =============================================================================
# Command fakes
# =============================================================================


class CommandRecorder:
    """Stands in for the subprocess runner and remembers every command."""

    def __init__(self, respond: Optional[Callable[[list[str]], tuple[int, str]]] = None) -> None:
        self.calls: list[list[str]] = []
        self._respond = respond or (lambda cmd: (0, ""))

    def __call__(self, cmd: Sequence[str]) -> subprocess.CompletedProcess:
        cmd = list(cmd)
        self.calls.append(cmd)
        returncode, stdout = self._respond(cmd)
        return subprocess.CompletedProcess(cmd, returncode, stdout=stdout, stderr="")

    def verbs(self) -> list[str]:
        return [call[-1] if call[0] == "service" else call[1] for call in self.calls]


class FakeServiceManager:
    """
    Tiny model of a service manager: start/stop commands flip a flag and
    the status command reports it in the host tool's output format.
    """

    def __init__(self, name: str, pid: int = 1234) -> None:
        self.name = name
        self.pid = pid
        self.running = False
        self.recorder = CommandRecorder(self.respond)

    def respond(self, cmd: list[str]) -> tuple[int, str]:
        if cmd[0] == "service":
            verb = cmd[2].removeprefix("one")
            if verb == "status":
                if self.running:
                    return 0, f"{self.name} is running as pid  {self.pid}.\n"
                return 1, f"{self.name} is not running.\n"
        elif cmd[0] == "launchctl":
            verb = {"load": "start", "unload": "stop", "list": "status"}[cmd[1]]
            if verb == "status":
                if self.running:
                    return 0, f'{{\n\t"Label" = "{self.name}";\n\t"PID" = {self.pid};\n}};\n'
                return 113, ""
        else:
            verb = cmd[1]
            if verb == "status":
                if self.running:
                    return 0, (
                        f"* {self.name}.service - test\n"
                        f"     Active: active (running)\n"
                        f"   Main PID: {self.pid} ({self.name})\n"
                    )
                return 3, f"o {self.name}.service - test\n     Active: inactive (dead)\n"

        if verb == "start":
            self.running = True
        elif verb == "stop":
            self.running = False
        return 0, ""


# =============================================================================
# Environment fixtures
# =============================================================================


@pytest.fixture
def as_root(monkeypatch: pytest.MonkeyPatch) -> None:
    """Pretend the tests run with root privileges."""
    monkeypatch.setattr("daemonctl.service.privileges.has_privileges", lambda: True)


@pytest.fixture
def as_user(monkeypatch: pytest.MonkeyPatch) -> None:
    """Pretend the tests run without root privileges."""
    monkeypatch.setattr("daemonctl.service.privileges.has_privileges", lambda: False)


@pytest.fixture
def rc_conf(tmp_path: Path) -> Path:
    """Empty rc.conf in a temporary directory."""
    path = tmp_path / "etc" / "rc.conf"
    path.parent.mkdir(parents=True)
    path.write_text("")
    return path


@pytest.fixture
def config(tmp_path: Path, rc_conf: Path) -> ConfigData:
    """Configuration with every service directory under tmp_path."""
    dirs = ServiceDirs(
        rcd=tmp_path / "rc.d",
        launchd=tmp_path / "LaunchDaemons",
        systemd=tmp_path / "systemd",
    )
    for directory in (dirs.rcd, dirs.launchd, dirs.systemd):
        directory.mkdir()
    return ConfigData(
        service_dirs=dirs,
        rc=RcConfig(files=[rc_conf]),
        launchd=LaunchdSettings(working_dir="/usr/local/var", log_dir="/usr/local/var/log"),
    )


@pytest.fixture
def executable(tmp_path: Path) -> Path:
    """An existing file to register as the service binary."""
    path = tmp_path / "bin" / "x"
    path.parent.mkdir()
    path.write_text("#!/bin/sh\nexit 0\n")
    path.chmod(0o755)
    return path


@pytest.fixture
def recorder() -> CommandRecorder:
    """Runner that records commands and reports success with no output."""
    return CommandRecorder()


@pytest.fixture
def fake_service() -> FakeServiceManager:
    """Stateful service manager for a service called ``x``."""
    return FakeServiceManager("x")


@pytest.fixture
def failing_runner() -> CommandRecorder:
    """Runner whose every command exits 1 with no output."""
    return CommandRecorder(lambda cmd: (1, ""))


@pytest.fixture
def make_recorder() -> Callable[..., CommandRecorder]:
    """Build a recorder around a custom ``cmd -> (returncode, stdout)`` function."""
    return CommandRecorder
