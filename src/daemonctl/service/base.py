"""Abstract base class for system service managers."""

from __future__ import annotations

import os
import subprocess
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Callable, NamedTuple, Optional, Protocol, Sequence, Union

from daemonctl.core.config import ConfigData
from daemonctl.service import privileges
from daemonctl.service.errors import (
    AlreadyInstalledError,
    AlreadyRunningError,
    AlreadyStoppedError,
    DaemonError,
    NotInstalledError,
)
from daemonctl.service.executable import resolve_executable_path, validate_executable_path
from daemonctl.service.status import CommandRunner, RunningStatus, run_command
from daemonctl.utils.logging import get_logger
from daemonctl.utils.paths import write_atomic

SUCCESS = " completed successfully"
FAILED = " failed"
STATUS_UNDEFINED = "Status could not be defined"

# Errors a lifecycle operation turns into a failed result instead of raising.
OPERATION_ERRORS = (DaemonError, OSError, subprocess.SubprocessError)


@dataclass
class ServiceRecord:
    """What to register: the service name, its description and how to launch it."""

    name: str
    description: str
    exec_start_path: str = ""
    dependencies: tuple[str, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        if not self.name:
            raise ValueError("Service name must not be empty")
        if os.sep in self.name or self.name in (".", ".."):
            raise ValueError(f"Service name must not be a path: {self.name!r}")
        self.dependencies = tuple(self.dependencies)


class ActionResult(NamedTuple):
    """Outcome of a lifecycle operation; unpacks as ``message, error``."""

    message: str
    error: Optional[BaseException] = None

    @property
    def ok(self) -> bool:
        return self.error is None


class Executable(Protocol):
    """The workload started by the service manager."""

    def run(self) -> Any:
        ...


class ServiceManager(ABC):
    """
    Lifecycle operations for one service on one service manager.

    Subclasses describe where the descriptor lives, how it is rendered and
    which commands start, stop and query the service. The preconditions and
    the message/error pairing are shared:

    * every mutating operation and ``status`` checks privileges first;
    * ``install`` requires the service to be absent, the others present;
    * ``start`` refuses a running service and ``stop`` a stopped one.

    Operations never raise for expected failures. They return an
    ``ActionResult`` whose error is set exactly when the message ends in
    ``" failed"``.
    """

    #: Permission bits of the written descriptor.
    DESCRIPTOR_MODE = 0o644

    def __init__(
        self,
        record: ServiceRecord,
        config: Optional[ConfigData] = None,
        runner: Optional[CommandRunner] = None,
    ) -> None:
        self.record = record
        self.config = config or ConfigData()
        self._runner = runner or run_command
        self._logger = get_logger("daemonctl.service")

    @property
    @abstractmethod
    def platform_name(self) -> str:
        """Return the service manager name (e.g., 'rc.d', 'launchd')."""

    @property
    @abstractmethod
    def service_dir(self) -> Path:
        """Directory holding this manager's service descriptors."""

    @abstractmethod
    def service_path(self) -> Path:
        """Descriptor path; depends only on the service name."""

    @abstractmethod
    def render(self, args: Sequence[str]) -> str:
        """Render the descriptor text for the current record."""

    @abstractmethod
    def check_running(self) -> RunningStatus:
        """Query the service manager for the live state of the service."""

    @abstractmethod
    def start_command(self) -> list[str]:
        """Command line that starts the installed service."""

    @abstractmethod
    def stop_command(self) -> list[str]:
        """Command line that stops the running service."""

    def after_install(self) -> None:
        """Hook run once the descriptor is in place."""

    def after_remove(self) -> None:
        """Hook run once the descriptor is gone."""

    @property
    def name(self) -> str:
        return self.record.name

    @property
    def description(self) -> str:
        return self.record.description

    # Shared lifecycle

    def is_installed(self) -> tuple[bool, Optional[OSError]]:
        """
        Check whether the descriptor exists.

        Returns:
            ``(True, None)`` when it does, otherwise ``(False, <stat error>)``.
        """
        try:
            os.stat(self.service_path())
        except OSError as e:
            return False, e
        return True, None

    def install(self, *args: str) -> ActionResult:
        """
        Write the service descriptor.

        Args:
            *args: Arguments passed to the executable when the service starts.
        """
        return self._perform("Installing", lambda: self._install(args))

    def remove(self) -> ActionResult:
        """Delete the service descriptor."""
        return self._perform("Removing", self._remove)

    def start(self) -> ActionResult:
        """Start the installed service if it is not running yet."""
        return self._perform("Starting", self._start)

    def stop(self) -> ActionResult:
        """Stop the running service."""
        return self._perform("Stopping", self._stop)

    def status(self) -> ActionResult:
        """Report whether the service is running."""
        running, error = self.query_status()
        if error is not None:
            return ActionResult(STATUS_UNDEFINED, error)
        return ActionResult(running.message)

    def query_status(self) -> tuple[Optional[RunningStatus], Optional[BaseException]]:
        """
        Check the status preconditions, then probe the service once.

        Returns:
            ``(RunningStatus, None)``, or ``(None, <error>)`` when privileges
            are missing or the service is not installed.
        """
        try:
            privileges.check_privileges()
            self._require_installed()
        except OPERATION_ERRORS as e:
            return None, e
        return self.check_running(), None

    def run(self, executable: Union[Executable, Callable[[], Any]]) -> ActionResult:
        """
        Run the workload in this process and wait for it to return.

        This is what the process spawned by the service manager calls; it
        checks nothing and does not touch the descriptor.
        """
        action = f"Running {self.description}:"
        entry = executable.run if hasattr(executable, "run") else executable
        try:
            entry()
        except Exception as e:
            self._logger.error(f"{self.name} workload failed: {e}")
            return ActionResult(action + FAILED, e)
        return ActionResult(action + " completed.")

    # Steps

    def _perform(self, verb: str, step: Callable[[], None]) -> ActionResult:
        action = f"{verb} {self.description}:"
        try:
            step()
        except OPERATION_ERRORS as e:
            self._logger.debug(f"{action} {e}")
            return ActionResult(action + FAILED, e)
        return ActionResult(action + SUCCESS)

    def _require_installed(self) -> None:
        installed, err = self.is_installed()
        if not installed:
            raise NotInstalledError() from err

    def _install(self, args: Sequence[str]) -> None:
        privileges.check_privileges()

        installed, _ = self.is_installed()
        if installed:
            raise AlreadyInstalledError()

        if not self.record.exec_start_path:
            self.record.exec_start_path = resolve_executable_path()
        validate_executable_path(self.record.exec_start_path)
        # The service manager does not start the service from this directory.
        self.record.exec_start_path = os.path.abspath(self.record.exec_start_path)

        # Nothing is written until the descriptor has been rendered in full.
        content = self.render(args)
        path = write_atomic(self.service_path(), content, self.DESCRIPTOR_MODE)
        self._logger.info(f"Created service descriptor: {path}")
        self.after_install()

    def _remove(self) -> None:
        privileges.check_privileges()
        self._require_installed()
        self.service_path().unlink()
        self._logger.info(f"Removed service descriptor: {self.service_path()}")
        self.after_remove()

    def _start(self) -> None:
        privileges.check_privileges()
        self._require_installed()
        if self.check_running().running:
            raise AlreadyRunningError()
        self._execute(self.start_command())
        self._logger.info(f"Service '{self.name}' started")

    def _stop(self) -> None:
        privileges.check_privileges()
        self._require_installed()
        if not self.check_running().running:
            raise AlreadyStoppedError()
        self._execute(self.stop_command())
        self._logger.info(f"Service '{self.name}' stopped")

    def _execute(self, cmd: list[str]) -> None:
        """Run a control command; a non-zero exit becomes CalledProcessError."""
        self._logger.debug(f"Running: {' '.join(cmd)}")
        result = self._runner(cmd)
        if result.returncode != 0:
            raise subprocess.CalledProcessError(
                result.returncode, cmd, output=result.stdout, stderr=result.stderr
            )

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name!r}, path={str(self.service_path())!r})"
