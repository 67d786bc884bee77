"""Run an external command as the service workload."""

from __future__ import annotations

import subprocess
import threading
from typing import Optional, Sequence

from daemonctl.core.shutdown import ShutdownHandler
from daemonctl.utils.logging import get_logger


class CommandExecutable:
    """
    Executable that spawns a command and waits for it to exit.

    SIGTERM and SIGINT received while waiting are forwarded to the child as
    a terminate request, so ``launchctl unload`` or ``service stop`` reach
    the workload. Nothing is restarted; that is the service manager's job.

    Example:
        manager.run(CommandExecutable(["/usr/local/bin/worker", "--serve"]))
    """

    def __init__(self, cmd: Sequence[str], stop_timeout: float = 10.0) -> None:
        if not cmd:
            raise ValueError("Command must not be empty")
        self.cmd = list(cmd)
        self.stop_timeout = stop_timeout
        self.returncode: Optional[int] = None
        self._process: Optional[subprocess.Popen] = None
        self._kill_timer: Optional[threading.Timer] = None
        self._logger = get_logger("daemonctl.runner")

    def run(self) -> int:
        """
        Start the command and block until it exits.

        Returns:
            The command's exit code.

        Raises:
            subprocess.CalledProcessError: If the command exits non-zero
                without having been asked to stop.
        """
        handler = ShutdownHandler().on_shutdown(self.stop)
        self._logger.info(f"Starting workload: {' '.join(self.cmd)}")
        self._process = subprocess.Popen(self.cmd)
        handler.install()
        try:
            self.returncode = self._process.wait()
        finally:
            handler.restore()
            if self._kill_timer is not None:
                self._kill_timer.cancel()

        self._logger.info(f"Workload exited with code {self.returncode}")
        if self.returncode != 0 and not handler.is_shutting_down:
            raise subprocess.CalledProcessError(self.returncode, self.cmd)
        return self.returncode

    def stop(self) -> None:
        """Ask the running command to exit, killing it after ``stop_timeout``."""
        process = self._process
        if process is None or process.poll() is not None:
            return

        self._logger.info("Stopping workload...")
        process.terminate()
        # run() is still blocked in wait() when this runs from a signal handler.
        self._kill_timer = threading.Timer(self.stop_timeout, self._kill)
        self._kill_timer.daemon = True
        self._kill_timer.start()

    def _kill(self) -> None:
        process = self._process
        if process is not None and process.poll() is None:
            self._logger.warning("Workload did not exit in time, killing it")
            process.kill()
