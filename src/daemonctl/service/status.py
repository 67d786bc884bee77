"""Running-state detection by scraping service manager output."""

from __future__ import annotations

import re
import subprocess
from dataclasses import dataclass
from typing import Callable, Optional, Sequence

from daemonctl.utils.logging import get_logger

CommandRunner = Callable[[Sequence[str]], subprocess.CompletedProcess]

STOPPED_MESSAGE = "Service is stopped"
RUNNING_MESSAGE = "Service is running..."
RUNNING_PID_MESSAGE = "Service (pid  {pid}) is running..."

RCD_PID_PATTERN = re.compile(r"pid  ([0-9]+)")
LAUNCHD_PID_PATTERN = re.compile(r'"PID" = ([0-9]+);')
SYSTEMD_PID_PATTERN = re.compile(r"Main PID: ([0-9]+)")


@dataclass(frozen=True)
class RunningStatus:
    """Result of one status probe."""

    message: str
    running: bool
    pid: Optional[int] = None


def run_command(cmd: Sequence[str]) -> subprocess.CompletedProcess:
    """Run a service manager command and capture its output."""
    return subprocess.run(list(cmd), capture_output=True, text=True)


def parse_status(
    output: str,
    name: str,
    pid_pattern: re.Pattern,
    required: Optional[re.Pattern] = None,
) -> RunningStatus:
    """
    Decide whether ``output`` describes a running service called ``name``.

    The service is running when its name appears anywhere in the output
    (and ``required`` matches too, when given). A ``pid_pattern`` match adds
    the process id to the message.
    """
    if name not in output:
        return RunningStatus(STOPPED_MESSAGE, False)
    if required is not None and not required.search(output):
        return RunningStatus(STOPPED_MESSAGE, False)

    match = pid_pattern.search(output)
    if match:
        pid = match.group(1)
        return RunningStatus(RUNNING_PID_MESSAGE.format(pid=pid), True, int(pid))
    return RunningStatus(RUNNING_MESSAGE, True)


def probe(
    cmd: Sequence[str],
    name: str,
    pid_pattern: re.Pattern,
    runner: CommandRunner = run_command,
    required: Optional[re.Pattern] = None,
) -> RunningStatus:
    """
    Run a status query command and parse its output.

    A command that cannot be spawned or exits non-zero means "not running";
    the failure is logged at debug level and never propagated.
    """
    logger = get_logger("daemonctl.service")
    try:
        result = runner(cmd)
    except (OSError, subprocess.SubprocessError) as e:
        logger.debug(f"Status command {' '.join(cmd)} failed: {e}")
        return RunningStatus(STOPPED_MESSAGE, False)

    if result.returncode != 0:
        logger.debug(
            f"Status command {' '.join(cmd)} exited with {result.returncode}: "
            f"{(result.stderr or '').strip()}"
        )
        return RunningStatus(STOPPED_MESSAGE, False)

    return parse_status(result.stdout or "", name, pid_pattern, required)
