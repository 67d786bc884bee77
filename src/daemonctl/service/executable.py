"""Resolve the absolute path of the binary to register with the service manager."""

from __future__ import annotations

import os
import shutil
import sys
from typing import Optional

from daemonctl.service.errors import InvalidExecutionPathError


def resolve_executable_path(argv0: Optional[str] = None) -> str:
    """
    Turn the path the current program was invoked with into an absolute path.

    A dotted or relative path (``./bin/app``, ``bin/app``) is made absolute
    against the current directory and normalised. A bare command name is
    searched for on ``PATH``.

    Args:
        argv0: Invocation path. Defaults to ``sys.argv[0]``.

    Returns:
        Absolute path of the executable.

    Raises:
        InvalidExecutionPathError: If nothing was invoked or a bare name is not on PATH.
    """
    name = argv0 if argv0 is not None else (sys.argv[0] if sys.argv else "")
    if not name:
        raise InvalidExecutionPathError("Cannot determine the executable path: empty command name")

    if name.startswith(".") or os.sep in name:
        return os.path.normpath(os.path.abspath(name))

    found = shutil.which(name)
    if found is None:
        raise InvalidExecutionPathError(f"Executable not found in PATH: {name}")
    return os.path.normpath(os.path.abspath(found))


def validate_executable_path(path: str) -> None:
    """
    Check that ``path`` names an existing file that is not a directory.

    Raises:
        InvalidExecutionPathError: If the path is empty, missing or a directory.
    """
    if not path or not os.path.exists(path) or os.path.isdir(path):
        raise InvalidExecutionPathError()
