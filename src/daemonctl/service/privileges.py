"""Administrative privilege check."""

from __future__ import annotations

import os

from daemonctl.service.errors import PrivilegeError


def has_privileges() -> bool:
    """Return True when the effective user may change system service state."""
    geteuid = getattr(os, "geteuid", None)
    if geteuid is None:
        return False
    return geteuid() == 0


def check_privileges() -> None:
    """
    Fail fast unless the process runs as root.

    Raises:
        PrivilegeError: If the effective uid is not 0.
    """
    if not has_privileges():
        raise PrivilegeError()
