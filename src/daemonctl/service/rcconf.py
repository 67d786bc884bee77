"""Boot-time enablement lookup for rc.d services."""

from __future__ import annotations

import re
from pathlib import Path
from typing import Iterable, Union

from daemonctl.utils.logging import get_logger

BLANKS = " \t"


def enable_pattern(name: str) -> re.Pattern:
    """Pattern for a line that sets ``<name>_enable="YES"``."""
    # Only the value is case-insensitive; the variable name must match exactly.
    return re.compile(
        r"^(?P<prefix>.*?)(?<![\w-])" + re.escape(name) + r'_enable="(?i:YES)"',
        re.MULTILINE,
    )


def is_active(prefix: str) -> bool:
    """
    Whether the text before an ``_enable`` assignment leaves it in effect.

    Scanning left to right, a ``#`` before any other non-blank character
    comments the assignment out. Any other non-blank character, or nothing
    at all, leaves it active.
    """
    for char in prefix:
        if char in BLANKS:
            continue
        return char != "#"
    return True


def parse_enabled(name: str, text: str) -> bool:
    """Return True if ``text`` enables ``name`` on at least one uncommented line."""
    for match in enable_pattern(name).finditer(text):
        if is_active(match.group("prefix")):
            return True
    return False


def is_enabled(name: str, files: Iterable[Union[str, Path]]) -> bool:
    """
    Check the boot configuration files for an active ``<name>_enable="YES"``.

    Unreadable or missing files are treated as containing no match.
    """
    logger = get_logger("daemonctl.service")
    for path in files:
        try:
            text = Path(path).read_text(encoding="utf-8", errors="replace")
        except OSError as e:
            logger.debug(f"Cannot read {path}: {e}")
            continue
        if parse_enabled(name, text):
            return True
    return False
