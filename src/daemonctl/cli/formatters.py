"""Output formatters for CLI commands."""

from __future__ import annotations

import json
import sys
from typing import Any


class StatusFormatter:
    """Format service status for display."""

    STATUS_SYMBOLS = {
        "running": "[+]",
        "stopped": "[-]",
    }

    @classmethod
    def format_status(cls, status: str) -> str:
        """Format a status with symbol."""
        symbol = cls.STATUS_SYMBOLS.get(status.lower(), "[?]")
        return f"{symbol} {status}"


def print_json(data: Any) -> None:
    """Print data as JSON."""
    print(json.dumps(data, indent=2, default=str))


def print_status(name: str, status: str, extra: str = "") -> None:
    """Print a status line."""
    formatted = StatusFormatter.format_status(status)
    if extra:
        print(f"{formatted} {name}: {extra}")
    else:
        print(f"{formatted} {name}")


def print_success(message: str) -> None:
    """Print a success message."""
    print(f"[+] {message}")


def print_error(message: str) -> None:
    """Print an error message."""
    print(f"[!] {message}", file=sys.stderr)


def print_info(message: str) -> None:
    """Print an info message."""
    print(f"[*] {message}")


def print_warning(message: str) -> None:
    """Print a warning message."""
    print(f"[~] {message}")
