"""Errors reported by service lifecycle operations."""


class DaemonError(Exception):
    """Base class for all service lifecycle errors."""


class PrivilegeError(DaemonError):
    """The current process may not change system service state."""

    def __init__(self, message: str = "") -> None:
        super().__init__(
            message
            or "You must have root user privileges. Possibly using 'sudo' command should help"
        )


class AlreadyInstalledError(DaemonError):
    """A service descriptor already exists for this name."""

    def __init__(self, message: str = "") -> None:
        super().__init__(message or "Service has already been installed")


class NotInstalledError(DaemonError):
    """No service descriptor exists for this name."""

    def __init__(self, message: str = "") -> None:
        super().__init__(message or "Service is not installed")


class AlreadyRunningError(DaemonError):
    """Start was requested for a service that is already running."""

    def __init__(self, message: str = "") -> None:
        super().__init__(message or "Service is already running")


class AlreadyStoppedError(DaemonError):
    """Stop was requested for a service that is not running."""

    def __init__(self, message: str = "") -> None:
        super().__init__(message or "Service has already been stopped")


class InvalidExecutionPathError(DaemonError):
    """The executable to register is missing or is a directory."""

    def __init__(self, message: str = "") -> None:
        super().__init__(message or "Incorrect ExecStart path: file does not exist or is a directory")


class TemplateError(DaemonError):
    """A service descriptor template could not be rendered."""


class UnsupportedPlatformError(DaemonError):
    """No service manager implementation exists for this platform."""
