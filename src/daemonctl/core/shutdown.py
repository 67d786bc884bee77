"""Signal handlers and graceful shutdown management."""

from __future__ import annotations

import signal
import threading
from typing import Callable, Optional

from daemonctl.utils.logging import get_logger


class ShutdownHandler:
    """
    Turns SIGTERM/SIGINT into a shutdown callback.

    Example:
        handler = ShutdownHandler()
        handler.on_shutdown(process.terminate)
        handler.install()
        ...
        handler.restore()
    """

    SIGNALS = (signal.SIGINT, signal.SIGTERM)

    def __init__(self) -> None:
        self._shutdown_callback: Optional[Callable[[], None]] = None
        self._shutdown_event = threading.Event()
        self._previous: dict[int, object] = {}
        self.logger = get_logger("daemonctl.shutdown")

    def on_shutdown(self, callback: Callable[[], None]) -> ShutdownHandler:
        """
        Register the shutdown callback.

        Args:
            callback: Function to call when shutdown is triggered.

        Returns:
            self for method chaining.
        """
        self._shutdown_callback = callback
        return self

    def install(self) -> ShutdownHandler:
        """
        Install signal handlers, remembering the ones they replace.

        Returns:
            self for method chaining.
        """
        if self._previous:
            return self

        for signum in self.SIGNALS:
            self._previous[signum] = signal.signal(signum, self._signal_handler)

        self.logger.debug("Shutdown handlers installed")
        return self

    def restore(self) -> None:
        """Put back the signal handlers that were active before install()."""
        for signum, previous in self._previous.items():
            signal.signal(signum, previous)
        self._previous.clear()

    def _signal_handler(self, signum: int, frame) -> None:
        """Handle shutdown signals."""
        sig_name = signal.Signals(signum).name
        self.logger.info(f"Received {sig_name}, initiating shutdown...")
        self.trigger_shutdown()

    def trigger_shutdown(self) -> None:
        """Trigger shutdown programmatically."""
        if self._shutdown_event.is_set():
            return

        self._shutdown_event.set()

        if self._shutdown_callback:
            try:
                self._shutdown_callback()
            except Exception as e:
                self.logger.error(f"Shutdown callback error: {e}")

    @property
    def is_shutting_down(self) -> bool:
        """Check if shutdown has been triggered."""
        return self._shutdown_event.is_set()
