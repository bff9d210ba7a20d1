"""
Counter of in-flight requests used to drive the loading indicator
"""

import logging
import threading
from typing import Protocol

from core.types import ActivityListener

logger = logging.getLogger(__name__)


class ActivityTracker(Protocol):
    def on_request_start(self) -> None: ...

    def on_request_end(self) -> None: ...


class NetworkActivityIndicator:
    """Thread-safe count of outstanding requests."""

    def __init__(self, on_change: ActivityListener | None = None) -> None:
        """
        Initialize a new instance of the NetworkActivityIndicator class.

        Args:
            on_change: Called with True when the first request starts and with
                False when the last outstanding request ends
        """
        self.on_change = on_change
        self._active_requests = 0

        # Lock para acesso thread-safe ao contador; reentrante para o listener
        self.lock = threading.RLock()

    @property
    def active_requests(self) -> int:
        with self.lock:
            return self._active_requests

    @property
    def is_active(self) -> bool:
        return self.active_requests > 0

    def on_request_start(self) -> None:
        with self.lock:
            self._active_requests += 1
            if self._active_requests == 1:
                self._notify(True)

    def on_request_end(self) -> None:
        with self.lock:
            if self._active_requests == 0:
                logger.warning("Request end reported with no outstanding requests")
                return
            self._active_requests -= 1
            if self._active_requests == 0:
                self._notify(False)

    def _notify(self, is_active: bool) -> None:
        """Runs under the lock so transitions reach the listener in order."""
        logger.debug(f"Network activity changed: active={is_active}")
        if self.on_change is not None:
            self.on_change(is_active)
