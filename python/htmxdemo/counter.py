"""Process-wide click counter."""

import threading

from htmxdemo.log import get_logger

logger = get_logger(__name__)


class CounterService:
    """A single integer shared by every client, reset on restart."""

    def __init__(self, start: int = 0):
        if start < 0:
            raise ValueError("Counter cannot start below zero")
        self._count = start
        self._lock = threading.Lock()

    def get_count(self) -> int:
        return self._count

    def increment(self) -> int:
        """Add one and return the new value."""
        with self._lock:
            self._count += 1
            count = self._count
        logger.debug("Counter incremented to %d", count)
        return count
