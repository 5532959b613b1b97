"""Per-session form state keyed by session id."""

import threading
import time
from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import Callable, Iterator

from htmxdemo.log import get_logger
from htmxdemo.userform import UserFormState

logger = get_logger(__name__)

DEFAULT_IDLE_TIMEOUT = 30 * 60.0
DEFAULT_SWEEP_INTERVAL = 60.0


@dataclass
class _Entry:
    last_access: float
    form: UserFormState | None = None
    lock: threading.Lock = field(default_factory=threading.Lock)


class SessionFormStore:
    """Maps session ids to their live form.

    A form is created on first access and dropped by ``clear()`` once it has
    been submitted. ``lock()`` serializes requests from the same session so
    concurrent tag edits cannot interleave. Sessions untouched for
    ``idle_timeout`` seconds are evicted, form and lock together.
    """

    def __init__(
        self,
        factory: Callable[[], UserFormState],
        *,
        idle_timeout: float = DEFAULT_IDLE_TIMEOUT,
        sweep_interval: float = DEFAULT_SWEEP_INTERVAL,
        clock: Callable[[], float] = time.monotonic,
    ):
        if idle_timeout <= 0:
            raise ValueError("idle_timeout must be positive")
        self._factory = factory
        self._idle_timeout = idle_timeout
        self._sweep_interval = sweep_interval
        self._clock = clock
        self._entries: dict[str, _Entry] = {}
        self._guard = threading.Lock()
        self._last_sweep = clock()

    def _touch(self, session_id: str) -> _Entry:
        # Caller holds self._guard.
        now = self._clock()
        if now - self._last_sweep >= self._sweep_interval:
            self._sweep(now)
        entry = self._entries.get(session_id)
        if entry is None:
            entry = self._entries[session_id] = _Entry(last_access=now)
        entry.last_access = now
        return entry

    def _sweep(self, now: float) -> None:
        expired = [
            sid for sid, entry in self._entries.items()
            if now - entry.last_access >= self._idle_timeout and not entry.lock.locked()
        ]
        for sid in expired:
            del self._entries[sid]
        self._last_sweep = now
        if expired:
            logger.debug("Evicted %d idle sessions", len(expired))

    def get(self, session_id: str) -> UserFormState | None:
        with self._guard:
            entry = self._entries.get(session_id)
            return entry.form if entry is not None else None

    def get_or_create(self, session_id: str) -> UserFormState:
        with self._guard:
            entry = self._touch(session_id)
            if entry.form is None:
                entry.form = self._factory()
            return entry.form

    def clear(self, session_id: str) -> None:
        with self._guard:
            self._entries.pop(session_id, None)

    def sweep(self) -> None:
        """Evict idle sessions now instead of waiting for the next access."""
        with self._guard:
            self._sweep(self._clock())

    @contextmanager
    def lock(self, session_id: str) -> Iterator[None]:
        with self._guard:
            session_lock = self._touch(session_id).lock
        with session_lock:
            yield

    def __contains__(self, session_id: str) -> bool:
        with self._guard:
            entry = self._entries.get(session_id)
            return entry is not None and entry.form is not None

    def __len__(self) -> int:
        """Number of sessions holding a form."""
        with self._guard:
            return sum(entry.form is not None for entry in self._entries.values())

    @property
    def session_count(self) -> int:
        """Number of tracked sessions, with or without a form."""
        with self._guard:
            return len(self._entries)
