"""TTL-bound cache of the choices derived from the job registry."""

import logging
import threading
import time
from collections.abc import Callable
from dataclasses import dataclass

from jobchoice.choice_snapshot import ChoiceSnapshot
from jobchoice.enumerate_items import enumerate_items
from jobchoice.path_resolver import PathResolver

logger = logging.getLogger(__name__)

DEFAULT_TTL_SECONDS = 60.0


@dataclass(frozen=True)
class CacheState:
    """The held snapshot and the clock reading at which it was built."""

    snapshot: ChoiceSnapshot
    refreshed_at: float


class ChoiceCache:
    """Recomputes the choices for one path at most once per TTL window."""

    def __init__(
        self,
        path: str,
        resolver: PathResolver,
        ttl_seconds: float = DEFAULT_TTL_SECONDS,
        clock: Callable[[], float] = time.time,
    ) -> None:
        """Initialize an empty cache for the path."""
        self.path = path
        self.resolver = resolver
        self.ttl_seconds = ttl_seconds
        self.clock = clock
        self._state: CacheState | None = None
        self._lock = threading.Lock()

    def get_snapshot(self, now: float | None = None) -> ChoiceSnapshot:
        """Return the current snapshot, refreshing it if the TTL has elapsed.

        A failed refresh raises and leaves the held state untouched, so the
        next call attempts the refresh again.
        """
        with self._lock:
            if now is None:
                now = self.clock()
            state = self._state
            if state is not None and now - state.refreshed_at < self.ttl_seconds:
                return state.snapshot

            group = self.resolver.resolve(self.path)
            snapshot = ChoiceSnapshot.from_records(enumerate_items(group))
            self._state = CacheState(snapshot, now)
            logger.debug(
                "Refreshed choices for '%s': %s items", self.path, len(snapshot.choices)
            )
            return snapshot

    def invalidate(self) -> None:
        """Drop the held snapshot so the next call refreshes."""
        with self._lock:
            self._state = None
