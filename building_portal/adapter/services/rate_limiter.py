"""In-memory sliding-window request budget per client."""

import time
from collections import deque
from threading import Lock
from typing import Callable, Deque, Dict

from building_portal.domain.errors import RateLimitError


class SlidingWindowRateLimiter:
    """Allow at most `max_requests` per `window_seconds` for each key."""

    def __init__(
        self,
        max_requests: int = 100,
        window_seconds: float = 60,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self.max_requests = max(1, int(max_requests))
        self.window_seconds = max(1.0, float(window_seconds))
        self._clock = clock
        self._hits: Dict[str, Deque[float]] = {}
        self._lock = Lock()

    def _prune(self, now: float) -> None:
        """Drop expired timestamps, and keys left with none."""
        for key in list(self._hits):
            hits = self._hits[key]
            while hits and now - hits[0] >= self.window_seconds:
                hits.popleft()
            if not hits:
                del self._hits[key]

    def hit(self, key: str) -> None:
        """Record one request for `key`; raise RateLimitError when over budget."""
        now = self._clock()
        with self._lock:
            self._prune(now)
            hits = self._hits.setdefault(key, deque())

            if len(hits) >= self.max_requests:
                retry_after = int(self.window_seconds - (now - hits[0])) + 1
                raise RateLimitError(
                    f"Too many requests. Retry after {retry_after} seconds."
                )
            hits.append(now)

    def tracked_keys(self) -> int:
        with self._lock:
            return len(self._hits)

    def reset(self) -> None:
        with self._lock:
            self._hits.clear()
