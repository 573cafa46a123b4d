import threading
import time
from collections import deque
from typing import Callable, Deque, Dict


class UploadRateLimiter:
    """
    Sliding-window request counter per client key.

    State lives on the instance and is handed to the route as a dependency.
    Expired timestamps, and clients with none left, are evicted on every check.
    """

    def __init__(self, max_requests: int, window_seconds: float, clock: Callable[[], float] = time.monotonic):
        self.max_requests = max_requests
        self.window_seconds = window_seconds
        self._clock = clock
        self._hits: Dict[str, Deque[float]] = {}
        self._lock = threading.Lock()

    def evict_expired(self, now: float) -> None:
        cutoff = now - self.window_seconds
        for key in list(self._hits):
            hits = self._hits[key]
            while hits and hits[0] <= cutoff:
                hits.popleft()
            if not hits:
                del self._hits[key]

    def allow(self, key: str) -> bool:
        """Record a request for key; False when the window is already full."""
        with self._lock:
            now = self._clock()
            self.evict_expired(now)
            hits = self._hits.setdefault(key, deque())
            if len(hits) >= self.max_requests:
                return False
            hits.append(now)
            return True

    def tracked_clients(self) -> int:
        with self._lock:
            return len(self._hits)
