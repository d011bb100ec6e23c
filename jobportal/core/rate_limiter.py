import math
import threading
import time
from collections import defaultdict, deque

# Credential endpoints throttled per client IP.
AUTH_PATHS = frozenset({"/signup", "/login", "/employer/signup", "/employer/login"})


class SlidingWindowRateLimiter:
    """
    Keeps, per key, the timestamps of requests seen in the last window.
    A request is admitted while fewer than `limit` timestamps remain after
    pruning. State lives in process memory, so each worker counts on its own.
    """

    def __init__(self, clock=time.monotonic) -> None:
        self._clock = clock
        self._lock = threading.Lock()
        self._hits: dict[str, deque[float]] = defaultdict(deque)

    def hit(self, key: str, limit: int, window_seconds: int) -> tuple[bool, int]:
        """Record one request for key. Returns (allowed, retry_after_seconds)."""
        now = self._clock()
        cutoff = now - window_seconds
        with self._lock:
            hits = self._hits[key]
            while hits and hits[0] <= cutoff:
                hits.popleft()
            if len(hits) >= limit:
                # Admission reopens once the oldest hit ages out.
                return False, max(1, math.ceil(hits[0] - cutoff))
            hits.append(now)
            return True, 0

    def reset(self) -> None:
        with self._lock:
            self._hits.clear()


rate_limiter = SlidingWindowRateLimiter()
