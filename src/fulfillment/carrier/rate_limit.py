"""Client-side sliding-window rate limiter.

Requests beyond the window's allowance are rejected locally, before they can
reach the network, so a runaway retry loop cannot hammer the carrier.
"""

import time
from collections import defaultdict, deque
from collections.abc import Callable


class SlidingWindowRateLimiter:
    def __init__(self, max_requests: int = 60, window_seconds: float = 60.0, clock: Callable[[], float] | None = None):
        self.max_requests = max_requests
        self.window_seconds = window_seconds
        self._clock = clock or time.monotonic
        self._requests: dict[str, deque[float]] = defaultdict(deque)

    def _prune(self, key: str, now: float) -> deque[float]:
        window = self._requests[key]
        while window and now - window[0] >= self.window_seconds:
            window.popleft()
        return window

    def try_acquire(self, key: str = "default") -> bool:
        """Record a request for ``key`` if the window has room; return whether it did."""
        now = self._clock()
        window = self._prune(key, now)
        if len(window) >= self.max_requests:
            return False
        window.append(now)
        return True

    def remaining(self, key: str = "default") -> int:
        return max(0, self.max_requests - len(self._prune(key, self._clock())))

    def retry_after(self, key: str = "default") -> float:
        """Seconds until the oldest request in the window expires."""
        window = self._prune(key, self._clock())
        if len(window) < self.max_requests:
            return 0.0
        return max(0.0, self.window_seconds - (self._clock() - window[0]))

    def reset(self, key: str | None = None) -> None:
        if key is None:
            self._requests.clear()
        else:
            self._requests.pop(key, None)
