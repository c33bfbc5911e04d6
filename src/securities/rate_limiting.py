import dataclasses
import threading
import time


@dataclasses.dataclass
class RateLimitDecision:
    allowed: bool
    limit: int
    remaining: int
    reset_seconds: int


@dataclasses.dataclass
class _Window:
    started_at: float
    hits: int = 0


class FixedWindowRateLimiter:
    """
    Counts requests per client key inside fixed windows of ``window_seconds``.

    The counter of a key restarts once its window has elapsed.
    """

    def __init__(self, *, max_requests: int, window_seconds: int, clock=time.monotonic):
        self.max_requests = max(1, int(max_requests))
        self.window_seconds = max(1, int(window_seconds))
        self._clock = clock
        self._windows: dict[str, _Window] = {}
        self._lock = threading.Lock()

    def consume(self, *, key: str) -> RateLimitDecision:
        now = self._clock()
        with self._lock:
            window = self._windows.get(key)
            if window is None or now - window.started_at >= self.window_seconds:
                window = _Window(started_at=now)
                self._windows[key] = window

            reset_seconds = int(max(1, self.window_seconds - (now - window.started_at)))
            if window.hits >= self.max_requests:
                return RateLimitDecision(
                    allowed=False, limit=self.max_requests, remaining=0, reset_seconds=reset_seconds
                )

            window.hits += 1
            return RateLimitDecision(
                allowed=True,
                limit=self.max_requests,
                remaining=self.max_requests - window.hits,
                reset_seconds=reset_seconds,
            )

    def reset(self) -> None:
        with self._lock:
            self._windows.clear()
