"""Fixed-window request limiter keyed by client address."""

from __future__ import annotations

import logging
import threading
import time
from dataclasses import dataclass
from typing import Callable

logger = logging.getLogger(__name__)

_PRUNE_THRESHOLD = 10_000


@dataclass(frozen=True)
class RateLimitConfig:
    window_seconds: float
    max_requests: int
    message: str = "Rate limit exceeded. Please try again later."


@dataclass(frozen=True)
class RateLimitDecision:
    allowed: bool
    error: str | None = None


@dataclass
class _Window:
    count: int
    reset_at: float


class FixedWindowRateLimiter:
    """Count requests per client in fixed windows.

    A client's window opens on its first request and lasts
    ``config.window_seconds``; once it has expired the next request opens a
    fresh one. Each protected operation owns its own instance.
    """

    def __init__(
        self,
        config: RateLimitConfig,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self.config = config
        self._clock = clock
        self._windows: dict[str, _Window] = {}
        self._lock = threading.Lock()

    def check(self, client_id: str) -> RateLimitDecision:
        """Record one request for ``client_id`` and say whether it may proceed."""

        with self._lock:
            now = self._clock()
            window = self._windows.get(client_id)

            if window is None or now > window.reset_at:
                if window is None and len(self._windows) >= _PRUNE_THRESHOLD:
                    self._prune(now)
                self._windows[client_id] = _Window(
                    count=1, reset_at=now + self.config.window_seconds
                )
                return RateLimitDecision(allowed=True)

            if window.count >= self.config.max_requests:
                return RateLimitDecision(allowed=False, error=self.config.message)

            window.count += 1
            return RateLimitDecision(allowed=True)

    def reset(self) -> None:
        with self._lock:
            self._windows.clear()

    def __len__(self) -> int:
        return len(self._windows)

    def _prune(self, now: float) -> None:
        expired = [key for key, window in self._windows.items() if now > window.reset_at]
        for key in expired:
            del self._windows[key]
        logger.debug(
            "Pruned expired rate limit windows",
            extra={"pruned": len(expired), "tracked": len(self._windows)},
        )
