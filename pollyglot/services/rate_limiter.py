"""
/**
 * @file pollyglot/services/rate_limiter.py
 * @description Client-side gate enforcing a minimum interval between translate submissions.
 */
"""

from __future__ import annotations

import time
from dataclasses import dataclass
from typing import Callable, Optional


def _now_ms() -> int:
    return int(time.time() * 1000)


@dataclass
class RateLimitState:
    # 0 means "no prior request"
    last_request_ms: int = 0


@dataclass(frozen=True)
class RateLimitDecision:
    allowed: bool
    wait_ms: int = 0


class RateLimiter:
    """
    Allows a submission only when at least ``minimum_interval_ms`` has passed since the
    last allowed one. The state belongs to one session; a denied check leaves it untouched
    so repeated clicks do not extend the window.
    """

    def __init__(
        self,
        minimum_interval_ms: int = 2000,
        state: Optional[RateLimitState] = None,
        clock: Callable[[], int] = _now_ms,
    ):
        self.minimum_interval_ms = minimum_interval_ms
        self.state = state or RateLimitState()
        self._clock = clock

    def check_and_record(self, now_ms: Optional[int] = None) -> RateLimitDecision:
        now = self._clock() if now_ms is None else now_ms
        elapsed = now - self.state.last_request_ms
        if elapsed < self.minimum_interval_ms:
            return RateLimitDecision(allowed=False, wait_ms=self.minimum_interval_ms - elapsed)
        self.state.last_request_ms = now
        return RateLimitDecision(allowed=True)
