# Copyright (c) 2026 Contrastkit
# SPDX-License-Identifier: MIT

"""
Fixed-window request throttling for the check endpoint.

State lives in an explicit limiter object owned by the server, never in
module globals. Each client gets a counter that resets when its window
elapses; expired entries can be evicted in bulk.
"""

from __future__ import annotations

import logging
import threading
import time
from dataclasses import dataclass
from typing import Callable, Mapping, Optional

from contrastkit.runtime.check import CheckError

logger = logging.getLogger(__name__)


TOO_MANY_REQUESTS_MESSAGE = "Too many requests"


@dataclass(frozen=True)
class RateLimitConfig:
    """Window length and per-client budget."""

    window_seconds: float = 60.0
    max_requests: int = 60


@dataclass
class _Window:
    count: int
    reset_at: float


class FixedWindowRateLimiter:
    """
    Per-client fixed-window counter.

    Args:
        config: Window settings (uses defaults if None).
        clock: Monotonic time source in seconds; inject one in tests.
    """

    def __init__(
        self,
        config: Optional[RateLimitConfig] = None,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self.config = config or RateLimitConfig()
        self._clock = clock
        self._windows: dict[str, _Window] = {}
        self._lock = threading.Lock()

    def __len__(self) -> int:
        return len(self._windows)

    def allow(self, client_id: str) -> bool:
        """Count one request for ``client_id``; False once over budget."""
        now = self._clock()
        with self._lock:
            window = self._windows.get(client_id)
            if window is None or now > window.reset_at:
                self._windows[client_id] = _Window(
                    count=1, reset_at=now + self.config.window_seconds
                )
                return True

            window.count += 1
            allowed = window.count <= self.config.max_requests
        if not allowed:
            logger.info("Rate limit exceeded for %s", client_id)
        return allowed

    def check(self, client_id: str) -> None:
        """Like ``allow`` but raises ``CheckError`` (status 429) when throttled."""
        if not self.allow(client_id):
            raise CheckError(TOO_MANY_REQUESTS_MESSAGE, status=429)

    def evict_expired(self) -> int:
        """Drop clients whose window has passed. Returns how many were dropped."""
        now = self._clock()
        with self._lock:
            expired = [cid for cid, w in self._windows.items() if now > w.reset_at]
            for cid in expired:
                del self._windows[cid]
        return len(expired)


def client_id_from_headers(headers: Mapping[str, str]) -> str:
    """
    Identify a client from proxy headers.

    First ``x-forwarded-for`` hop, then ``x-real-ip``, then ``"unknown"``.
    Header names are matched case-insensitively.
    """
    lowered = {k.lower(): v for k, v in headers.items()}

    forwarded = lowered.get("x-forwarded-for")
    if forwarded:
        first = forwarded.split(",")[0].strip()
        if first:
            return first

    real_ip = lowered.get("x-real-ip")
    if real_ip:
        return real_ip
    return "unknown"
