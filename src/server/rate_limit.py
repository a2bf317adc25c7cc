"""Cooldown between PDF renders from the same client.

Every render hits the conversion backend, so each client may call each of
`/extract-svg`, `/crop-svg` and `/crop-svg/file` once per cooldown window.
The endpoints keep separate windows, so extracting a document and then
cropping it is not throttled. Rejected requests still start a window.
Disabled unless `rate_limit_enabled` is set.
"""

from __future__ import annotations

import math
import threading
import time
from typing import Callable

from fastapi import Request

from server.config import settings
from server.exceptions import RateLimitError


class CooldownLimiter:
    """In-memory cooldown keyed by `"<client> <path>"`; state is per process."""

    def __init__(self, cooldown_seconds: int, now: Callable[[], float] | None = None) -> None:
        self.cooldown_seconds = max(0, int(cooldown_seconds))
        self._now = now or time.monotonic
        self._lock = threading.Lock()
        self._hits: dict[str, float] = {}

    def check(self, key: str) -> int:
        """Return retry-after seconds if within cooldown, otherwise 0."""
        now = self._now()
        with self._lock:
            last = self._hits.get(key)
            if last is None or (now - last) >= self.cooldown_seconds:
                self._hits[key] = now
                return 0
            remaining = self.cooldown_seconds - (now - last)
            return max(1, int(math.ceil(remaining)))

    def reset(self) -> None:
        with self._lock:
            self._hits.clear()


_limiter = CooldownLimiter(settings.rate_limit_cooldown_seconds)


def client_key(request: Request) -> str:
    """Client address, taken from proxy headers only when they are trusted."""
    if settings.rate_limit_trust_forwarded:
        forwarded_for = request.headers.get("x-forwarded-for") or request.headers.get("x-real-ip")
        if forwarded_for:
            first = forwarded_for.split(",")[0].strip()
            if first:
                return first
    if request.client and request.client.host:
        return request.client.host
    return "unknown"


def format_retry(retry_after: int) -> str:
    if retry_after < 90:
        unit = "second" if retry_after == 1 else "seconds"
        return f"{retry_after} {unit}"
    minutes = int((retry_after + 59) // 60)
    unit = "minute" if minutes == 1 else "minutes"
    return f"{minutes} {unit}"


def check_rate_limit(request: Request) -> None:
    if not settings.rate_limit_enabled:
        return
    # Each endpoint keeps its own cooldown per client.
    retry_after = _limiter.check(f"{client_key(request)} {request.url.path}")
    if retry_after:
        message = f"Rate limit exceeded. Try again in {format_retry(retry_after)}."
        raise RateLimitError(message=message, retry_after=retry_after)
