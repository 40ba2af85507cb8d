"""GitHub rate limit tracking and inter-page pacing."""

from __future__ import annotations

import asyncio
import logging
import time

import httpx

log = logging.getLogger(__name__)


def _parse_header(response: httpx.Response, name: str, convert):
    value = response.headers.get(name)
    if value is None:
        return None
    try:
        return convert(value)
    except ValueError:
        log.debug("Ignoring unparsable %s header: %r", name, value)
        return None


class RateLimitMonitor:
    """Track ``X-RateLimit-*`` headers and pace requests cooperatively."""

    def __init__(
        self,
        threshold: int = 10,
        page_delay: float = 0.1,
        max_wait: float = 60.0,
    ) -> None:
        self.threshold = threshold
        self.page_delay = page_delay
        self.max_wait = max_wait
        self._remaining: int | None = None
        self._reset_at: float | None = None

    def update(self, response: httpx.Response) -> None:
        remaining = _parse_header(response, "X-RateLimit-Remaining", int)
        reset = _parse_header(response, "X-RateLimit-Reset", float)
        if remaining is not None:
            self._remaining = remaining
        if reset is not None:
            self._reset_at = reset

    async def wait_if_needed(self) -> None:
        """Sleep until the quota resets when it is nearly exhausted."""
        if self._remaining is None or self._reset_at is None:
            return
        if self._remaining > self.threshold:
            return
        wait = min(max(0.0, self._reset_at - time.time()) + 1, self.max_wait)
        log.warning(
            "Rate limit nearly exhausted (%d left), sleeping %.0fs", self._remaining, wait
        )
        await asyncio.sleep(wait)

    async def pause(self) -> None:
        """Fixed delay between consecutive pages."""
        if self.page_delay > 0:
            await asyncio.sleep(self.page_delay)
