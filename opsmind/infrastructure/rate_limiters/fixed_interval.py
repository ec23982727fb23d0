import asyncio
import time
from typing import Awaitable, Callable, Optional


class FixedIntervalRateLimiter:
    """Enforce a minimum delay between consecutive calls."""

    def __init__(
        self,
        interval: float = 0.2,
        clock: Callable[[], float] = time.monotonic,
        sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
    ):
        """Initialize limiter.

        Args:
            interval: Minimum seconds between calls.
            clock: Monotonic clock.
            sleep: Async sleep function.
        """
        if interval < 0:
            raise ValueError(f"interval must be >= 0, got {interval}")
        self._interval = interval
        self._clock = clock
        self._sleep = sleep
        self._last: Optional[float] = None
        self._lock = asyncio.Lock()

    async def acquire(self) -> None:
        async with self._lock:
            if self._last is not None:
                wait = self._last + self._interval - self._clock()
                if wait > 0:
                    await self._sleep(wait)
            self._last = self._clock()
