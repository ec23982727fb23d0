"""Rate limiter protocol for dependency injection."""
from typing import Protocol, runtime_checkable


@runtime_checkable
class RateLimiterProtocol(Protocol):
    """Protocol for pacing provider calls."""

    async def acquire(self) -> None:
        """Wait until the next call is allowed."""
        ...
