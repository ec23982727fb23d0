"""Rate limiter implementations."""
from .fixed_interval import FixedIntervalRateLimiter
from .token_bucket import TokenBucketRateLimiter

__all__ = ["FixedIntervalRateLimiter", "TokenBucketRateLimiter"]
