"""Protocol interfaces for dependency injection."""
from .embedder import EmbedderProtocol
from .llm import LLMProtocol
from .rate_limiter import RateLimiterProtocol
from .repository import DocumentRepositoryProtocol

__all__ = [
    "EmbedderProtocol",
    "LLMProtocol",
    "RateLimiterProtocol",
    "DocumentRepositoryProtocol",
]
