"""LLM protocol for dependency injection."""
from typing import Protocol, runtime_checkable


@runtime_checkable
class LLMProtocol(Protocol):
    """Protocol for a text-generation provider."""

    async def generate(self, prompt: str) -> str:
        """Generate a completion for the prompt.

        Args:
            prompt: Full prompt including context and question.

        Returns:
            Generated text.

        Raises:
            Exception: Any provider failure (timeout, quota, unavailable).
        """
        ...
