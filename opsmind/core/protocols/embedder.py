"""Embedder protocol for dependency injection."""
from typing import Protocol, runtime_checkable


@runtime_checkable
class EmbedderProtocol(Protocol):
    """Protocol for an embedding provider."""

    async def embed(self, text: str) -> list[float]:
        """Embed text into a fixed-dimension vector.

        Args:
            text: Text to embed.

        Returns:
            Embedding vector.

        Raises:
            Exception: Any provider failure (network, quota, bad response).
        """
        ...
