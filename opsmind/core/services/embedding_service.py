"""Embedding service - failure-tolerant, rate-limited provider calls."""

import logging
from typing import Optional, Sequence

from ..models.document import Chunk
from ..models.ingest import EmbeddingOutcome, EmbeddingStatus
from ..protocols.embedder import EmbedderProtocol
from ..protocols.rate_limiter import RateLimiterProtocol

logger = logging.getLogger(__name__)


class EmbeddingService:
    """Wraps an embedding provider so failures become missing vectors."""

    def __init__(
        self,
        embedder: EmbedderProtocol,
        rate_limiter: RateLimiterProtocol,
        max_chunks: int = 50,
        progress_every: int = 5,
    ):
        """Initialize embedding service.

        Args:
            embedder: Embedding provider.
            rate_limiter: Pacing for document-embedding calls.
            max_chunks: Max chunks embedded per document.
            progress_every: Log progress every N chunks.
        """
        self._embedder = embedder
        self._rate_limiter = rate_limiter
        self._max_chunks = max_chunks
        self._progress_every = progress_every

    @property
    def max_chunks(self) -> int:
        return self._max_chunks

    async def embed(self, text: str) -> Optional[list[float]]:
        """Embed text.

        Args:
            text: Text to embed.

        Returns:
            Vector, or None if the provider failed or returned nothing.
        """
        try:
            vector = await self._embedder.embed(text)
        except Exception as e:
            logger.error(f"Embedding error: {e}")
            return None

        if vector is None or len(vector) == 0:
            logger.error("Embedding error: provider returned an empty vector")
            return None

        return [float(x) for x in vector]

    async def embed_query(self, question: str) -> Optional[list[float]]:
        """Embed a question. Not paced by the rate limiter."""
        vector = await self.embed(question)
        if vector is None:
            logger.error(f"Failed to embed question: '{question[:50]}...'")
        return vector

    async def embed_chunks(
        self, chunks: Sequence[Chunk]
    ) -> tuple[list[Chunk], list[EmbeddingOutcome]]:
        """Embed a document's chunks, up to the per-document cap.

        Args:
            chunks: Chunks in index order.

        Returns:
            Chunks (with vectors where embedding succeeded) and one
            outcome per chunk.
        """
        to_embed = chunks[: self._max_chunks]
        if len(chunks) > self._max_chunks:
            logger.warning(
                f"Limiting embedding to first {self._max_chunks} chunks "
                f"(of {len(chunks)})"
            )

        result: list[Chunk] = []
        outcomes: list[EmbeddingOutcome] = []

        for i, chunk in enumerate(to_embed, 1):
            await self._rate_limiter.acquire()
            vector = await self.embed(chunk.text)

            if vector is None:
                result.append(chunk)
                outcomes.append(
                    EmbeddingOutcome(
                        chunk_index=chunk.chunk_index,
                        status=EmbeddingStatus.FAILED,
                        reason="provider error",
                    )
                )
                logger.warning(f"Chunk {chunk.chunk_index} stored without embedding")
            else:
                result.append(chunk.with_embedding(vector))
                outcomes.append(
                    EmbeddingOutcome(
                        chunk_index=chunk.chunk_index, status=EmbeddingStatus.EMBEDDED
                    )
                )

            if i % self._progress_every == 0:
                logger.info(f"Embedded {i}/{len(to_embed)} chunks")

        for chunk in chunks[self._max_chunks :]:
            result.append(chunk)
            outcomes.append(
                EmbeddingOutcome(
                    chunk_index=chunk.chunk_index,
                    status=EmbeddingStatus.SKIPPED,
                    reason=f"beyond cap of {self._max_chunks} chunks",
                )
            )

        return result, outcomes
