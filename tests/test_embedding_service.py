"""
Tests for opsmind/core/services/embedding_service.py
Failure-tolerant embedding with per-document cap and pacing.
"""
from unittest.mock import AsyncMock

import pytest

from opsmind.core.models.document import Chunk
from opsmind.core.models.ingest import EmbeddingStatus
from opsmind.core.services.embedding_service import EmbeddingService

from conftest import FakeEmbedder, NoWaitRateLimiter


def _chunks(n: int) -> list[Chunk]:
    return [Chunk(text=f"chunk number {i}", chunk_index=i) for i in range(n)]


class TestEmbed:
    """Test single-text embedding."""

    async def test_returns_vector(self):
        service = EmbeddingService(FakeEmbedder(default=[0.5, 0.5]), NoWaitRateLimiter())
        assert await service.embed("text") == [0.5, 0.5]

    async def test_provider_error_returns_none(self):
        service = EmbeddingService(FakeEmbedder(fail_all=True), NoWaitRateLimiter())
        assert await service.embed("text") is None

    async def test_empty_vector_returns_none(self):
        embedder = AsyncMock()
        embedder.embed.return_value = []
        service = EmbeddingService(embedder, NoWaitRateLimiter())
        assert await service.embed("text") is None

    async def test_query_not_paced(self):
        limiter = NoWaitRateLimiter()
        service = EmbeddingService(FakeEmbedder(), limiter)
        await service.embed_query("question")
        assert limiter.acquired == 0

    async def test_query_failure_returns_none(self):
        service = EmbeddingService(FakeEmbedder(fail_all=True), NoWaitRateLimiter())
        assert await service.embed_query("question") is None


class TestEmbedChunks:
    """Test document embedding."""

    async def test_all_chunks_embedded(self):
        limiter = NoWaitRateLimiter()
        service = EmbeddingService(FakeEmbedder(default=[1.0, 0.0]), limiter)

        chunks, outcomes = await service.embed_chunks(_chunks(3))

        assert all(c.embedding == (1.0, 0.0) for c in chunks)
        assert [o.status for o in outcomes] == [EmbeddingStatus.EMBEDDED] * 3
        assert limiter.acquired == 3

    async def test_cap_limits_embedded_chunks(self):
        embedder = FakeEmbedder()
        service = EmbeddingService(embedder, NoWaitRateLimiter(), max_chunks=2)

        chunks, outcomes = await service.embed_chunks(_chunks(5))

        assert len(chunks) == 5
        assert [c.has_embedding for c in chunks] == [True, True, False, False, False]
        assert [o.status for o in outcomes[2:]] == [EmbeddingStatus.SKIPPED] * 3
        assert len(embedder.calls) == 2

    async def test_failed_chunk_kept_without_vector(self):
        embedder = FakeEmbedder(fail_on=["chunk number 1"])
        service = EmbeddingService(embedder, NoWaitRateLimiter())

        chunks, outcomes = await service.embed_chunks(_chunks(3))

        assert [c.has_embedding for c in chunks] == [True, False, True]
        assert outcomes[1].status == EmbeddingStatus.FAILED
        assert outcomes[1].reason
        assert [c.chunk_index for c in chunks] == [0, 1, 2]

    async def test_all_failures_never_raise(self):
        service = EmbeddingService(FakeEmbedder(fail_all=True), NoWaitRateLimiter())
        chunks, outcomes = await service.embed_chunks(_chunks(4))

        assert not any(c.has_embedding for c in chunks)
        assert all(o.status == EmbeddingStatus.FAILED for o in outcomes)

    async def test_chunk_text_unchanged(self):
        service = EmbeddingService(FakeEmbedder(), NoWaitRateLimiter())
        original = _chunks(2)
        chunks, _ = await service.embed_chunks(original)
        assert [c.text for c in chunks] == [c.text for c in original]

    async def test_empty_input(self):
        service = EmbeddingService(FakeEmbedder(), NoWaitRateLimiter())
        assert await service.embed_chunks([]) == ([], [])

    @pytest.mark.parametrize("cap", [0, 1, 50])
    async def test_one_outcome_per_chunk(self, cap):
        service = EmbeddingService(FakeEmbedder(), NoWaitRateLimiter(), max_chunks=cap)
        chunks, outcomes = await service.embed_chunks(_chunks(7))
        assert [o.chunk_index for o in outcomes] == list(range(7))
        assert sum(o.embedded for o in outcomes) == min(cap, 7)
