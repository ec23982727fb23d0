"""
Pytest configuration for the OpsMind test suite.

Provides fake providers so no test touches the network.
"""
from datetime import datetime, timedelta, timezone
from typing import Optional, Sequence

import pytest

from opsmind.core.models.document import Chunk, Document
from opsmind.core.services.answer_service import AnswerService
from opsmind.core.services.ask_service import AskService
from opsmind.core.services.chunk_store import ChunkStore
from opsmind.core.services.chunker import TextChunker
from opsmind.core.services.context_builder import ContextBuilder
from opsmind.core.services.embedding_service import EmbeddingService
from opsmind.core.services.ingest_service import IngestService
from opsmind.core.services.ranking_service import RankingService
from opsmind.infrastructure.repositories import InMemoryDocumentRepository


class FakeEmbedder:
    """Returns vectors from a lookup table, or a default vector."""

    def __init__(
        self,
        vectors: Optional[dict[str, list[float]]] = None,
        default: Optional[list[float]] = None,
        fail_on: Sequence[str] = (),
        fail_all: bool = False,
    ):
        self.vectors = vectors or {}
        self.default = default if default is not None else [1.0, 0.0]
        self.fail_on = set(fail_on)
        self.fail_all = fail_all
        self.calls: list[str] = []

    async def embed(self, text: str) -> list[float]:
        self.calls.append(text)
        if self.fail_all or text in self.fail_on:
            raise RuntimeError("embedding provider unavailable")
        return self.vectors.get(text, self.default)


class FakeLLM:
    """Echoes a fixed answer or raises."""

    def __init__(self, answer: str = "Synthesized answer.", error: Optional[Exception] = None):
        self.answer = answer
        self.error = error
        self.prompts: list[str] = []

    async def generate(self, prompt: str) -> str:
        self.prompts.append(prompt)
        if self.error is not None:
            raise self.error
        return self.answer


class NoWaitRateLimiter:
    """Counts acquisitions without waiting."""

    def __init__(self):
        self.acquired = 0

    async def acquire(self) -> None:
        self.acquired += 1


def make_document(
    filename: str,
    texts: Sequence[str],
    embeddings: Optional[Sequence[Optional[Sequence[float]]]] = None,
    uploaded_at: Optional[datetime] = None,
) -> Document:
    """Build a document with one chunk per text."""
    embeddings = embeddings or [None] * len(texts)
    chunks = tuple(
        Chunk(
            text=text,
            chunk_index=i,
            page_number=1,
            embedding=tuple(vec) if vec is not None else None,
        )
        for i, (text, vec) in enumerate(zip(texts, embeddings))
    )
    return Document(
        filename=filename,
        content="\n".join(texts),
        chunks=chunks,
        size=sum(len(t) for t in texts),
        uploaded_at=uploaded_at or datetime(2024, 1, 1, tzinfo=timezone.utc),
    )


@pytest.fixture
def repository():
    return InMemoryDocumentRepository()


@pytest.fixture
def store(repository):
    return ChunkStore(repository)


@pytest.fixture
def embedder():
    return FakeEmbedder()


@pytest.fixture
def llm():
    return FakeLLM()


@pytest.fixture
def rate_limiter():
    return NoWaitRateLimiter()


@pytest.fixture
def embedding_service(embedder, rate_limiter):
    return EmbeddingService(embedder=embedder, rate_limiter=rate_limiter, max_chunks=50)


@pytest.fixture
def ask_service(store, embedding_service, llm):
    return AskService(
        store=store,
        embedding_service=embedding_service,
        ranking_service=RankingService(top_k=3, vector_threshold=0.01),
        context_builder=ContextBuilder(top_k=3),
        answer_service=AnswerService(llm),
    )


@pytest.fixture
def ingest_service(store, embedding_service):
    return IngestService(
        store=store,
        chunker=TextChunker(chunk_size=1000, chunk_overlap=200),
        embedding_service=embedding_service,
    )


@pytest.fixture
def later():
    """Timestamps one hour apart."""
    base = datetime(2024, 1, 1, tzinfo=timezone.utc)
    return lambda n: base + timedelta(hours=n)
