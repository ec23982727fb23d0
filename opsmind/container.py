import logging
from dataclasses import dataclass, field
from typing import Any, Callable, TypeVar

from .config.settings import Settings

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass
class Container:
    _factories: dict[type, Callable[[], Any]] = field(default_factory=dict)
    _singletons: dict[type, Any] = field(default_factory=dict)
    _singleton_flags: set[type] = field(default_factory=set)

    def register(
        self, interface: type[T], factory: Callable[[], T], singleton: bool = False
    ) -> None:
        """Register factory for interface.

        Args:
            interface: Interface type.
            factory: Factory function.
            singleton: Whether to cache instance.
        """
        self._factories[interface] = factory
        if singleton:
            self._singleton_flags.add(interface)

    def resolve(self, interface: type[T]) -> T:
        if interface in self._singletons:
            return self._singletons[interface]

        if interface not in self._factories:
            raise KeyError(f"No factory registered for {interface}")

        instance = self._factories[interface]()

        if interface in self._singleton_flags:
            self._singletons[interface] = instance

        return instance

    def reset(self) -> None:
        """Reset singletons (for testing)."""
        self._singletons.clear()


def _embedder_factory(settings: Settings) -> Callable[[], Any]:
    if settings.embedding_backend == "sentence_transformer":
        from .infrastructure.embeddings.sentence_transformer import (
            SentenceTransformerEmbedder,
        )

        return lambda: SentenceTransformerEmbedder(settings.embedding_model)

    if settings.embedding_backend == "openai":
        from .infrastructure.embeddings.openai_embedder import OpenAIEmbedder

        return lambda: OpenAIEmbedder(
            base_url=settings.embedding_base_url,
            model=settings.embedding_model,
            api_key=settings.embedding_api_key,
        )

    raise ValueError(f"Unknown embedding backend: {settings.embedding_backend}")


def _rate_limiter_factory(settings: Settings) -> Callable[[], Any]:
    from .infrastructure.rate_limiters import (
        FixedIntervalRateLimiter,
        TokenBucketRateLimiter,
    )

    if settings.rate_limiter not in ("fixed", "token_bucket"):
        raise ValueError(f"Unknown rate limiter: {settings.rate_limiter}")

    interval = settings.embedding_delay_ms / 1000

    if settings.rate_limiter == "fixed" or interval <= 0:
        return lambda: FixedIntervalRateLimiter(interval=max(interval, 0.0))

    return lambda: TokenBucketRateLimiter(
        rate=1 / interval, capacity=settings.rate_limiter_burst
    )


def _repository_factory(settings: Settings) -> Callable[[], Any]:
    from .infrastructure.repositories import (
        InMemoryDocumentRepository,
        JsonFileDocumentRepository,
    )

    if settings.store_backend == "memory":
        return InMemoryDocumentRepository

    if settings.store_backend == "json":
        return lambda: JsonFileDocumentRepository(settings.store_path)

    raise ValueError(f"Unknown store backend: {settings.store_backend}")


def configure_container(settings: Settings) -> Container:
    """Build a container with all dependencies.

    Args:
        settings: Application settings.

    Returns:
        Configured container.
    """
    from .core.protocols.embedder import EmbedderProtocol
    from .core.protocols.llm import LLMProtocol
    from .core.protocols.rate_limiter import RateLimiterProtocol
    from .core.protocols.repository import DocumentRepositoryProtocol
    from .core.services.answer_service import AnswerService
    from .core.services.ask_service import AskService
    from .core.services.chunk_store import ChunkStore
    from .core.services.chunker import TextChunker
    from .core.services.context_builder import ContextBuilder
    from .core.services.embedding_service import EmbeddingService
    from .core.services.ingest_service import IngestService
    from .core.services.ranking_service import RankingService
    from .core.strategies.scoring import KeywordScoringStrategy
    from .infrastructure.llm.chat_client import ChatCompletionClient

    container = Container()

    container.register(EmbedderProtocol, _embedder_factory(settings), singleton=True)

    container.register(
        RateLimiterProtocol, _rate_limiter_factory(settings), singleton=True
    )

    container.register(
        DocumentRepositoryProtocol, _repository_factory(settings), singleton=True
    )

    container.register(
        LLMProtocol,
        lambda: ChatCompletionClient(
            base_url=settings.llm_base_url,
            model=settings.llm_model,
            api_key=settings.llm_api_key,
            max_tokens=settings.llm_max_tokens,
            temperature=settings.llm_temperature,
            timeout=settings.llm_timeout,
        ),
        singleton=True,
    )

    container.register(
        ChunkStore,
        lambda: ChunkStore(container.resolve(DocumentRepositoryProtocol)),
        singleton=True,
    )

    container.register(
        TextChunker,
        lambda: TextChunker(
            chunk_size=settings.chunk_size,
            chunk_overlap=settings.chunk_overlap,
            min_chunk_length=settings.min_chunk_length,
            page_size=settings.page_size_chars,
        ),
        singleton=True,
    )

    container.register(
        EmbeddingService,
        lambda: EmbeddingService(
            embedder=container.resolve(EmbedderProtocol),
            rate_limiter=container.resolve(RateLimiterProtocol),
            max_chunks=settings.embedding_max_chunks,
        ),
        singleton=True,
    )

    container.register(
        RankingService,
        lambda: RankingService(
            top_k=settings.rag_top_k,
            vector_threshold=settings.rag_vector_threshold,
            fallback=KeywordScoringStrategy(
                weight=settings.rag_keyword_weight,
                min_length=settings.rag_keyword_min_length,
            ),
        ),
        singleton=True,
    )

    container.register(
        ContextBuilder, lambda: ContextBuilder(top_k=settings.rag_top_k), singleton=True
    )

    container.register(
        AnswerService,
        lambda: AnswerService(container.resolve(LLMProtocol)),
        singleton=True,
    )

    container.register(
        IngestService,
        lambda: IngestService(
            store=container.resolve(ChunkStore),
            chunker=container.resolve(TextChunker),
            embedding_service=container.resolve(EmbeddingService),
            max_file_bytes=settings.max_file_bytes,
        ),
        singleton=True,
    )

    container.register(
        AskService,
        lambda: AskService(
            store=container.resolve(ChunkStore),
            embedding_service=container.resolve(EmbeddingService),
            ranking_service=container.resolve(RankingService),
            context_builder=container.resolve(ContextBuilder),
            answer_service=container.resolve(AnswerService),
        ),
        singleton=True,
    )

    logger.info("Container configured")
    return container
