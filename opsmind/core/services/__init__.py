"""Core business services."""
from .answer_service import AnswerService
from .ask_service import AskService
from .chunk_store import ChunkStore
from .chunker import TextChunker
from .context_builder import ContextBuilder
from .embedding_service import EmbeddingService
from .ingest_service import IngestService
from .ranking_service import RankingService

__all__ = [
    "AnswerService",
    "AskService",
    "ChunkStore",
    "TextChunker",
    "ContextBuilder",
    "EmbeddingService",
    "IngestService",
    "RankingService",
]
