"""Domain models."""
from .document import Chunk, ChunkRecord, Document, DocumentSummary, SourceText
from .search import Context, RankedChunk, RankingResult, ScoringMethod, SourceCitation
from .answer import Answer, AnswerMode, AskResponse, AskStatus
from .ingest import EmbeddingOutcome, EmbeddingStatus, IngestReport

__all__ = [
    "Chunk",
    "ChunkRecord",
    "Document",
    "DocumentSummary",
    "SourceText",
    "Context",
    "RankedChunk",
    "RankingResult",
    "ScoringMethod",
    "SourceCitation",
    "Answer",
    "AnswerMode",
    "AskResponse",
    "AskStatus",
    "EmbeddingOutcome",
    "EmbeddingStatus",
    "IngestReport",
]
