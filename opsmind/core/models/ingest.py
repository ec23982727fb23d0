"""Ingestion result models."""
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional


class EmbeddingStatus(str, Enum):
    """Per-chunk embedding result."""
    EMBEDDED = "embedded"
    FAILED = "failed"
    SKIPPED = "skipped"  # past the per-document cap


@dataclass(frozen=True)
class EmbeddingOutcome:
    """Embedding result for a single chunk."""
    chunk_index: int
    status: EmbeddingStatus
    reason: Optional[str] = None

    @property
    def embedded(self) -> bool:
        return self.status == EmbeddingStatus.EMBEDDED


@dataclass(frozen=True)
class IngestReport:
    """Summary of one ingested document."""
    document_id: str
    filename: str
    chunk_count: int
    embedded_count: int
    outcomes: list[EmbeddingOutcome] = field(default_factory=list)

    @property
    def failed_count(self) -> int:
        return sum(1 for o in self.outcomes if o.status == EmbeddingStatus.FAILED)

    @property
    def skipped_count(self) -> int:
        return sum(1 for o in self.outcomes if o.status == EmbeddingStatus.SKIPPED)

    def to_dict(self) -> dict:
        return {
            "document_id": self.document_id,
            "filename": self.filename,
            "chunk_count": self.chunk_count,
            "embedded_count": self.embedded_count,
            "failed_count": self.failed_count,
            "skipped_count": self.skipped_count,
        }
