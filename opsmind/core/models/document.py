"""Document domain models."""
import uuid
from dataclasses import dataclass, field, replace
from datetime import datetime, timezone
from typing import Optional, Sequence


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(frozen=True)
class Chunk:
    """Window of document text, the unit of retrieval."""
    text: str
    chunk_index: int
    page_number: int = 1
    embedding: Optional[tuple[float, ...]] = None

    def __post_init__(self) -> None:
        if not self.text:
            raise ValueError("Chunk text must not be empty")
        if self.chunk_index < 0:
            raise ValueError(f"Invalid chunk index: {self.chunk_index}")
        if self.page_number < 1:
            raise ValueError(f"Invalid page number: {self.page_number}")
        if self.embedding is not None:
            if len(self.embedding) == 0:
                raise ValueError("Embedding must not be empty")
            object.__setattr__(
                self, "embedding", tuple(float(x) for x in self.embedding)
            )

    @property
    def has_embedding(self) -> bool:
        return self.embedding is not None

    def with_embedding(self, embedding: Sequence[float]) -> "Chunk":
        """Copy of the chunk with a vector attached."""
        return replace(self, embedding=tuple(embedding))


@dataclass(frozen=True)
class Document:
    """Ingested document with its ordered chunks."""
    filename: str
    content: str
    chunks: tuple[Chunk, ...] = ()
    size: int = 0
    uploaded_at: datetime = field(default_factory=_utcnow)
    id: str = field(default_factory=lambda: uuid.uuid4().hex)

    def __post_init__(self) -> None:
        object.__setattr__(self, "chunks", tuple(self.chunks))
        for expected, chunk in enumerate(self.chunks):
            if chunk.chunk_index != expected:
                raise ValueError(
                    f"Chunk indices must be contiguous from 0: "
                    f"expected {expected}, got {chunk.chunk_index}"
                )

    @property
    def embedded_count(self) -> int:
        return sum(1 for c in self.chunks if c.has_embedding)


@dataclass(frozen=True)
class ChunkRecord:
    """Chunk paired with its owning document's identity."""
    chunk: Chunk
    filename: str
    document_id: str
    uploaded_at: datetime

    @property
    def text(self) -> str:
        return self.chunk.text

    @property
    def page_number(self) -> int:
        return self.chunk.page_number

    @property
    def embedding(self) -> Optional[tuple[float, ...]]:
        return self.chunk.embedding


@dataclass(frozen=True)
class SourceText:
    """Extracted text of a file, with real page boundaries when known."""
    text: str
    pages: Optional[tuple[str, ...]] = None


@dataclass(frozen=True)
class DocumentSummary:
    """Listing entry for a stored document."""
    id: str
    filename: str
    chunk_count: int
    embedded_count: int
    size: int
    uploaded_at: datetime
