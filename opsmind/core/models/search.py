"""Ranking and context models."""
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from .document import ChunkRecord


class ScoringMethod(str, Enum):
    """Strategy that produced a score."""
    VECTOR = "vector"
    KEYWORD = "keyword"


@dataclass(frozen=True)
class RankedChunk:
    """Chunk scored against a query."""
    record: ChunkRecord
    score: float
    method: ScoringMethod

    @property
    def text(self) -> str:
        return self.record.text

    @property
    def filename(self) -> str:
        return self.record.filename

    @property
    def page_number(self) -> int:
        return self.record.page_number


@dataclass(frozen=True)
class RankingResult:
    """Ranked chunks and the strategy whose scores were used."""
    chunks: tuple[RankedChunk, ...]
    method: Optional[ScoringMethod]


@dataclass(frozen=True)
class SourceCitation:
    """Citation for one chunk used in a context."""
    filename: str
    page: Optional[int]
    score: float

    def to_dict(self) -> dict:
        return {"filename": self.filename, "page": self.page, "score": self.score}


@dataclass(frozen=True)
class Context:
    """Concatenated chunk texts plus the chunks they came from."""
    text: str
    chunks: tuple[RankedChunk, ...] = ()

    @property
    def is_empty(self) -> bool:
        return not self.chunks

    @property
    def sources(self) -> list[SourceCitation]:
        return [
            SourceCitation(filename=c.filename, page=c.page_number, score=c.score)
            for c in self.chunks
        ]
