"""Answer and ask-response models."""
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

from .search import ScoringMethod, SourceCitation


class AnswerMode(str, Enum):
    """How the answer text was produced."""
    SYNTHESIZED = "synthesized"  # generation provider answered
    FALLBACK = "fallback"        # provider failed, raw context returned
    NONE = "none"                # no synthesis attempted


class AskStatus(str, Enum):
    """Terminal state of an ask request."""
    ANSWERED = "answered"
    NO_DOCUMENTS = "no_documents"
    NO_RELEVANT_CONTEXT = "no_relevant_context"
    INVALID_QUESTION = "invalid_question"
    EMBEDDING_FAILED = "embedding_failed"


@dataclass(frozen=True)
class Answer:
    """Synthesized answer with its sources."""
    text: str
    sources: list[SourceCitation] = field(default_factory=list)
    mode: AnswerMode = AnswerMode.SYNTHESIZED


@dataclass(frozen=True)
class AskResponse:
    """Response returned to the presentation layer."""
    status: AskStatus
    answer: str
    sources: list[SourceCitation] = field(default_factory=list)
    strategy_used: Optional[ScoringMethod] = None
    mode: AnswerMode = AnswerMode.NONE
    error: Optional[str] = None

    @property
    def is_error(self) -> bool:
        return self.status == AskStatus.EMBEDDING_FAILED

    @property
    def confidence(self) -> float:
        """Top source score, 0 when nothing was found."""
        return self.sources[0].score if self.sources else 0.0

    def to_dict(self) -> dict:
        return {
            "status": self.status.value,
            "answer": self.answer,
            "sources": [s.to_dict() for s in self.sources],
            "strategy_used": self.strategy_used.value if self.strategy_used else None,
            "mode": self.mode.value,
            "confidence": self.confidence,
            "error": self.error,
        }
