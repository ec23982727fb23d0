"""Ranking service - vector similarity with keyword fallback."""

import logging
from typing import Iterable, Optional, Sequence

from ..models.document import ChunkRecord
from ..models.search import RankedChunk, RankingResult
from ..strategies.scoring import (
    KeywordScoringStrategy,
    ScoringStrategy,
    VectorScoringStrategy,
)

logger = logging.getLogger(__name__)


class RankingService:
    """Rank chunks against a question.

    The primary strategy scores by cosine similarity. When it yields nothing
    or its best score is under ``vector_threshold`` the fallback strategy
    rescores every chunk by keyword matches instead.
    """

    def __init__(
        self,
        top_k: int = 3,
        vector_threshold: float = 0.01,
        primary: Optional[ScoringStrategy] = None,
        fallback: Optional[ScoringStrategy] = None,
    ):
        """Initialize ranking service.

        Args:
            top_k: Number of results to keep.
            vector_threshold: Minimum top score for the primary strategy
                to be used.
            primary: Primary strategy (vector similarity by default).
            fallback: Fallback strategy (keyword matching by default).
        """
        self._top_k = top_k
        self._vector_threshold = vector_threshold
        self._primary = primary or VectorScoringStrategy()
        self._fallback = fallback or KeywordScoringStrategy()

    def rank(
        self,
        question: str,
        query_vector: Optional[Sequence[float]],
        records: Iterable[ChunkRecord],
    ) -> RankingResult:
        """Rank records for the question.

        Args:
            question: User question (used by keyword scoring).
            query_vector: Embedded question.
            records: Candidate chunks in encounter order.

        Returns:
            At most top_k chunks with positive scores, sorted descending,
            and the strategy that produced them.
        """
        candidates = list(records)

        ranked = self._primary.score(question, query_vector, candidates)
        method = self._primary.method

        if not ranked or ranked[0].score < self._vector_threshold:
            top = ranked[0].score if ranked else None
            logger.info(
                f"{self._primary.method.value} scoring weak (top={top}), "
                f"switching to {self._fallback.method.value} scoring"
            )
            ranked = self._fallback.score(question, query_vector, candidates)
            method = self._fallback.method

        results = self._select(ranked)

        logger.info(
            f"Ranking: {len(results)}/{self._top_k} chunks via {method.value} "
            f"for '{question[:50]}...'"
        )
        return RankingResult(chunks=tuple(results), method=method)

    def _select(self, ranked: list[RankedChunk]) -> list[RankedChunk]:
        """Top-k, then drop non-positive scores."""
        return [r for r in ranked[: self._top_k] if r.score > 0]
