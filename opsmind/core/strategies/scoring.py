import logging
import string
from abc import ABC, abstractmethod
from typing import Iterable, Optional, Sequence

import numpy as np

from ..models.document import ChunkRecord
from ..models.search import RankedChunk, ScoringMethod

logger = logging.getLogger(__name__)


def cosine_similarity(a: Sequence[float], b: Sequence[float]) -> float:
    """Cosine of the angle between two vectors.

    Returns 0.0 when either vector has zero magnitude.

    Raises:
        ValueError: If the vectors differ in dimension.
    """
    va = np.asarray(a, dtype=float)
    vb = np.asarray(b, dtype=float)
    if va.shape != vb.shape:
        raise ValueError(f"Dimension mismatch: {va.shape[0]} != {vb.shape[0]}")

    norm = np.linalg.norm(va) * np.linalg.norm(vb)
    if norm == 0:
        return 0.0
    return float(np.dot(va, vb) / norm)


def extract_keywords(question: str, min_length: int = 3) -> list[str]:
    """Distinct lowercase whitespace tokens longer than min_length.

    Surrounding punctuation is stripped so "policy?" matches "policy".
    """
    keywords: dict[str, None] = {}
    for token in question.lower().split():
        token = token.strip(string.punctuation)
        if len(token) > min_length:
            keywords[token] = None
    return list(keywords)


def sort_by_score(results: Iterable[RankedChunk]) -> list[RankedChunk]:
    """Descending by score; equal scores keep encounter order."""
    return sorted(results, key=lambda r: r.score, reverse=True)


class ScoringStrategy(ABC):
    """Base class for scoring strategies."""

    method: ScoringMethod

    @abstractmethod
    def score(
        self,
        question: str,
        query_vector: Optional[Sequence[float]],
        records: Iterable[ChunkRecord],
    ) -> list[RankedChunk]:
        """Score every record and return them sorted descending."""
        ...


class VectorScoringStrategy(ScoringStrategy):
    """Cosine similarity between the query vector and chunk vectors."""

    method = ScoringMethod.VECTOR

    def score(
        self,
        question: str,
        query_vector: Optional[Sequence[float]],
        records: Iterable[ChunkRecord],
    ) -> list[RankedChunk]:
        results = []
        mismatched = 0

        for record in records:
            value = 0.0
            embedding = record.embedding
            if query_vector is not None and embedding is not None:
                if len(embedding) == len(query_vector):
                    value = cosine_similarity(query_vector, embedding)
                else:
                    mismatched += 1
            results.append(RankedChunk(record=record, score=value, method=self.method))

        if mismatched:
            logger.warning(
                f"Vector scoring: {mismatched} chunks skipped (dimension mismatch)"
            )

        return sort_by_score(results)


class KeywordScoringStrategy(ScoringStrategy):
    """Count of question keywords found as substrings of the chunk text."""

    method = ScoringMethod.KEYWORD

    def __init__(self, weight: float = 0.1, min_length: int = 3):
        """Initialize strategy.

        Args:
            weight: Score added per matched keyword.
            min_length: Tokens must be longer than this to count as keywords.
        """
        self._weight = weight
        self._min_length = min_length

    def score(
        self,
        question: str,
        query_vector: Optional[Sequence[float]],
        records: Iterable[ChunkRecord],
    ) -> list[RankedChunk]:
        keywords = extract_keywords(question, self._min_length)

        results = []
        for record in records:
            text = record.text.lower()
            matches = sum(1 for kw in keywords if kw in text)
            results.append(
                RankedChunk(record=record, score=matches * self._weight, method=self.method)
            )

        logger.debug(f"Keyword scoring with {keywords}")
        return sort_by_score(results)
