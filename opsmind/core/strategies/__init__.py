"""Scoring strategies."""
from .scoring import (
    KeywordScoringStrategy,
    ScoringStrategy,
    VectorScoringStrategy,
    cosine_similarity,
    extract_keywords,
)

__all__ = [
    "ScoringStrategy",
    "VectorScoringStrategy",
    "KeywordScoringStrategy",
    "cosine_similarity",
    "extract_keywords",
]
