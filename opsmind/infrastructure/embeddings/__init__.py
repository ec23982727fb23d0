"""Embedding provider implementations."""
from .openai_embedder import OpenAIEmbedder

__all__ = ["OpenAIEmbedder"]
