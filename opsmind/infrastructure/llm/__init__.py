"""LLM client implementations."""
from .chat_client import ChatCompletionClient

__all__ = ["ChatCompletionClient"]
