"""Document repository implementations."""
from .memory_repository import InMemoryDocumentRepository
from .json_repository import JsonFileDocumentRepository

__all__ = ["InMemoryDocumentRepository", "JsonFileDocumentRepository"]
