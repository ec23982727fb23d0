"""Document repository protocol for dependency injection."""
from typing import Protocol, Sequence, runtime_checkable

from ..models.document import Document


@runtime_checkable
class DocumentRepositoryProtocol(Protocol):
    """Protocol for document storage."""

    def create(self, document: Document) -> None:
        """Store a fully chunked document.

        Args:
            document: Document to store.
        """
        ...

    def find_all(self) -> Sequence[Document]:
        """Get all stored documents in insertion order.

        Returns:
            Snapshot of stored documents.
        """
        ...
