"""Chunk store - iteration over every stored chunk."""

import logging
from typing import Iterator

from ..models.document import ChunkRecord, Document, DocumentSummary
from ..protocols.repository import DocumentRepositoryProtocol

logger = logging.getLogger(__name__)


class ChunkStore:
    """Read/write facade over a document repository."""

    def __init__(self, repository: DocumentRepositoryProtocol):
        self._repository = repository

    def append(self, document: Document) -> None:
        """Store a document. Visible to readers only once stored."""
        self._repository.create(document)
        logger.info(
            f"Stored {document.filename}: {len(document.chunks)} chunks, "
            f"{document.embedded_count} embedded"
        )

    def all_chunks(self) -> Iterator[ChunkRecord]:
        """Lazily yield every chunk of every document in ingestion order.

        Each call iterates a fresh snapshot of the repository.
        """
        for document in self._repository.find_all():
            for chunk in document.chunks:
                yield ChunkRecord(
                    chunk=chunk,
                    filename=document.filename,
                    document_id=document.id,
                    uploaded_at=document.uploaded_at,
                )

    def is_empty(self) -> bool:
        return not any(doc.chunks for doc in self._repository.find_all())

    def summaries(self) -> list[DocumentSummary]:
        """Stored documents, newest first."""
        documents = sorted(
            self._repository.find_all(), key=lambda d: d.uploaded_at, reverse=True
        )
        return [
            DocumentSummary(
                id=doc.id,
                filename=doc.filename,
                chunk_count=len(doc.chunks),
                embedded_count=doc.embedded_count,
                size=doc.size,
                uploaded_at=doc.uploaded_at,
            )
            for doc in documents
        ]
