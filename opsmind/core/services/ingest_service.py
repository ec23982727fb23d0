"""Ingest service - chunk, embed and store documents."""

import asyncio
import logging
from pathlib import Path
from typing import Optional, Sequence

from ..exceptions import IngestError
from ..models.document import Document, DocumentSummary
from ..models.ingest import IngestReport
from .chunk_store import ChunkStore
from .chunker import TextChunker
from .embedding_service import EmbeddingService

logger = logging.getLogger(__name__)


class IngestService:
    """Service for adding documents to the chunk store."""

    def __init__(
        self,
        store: ChunkStore,
        chunker: TextChunker,
        embedding_service: EmbeddingService,
        max_file_bytes: int = 10 * 1024 * 1024,
    ):
        """Initialize ingest service.

        Args:
            store: Chunk store to write to.
            chunker: Text chunker.
            embedding_service: Embedding service.
            max_file_bytes: Max accepted file size for ingest_file.
        """
        self._store = store
        self._chunker = chunker
        self._embedding = embedding_service
        self._max_file_bytes = max_file_bytes

        self._loader: Optional["CompositeLoader"] = None

    @property
    def loader(self):
        """Lazy load document loader."""
        if self._loader is None:
            from opsmind.infrastructure.document_loaders import CompositeLoader

            self._loader = CompositeLoader()
        return self._loader

    async def ingest(
        self,
        raw_text: str,
        filename: str,
        pages: Optional[Sequence[str]] = None,
        size: Optional[int] = None,
    ) -> IngestReport:
        """Chunk, embed and store a document.

        Args:
            raw_text: Full extracted text.
            filename: Original file name.
            pages: Per-page text when real page boundaries are known.
            size: Source size in bytes (defaults to encoded text length).

        Returns:
            Report with chunk and embedding counts.

        Raises:
            IngestError: If no chunk could be produced from the text.
        """
        if not filename:
            raise IngestError("Filename is required")

        if pages:
            chunks = self._chunker.chunk_pages(pages)
        else:
            chunks = self._chunker.chunk(raw_text or "")

        if not chunks:
            raise IngestError(f"No text found in {filename}")

        logger.info(f"Processing {filename}: {len(chunks)} chunks")

        embedded_chunks, outcomes = await self._embedding.embed_chunks(chunks)

        document = Document(
            filename=filename,
            content=raw_text,
            chunks=tuple(embedded_chunks),
            size=size if size is not None else len(raw_text.encode("utf-8")),
        )
        # File-backed repositories rewrite on create; keep that off the loop.
        await asyncio.to_thread(self._store.append, document)

        report = IngestReport(
            document_id=document.id,
            filename=filename,
            chunk_count=len(document.chunks),
            embedded_count=document.embedded_count,
            outcomes=outcomes,
        )
        logger.info(
            f"Ingested {filename}: {report.embedded_count}/{report.chunk_count} "
            f"chunks embedded ({report.failed_count} failed, "
            f"{report.skipped_count} over cap)"
        )
        return report

    async def ingest_file(self, file_path: str | Path) -> IngestReport:
        """Load a file from disk and ingest it.

        Raises:
            IngestError: If the file is missing, too large, of an
                unsupported type or yields no text.
        """
        path = Path(file_path)
        if not path.is_file():
            raise IngestError(f"File not found: {path}")

        size = path.stat().st_size
        if size > self._max_file_bytes:
            raise IngestError(
                f"{path.name} is {size} bytes, limit is {self._max_file_bytes}"
            )

        if not self.loader.supports(path):
            raise IngestError(f"Unsupported file type: {path.suffix or path.name}")

        source = self.loader.load(path)
        return await self.ingest(
            source.text, path.name, pages=source.pages, size=size
        )

    def list_documents(self) -> list[DocumentSummary]:
        """Stored documents, newest first."""
        return self._store.summaries()
