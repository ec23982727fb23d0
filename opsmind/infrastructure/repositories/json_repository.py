import json
import logging
import os
import tempfile
from datetime import datetime
from pathlib import Path
from typing import Any, Sequence

from opsmind.core.models.document import Chunk, Document

from .memory_repository import InMemoryDocumentRepository

logger = logging.getLogger(__name__)


def document_to_dict(document: Document) -> dict[str, Any]:
    return {
        "id": document.id,
        "filename": document.filename,
        "content": document.content,
        "size": document.size,
        "uploaded_at": document.uploaded_at.isoformat(),
        "chunks": [
            {
                "text": c.text,
                "chunk_index": c.chunk_index,
                "page_number": c.page_number,
                "embedding": list(c.embedding) if c.embedding is not None else None,
            }
            for c in document.chunks
        ],
    }


def document_from_dict(data: dict[str, Any]) -> Document:
    chunks = tuple(
        Chunk(
            text=c["text"],
            chunk_index=c["chunk_index"],
            page_number=c.get("page_number", 1),
            embedding=tuple(c["embedding"]) if c.get("embedding") else None,
        )
        for c in data.get("chunks", [])
    )
    return Document(
        id=data["id"],
        filename=data["filename"],
        content=data.get("content", ""),
        size=data.get("size", 0),
        uploaded_at=datetime.fromisoformat(data["uploaded_at"]),
        chunks=chunks,
    )


class JsonFileDocumentRepository(InMemoryDocumentRepository):
    """Document storage persisted to a single JSON file.

    The file is loaded once on startup and rewritten (write to a temp file,
    then atomic replace) on every create.
    """

    def __init__(self, path: str | Path):
        """Initialize repository.

        Args:
            path: JSON file path. Created on first write.
        """
        self._path = Path(path)
        super().__init__(self._load())

    def _load(self) -> list[Document]:
        if not self._path.exists():
            return []

        with self._path.open(encoding="utf-8") as f:
            data = json.load(f)

        documents = [document_from_dict(d) for d in data.get("documents", [])]
        logger.info(f"Loaded {len(documents)} documents from {self._path}")
        return documents

    def _write(self, documents: Sequence[Document]) -> None:
        self._path.parent.mkdir(parents=True, exist_ok=True)
        payload = {"documents": [document_to_dict(d) for d in documents]}

        fd, tmp_path = tempfile.mkstemp(
            dir=self._path.parent, prefix=f".{self._path.name}.", suffix=".tmp"
        )
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                json.dump(payload, f, ensure_ascii=False)
            os.replace(tmp_path, self._path)
        except BaseException:
            if os.path.exists(tmp_path):
                os.unlink(tmp_path)
            raise

    def create(self, document: Document) -> None:
        with self._lock:
            documents = self._documents + (document,)
            self._write(documents)
            self._documents = documents
