import threading
from typing import Sequence

from opsmind.core.models.document import Document


class InMemoryDocumentRepository:
    """Process-local document storage.

    Writers swap in a new immutable snapshot under a lock, so readers see
    every document either complete or not at all.
    """

    def __init__(self, documents: Sequence[Document] = ()):
        self._documents: tuple[Document, ...] = tuple(documents)
        self._lock = threading.Lock()

    def create(self, document: Document) -> None:
        with self._lock:
            self._documents = self._documents + (document,)

    def find_all(self) -> Sequence[Document]:
        return self._documents

    def count(self) -> int:
        return len(self._documents)
