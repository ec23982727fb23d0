import logging
from pathlib import Path

from opsmind.core.exceptions import DocumentLoadError
from opsmind.core.models.document import SourceText

from .pdf_loader import PDFLoader
from .text_loader import TextLoader

logger = logging.getLogger(__name__)


class CompositeLoader:

    def __init__(self):
        self._loaders = [
            PDFLoader(),
            TextLoader(),
        ]

    def supports(self, file_path: Path) -> bool:
        return any(loader.supports(file_path) for loader in self._loaders)

    def load(self, file_path: Path) -> SourceText:
        for loader in self._loaders:
            if loader.supports(file_path):
                try:
                    return loader.load(file_path)
                except Exception as e:
                    logger.error(f"Failed to load {file_path}: {e}")
                    raise DocumentLoadError(f"Failed to load {file_path.name}: {e}") from e
        raise DocumentLoadError(f"Unsupported file type: {file_path.name}")
