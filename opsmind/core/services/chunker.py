"""Chunker - fixed-size overlapping windows over document text."""

import logging
from bisect import bisect_right
from typing import Sequence

from ..models.document import Chunk

logger = logging.getLogger(__name__)

PAGE_SEPARATOR = "\n\n"


class TextChunker:
    """Split text into overlapping character windows."""

    def __init__(
        self,
        chunk_size: int = 1000,
        chunk_overlap: int = 200,
        min_chunk_length: int = 50,
        page_size: int = 3000,
    ):
        """Initialize chunker.

        Args:
            chunk_size: Window size in characters.
            chunk_overlap: Characters shared by consecutive windows.
            min_chunk_length: Windows whose stripped text is not longer
                than this are dropped.
            page_size: Characters per synthetic page when real page
                boundaries are unknown.
        """
        if chunk_size <= 0:
            raise ValueError(f"chunk_size must be positive, got {chunk_size}")
        if not 0 <= chunk_overlap < chunk_size:
            raise ValueError(
                f"chunk_overlap must be in [0, {chunk_size}), got {chunk_overlap}"
            )
        if page_size <= 0:
            raise ValueError(f"page_size must be positive, got {page_size}")

        self._chunk_size = chunk_size
        self._chunk_overlap = chunk_overlap
        self._min_chunk_length = min_chunk_length
        self._page_size = page_size

    @property
    def step(self) -> int:
        return self._chunk_size - self._chunk_overlap

    def _windows(self, text: str) -> list[tuple[int, str]]:
        """Offsets and texts of windows that pass the length filter."""
        windows = []
        for offset in range(0, len(text), self.step):
            window = text[offset : offset + self._chunk_size]
            if len(window.strip()) > self._min_chunk_length:
                windows.append((offset, window))
        return windows

    def chunk(self, text: str) -> list[Chunk]:
        """Chunk text without page boundaries.

        Pages are synthetic: one per page_size characters of offset.

        Args:
            text: Raw document text.

        Returns:
            Chunks with contiguous indices from 0.
        """
        chunks = [
            Chunk(
                text=window,
                chunk_index=i,
                page_number=offset // self._page_size + 1,
            )
            for i, (offset, window) in enumerate(self._windows(text))
        ]
        logger.debug(f"Split {len(text)} chars into {len(chunks)} chunks")
        return chunks

    def chunk_pages(self, pages: Sequence[str]) -> list[Chunk]:
        """Chunk text with real page boundaries.

        Non-empty pages are joined with a blank line and windowed like
        ``chunk``. Each window carries the 1-based number of the page its
        start offset falls in, so short pages are never dropped on their own.

        Args:
            pages: Text of each page in order.

        Returns:
            Chunks with contiguous indices from 0.
        """
        starts: list[int] = []
        numbers: list[int] = []
        parts: list[str] = []
        offset = 0
        for page_number, page_text in enumerate(pages, 1):
            if not page_text:
                continue
            if parts:
                offset += len(PAGE_SEPARATOR)
            starts.append(offset)
            numbers.append(page_number)
            parts.append(page_text)
            offset += len(page_text)

        text = PAGE_SEPARATOR.join(parts)
        chunks = [
            Chunk(
                text=window,
                chunk_index=i,
                page_number=numbers[bisect_right(starts, start) - 1],
            )
            for i, (start, window) in enumerate(self._windows(text))
        ]
        logger.debug(f"Split {len(pages)} pages into {len(chunks)} chunks")
        return chunks
