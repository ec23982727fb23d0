"""
Tests for opsmind/core/services/chunker.py
Fixed-size overlapping windows with page tagging.
"""
import math

import pytest

from opsmind.core.services.chunker import TextChunker


def _text(length: int) -> str:
    return ("abcdefghij" * (length // 10 + 1))[:length]


class TestChunkerConfig:
    """Test constructor validation."""

    def test_overlap_must_be_smaller_than_size(self):
        with pytest.raises(ValueError):
            TextChunker(chunk_size=100, chunk_overlap=100)

    def test_negative_overlap_rejected(self):
        with pytest.raises(ValueError):
            TextChunker(chunk_size=100, chunk_overlap=-1)

    def test_step_is_size_minus_overlap(self):
        assert TextChunker(chunk_size=1000, chunk_overlap=200).step == 800


class TestChunk:
    """Test chunking without page boundaries."""

    def test_empty_text_returns_empty(self):
        assert TextChunker().chunk("") == []

    def test_text_at_minimum_length_is_dropped(self):
        assert TextChunker().chunk(_text(50)) == []

    def test_text_just_over_minimum_gives_one_chunk(self):
        chunks = TextChunker().chunk(_text(51))
        assert len(chunks) == 1
        assert chunks[0].chunk_index == 0
        assert chunks[0].page_number == 1

    def test_whitespace_only_text_gives_no_chunks(self):
        assert TextChunker().chunk(" " * 5000) == []

    def test_windows_advance_by_step(self):
        text = _text(2500)
        chunks = TextChunker(chunk_size=1000, chunk_overlap=200).chunk(text)

        assert len(chunks) == 4
        for chunk in chunks:
            offset = chunk.chunk_index * 800
            assert chunk.text == text[offset : offset + 1000]

    def test_short_trailing_fragment_dropped(self):
        # Last window starts at 2400 and holds only 50 chars.
        chunks = TextChunker(chunk_size=1000, chunk_overlap=200).chunk(_text(2450))
        assert len(chunks) == 3
        assert len(chunks[-1].text) == 850

    def test_count_close_to_formula(self):
        length, size, overlap = 9000, 1000, 200
        chunks = TextChunker(chunk_size=size, chunk_overlap=overlap).chunk(_text(length))
        expected = math.ceil((length - overlap) / (size - overlap))
        assert abs(len(chunks) - expected) <= 1

    def test_chunks_cover_whole_text(self):
        text = _text(5321)
        chunker = TextChunker(chunk_size=1000, chunk_overlap=200)
        chunks = chunker.chunk(text)

        covered = set()
        for chunk in chunks:
            start = chunk.chunk_index * chunker.step
            covered.update(range(start, start + len(chunk.text)))
        assert covered == set(range(len(text)))

    def test_indices_contiguous_from_zero(self):
        chunks = TextChunker(chunk_size=300, chunk_overlap=50).chunk(_text(4000))
        assert [c.chunk_index for c in chunks] == list(range(len(chunks)))

    def test_synthetic_pages_every_3000_chars(self):
        chunks = TextChunker(chunk_size=1000, chunk_overlap=200).chunk(_text(7000))
        assert [c.page_number for c in chunks] == [1, 1, 1, 1, 2, 2, 2, 2, 3]

    def test_deterministic(self):
        chunker = TextChunker(chunk_size=500, chunk_overlap=100)
        text = _text(3333)
        assert chunker.chunk(text) == chunker.chunk(text)

    def test_chunks_have_no_embedding(self):
        chunks = TextChunker().chunk(_text(1200))
        assert all(c.embedding is None for c in chunks)


class TestChunkPages:
    """Test chunking with real page boundaries."""

    def test_chunks_tagged_with_page_of_start_offset(self):
        # Pages start at 0, 122 and 129 in the joined text.
        pages = [_text(120), "short", _text(1500)]
        chunks = TextChunker(chunk_size=1000, chunk_overlap=200).chunk_pages(pages)

        assert [c.page_number for c in chunks] == [1, 3]
        assert [c.chunk_index for c in chunks] == [0, 1]

    def test_short_pages_are_kept(self):
        pages = [
            "Refund policy: refunds are issued within 30 days.",
            "Contact billing@example.com for any refund.",
        ]
        chunks = TextChunker().chunk_pages(pages)

        assert len(chunks) == 1
        assert chunks[0].page_number == 1
        assert chunks[0].text == "\n\n".join(pages)

    def test_windows_match_plain_chunking_of_joined_text(self):
        pages = [_text(700), _text(900), _text(1600)]
        chunker = TextChunker(chunk_size=500, chunk_overlap=100)

        paged = chunker.chunk_pages(pages)
        plain = chunker.chunk("\n\n".join(pages))

        assert [c.text for c in paged] == [c.text for c in plain]
        assert [c.chunk_index for c in paged] == list(range(len(paged)))

    def test_empty_pages_skipped_but_numbered(self):
        pages = ["", _text(100), "", _text(900)]
        chunks = TextChunker(chunk_size=500, chunk_overlap=100).chunk_pages(pages)

        # Pages 2 and 4 start at 0 and 102; windows start at 0, 400 and 800.
        assert [c.page_number for c in chunks] == [2, 4, 4]

    def test_only_short_pages_below_minimum_gives_nothing(self):
        assert TextChunker().chunk_pages(["tiny", "", "page"]) == []

    def test_no_pages_returns_empty(self):
        assert TextChunker().chunk_pages([]) == []
