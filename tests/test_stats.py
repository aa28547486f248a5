"""Tests for chunk statistics."""

import pytest
from pydantic import ValidationError

from app.services.chunking.models import Chunk, ChunkStats
from app.services.chunking.stats import compute_chunking_stats
from app.services.chunking.text_chunker import TextChunker


def _chunks(*texts):
    return [Chunk(text=t, index=i) for i, t in enumerate(texts)]


class TestComputeChunkingStats:
    """Tests for compute_chunking_stats."""

    def test_empty(self):
        stats = compute_chunking_stats([])
        assert stats == ChunkStats(
            chunk_count=0, total_length=0, avg_chunk_size=0, min_chunk_size=0, max_chunk_size=0
        )

    def test_single_chunk(self):
        stats = compute_chunking_stats(_chunks("Hello world"))
        assert stats.chunk_count == 1
        assert stats.total_length == 11
        assert stats.avg_chunk_size == 11
        assert stats.min_chunk_size == 11
        assert stats.max_chunk_size == 11

    def test_multiple_chunks(self):
        stats = compute_chunking_stats(_chunks("short", "medium text", "this is a longer piece of text"))
        assert stats.chunk_count == 3
        assert stats.total_length == 46
        assert stats.avg_chunk_size == 15
        assert stats.min_chunk_size == 5
        assert stats.max_chunk_size == 30

    def test_average_rounds_half_up(self):
        assert compute_chunking_stats(_chunks("ab", "abc")).avg_chunk_size == 3
        assert compute_chunking_stats(_chunks("abcd", "abcdefg")).avg_chunk_size == 6

    def test_idempotent(self):
        chunks = TextChunker(chunk_size=40, overlap=10).chunk_by_sentences(
            "One two three. Four five six seven. Eight nine ten eleven twelve. Thirteen."
        )
        assert compute_chunking_stats(chunks) == compute_chunking_stats(chunks)

    def test_chunker_delegates(self):
        chunker = TextChunker()
        chunks = _chunks("abc", "de")
        assert chunker.get_chunking_stats(chunks) == compute_chunking_stats(chunks)

    def test_stats_are_frozen(self):
        stats = compute_chunking_stats(_chunks("abc"))
        with pytest.raises(ValidationError):
            stats.chunk_count = 5


class TestChunkModel:
    """Chunk values are validated and immutable."""

    def test_empty_text_rejected(self):
        with pytest.raises(ValidationError):
            Chunk(text="", index=0)

    def test_negative_index_rejected(self):
        with pytest.raises(ValidationError):
            Chunk(text="a", index=-1)

    def test_frozen(self):
        chunk = Chunk(text="a", index=0)
        with pytest.raises(ValidationError):
            chunk.text = "b"
