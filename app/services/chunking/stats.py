"""Chunk size statistics for observability."""

from collections.abc import Sequence

from app.services.chunking.models import Chunk, ChunkStats


def compute_chunking_stats(chunks: Sequence[Chunk]) -> ChunkStats:
    """Count, total, rounded average (half up), min and max of chunk text lengths."""
    if not chunks:
        return ChunkStats()
    sizes = [len(c.text) for c in chunks]
    total = sum(sizes)
    count = len(sizes)
    return ChunkStats(
        chunk_count=count,
        total_length=total,
        avg_chunk_size=(2 * total + count) // (2 * count),
        min_chunk_size=min(sizes),
        max_chunk_size=max(sizes),
    )
