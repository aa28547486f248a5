"""Chunk and chunk statistics models. Immutable values handed to the caller."""

from pydantic import BaseModel, ConfigDict, Field


class Chunk(BaseModel):
    """A trimmed, non-empty segment of text tagged with its emission index."""

    model_config = ConfigDict(frozen=True)

    text: str = Field(..., min_length=1)
    index: int = Field(..., ge=0)


class ChunkStats(BaseModel):
    """Size statistics over a chunk sequence. Derived on demand, never cached."""

    model_config = ConfigDict(frozen=True)

    chunk_count: int = 0
    total_length: int = 0
    avg_chunk_size: int = 0
    min_chunk_size: int = 0
    max_chunk_size: int = 0
