"""Chunking configuration models. Read-only; no business logic."""

from pydantic import BaseModel, ConfigDict, Field, model_validator

DEFAULT_MAX_CHUNK_SIZE = 1000


class ChunkingConfig(BaseModel):
    """Chunking strategy and sizes in characters. Immutable once built."""

    model_config = ConfigDict(frozen=True)

    strategy: str = Field(default="paragraphs", description="sentences|paragraphs")
    chunk_size: int = Field(default=300, ge=1, description="Soft target / max chunk length")
    overlap: int = Field(default=50, ge=0, description="Overlap budget carried into the next chunk")
    max_chunk_size: int | None = Field(
        default=None, ge=1, description="Hard ceiling for a single word; unset means max(1000, chunk_size)"
    )

    @model_validator(mode="after")
    def _check_sizes(self) -> "ChunkingConfig":
        if self.overlap >= self.chunk_size:
            raise ValueError(
                f"overlap ({self.overlap}) must be smaller than chunk_size ({self.chunk_size})"
            )
        if self.max_chunk_size is not None and self.max_chunk_size < self.chunk_size:
            raise ValueError(
                f"max_chunk_size ({self.max_chunk_size}) must be at least chunk_size ({self.chunk_size})"
            )
        return self

    @property
    def ceiling(self) -> int:
        """Effective hard ceiling: max_chunk_size when given, else max(1000, chunk_size)."""
        if self.max_chunk_size is not None:
            return self.max_chunk_size
        return max(DEFAULT_MAX_CHUNK_SIZE, self.chunk_size)
