"""Request/response schemas for the /chunk routes."""

from pydantic import BaseModel, Field


class ChunkRequest(BaseModel):
    """POST /chunk request body. Profile defaults to the active one; sizes may be overridden."""

    text: str = Field(..., description="Raw text to chunk")
    document_id: str | None = Field(default=None, min_length=1, description="When set, chunk ids and hashes are returned")
    profile: str | None = Field(default=None, description="Chunking profile from static.json (default: active)")
    strategy: str | None = Field(default=None, description="Optional override: sentences|paragraphs")
    chunk_size: int | None = Field(default=None, ge=1, le=10000, description="Optional override for chunk size (max 10000)")
    overlap: int | None = Field(default=None, ge=0, le=5000, description="Optional override for overlap (max 5000)")
    max_chunk_size: int | None = Field(default=None, ge=1, le=100000, description="Optional override for the hard ceiling")


class ChunkItem(BaseModel):
    """One chunk in a response. chunk_id/chunk_hash only when a document_id was given."""

    text: str = Field(..., min_length=1)
    index: int = Field(..., ge=0)
    chunk_id: str | None = None
    chunk_hash: str | None = None


class ChunkStatsBody(BaseModel):
    chunk_count: int = Field(..., ge=0)
    total_length: int = Field(..., ge=0)
    avg_chunk_size: int = Field(..., ge=0)
    min_chunk_size: int = Field(..., ge=0)
    max_chunk_size: int = Field(..., ge=0)


class ChunkResponse(BaseModel):
    """POST /chunk response body."""

    document_id: str | None = None
    profile: str
    strategy: str
    chunks: list[ChunkItem] = Field(default_factory=list)
    stats: ChunkStatsBody


class ChunkStatsRequest(BaseModel):
    """POST /chunk/stats request body: chunks as returned by POST /chunk."""

    chunks: list[ChunkItem] = Field(default_factory=list)


class ProfilesResponse(BaseModel):
    active: str
    profiles: dict[str, dict]
