"""/chunk routes: chunk raw text with a profile from static.json, list profiles, compute stats."""

from fastapi import APIRouter, HTTPException
from pydantic import ValidationError

from app.config.chunking.static import (
    get_active_profile_name,
    load_chunking_profiles,
    resolve_chunking_config,
)
from app.config.logging import get_logger
from app.config.settings import get_settings
from app.controllers.schema.chunk import (
    ChunkItem,
    ChunkRequest,
    ChunkResponse,
    ChunkStatsBody,
    ChunkStatsRequest,
    ProfilesResponse,
)
from app.services.chunking.chunker import chunk_document, chunk_text
from app.services.chunking.models import Chunk
from app.services.chunking.stats import compute_chunking_stats

logger = get_logger(__name__)

router = APIRouter(prefix="/chunk", tags=["chunking"])


@router.post("", response_model=ChunkResponse)
async def chunk(body: ChunkRequest) -> ChunkResponse:
    """
    Chunk `text` with the requested profile (default: active). strategy, chunk_size, overlap
    and max_chunk_size can be overridden per request. With a document_id, each chunk also
    carries a deterministic chunk_id and chunk_hash.
    """
    if len(body.text) > get_settings().max_text_length:
        raise HTTPException(status_code=413, detail="Text exceeds max_text_length")

    profile = body.profile or get_active_profile_name()
    overrides = {
        key: value
        for key, value in {
            "strategy": body.strategy,
            "chunk_size": body.chunk_size,
            "overlap": body.overlap,
            "max_chunk_size": body.max_chunk_size,
        }.items()
        if value is not None
    }
    try:
        config = resolve_chunking_config(profile, overrides or None)
        if body.document_id:
            records = chunk_document(body.text, body.document_id, config.strategy, config)
            items = [
                ChunkItem(
                    text=r["chunk_text"],
                    index=r["chunk_index"],
                    chunk_id=r["chunk_id"],
                    chunk_hash=r["chunk_hash"],
                )
                for r in records
            ]
            chunks = [Chunk(text=i.text, index=i.index) for i in items]
        else:
            chunks = chunk_text(body.text, config.strategy, config)
            items = [ChunkItem(text=c.text, index=c.index) for c in chunks]
    except ValidationError as e:
        logger.warning("Invalid chunking config", extra={"profile": profile, "errors": e.error_count()})
        raise HTTPException(status_code=400, detail=f"Invalid chunking config: {e.errors()[0]['msg']}") from e
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e)) from e

    stats = compute_chunking_stats(chunks)
    logger.info(
        "Chunk request served",
        extra={"profile": profile, "strategy": config.strategy, "chunks": stats.chunk_count},
    )
    return ChunkResponse(
        document_id=body.document_id,
        profile=profile,
        strategy=config.strategy,
        chunks=items,
        stats=ChunkStatsBody(**stats.model_dump()),
    )


@router.get("/profiles", response_model=ProfilesResponse)
async def list_profiles() -> ProfilesResponse:
    """Configured chunking profiles and the active profile name."""
    profiles = load_chunking_profiles()
    return ProfilesResponse(
        active=get_active_profile_name(),
        profiles={name: cfg.model_dump() for name, cfg in profiles.items()},
    )


@router.post("/stats", response_model=ChunkStatsBody)
async def chunk_stats(body: ChunkStatsRequest) -> ChunkStatsBody:
    """Size statistics for a list of chunks."""
    chunks = [Chunk(text=c.text, index=c.index) for c in body.chunks]
    stats = compute_chunking_stats(chunks)
    return ChunkStatsBody(**stats.model_dump())
