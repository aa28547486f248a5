"""
Chunker service: takes raw text + strategy + config and returns chunks or chunk records
with chunk_hash. Deterministic for the same input and config. Storage is the caller's job.
"""

import hashlib
import json
from typing import Any

from app.config.chunking.models import ChunkingConfig
from app.config.logging import get_logger, log_extra
from app.services.chunking.models import Chunk
from app.services.chunking.strategies import get_strategy_fn
from app.utils.ids import generate_chunk_id

logger = get_logger(__name__)


def compute_chunk_hash(chunk_text: str, strategy: str, config: ChunkingConfig) -> str:
    """Chunk hash = SHA-256(chunk_text + strategy + canonical config)."""
    config_canonical = json.dumps(config.model_dump(mode="json"), sort_keys=True)
    payload = f"{chunk_text}|{strategy}|{config_canonical}"
    return hashlib.sha256(payload.encode("utf-8")).hexdigest()


def chunk_text(text: str, strategy_name: str, config: ChunkingConfig) -> list[Chunk]:
    """Run the named strategy over text. Raises ValueError for an unknown strategy."""
    strategy_fn = get_strategy_fn(strategy_name)
    if strategy_fn is None:
        raise ValueError(f"Unknown chunking strategy: {strategy_name!r}")
    chunks = strategy_fn(text, config)
    logger.debug(
        "Chunked text",
        **log_extra({"strategy": strategy_name, "text_length": len(text), "chunks": len(chunks)}),
    )
    return chunks


def chunk_document(
    full_content: str,
    document_id: str,
    strategy_name: str,
    config: ChunkingConfig,
) -> list[dict[str, Any]]:
    """
    Chunk a document and build one record per chunk with chunk_id, chunk_hash and the
    parent document_id. chunk_index is the chunk's position within this document.
    """
    chunks = chunk_text(full_content, strategy_name, config)
    config_dict = config.model_dump(mode="json")
    records: list[dict[str, Any]] = []
    for chunk in chunks:
        chunk_hash = compute_chunk_hash(chunk.text, strategy_name, config)
        records.append({
            "chunk_id": generate_chunk_id(document_id, chunk.index, chunk_hash),
            "document_id": document_id,
            "chunk_text": chunk.text,
            "chunk_index": chunk.index,
            "chunking_strategy": strategy_name,
            "chunking_config": config_dict,
            "chunk_char_count": len(chunk.text),
            "overlap_size": config.overlap,
            "chunk_hash": chunk_hash,
        })
    logger.info(
        "Document chunked",
        **log_extra({"document_id": document_id, "strategy": strategy_name, "chunks": len(records)}),
    )
    return records
