"""Id generation for chunks. Deterministic so re-chunking the same text yields the same ids."""

import hashlib


def generate_chunk_id(document_id: str, chunk_index: int, chunk_hash: str) -> str:
    """Chunk id from document, index and chunk hash, e.g. chunk_<24 hex chars>."""
    payload = f"{document_id}:{chunk_index}:{chunk_hash}"
    digest = hashlib.sha256(payload.encode("utf-8")).hexdigest()[:24]
    return f"chunk_{digest}"
