"""Chunking strategy implementations."""

from typing import Callable

from app.config.chunking.models import ChunkingConfig
from app.services.chunking.models import Chunk
from app.services.chunking.strategies.paragraph import paragraph_chunks
from app.services.chunking.strategies.sentence_boundary import sentence_chunks

STRATEGY_REGISTRY: dict[str, Callable[[str, ChunkingConfig], list[Chunk]]] = {
    "sentences": sentence_chunks,
    "sentence_based": sentence_chunks,  # alias
    "sentence_boundary": sentence_chunks,  # alias
    "paragraphs": paragraph_chunks,
    "paragraph_based": paragraph_chunks,  # alias
}


def get_strategy_fn(strategy_name: str):
    """Return the chunking function for the given strategy name, or None."""
    return STRATEGY_REGISTRY.get(strategy_name)
