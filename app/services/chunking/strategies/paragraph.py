"""Paragraph-based chunking. One chunk per paragraph; oversized paragraphs fall back to sentences."""

from app.config.chunking.models import ChunkingConfig
from app.services.chunking.models import Chunk
from app.services.chunking.text_chunker import TextChunker


def paragraph_chunks(text: str, config: ChunkingConfig) -> list[Chunk]:
    """Chunk text by blank-line separated paragraphs with the sizes from config."""
    return TextChunker.from_config(config).chunk_by_paragraphs(text)
