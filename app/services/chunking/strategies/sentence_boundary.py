"""Sentence-based chunking. Packs whole sentences; long sentences are split at word boundaries."""

from app.config.chunking.models import ChunkingConfig
from app.services.chunking.models import Chunk
from app.services.chunking.text_chunker import TextChunker


def sentence_chunks(text: str, config: ChunkingConfig) -> list[Chunk]:
    """Chunk text by sentences with the sizes from config."""
    return TextChunker.from_config(config).chunk_by_sentences(text)
