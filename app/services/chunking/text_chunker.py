"""
TextChunker: sentence- and paragraph-based chunking over raw text.
Pure and synchronous; the only state is the immutable ChunkingConfig.
"""

from collections.abc import Sequence

from app.config.chunking.models import ChunkingConfig
from app.config.logging import get_logger
from app.services.chunking.models import Chunk, ChunkStats
from app.services.chunking.packer import WordBoundaryPacker
from app.services.chunking.segmenters import split_paragraphs, split_sentences
from app.services.chunking.stats import compute_chunking_stats

logger = get_logger(__name__)


class TextChunker:
    """
    Splits text into word-aligned chunks of about chunk_size characters.
    Raises pydantic.ValidationError at construction when overlap >= chunk_size,
    chunk_size < 1 or an explicit max_chunk_size < chunk_size.
    """

    def __init__(self, chunk_size: int = 300, overlap: int = 50, max_chunk_size: int | None = None):
        self._config = ChunkingConfig(
            chunk_size=chunk_size,
            overlap=overlap,
            max_chunk_size=max_chunk_size,
        )
        self._packer = WordBoundaryPacker(
            chunk_size=self._config.chunk_size,
            overlap=self._config.overlap,
            max_chunk_size=self._config.ceiling,
        )

    @classmethod
    def from_config(cls, config: ChunkingConfig) -> "TextChunker":
        return cls(
            chunk_size=config.chunk_size,
            overlap=config.overlap,
            max_chunk_size=config.max_chunk_size,
        )

    @property
    def config(self) -> ChunkingConfig:
        return self._config

    @property
    def chunk_size(self) -> int:
        return self._config.chunk_size

    def chunk_by_sentences(self, text: str) -> list[Chunk]:
        """Segment into sentences and pack them, keeping sentences whole where they fit."""
        sentences = split_sentences(text)
        return self._packer.pack(sentences, respect_unit_boundaries=True)

    def chunk_by_paragraphs(self, text: str) -> list[Chunk]:
        """
        One chunk per paragraph that fits. Oversized paragraphs are chunked by sentences,
        with indices renumbered into the overall sequence. No overlap across paragraphs.
        """
        paragraphs = split_paragraphs(text)
        if len(paragraphs) == 1 and len(paragraphs[0]) > self.chunk_size:
            logger.debug("Single oversized paragraph, falling back to sentences")
            return self.chunk_by_sentences(paragraphs[0])

        chunks: list[Chunk] = []
        for paragraph in paragraphs:
            if len(paragraph) <= self.chunk_size:
                chunks.append(Chunk(text=paragraph, index=len(chunks)))
                continue
            for chunk in self.chunk_by_sentences(paragraph):
                chunks.append(Chunk(text=chunk.text, index=len(chunks)))
        return chunks

    def get_chunking_stats(self, chunks: Sequence[Chunk]) -> ChunkStats:
        return compute_chunking_stats(chunks)
