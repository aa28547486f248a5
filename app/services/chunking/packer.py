"""
Word-boundary packing (greedy). Turns an ordered sequence of text units into chunks of at
most chunk_size characters, never cutting inside a word, and seeds each chunk with a
word-aligned overlap taken from the tail of the previous one.
"""

import re
from collections import deque
from collections.abc import Callable, Iterator, Sequence
from typing import NamedTuple

from app.config.logging import get_logger
from app.services.chunking.models import Chunk

logger = get_logger(__name__)

_WHITESPACE = re.compile(r"\s+")


class MergeResult(NamedTuple):
    """Outcome of merge_bounded. remainder is the part of the addition left unmerged."""

    merged: str
    remainder: str
    overflowed: bool


def merge_bounded(base: str, addition: str, max_length: int) -> MergeResult:
    """
    Append addition to base (space separated) without exceeding max_length.
    On overflow, append only the words of addition that end before the last whitespace
    within the available space; a partial word is never appended.
    """
    separator = " " if base else ""
    if len(base) + len(separator) + len(addition) <= max_length:
        return MergeResult(base + separator + addition, "", False)
    available = max_length - len(base) - len(separator)
    if available <= 0:
        return MergeResult(base, addition, True)
    cut = -1
    for match in _WHITESPACE.finditer(addition, 0, available + 1):
        cut = match.start()
    if cut <= 0:
        return MergeResult(base, addition, True)
    return MergeResult(base + separator + addition[:cut], addition[cut:].lstrip(), True)


def build_overlap(flushed_chunk: str, overlap_budget: int) -> str:
    """
    Return the trailing words of flushed_chunk whose joined length stays within
    overlap_budget. Empty when even the last word does not fit.
    """
    selected: list[str] = []
    length = 0
    for word in reversed(flushed_chunk.split()):
        if length + len(word) + 1 > overlap_budget:
            break
        selected.append(word)
        length += len(word) + (1 if length else 0)
    selected.reverse()
    return " ".join(selected)


class WordBoundaryPacker:
    """
    Greedy packer over text units (sentences or paragraphs).

    A unit that fits is kept whole; one that does not is split word by word. A word
    longer than chunk_size is emitted as an oversized chunk of its own, unless it is
    also longer than max_chunk_size, in which case it is cut into max_chunk_size pieces.
    Overlap is only ever emitted together with new text, never as a chunk by itself.
    """

    def __init__(self, chunk_size: int, overlap: int = 0, max_chunk_size: int | None = None):
        self.chunk_size = chunk_size
        self.overlap = overlap
        self.max_chunk_size = max_chunk_size

    def pack(self, units: Sequence[str], respect_unit_boundaries: bool = True) -> list[Chunk]:
        """
        Pack units into chunks indexed 0, 1, 2, ... in emission order.

        With respect_unit_boundaries, a unit that does not fit in the current chunk
        closes it and is processed again against an empty chunk. Without it, the
        current chunk is filled up to a word boundary and the unmerged tail is carried
        into the next unit.
        """
        chunks: list[Chunk] = []

        def emit(text: str) -> None:
            text = text.strip()
            if text:
                chunks.append(Chunk(text=text, index=len(chunks)))

        pending: deque[str] = deque(u for u in units if u.strip())
        current = ""
        # current holds nothing but overlap from the previous chunk
        seeded = False
        remaining = ""

        while pending:
            unit = pending.popleft()
            if remaining:
                unit = f"{remaining} {unit}"
                remaining = ""
            full = False

            if not current:
                current = self._split_words(unit, "", emit)
                seeded = False
            else:
                result = merge_bounded(current, unit, self.chunk_size)
                if not result.overflowed:
                    current, seeded = result.merged, False
                elif seeded and (respect_unit_boundaries or result.merged == current):
                    current = self._split_words(unit, current, emit)
                    seeded = False
                elif respect_unit_boundaries:
                    emit(current)
                    current = ""
                    pending.appendleft(unit)
                    continue
                else:
                    current, seeded = result.merged, False
                    remaining = result.remainder
                    full = True
                    if not pending:
                        pending.append(remaining)
                        remaining = ""

            if full or len(current) >= self.chunk_size or not pending:
                emit(current)
                if pending and self.overlap > 0:
                    current = build_overlap(current, self.overlap)
                    seeded = bool(current)
                    continue
                current, seeded = "", False

        logger.debug("Packed text units", extra={"units": len(units), "chunks": len(chunks)})
        return chunks

    def _split_words(self, text: str, seed: str, emit: Callable[[str], None]) -> str:
        """
        Start a chunk from text. Text that fits is returned whole, led by as many trailing
        seed words as still fit in front of it.
        Otherwise words are accumulated after the seed, emitting a chunk each time the
        next word would overflow; the last partial buffer is returned.
        """
        if len(text) <= self.chunk_size:
            tail = build_overlap(seed, self.chunk_size - len(text)) if seed else ""
            return f"{tail} {text}" if tail else text
        buffer = seed
        seed_only = bool(seed)
        for word in self._words(text):
            if buffer and len(buffer) + 1 + len(word) > self.chunk_size:
                if seed_only:
                    buffer = word
                else:
                    emit(buffer)
                    buffer = self._reseed(buffer, word)
            else:
                buffer = f"{buffer} {word}" if buffer else word
            seed_only = False
        return buffer

    def _reseed(self, flushed: str, word: str) -> str:
        """New buffer after a flush: overlap of the flushed buffer plus word, if it fits."""
        if self.overlap > 0:
            overlap = build_overlap(flushed, self.overlap)
            if overlap and len(overlap) + 1 + len(word) <= self.chunk_size:
                return f"{overlap} {word}"
        return word

    def _words(self, text: str) -> Iterator[str]:
        """Whitespace-separated words, with words above max_chunk_size cut into pieces."""
        limit = self.max_chunk_size
        for word in text.split():
            if limit is None or len(word) <= limit:
                yield word
                continue
            logger.debug("Cutting word above hard ceiling", extra={"length": len(word), "limit": limit})
            for start in range(0, len(word), limit):
                yield word[start : start + limit]
