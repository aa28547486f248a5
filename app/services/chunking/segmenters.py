"""Sentence and paragraph segmentation. Produces trimmed, non-empty text units."""

import re

# Run of terminators followed by whitespace; the match closes the sentence.
_SENTENCE_END = re.compile(r"[.!?]+\s+")
# Whitespace run holding at least two newlines (a blank line).
_PARAGRAPH_BREAK = re.compile(r"\n\s*\n")


def split_sentences(text: str) -> list[str]:
    """
    Split text into sentences by scanning forward for punctuation followed by whitespace.
    Each sentence keeps its terminating punctuation. Text with no boundary is one unit.
    """
    if not text:
        return []
    sentences: list[str] = []
    last = 0
    for match in _SENTENCE_END.finditer(text):
        sentences.append(text[last : match.end()])
        last = match.end()
    if last < len(text):
        sentences.append(text[last:])
    return [s.strip() for s in sentences if s.strip()]


def split_paragraphs(text: str) -> list[str]:
    """Split text on blank lines. Pieces are trimmed; empty pieces are dropped."""
    if not text:
        return []
    parts = _PARAGRAPH_BREAK.split(text)
    return [p.strip() for p in parts if p.strip()]
