"""
Pytest configuration and shared fixtures.

Settings are cached per process; every test starts from a clean environment so
profile overrides set by one test do not leak into the next.
"""
import pytest

from app.config.settings import get_settings
from app.services.chunking.text_chunker import TextChunker


@pytest.fixture(autouse=True)
def clean_settings(monkeypatch):
    """Drop env overrides and the cached Settings around each test."""
    for name in ("CHUNKING_PROFILE", "MAX_TEXT_LENGTH", "LOG_LEVEL", "HOST", "PORT"):
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def chunker():
    """Chunker with small sizes so short texts exercise splitting."""
    return TextChunker(chunk_size=50, overlap=10)


def make_text(sentence_lengths, paragraph_every=None):
    """
    Build text from sentences of unique words (w0, w1, ...), each ending in a period.
    With paragraph_every, a blank line follows every N sentences.
    """
    sentences = []
    n = 0
    for length in sentence_lengths:
        words = [f"w{n + k}" for k in range(length)]
        n += length
        sentences.append(" ".join(words) + ".")
    if not paragraph_every:
        return " ".join(sentences)
    groups = [
        " ".join(sentences[i : i + paragraph_every])
        for i in range(0, len(sentences), paragraph_every)
    ]
    return "\n\n".join(groups)
