"""
Pytest configuration and fixtures for splitter tests.
"""

import re
from typing import Any

import pytest

ANIMALS = {"cat", "dog", "sat", "ran", "bird", "flew", "barked"}
FINANCE = {"stocks", "markets", "fell", "crashed", "sharply", "today", "bank", "rates"}


class KeywordEmbedder:
    """Counts topic words per text: one dimension per vocabulary. Text with no topic words is a zero vector."""

    def __init__(self, *vocabularies: set[str]) -> None:
        self.vocabularies = vocabularies or (ANIMALS, FINANCE)
        self.calls: list[list[str]] = []

    def embed(self, texts: list[str]) -> list[list[float]]:
        self.calls.append(list(texts))
        return [self._vector(t) for t in texts]

    def _vector(self, text: str) -> list[float]:
        words = re.findall(r"[a-z]+", text.lower())
        return [float(sum(w in vocab for w in words)) for vocab in self.vocabularies]


class LookupEmbedder:
    """Returns fixed vectors keyed by exact text; unknown text fails loudly."""

    def __init__(self, vectors: dict[str, list[float]]) -> None:
        self.vectors = vectors
        self.calls: list[list[str]] = []

    def embed(self, texts: list[str]) -> list[list[float]]:
        self.calls.append(list(texts))
        return [self.vectors[t] for t in texts]


@pytest.fixture
def keyword_embedder() -> KeywordEmbedder:
    """Animals vs. finance keyword embedder."""
    return KeywordEmbedder()


@pytest.fixture
def topic_text() -> str:
    """Two sentences about animals followed by two about markets."""
    return "A cat sat. A dog ran. Stocks fell sharply today. Markets crashed."


@pytest.fixture
def topic_windows() -> dict[str, list[float]]:
    """
    Vectors for the buffer-1 windows of topic_text (and its two topic chunks). The distance
    between the second and third windows is the only large one.
    """
    return {
        "A cat sat. A dog ran.": [1.0, 0.0],
        "A cat sat. A dog ran. Stocks fell sharply today.": [1.0, 0.2],
        "A dog ran. Stocks fell sharply today. Markets crashed.": [0.2, 1.0],
        "Stocks fell sharply today. Markets crashed.": [0.0, 1.0],
    }


@pytest.fixture
def long_text() -> str:
    """Twenty-six sentences: three animal/finance topic runs, then two topic-free sentences."""
    animal = ["The cat sat.", "A dog barked.", "The bird flew.", "A dog ran."]
    finance = ["Stocks fell.", "Markets crashed.", "Bank rates fell sharply.", "Stocks crashed today."]
    sentences = (animal + finance) * 3 + ["Plain words here.", "More plain words."]
    return " ".join(sentences)


@pytest.fixture
def sample_documents() -> list[dict[str, Any]]:
    """Two source documents with metadata."""
    return [
        {"content": "A cat sat. Stocks fell.", "metadata": {"source": "a.txt", "tags": ["x"]}},
        {"content": "Markets crashed.", "metadata": {"source": "b.txt", "tags": []}},
    ]
