"""Base embedding strategy, the embedder contract consumed by the splitter, and its error type."""

import math
from abc import ABC, abstractmethod
from typing import Any, Protocol, Sequence, runtime_checkable

from semantic_splitter.config.embedding.models import EmbeddingConfig


class EmbeddingError(Exception):
    """Raised when the embedding backend fails or returns an unusable batch. Never retried here."""

    def __init__(self, message: str, cause: Exception | None = None):
        super().__init__(message)
        self.cause = cause


@runtime_checkable
class Embedder(Protocol):
    """Anything that turns a list of strings into one vector per string, in order."""

    def embed(self, texts: list[str]) -> list[list[float]]: ...


def validate_vectors(texts: Sequence[str], vectors: Any) -> list[list[float]]:
    """
    Check a batch returned for `texts`: one vector per text, identical non-zero dimension,
    finite numeric entries. Returns the vectors as plain float lists.
    """
    try:
        rows = [[float(x) for x in v] for v in vectors]
    except (TypeError, ValueError) as e:
        raise EmbeddingError(f"Malformed embedding response: {e}", cause=e) from e
    if len(rows) != len(texts):
        raise EmbeddingError(f"Embedding backend returned {len(rows)} vectors but expected {len(texts)}")
    dims = {len(r) for r in rows}
    if 0 in dims:
        raise EmbeddingError("Embedding backend returned an empty vector")
    if len(dims) > 1:
        raise EmbeddingError(f"Embedding dimension mismatch within one batch: {sorted(dims)}")
    for i, row in enumerate(rows):
        if not all(math.isfinite(x) for x in row):
            raise EmbeddingError(f"Malformed embedding response: non-finite value in vector {i}")
    return rows


class BaseEmbeddingStrategy(ABC):
    """
    Abstract embedding strategy. Each strategy produces vectors with consistent dimension.
    Strategies are stateless with respect to texts; the gateway validates their output.
    """

    @abstractmethod
    def embed(self, texts: list[str], config: EmbeddingConfig) -> list[list[float]]:
        """Embed a list of texts. Returns one vector per text in the same order."""
        ...

    @property
    @abstractmethod
    def strategy_name(self) -> str:
        """Strategy identifier, e.g. 'openai', 'sentence_transformers'."""
        ...
