"""Mock embedding strategy for tests and local runs. Produces deterministic fake vectors."""

import hashlib
import math
import re

from semantic_splitter.config.embedding.models import EmbeddingConfig
from semantic_splitter.services.embedder.base import BaseEmbeddingStrategy

# Default dimension for mock when model is unknown
MOCK_DEFAULT_DIM = 384


def _mock_dimension_for_model(model: str) -> int:
    if "ada-002" in model or "3-small" in model:
        return 1536
    if "3-large" in model:
        return 3072
    m = re.search(r"(\d+)$", model)
    if m and int(m.group(1)) > 0:
        return int(m.group(1))
    return MOCK_DEFAULT_DIM


def mock_vector(text: str, dim: int) -> list[float]:
    """Unit vector from the SHAKE-256 digest of the text; identical across processes."""
    raw = hashlib.shake_256(text.encode("utf-8")).digest(dim * 2)
    vec = [(int.from_bytes(raw[j : j + 2], "big") / 32767.5) - 1.0 for j in range(0, dim * 2, 2)]
    norm = math.sqrt(sum(x * x for x in vec)) or 1.0
    return [x / norm for x in vec]


class MockEmbeddingStrategy(BaseEmbeddingStrategy):
    """
    Deterministic fake embeddings keyed on the text only. Dimension inferred from the model
    name (trailing number, e.g. 'mock-64') or default 384. Carries no semantics.
    """

    @property
    def strategy_name(self) -> str:
        return "mock"

    def embed(self, texts: list[str], config: EmbeddingConfig) -> list[list[float]]:
        dim = _mock_dimension_for_model(config.model)
        return [mock_vector(t, dim) for t in texts]
