"""
Embedding gateway: adapts a configured embedding strategy to the splitter's Embedder contract.
k texts in, k vectors out, same order, one dimensionality per batch. Any backend failure or
malformed batch is raised as EmbeddingError; there are no retries and no partial results.
"""

from semantic_splitter.config.embedding.models import EmbeddingConfig
from semantic_splitter.config.logging import get_logger
from semantic_splitter.services.embedder.base import BaseEmbeddingStrategy, EmbeddingError, validate_vectors
from semantic_splitter.services.embedder.strategies import get_embedding_strategy

logger = get_logger(__name__)


class EmbeddingGateway:
    """Embedder backed by one embedding strategy and its config."""

    def __init__(self, strategy: BaseEmbeddingStrategy, config: EmbeddingConfig) -> None:
        self._strategy = strategy
        self._config = config

    @classmethod
    def from_config(cls, config: EmbeddingConfig) -> "EmbeddingGateway":
        """Build a gateway for config.strategy. Raises ValueError for unknown strategies."""
        strategy = get_embedding_strategy(config.strategy)
        if strategy is None:
            raise ValueError(f"Unknown embedding strategy: {config.strategy!r}")
        return cls(strategy, config)

    @property
    def config(self) -> EmbeddingConfig:
        return self._config

    def embed(self, texts: list[str]) -> list[list[float]]:
        if not texts:
            return []
        try:
            vectors = self._strategy.embed(list(texts), self._config)
        except EmbeddingError:
            raise
        except Exception as e:
            logger.warning(
                "Embedding strategy failed",
                extra={
                    "strategy": self._strategy.strategy_name,
                    "model": self._config.model,
                    "batch": len(texts),
                    "error_type": type(e).__name__,
                },
            )
            raise EmbeddingError(
                f"Embedding strategy {self._strategy.strategy_name!r} failed: {e}", cause=e
            ) from e
        return validate_vectors(texts, vectors)
