"""Sentence Transformers (local) embedding strategy."""

import threading

from sentence_transformers import SentenceTransformer

from semantic_splitter.config.embedding.models import EmbeddingConfig
from semantic_splitter.config.logging import get_logger
from semantic_splitter.services.embedder.base import BaseEmbeddingStrategy

logger = get_logger(__name__)


class SentenceTransformersEmbeddingStrategy(BaseEmbeddingStrategy):
    """
    Local Sentence Transformers, no API key. The strategy instance is shared by every
    request, and each request may name its own model, so loaded models are kept per name.
    A model is loaded at most once per process even when several splits start together.
    """

    def __init__(self) -> None:
        self._models: dict[str, SentenceTransformer] = {}
        self._lock = threading.Lock()

    @property
    def strategy_name(self) -> str:
        return "sentence_transformers"

    def _get_model(self, model_name: str) -> SentenceTransformer:
        with self._lock:
            model = self._models.get(model_name)
            if model is None:
                logger.info("Loading sentence-transformers model", extra={"model": model_name})
                model = SentenceTransformer(model_name)
                self._models[model_name] = model
            return model

    def embed(self, texts: list[str], config: EmbeddingConfig) -> list[list[float]]:
        if not texts:
            return []
        # Second-pass re-embeds arrive one text at a time; encode handles any batch size.
        vectors = self._get_model(config.model).encode(
            texts,
            batch_size=config.batch_size,
            show_progress_bar=False,
            convert_to_numpy=True,
        )
        return [v.tolist() for v in vectors]
