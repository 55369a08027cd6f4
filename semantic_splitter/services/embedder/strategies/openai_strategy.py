"""OpenAI Embedding API strategy."""

import threading

from openai import OpenAI

from semantic_splitter.config.embedding.models import EmbeddingConfig
from semantic_splitter.config.settings import get_settings
from semantic_splitter.services.embedder.base import BaseEmbeddingStrategy

# Inputs per embeddings.create request accepted by the API
MAX_INPUTS_PER_REQUEST = 2048


class OpenAIEmbeddingStrategy(BaseEmbeddingStrategy):
    """
    OpenAI Embeddings API (text-embedding-3-small, text-embedding-3-large, ...).
    API key from config.api_key or settings.openai_api_key. One client is kept per key,
    so the splitter's many single-text second-pass calls share a connection pool.
    """

    def __init__(self) -> None:
        self._clients: dict[str, OpenAI] = {}
        self._lock = threading.Lock()

    @property
    def strategy_name(self) -> str:
        return "openai"

    def _get_client(self, api_key: str) -> OpenAI:
        with self._lock:
            client = self._clients.get(api_key)
            if client is None:
                client = OpenAI(api_key=api_key)
                self._clients[api_key] = client
            return client

    def embed(self, texts: list[str], config: EmbeddingConfig) -> list[list[float]]:
        if not texts:
            return []
        api_key = config.api_key or get_settings().openai_api_key or None
        if not api_key:
            raise ValueError("OpenAI API key is required (set in config or OPENAI_API_KEY)")
        client = self._get_client(api_key)
        step = min(config.batch_size, MAX_INPUTS_PER_REQUEST)
        vectors: list[list[float]] = []
        for start in range(0, len(texts), step):
            window_texts = texts[start : start + step]
            response = client.embeddings.create(model=config.model, input=window_texts)
            by_index = {item.index: item.embedding for item in response.data}
            missing = [j for j in range(len(window_texts)) if j not in by_index]
            if missing:
                raise ValueError(f"OpenAI response is missing embeddings for inputs {missing}")
            vectors.extend(by_index[j] for j in range(len(window_texts)))
        return vectors
