"""Embedding strategy implementations available to the embedding gateway."""

from functools import lru_cache

from semantic_splitter.services.embedder.base import BaseEmbeddingStrategy
from semantic_splitter.services.embedder.strategies.bedrock_strategy import BedrockEmbeddingStrategy
from semantic_splitter.services.embedder.strategies.mock_strategy import MockEmbeddingStrategy
from semantic_splitter.services.embedder.strategies.openai_strategy import OpenAIEmbeddingStrategy
from semantic_splitter.services.embedder.strategies.sentence_transformers_strategy import (
    SentenceTransformersEmbeddingStrategy,
)

STRATEGY_REGISTRY: dict[str, type[BaseEmbeddingStrategy]] = {
    "openai": OpenAIEmbeddingStrategy,
    "sentence_transformers": SentenceTransformersEmbeddingStrategy,
    "bedrock": BedrockEmbeddingStrategy,
    "mock": MockEmbeddingStrategy,
}


@lru_cache
def get_embedding_strategy(strategy_name: str) -> BaseEmbeddingStrategy | None:
    """
    Return the shared instance of the embedding strategy for the given name, or None.
    Instances are cached so local models are loaded once per process.
    """
    cls = STRATEGY_REGISTRY.get(strategy_name)
    if cls is None:
        return None
    return cls()
