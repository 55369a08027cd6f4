"""
Semantic double-pass splitter: sentences -> windows -> embeddings -> distances -> breakpoints
-> chunks -> second-pass merge -> size constraints. Synchronous; one call per text, no state
kept between calls.
"""

import copy
from typing import Any, Mapping

from pydantic import BaseModel, Field

from semantic_splitter.config.logging import get_logger, log_extra
from semantic_splitter.config.splitting.models import SplitterConfig
from semantic_splitter.services.embedder.base import Embedder, validate_vectors
from semantic_splitter.services.splitting.assembly import create_chunks
from semantic_splitter.services.splitting.breakpoints import calculate_breakpoints
from semantic_splitter.services.splitting.constraints import apply_size_constraints
from semantic_splitter.services.splitting.distance import calculate_distances
from semantic_splitter.services.splitting.merging import second_pass_merge
from semantic_splitter.services.splitting.sentences import combine_sentences, split_sentences

logger = get_logger(__name__)


class Document(BaseModel):
    """A piece of text with free-form metadata."""

    content: str
    metadata: dict[str, Any] = Field(default_factory=dict)


class SemanticDoublePassSplitter:
    """
    Splits text where the semantic distance between neighbouring sentence windows spikes,
    merges adjacent chunks that turn out similar, then enforces character size bounds.

    `embedder` is anything with embed(list[str]) -> list[list[float]]; `config` is a
    SplitterConfig or a mapping of its options (snake_case or camelCase). Invalid options
    raise pydantic.ValidationError here, before any text is processed.
    """

    def __init__(
        self,
        embedder: Embedder,
        config: SplitterConfig | Mapping[str, Any] | None = None,
    ) -> None:
        if not isinstance(embedder, Embedder):
            raise TypeError(f"embedder must provide embed(texts), got {type(embedder).__name__}")
        if config is None:
            config = SplitterConfig()
        elif not isinstance(config, SplitterConfig):
            config = SplitterConfig.model_validate(dict(config))
        self._embedder = embedder
        self._config = config
        self._pattern = config.sentence_pattern

    @property
    def config(self) -> SplitterConfig:
        return self._config

    def _embed(self, texts: list[str]) -> list[list[float]]:
        return validate_vectors(texts, self._embedder.embed(texts))

    def split_text(self, text: str) -> list[str]:
        """Split one text into ordered chunk strings. Empty or blank text gives []."""
        sentences = split_sentences(text, self._pattern)
        if not sentences:
            return []

        windows = combine_sentences(sentences, self._config.buffer_size)
        distances = calculate_distances(self._embed(windows))
        breakpoints = calculate_breakpoints(distances, self._config)
        chunks = create_chunks(sentences, breakpoints)
        first_pass = len(chunks)

        chunks = second_pass_merge(chunks, self._embedder, self._config.second_pass_threshold)
        merged = len(chunks)

        if self._config.has_size_constraints:
            chunks = apply_size_constraints(
                chunks,
                min_size=self._config.min_chunk_size,
                max_size=self._config.max_chunk_size,
                pattern=self._pattern,
            )

        logger.info(
            "Text split",
            **log_extra({
                "sentences": len(sentences),
                "first_pass_chunks": first_pass,
                "merged_chunks": merged,
                "chunks": len(chunks),
            }),
        )
        return chunks

    def create_documents(
        self,
        texts: list[str],
        metadatas: list[dict[str, Any]] | None = None,
    ) -> list[Document]:
        """One Document per chunk of each text, carrying a copy of that text's metadata."""
        if metadatas is not None and len(metadatas) != len(texts):
            raise ValueError(f"Got {len(metadatas)} metadata dicts for {len(texts)} texts")
        documents: list[Document] = []
        for i, text in enumerate(texts):
            metadata = metadatas[i] if metadatas is not None else {}
            for chunk in self.split_text(text):
                documents.append(Document(content=chunk, metadata=copy.deepcopy(metadata)))
        return documents

    def split_documents(self, documents: list[Document]) -> list[Document]:
        """Split each document; output keeps source order and copies each source's metadata."""
        return self.create_documents(
            [d.content for d in documents],
            [d.metadata for d in documents],
        )
