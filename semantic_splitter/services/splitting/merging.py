"""
Second pass: merge adjacent chunks whose embeddings are similar enough. A merged chunk is
always re-embedded from its exact text, so every retained vector describes its emitted chunk.
"""

from semantic_splitter.config.logging import get_logger
from semantic_splitter.services.embedder.base import Embedder, validate_vectors
from semantic_splitter.services.splitting.distance import cosine_similarity

logger = get_logger(__name__)


def _embed_one(embedder: Embedder, text: str) -> list[float]:
    (vector,) = validate_vectors([text], embedder.embed([text]))
    return vector


def second_pass_merge_with_embeddings(
    chunks: list[str],
    embedder: Embedder,
    threshold: float,
) -> list[tuple[str, list[float]]]:
    """
    Walk chunks left to right keeping a current chunk and its vector. The next chunk's
    original vector is compared with the current one; at similarity >= threshold the two are
    merged and the merged text is embedded again, otherwise the current chunk is emitted.
    Returns (chunk, vector) pairs.
    """
    if not chunks:
        return []
    vectors = validate_vectors(chunks, embedder.embed(list(chunks)))
    if len(chunks) == 1:
        return [(chunks[0], vectors[0])]

    merged: list[tuple[str, list[float]]] = []
    current, current_vec = chunks[0], vectors[0]
    merges = 0
    for chunk, vec in zip(chunks[1:], vectors[1:]):
        if cosine_similarity(current_vec, vec) >= threshold:
            current = f"{current} {chunk}"
            current_vec = _embed_one(embedder, current)
            merges += 1
        else:
            merged.append((current, current_vec))
            current, current_vec = chunk, vec
    merged.append((current, current_vec))

    logger.debug("Second pass merged chunks", extra={"before": len(chunks), "after": len(merged), "merges": merges})
    return merged


def second_pass_merge(chunks: list[str], embedder: Embedder, threshold: float) -> list[str]:
    """Second-pass merge returning chunk texts only. Zero or one chunk is returned unchanged."""
    if len(chunks) <= 1:
        return list(chunks)
    return [text for text, _ in second_pass_merge_with_embeddings(chunks, embedder, threshold)]
