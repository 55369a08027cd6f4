"""Cosine similarity and distance between embedding vectors."""

import math
from typing import Sequence


def cosine_similarity(a: Sequence[float], b: Sequence[float]) -> float:
    """
    dot(a, b) / (|a| * |b|). A zero-magnitude vector has no direction; its similarity to
    anything is 0.0 so it never feeds NaN into threshold math.
    """
    if len(a) != len(b):
        raise ValueError(f"Cannot compare vectors of dimension {len(a)} and {len(b)}")
    dot = math.fsum(x * y for x, y in zip(a, b))
    norm_a = math.sqrt(math.fsum(x * x for x in a))
    norm_b = math.sqrt(math.fsum(y * y for y in b))
    if norm_a == 0.0 or norm_b == 0.0:
        return 0.0
    # Rounding can push the ratio a hair outside [-1, 1]
    return max(-1.0, min(1.0, dot / (norm_a * norm_b)))


def cosine_distance(a: Sequence[float], b: Sequence[float]) -> float:
    """1 - cosine similarity; in [0, 2], and exactly 1.0 for zero-magnitude input."""
    return 1.0 - cosine_similarity(a, b)


def calculate_distances(embeddings: Sequence[Sequence[float]]) -> list[float]:
    """Distance between each pair of consecutive embeddings; len(embeddings) - 1 values."""
    return [cosine_distance(embeddings[i], embeddings[i + 1]) for i in range(len(embeddings) - 1)]
