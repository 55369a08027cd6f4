"""
Breakpoint detection. A distance threshold is chosen (chunk-count target, explicit amount,
or one of the threshold strategies) and every distance strictly above it starts a new chunk.
"""

import math
from typing import Callable

from semantic_splitter.config.logging import get_logger
from semantic_splitter.config.splitting.models import SplitterConfig

logger = get_logger(__name__)

PERCENTILE = 0.95
IQR_MULTIPLIER = 1.5
DEFAULT_THRESHOLD = 0.5


def percentile_threshold(distances: list[float]) -> float:
    """Value at floor(0.95 * n) of the ascending distances."""
    ordered = sorted(distances)
    return ordered[math.floor(len(ordered) * PERCENTILE)]


def standard_deviation_threshold(distances: list[float]) -> float:
    """Mean plus population standard deviation."""
    mean = math.fsum(distances) / len(distances)
    variance = math.fsum((d - mean) ** 2 for d in distances) / len(distances)
    return mean + math.sqrt(variance)


def interquartile_threshold(distances: list[float]) -> float:
    """Q3 + 1.5 * IQR, quartiles taken at floor(0.25 * n) and floor(0.75 * n)."""
    ordered = sorted(distances)
    q1 = ordered[math.floor(len(ordered) * 0.25)]
    q3 = ordered[math.floor(len(ordered) * 0.75)]
    return q3 + IQR_MULTIPLIER * (q3 - q1)


def gradient_threshold(distances: list[float]) -> float:
    """
    The distance right after the steepest jump between consecutive distances (first one
    wins on ties). A single distance has no jump and is its own threshold.
    """
    gradients = [abs(distances[i] - distances[i - 1]) for i in range(1, len(distances))]
    if not gradients:
        return distances[0]
    steepest = gradients.index(max(gradients))
    return distances[steepest + 1]


THRESHOLD_REGISTRY: dict[str, Callable[[list[float]], float]] = {
    "percentile": percentile_threshold,
    "standard_deviation": standard_deviation_threshold,
    "interquartile": interquartile_threshold,
    "gradient": gradient_threshold,
}


def get_threshold_fn(threshold_type: str) -> Callable[[list[float]], float] | None:
    """Return the threshold function for the given strategy name, or None."""
    return THRESHOLD_REGISTRY.get(threshold_type)


def chunk_count_threshold(distances: list[float], number_of_chunks: int) -> float:
    """The (k-1)-th largest distance, clamped; at most k - 1 distances lie strictly above it."""
    ordered = sorted(distances, reverse=True)
    return ordered[min(number_of_chunks - 1, len(ordered) - 1)]


def select_threshold(distances: list[float], config: SplitterConfig) -> float:
    """
    Pick the breakpoint threshold. First applicable wins: number_of_chunks,
    breakpoint_threshold_amount, then breakpoint_threshold_type. Requires distances.
    """
    if config.number_of_chunks:
        return chunk_count_threshold(distances, config.number_of_chunks)
    if config.breakpoint_threshold_amount is not None:
        return config.breakpoint_threshold_amount
    threshold_fn = get_threshold_fn(config.breakpoint_threshold_type)
    if threshold_fn is None:
        logger.warning(
            "Unknown breakpoint threshold type, using fixed threshold",
            extra={"threshold_type": config.breakpoint_threshold_type, "threshold": DEFAULT_THRESHOLD},
        )
        return DEFAULT_THRESHOLD
    return threshold_fn(distances)


def find_breakpoints(distances: list[float], threshold: float) -> list[int]:
    """Sentence indices i + 1 for every distances[i] strictly above threshold; ascending."""
    return [i + 1 for i, d in enumerate(distances) if d > threshold]


def calculate_breakpoints(distances: list[float], config: SplitterConfig) -> list[int]:
    """Breakpoints for the configured threshold selection. No distances, no breakpoints."""
    if not distances:
        return []
    threshold = select_threshold(distances, config)
    breakpoints = find_breakpoints(distances, threshold)
    logger.debug(
        "Breakpoints detected",
        extra={"threshold": threshold, "distances": len(distances), "breakpoints": len(breakpoints)},
    )
    return breakpoints
