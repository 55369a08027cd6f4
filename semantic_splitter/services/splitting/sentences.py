"""Sentence segmentation and context windows for the first pass."""

import re

from semantic_splitter.config.splitting.models import DEFAULT_SENTENCE_SPLIT_REGEX


def split_sentences(text: str, pattern: str | re.Pattern[str] = DEFAULT_SENTENCE_SPLIT_REGEX) -> list[str]:
    """Split on every boundary match; trim and drop empty or whitespace-only units."""
    if not text or not text.strip():
        return []
    parts = re.split(pattern, text)
    return [p.strip() for p in parts if p and p.strip()]


def combine_sentences(sentences: list[str], buffer_size: int) -> list[str]:
    """
    One window per sentence: the sentence joined with up to buffer_size neighbours on each
    side, clamped at the ends of the sequence.
    """
    n = len(sentences)
    buffer = min(buffer_size, n)
    windows: list[str] = []
    for i in range(n):
        start = max(0, i - buffer)
        end = min(n, i + buffer + 1)
        windows.append(" ".join(sentences[start:end]))
    return windows
