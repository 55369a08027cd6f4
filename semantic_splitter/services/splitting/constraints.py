"""Size constraints (characters). Oversized chunks are re-packed by sentence; undersized ones coalesce."""

import re
from typing import Iterator

from semantic_splitter.config.splitting.models import DEFAULT_SENTENCE_SPLIT_REGEX
from semantic_splitter.services.splitting.sentences import split_sentences


def pack_sentences(sentences: list[str], max_size: int) -> list[str]:
    """
    Greedily join sentences into pieces of at most max_size characters, counting one joiner
    character per sentence. A sentence longer than max_size becomes its own piece.
    """
    pieces: list[str] = []
    pending = ""
    for sentence in sentences:
        if len(pending) + len(sentence) + 1 <= max_size:
            pending = f"{pending} {sentence}" if pending else sentence
        else:
            if pending:
                pieces.append(pending)
            pending = sentence
    if pending:
        pieces.append(pending)
    return pieces


def _bounded_pieces(
    chunks: list[str],
    max_size: int | None,
    pattern: str | re.Pattern[str],
) -> Iterator[str]:
    for chunk in chunks:
        if max_size and len(chunk) > max_size:
            yield from pack_sentences(split_sentences(chunk, pattern), max_size)
        else:
            yield chunk


def apply_size_constraints(
    chunks: list[str],
    min_size: int | None = None,
    max_size: int | None = None,
    pattern: str | re.Pattern[str] = DEFAULT_SENTENCE_SPLIT_REGEX,
) -> list[str]:
    """
    Enforce min/max chunk sizes in order.

    Chunks over max_size are split along sentence boundaries. Each resulting piece shorter
    than min_size goes into an accumulator that is emitted once it reaches min_size; any
    other piece flushes the accumulator first (even if it is still short) and is emitted
    as-is. Whatever is left in the accumulator is emitted at the end. Accumulated chunks are
    not checked against max_size again, and no sentence is ever cut.
    """
    if not min_size and not max_size:
        return list(chunks)

    constrained: list[str] = []
    pending = ""
    for piece in _bounded_pieces(chunks, max_size, pattern):
        if min_size and len(piece) < min_size:
            pending = f"{pending} {piece}" if pending else piece
            if len(pending) >= min_size:
                constrained.append(pending)
                pending = ""
        else:
            if pending:
                constrained.append(pending)
                pending = ""
            constrained.append(piece)
    if pending:
        constrained.append(pending)
    return constrained
