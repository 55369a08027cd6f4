"""Initial chunk assembly: cut the sentence sequence at breakpoints."""


def create_chunks(sentences: list[str], breakpoints: list[int]) -> list[str]:
    """
    Join sentences[start:breakpoint] for each breakpoint in order, then the tail.
    Chunks are space-joined and trimmed; empty ones are dropped.
    """
    chunks: list[str] = []
    start = 0
    for breakpoint in [*breakpoints, len(sentences)]:
        chunk = " ".join(sentences[start:breakpoint]).strip()
        if chunk:
            chunks.append(chunk)
        start = breakpoint
    return chunks
