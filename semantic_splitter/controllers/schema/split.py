"""Request/response schemas for POST /split and POST /split/documents."""

from typing import Any

from pydantic import BaseModel, Field

from semantic_splitter.services.splitting.splitter import Document


class SplitOptions(BaseModel):
    """Profile overrides shared by both split endpoints."""

    splitter_config: dict[str, Any] | None = Field(
        default=None,
        description="Optional splitter option overrides (bufferSize, maxChunkSize, ...)",
    )
    embedding_config: dict[str, Any] | None = Field(
        default=None,
        description="Optional embedding overrides (strategy, model, batch_size, ...)",
    )


class SplitRequest(SplitOptions):
    """POST /split request body. Splitter and embedding profiles come from static.json."""

    text: str = Field(..., description="Text to split; blank text yields no chunks")


class SplitResponse(BaseModel):
    """POST /split response body."""

    chunks: list[str] = Field(default_factory=list)
    chunk_count: int = Field(..., ge=0)


class SplitDocumentsRequest(SplitOptions):
    """POST /split/documents request body."""

    documents: list[Document] = Field(..., max_length=1000, description="Documents to split (max 1000)")


class SplitDocumentsResponse(BaseModel):
    """POST /split/documents response body. One document per chunk, metadata copied from its source."""

    documents: list[Document] = Field(default_factory=list)
    document_count: int = Field(..., ge=0)
