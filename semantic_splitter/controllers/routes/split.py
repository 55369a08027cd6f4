"""POST /split and /split/documents: semantic double-pass splitting with profile-based config."""

import asyncio

from fastapi import APIRouter, HTTPException
from pydantic import ValidationError

from semantic_splitter.config.embedding.static import resolve_embedding_config
from semantic_splitter.config.logging import get_logger
from semantic_splitter.config.settings import get_settings
from semantic_splitter.config.splitting.static import resolve_splitter_config
from semantic_splitter.controllers.schema.split import (
    SplitDocumentsRequest,
    SplitDocumentsResponse,
    SplitOptions,
    SplitRequest,
    SplitResponse,
)
from semantic_splitter.services.embedder.base import EmbeddingError
from semantic_splitter.services.embedder.gateway import EmbeddingGateway
from semantic_splitter.services.splitting.splitter import SemanticDoublePassSplitter

logger = get_logger(__name__)

router = APIRouter(prefix="/split", tags=["splitting"])


def _build_splitter(body: SplitOptions) -> SemanticDoublePassSplitter:
    """Resolve profiles plus inline overrides. Invalid options become 400s."""
    settings = get_settings()
    try:
        splitter_config = resolve_splitter_config(settings.splitter_profile, body.splitter_config)
        embedding_config = resolve_embedding_config(settings.embedding_profile, body.embedding_config)
        gateway = EmbeddingGateway.from_config(embedding_config)
    except ValidationError as e:
        raise HTTPException(status_code=400, detail=e.errors(include_url=False, include_context=False)) from e
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e)) from e
    return SemanticDoublePassSplitter(gateway, splitter_config)


def _embedding_failed(e: EmbeddingError) -> HTTPException:
    logger.warning("Split aborted by embedding failure", extra={"error": str(e)})
    return HTTPException(status_code=502, detail="Embedding backend failed; the text was not split")


@router.post("", response_model=SplitResponse)
async def split_text(body: SplitRequest) -> SplitResponse:
    """
    Split one text. Embedding backends block, so the pipeline runs in a worker thread.
    Any embedding failure aborts the whole split (502); nothing partial is returned.
    """
    splitter = _build_splitter(body)
    try:
        chunks = await asyncio.to_thread(splitter.split_text, body.text)
    except EmbeddingError as e:
        raise _embedding_failed(e) from e
    return SplitResponse(chunks=chunks, chunk_count=len(chunks))


@router.post("/documents", response_model=SplitDocumentsResponse)
async def split_documents(body: SplitDocumentsRequest) -> SplitDocumentsResponse:
    """Split each document in order; every chunk keeps a copy of its source metadata."""
    splitter = _build_splitter(body)
    try:
        documents = await asyncio.to_thread(splitter.split_documents, body.documents)
    except EmbeddingError as e:
        raise _embedding_failed(e) from e
    return SplitDocumentsResponse(documents=documents, document_count=len(documents))
