"""FastAPI app entry: config, logging, health, and the split routes."""

from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from semantic_splitter.config.logging import configure_logging, get_logger
from semantic_splitter.config.settings import get_settings
from semantic_splitter.controllers.routes.split import router as split_router

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup: config and logging."""
    settings = get_settings()
    configure_logging()
    logger.info(
        "Application starting",
        extra={
            "app_name": settings.app_name,
            "environment": settings.environment,
            "splitter_profile": settings.splitter_profile,
            "embedding_profile": settings.embedding_profile,
        },
    )
    yield
    logger.info("Application shutting down")


app = FastAPI(
    title="Semantic Splitter",
    description="Split text into semantically coherent chunks for retrieval",
    version="1.0.0",
    lifespan=lifespan,
)
app.include_router(split_router)


@app.get("/health")
async def health() -> dict[str, str]:
    """Liveness: service is up. Does not call the embedding backend."""
    return {"status": "ok"}


@app.exception_handler(Exception)
async def global_exception_handler(_request: Request, exc: Exception):
    """Centralized error handling: connection failures and timeouts get clear, non-leaking messages."""
    exc_name = type(exc).__name__
    if "Connection" in exc_name or "Timeout" in exc_name:
        logger.warning("Connection or timeout error", extra={"error": exc_name})
        return JSONResponse(
            content={"detail": "A dependency is temporarily unavailable. Please retry later."},
            status_code=503,
        )
    logger.exception("Unhandled error")
    return JSONResponse(
        content={"detail": "An internal error occurred."},
        status_code=500,
    )
