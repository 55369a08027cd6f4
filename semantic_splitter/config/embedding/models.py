"""Embedding configuration models. Read-only; no business logic."""

from pydantic import BaseModel, Field


class EmbeddingConfig(BaseModel):
    """Embedding backend and parameters used by the splitter's embedding gateway."""

    strategy: str = Field(..., description="openai|sentence_transformers|bedrock|mock")
    model: str = Field(..., description="Model identifier")
    batch_size: int = Field(default=100, ge=1)
    api_key: str | None = Field(default=None, description="OpenAI API key when strategy is openai")
    region: str | None = Field(default=None, description="AWS region when strategy is bedrock")
