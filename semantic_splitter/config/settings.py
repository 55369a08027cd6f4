"""Environment-based application settings. Read-only; no business logic."""

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    app_name: str = Field(default="semantic-splitter", description="Service name")
    environment: Literal["development", "staging", "production"] = Field(
        default="development", description="Runtime environment"
    )
    debug: bool = Field(default=False, description="Enable debug mode")
    log_level: str = Field(default="INFO", description="Log level name")

    # Profiles (see config/splitting/static.json and config/embedding/static.json)
    splitter_profile: str = Field(default="active", description="Splitter profile used by the API")
    embedding_profile: str = Field(default="active", description="Embedding profile used by the API")

    # OpenAI (for embedding strategy)
    openai_api_key: str = Field(default="", description="OpenAI API key for embeddings")

    # AWS Bedrock (for embedding strategy)
    aws_region: str = Field(default="us-east-1", description="AWS region for Bedrock")


@lru_cache
def get_settings() -> Settings:
    """Return cached settings instance. Use for app lifetime."""
    return Settings()
