"""Shared configuration loaded from environment / .env file."""

from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application-wide settings, populated from env vars or .env file."""

    # Vector store
    weaviate_host: str = "localhost"
    weaviate_port: int = 8080
    weaviate_grpc_port: int = 50051
    collection_name: str = "DocumentationPage"
    vectorizer: str = Field(
        default="text2vec-transformers",
        description="Weaviate vectorizer module applied to the collection's text fields",
    )

    # Retrieval
    min_certainty: float = Field(
        default=0.7,
        ge=0.0,
        le=1.0,
        description="Minimum certainty a near-text match must reach; enforced by Weaviate",
    )

    # Fetching
    request_timeout: float | None = Field(
        default=30.0,
        description="Per-request timeout in seconds handed to requests (None disables it)",
    )

    log_level: str = "INFO"

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


# Module-level instance shared by every component.
settings = Settings()
