"""
Vector index configuration settings.

Manages Pinecone index access for chunk vector storage.

Dependencies: pydantic, pydantic_settings
System role: Vector database configuration
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class VectorIndexSettings(BaseSettings):
    """Pinecone index configuration."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix="PINECONE_",
        case_sensitive=False,
        extra="ignore",
    )

    api_key: str = Field(default="", description="Pinecone API key")
    host: str = Field(
        default="",
        description="Index host URL (e.g. https://index-project.svc.pinecone.io)",
    )
    upsert_batch_size: int = Field(default=100, description="Vectors per upsert request")
