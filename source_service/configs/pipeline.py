"""
Configuration settings for the source ingestion pipeline.

Provides environment-based configuration for chunking, link fetching and
the failure policies that are switchable per deployment.

Dependencies: pydantic, pydantic_settings
System role: Centralized pipeline configuration
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class PipelineSettings(BaseSettings):
    """Settings for the source ingestion pipeline."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix="PIPELINE_",
        case_sensitive=False,
        extra="ignore",
    )

    # Chunking settings
    chunk_size: int = Field(
        default=1000,
        description="Maximum chunk size in characters",
    )
    chunk_overlap: int = Field(
        default=200,
        description="Overlap between consecutive chunks",
    )

    link_fetch_timeout_seconds: float = Field(
        default=30.0,
        description="Timeout for fetching a link's page",
    )

    # Failure policies
    fail_on_empty_embeddings: bool = Field(
        default=True,
        description="Mark a source failed when no chunk could be embedded",
    )
    mark_unknown_type_failed: bool = Field(
        default=True,
        description="Mark a source failed when its job type is not recognized",
    )
