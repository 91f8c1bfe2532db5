"""
Unified application settings.

Aggregates all configuration modules into a single Settings class.

Dependencies: All config modules
System role: Central configuration aggregator for the worker
"""

from functools import lru_cache

from pydantic import Field

from source_service.configs.base import BaseSettings
from source_service.configs.blob_store import BlobStoreSettings
from source_service.configs.broker import BrokerSettings
from source_service.configs.database import DatabaseSettings
from source_service.configs.embedding import EmbeddingSettings
from source_service.configs.parse_service import ParseServiceSettings
from source_service.configs.pipeline import PipelineSettings
from source_service.configs.vector_index import VectorIndexSettings


class Settings(BaseSettings):
    """Unified application settings aggregating all config modules."""

    broker: BrokerSettings = Field(default_factory=BrokerSettings)
    database: DatabaseSettings = Field(default_factory=DatabaseSettings)
    blob_store: BlobStoreSettings = Field(default_factory=BlobStoreSettings)
    embedding: EmbeddingSettings = Field(default_factory=EmbeddingSettings)
    vector_index: VectorIndexSettings = Field(default_factory=VectorIndexSettings)
    parse_service: ParseServiceSettings = Field(default_factory=ParseServiceSettings)
    pipeline: PipelineSettings = Field(default_factory=PipelineSettings)


@lru_cache
def get_settings() -> Settings:
    """
    Get application settings singleton.

    Environment variables are loaded once at startup.

    Returns:
        Settings: Application settings instance

    Usage:
        from source_service.configs import get_settings
        settings = get_settings()
    """
    return Settings()
