"""
Embedding provider configuration.

Dependencies: pydantic_settings
System role: Gemini embedding configuration
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class EmbeddingSettings(BaseSettings):
    """Google Gemini embedding settings."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix="GEMINI_",
        case_sensitive=False,
        extra="ignore",
    )

    api_key: str = Field(default="", description="Gemini API key")
    model: str = Field(
        default="models/gemini-embedding-001",
        description="Embedding model ID",
    )
    output_dimensionality: int = Field(
        default=768,
        description="Fixed embedding dimension (must match the index)",
    )
