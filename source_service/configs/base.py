"""
Shared worker settings.

Every settings class of the ingestion worker reads the same .env file and
carries the deployment environment name and the root log level that
main.py hands to configure_logging.

Dependencies: pydantic_settings
System role: Parent of the per-concern settings classes
"""

import logging

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings as PydanticBaseSettings, SettingsConfigDict


class BaseSettings(PydanticBaseSettings):
    """Environment name and log level shared by all worker settings."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    environment: str = Field(
        default="development",
        description="Deployment the worker runs in, echoed in the startup log",
    )
    log_level: str = Field(
        default="INFO",
        description="Root log level for the worker (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        """Normalize to upper case and reject names logging does not know."""
        level = value.strip().upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level: {value!r}")
        return level
