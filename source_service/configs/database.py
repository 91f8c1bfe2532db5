"""
Database configuration settings.

Manages PostgreSQL connection parameters for SQLAlchemy.

Dependencies: pydantic, pydantic_settings
System role: Database connection configuration for the source store
"""

from pydantic import Field
from pydantic_settings import SettingsConfigDict

from source_service.configs.base import BaseSettings


class DatabaseSettings(BaseSettings):
    """PostgreSQL database configuration."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="DATABASE_",
        case_sensitive=False,
        extra="ignore",
    )

    url: str = Field(default="", description="PostgreSQL connection string")
    pool_size: int = Field(default=5, description="Connection pool size")
    max_overflow: int = Field(default=10, description="Maximum overflow connections")
    echo_sql: bool = Field(default=False, description="Echo SQL statements to logs")

    @property
    def sqlalchemy_url(self) -> str:
        """
        Normalize the connection string for SQLAlchemy.

        Returns:
            str: URL with a psycopg driver when a bare postgres scheme is given
        """
        if self.url.startswith("postgres://"):
            return self.url.replace("postgres://", "postgresql+psycopg://", 1)
        if self.url.startswith("postgresql://"):
            return self.url.replace("postgresql://", "postgresql+psycopg://", 1)
        return self.url
