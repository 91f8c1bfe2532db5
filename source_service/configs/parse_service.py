"""
Document parse service configuration.

Settings for the LlamaParse submit/poll/fetch protocol.

Dependencies: pydantic_settings
System role: Parse service configuration
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class ParseServiceSettings(BaseSettings):
    """LlamaParse settings."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix="LLAMAPARSE_",
        case_sensitive=False,
        extra="ignore",
    )

    api_key: str = Field(default="", description="LlamaParse API key")
    base_url: str = Field(
        default="https://api.cloud.llamaindex.ai/api/parsing",
        description="Parsing API base URL",
    )
    poll_interval_seconds: float = Field(
        default=2.0,
        description="Delay between job status polls",
    )
    max_retries: int = Field(
        default=150,
        description="Maximum status polls before giving up (150 x 2s = 5 minutes)",
    )
    request_timeout_seconds: float = Field(
        default=300.0,
        description="Per-request HTTP timeout",
    )
