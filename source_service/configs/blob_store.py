"""
Blob store configuration.

Settings for the S3-compatible bucket holding uploaded documents and
link preview images.

Dependencies: pydantic_settings
System role: Blob store configuration
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class BlobStoreSettings(BaseSettings):
    """Settings for S3-compatible object storage."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix="BLOB_",
        case_sensitive=False,
        extra="ignore",
    )

    region: str = Field(default="", description="Storage region")
    endpoint: str = Field(
        default="",
        description="Custom endpoint URL (e.g. https://nyc3.digitaloceanspaces.com)",
    )
    access_key: str = Field(default="", description="Access key id")
    secret_key: str = Field(default="", description="Secret access key")
    bucket: str = Field(default="", description="Default bucket name")
    image_key_prefix: str = Field(
        default="links",
        description="Key prefix for copied link preview images",
    )
