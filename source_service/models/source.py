"""
Source domain models.

SourceRecord mirrors the persisted row; ProcessingJob is the immutable,
per-delivery view the pipeline works from.

Dependencies: pydantic
System role: Core data contracts for job enrichment and dispatch
"""

import enum
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field


class SourceStatus(str, enum.Enum):
    """
    Source processing lifecycle states (mirrors the store's enum).

    PROCESSING: Written by the upstream API, never re-asserted here
    INDEXED: Chunks embedded and upserted
    FAILED: Extraction, embedding or upsert failed
    """

    PROCESSING = "processing"
    INDEXED = "indexed"
    FAILED = "failed"


class ExtractorFamily(str, enum.Enum):
    """Extractor variant responsible for a source type."""

    LINK = "link"
    NOTE = "note"
    DOCUMENT = "document"


class SourceType(str, enum.Enum):
    """Declared type of a source, as carried on queue messages."""

    LINK = "link"
    NOTE = "note"
    PDF = "pdf"
    PPT = "ppt"
    DOC = "doc"

    @property
    def family(self) -> ExtractorFamily:
        """Extractor family that handles this type."""
        if self is SourceType.LINK:
            return ExtractorFamily.LINK
        if self is SourceType.NOTE:
            return ExtractorFamily.NOTE
        return ExtractorFamily.DOCUMENT


class SourceRecord(BaseModel):
    """Persisted description of a content source."""

    id: UUID
    type: str
    user_id: str
    original_url: str | None = None
    s3_bucket: str | None = None
    s3_key: str | None = None
    title: str = ""
    status: str = SourceStatus.PROCESSING.value


class ProcessingJob(BaseModel):
    """Enriched, immutable job built fresh for each delivery."""

    model_config = ConfigDict(frozen=True)

    source_id: UUID
    type: str = Field(description="Type declared by the queue message")
    user_id: str = Field(description="Owner; also the vector namespace")
    original_url: str = ""
    s3_bucket: str = ""
    s3_key: str = ""
    title: str = ""
