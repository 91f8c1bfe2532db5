"""
Pipeline result model for source processing.

Dependencies: pydantic
System role: Return type for SourceIndexingService.process()
"""

from pydantic import BaseModel, Field

from .source import SourceStatus


class ProcessingResult(BaseModel):
    """Result of processing one source through the pipeline."""

    source_id: str = Field(description="Source identifier")
    status: SourceStatus = Field(description="Terminal status written")
    chunk_count: int = Field(default=0, description="Number of chunks generated")
    vector_count: int = Field(default=0, description="Number of vectors upserted")
    skipped_chunks: list[int] = Field(
        default_factory=list,
        description="Indices of chunks whose embedding failed",
    )
    processing_time_ms: float = Field(default=0.0, description="Total processing time")
