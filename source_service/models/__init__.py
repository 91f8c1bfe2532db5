"""
Domain models for the source ingestion pipeline.

Exports: SourceType, SourceStatus, ExtractorFamily, SourceRecord,
ProcessingJob, SourceMessage, ProcessedContent, Chunk, Vector,
ProcessingResult
"""

from .chunk import Chunk, Vector
from .content import ProcessedContent
from .message import SourceMessage
from .pipeline_result import ProcessingResult
from .source import (
    ExtractorFamily,
    ProcessingJob,
    SourceRecord,
    SourceStatus,
    SourceType,
)

__all__ = [
    "Chunk",
    "Vector",
    "ProcessedContent",
    "SourceMessage",
    "ProcessingResult",
    "ExtractorFamily",
    "ProcessingJob",
    "SourceRecord",
    "SourceStatus",
    "SourceType",
]
