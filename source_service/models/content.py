"""
Extracted content model.

Dependencies: pydantic
System role: Extractor output consumed by the chunker
"""

from typing import Any

from pydantic import BaseModel, Field


class ProcessedContent(BaseModel):
    """Normalized text and metadata produced by one extractor."""

    title: str = ""
    text: str
    metadata: dict[str, Any] = Field(
        default_factory=dict,
        description="Source-specific facts (site name, image URL, file type)",
    )
