"""
Chunk and vector domain models for the ingestion pipeline.

Dependencies: pydantic
System role: Data structures for chunking, embedding and upsert
"""

from typing import Any

from pydantic import BaseModel, Field


class Chunk(BaseModel):
    """Contiguous slice of a source's text."""

    text: str = Field(description="Chunk text content (whitespace-trimmed)")
    index: int = Field(ge=0, description="0-based position in emission order")


class Vector(BaseModel):
    """Unit persisted to the vector index."""

    id: str = Field(description="'{source_id}_{chunk_index}', unique per namespace")
    values: list[float] = Field(description="Embedding vector")
    metadata: dict[str, Any] = Field(default_factory=dict)

    @staticmethod
    def make_id(source_id: Any, chunk_index: int) -> str:
        """Build the deterministic vector ID for a chunk."""
        return f"{source_id}_{chunk_index}"

    def to_record(self) -> dict[str, Any]:
        """Serialize to the index's upsert payload shape."""
        return {"id": self.id, "values": self.values, "metadata": self.metadata}
