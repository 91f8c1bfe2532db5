"""
Embedding generation task.

Embeds chunks one by one. A chunk whose embedding fails is logged and
left out; the remaining chunks still become vectors.

Dependencies: source_service.boundary.embeddings (client passed in)
System role: Embedding stage of the ingestion pipeline
"""

import logging
from dataclasses import dataclass, field
from typing import Any

from source_service.core.processing.step_policy import PipelineStep, run_step
from source_service.models import (
    Chunk,
    ProcessedContent,
    ProcessingJob,
    SourceType,
    Vector,
)

logger = logging.getLogger(__name__)


@dataclass
class EmbeddingOutcome:
    """Vectors built for surviving chunks plus the indices that were dropped."""

    vectors: list[Vector] = field(default_factory=list)
    skipped: list[int] = field(default_factory=list)


class EmbeddingTask:
    """Turn chunks into index-ready vectors."""

    def __init__(self, embedding_client) -> None:
        """
        Args:
            embedding_client: Client exposing embed(text) -> list[float]
        """
        self._client = embedding_client

    def embed(
        self,
        chunks: list[Chunk],
        job: ProcessingJob,
        source_type: SourceType,
        content: ProcessedContent,
    ) -> EmbeddingOutcome:
        """
        Embed each chunk and build its vector.

        Args:
            chunks: Chunks in emission order
            job: Job being processed
            source_type: Resolved type tag for metadata
            content: Extracted content (title, metadata)

        Returns:
            EmbeddingOutcome: Vectors for surviving chunks and skipped indices
        """
        outcome = EmbeddingOutcome()
        base_metadata = self._base_metadata(job, source_type, content)

        for chunk in chunks:
            values = run_step(
                PipelineStep.EMBED_CHUNK,
                self._client.embed,
                chunk.text,
                context={"source_id": str(job.source_id), "chunk_index": chunk.index},
            )
            if values is None:
                outcome.skipped.append(chunk.index)
                continue

            outcome.vectors.append(
                Vector(
                    id=Vector.make_id(job.source_id, chunk.index),
                    values=values,
                    metadata={
                        **base_metadata,
                        "text": chunk.text,
                        "chunk_index": chunk.index,
                    },
                )
            )

        if outcome.skipped:
            logger.warning(
                f"{__name__}:embed - Skipped {len(outcome.skipped)} of {len(chunks)} chunks",
                extra={"source_id": str(job.source_id)},
            )
        return outcome

    @staticmethod
    def _base_metadata(
        job: ProcessingJob,
        source_type: SourceType,
        content: ProcessedContent,
    ) -> dict[str, Any]:
        metadata: dict[str, Any] = {
            "source_id": str(job.source_id),
            "title": content.title,
            "type": source_type.value,
        }
        if job.original_url:
            metadata["url"] = job.original_url
        for key in ("s3_key", "file_type"):
            if content.metadata.get(key):
                metadata[key] = content.metadata[key]
        return metadata
