"""
Text chunking task.

Splits extracted content into overlapping windows for embedding.

Dependencies: source_service.core.processing.chunker
System role: Chunking stage of the ingestion pipeline
"""

from source_service.core.processing.chunker import split_text
from source_service.models import Chunk, ProcessedContent


class ChunkingTask:
    """Split content into chunks with the configured window."""

    def __init__(self, chunk_size: int = 1000, chunk_overlap: int = 200) -> None:
        """
        Initialize chunking task with splitter configuration.

        Args:
            chunk_size: Maximum chunk size in characters
            chunk_overlap: Overlap between consecutive chunks
        """
        self._chunk_size = chunk_size
        self._chunk_overlap = chunk_overlap

    def chunk(self, content: ProcessedContent) -> list[Chunk]:
        """
        Split content text into chunks.

        Args:
            content: Extracted content

        Returns:
            list[Chunk]: Ordered chunks (at least one)
        """
        return split_text(content.text, self._chunk_size, self._chunk_overlap)
