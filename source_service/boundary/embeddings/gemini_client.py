"""
Gemini embedding client.

Embeds one chunk at a time so that a failure is attributable to a single
chunk and can be skipped by the caller.

Dependencies: langchain_google_genai (via FixedDimensionEmbeddings)
System role: Embedding provider adapter
"""

import logging

from source_service.boundary.embeddings.embeddings_wrapper import FixedDimensionEmbeddings
from source_service.configs.embedding import EmbeddingSettings
from source_service.core.exceptions import EmbeddingError

logger = logging.getLogger(__name__)

RETRIEVAL_DOCUMENT_TASK = "RETRIEVAL_DOCUMENT"


class GeminiEmbeddingClient:
    """Generate document embeddings with Gemini."""

    def __init__(self, settings: EmbeddingSettings, embeddings=None) -> None:
        """
        Initialize embedding client.

        Args:
            settings: Embedding settings (model, dimension, key)
            embeddings: Pre-built LangChain embeddings object (tests)
        """
        self._dimension = settings.output_dimensionality
        if embeddings is None:
            kwargs = {"google_api_key": settings.api_key} if settings.api_key else {}
            embeddings = FixedDimensionEmbeddings(
                model=settings.model,
                dimension=settings.output_dimensionality,
                **kwargs,
            )
        self._embeddings = embeddings

    @property
    def dimension(self) -> int:
        return self._dimension

    def embed(self, text: str) -> list[float]:
        """
        Embed a single text.

        Args:
            text: Chunk text

        Returns:
            list[float]: Embedding vector

        Raises:
            EmbeddingError: Empty text, provider failure or empty response
        """
        if not text or not text.strip():
            raise EmbeddingError("text cannot be empty")

        try:
            result = self._embeddings.embed_documents(
                [text],
                task_type=RETRIEVAL_DOCUMENT_TASK,
            )
        except Exception as e:
            raise EmbeddingError(f"Failed to embed content: {e}") from e

        if not result or not result[0]:
            raise EmbeddingError("No embeddings returned")

        return [float(value) for value in result[0]]
