"""
Embedding provider boundary.

Exports: GeminiEmbeddingClient, FixedDimensionEmbeddings
"""

from source_service.boundary.embeddings.embeddings_wrapper import FixedDimensionEmbeddings
from source_service.boundary.embeddings.gemini_client import GeminiEmbeddingClient

__all__ = ["GeminiEmbeddingClient", "FixedDimensionEmbeddings"]
