"""
Task modules for the ingestion pipeline.

Exports: ChunkingTask, EmbeddingTask, EmbeddingOutcome, VectorStoreTask
"""

from .chunking_task import ChunkingTask
from .embedding_task import EmbeddingOutcome, EmbeddingTask
from .vector_store_task import VectorStoreTask

__all__ = [
    "ChunkingTask",
    "EmbeddingTask",
    "EmbeddingOutcome",
    "VectorStoreTask",
]
