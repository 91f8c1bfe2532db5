"""
Vector index boundary.

Exports: PineconeVectorIndex
"""

from source_service.boundary.vdb.pinecone_index import PineconeVectorIndex

__all__ = ["PineconeVectorIndex"]
