"""
Object storage boundary.

Exports: BlobStoreClient
"""

from source_service.boundary.aws.s3_client import BlobStoreClient

__all__ = ["BlobStoreClient"]
