"""
Database boundary.

Exports: Base, SourceModel, SourceContentModel, SourceRepository,
get_engine, get_session_factory
"""

from source_service.boundary.db.base import Base
from source_service.boundary.db.connection import get_engine, get_session_factory
from source_service.boundary.db.source_model import SourceContentModel, SourceModel
from source_service.boundary.db.source_repository import SourceRepository

__all__ = [
    "Base",
    "SourceModel",
    "SourceContentModel",
    "SourceRepository",
    "get_engine",
    "get_session_factory",
]
