"""
Shared test fixtures and configuration for entire test suite.

Provides: job/content factories, in-memory SQLite session factory,
fake collaborators for the pipeline
Dependencies: pytest, sqlalchemy
System role: Test infrastructure and fixture management
"""

import uuid
from unittest.mock import MagicMock

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from source_service.models import ProcessedContent, ProcessingJob


@pytest.fixture
def source_id() -> uuid.UUID:
    return uuid.UUID("550e8400-e29b-41d4-a716-446655440000")


@pytest.fixture
def make_job(source_id):
    """Factory for ProcessingJob with sensible defaults."""

    def _make(**overrides) -> ProcessingJob:
        fields = {
            "source_id": source_id,
            "type": "note",
            "user_id": "user_1",
            "title": "",
        }
        fields.update(overrides)
        return ProcessingJob(**fields)

    return _make


@pytest.fixture
def make_content():
    def _make(text: str = "hello world", title: str = "Title", **metadata) -> ProcessedContent:
        return ProcessedContent(title=title, text=text, metadata=metadata)

    return _make


@pytest.fixture
def session_factory():
    """
    Create in-memory SQLite database for testing.

    Yields:
        sessionmaker: Factory bound to a fresh schema
    """
    from source_service.boundary.db.base import Base

    engine = create_engine(
        "sqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(engine)
    yield sessionmaker(bind=engine, expire_on_commit=False)
    Base.metadata.drop_all(engine)
    engine.dispose()


@pytest.fixture
def mock_repository():
    """
    Create mock SourceRepository for testing.

    Returns:
        MagicMock: Repository recording status writes
    """
    repository = MagicMock()
    repository.get_note_content.return_value = "note body"
    return repository


@pytest.fixture
def fake_embedding_client():
    """Embedding client returning a constant 3-d vector."""
    client = MagicMock()
    client.embed.return_value = [0.1, 0.2, 0.3]
    return client


@pytest.fixture
def mock_vector_index():
    index = MagicMock()
    index.upsert.side_effect = lambda namespace, vectors: len(vectors)
    return index
