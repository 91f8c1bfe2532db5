"""Tests for per-delivery control flow and disposition mapping."""

import json
import uuid
from unittest.mock import MagicMock

import pytest
from sqlalchemy.exc import OperationalError

from source_service.core.exceptions import (
    ContentMissingError,
    FetchFailedError,
    InvalidIdentifierError,
    SourceNotFoundError,
    UnknownSourceTypeError,
)
from source_service.core.processing.dispatcher import ExtractorDispatcher
from source_service.core.processing.extractors import NoteExtractor
from source_service.core.processing.indexing_service import SourceIndexingService
from source_service.core.processing.tasks import ChunkingTask, EmbeddingTask, VectorStoreTask
from source_service.models import ExtractorFamily, ProcessingResult, SourceStatus
from source_service.observability.correlation import get_correlation_id
from source_service.worker.handler import Disposition, MessageHandler


def _body(**overrides) -> bytes:
    payload = {"source_id": str(uuid.uuid4()), "type": "note", "user_id": "user_1"}
    payload.update(overrides)
    return json.dumps(payload).encode("utf-8")


@pytest.fixture
def enricher():
    return MagicMock()


@pytest.fixture
def service():
    service = MagicMock()
    service.process.return_value = ProcessingResult(
        source_id="s", status=SourceStatus.INDEXED, chunk_count=1, vector_count=1
    )
    return service


@pytest.fixture
def handler(enricher, service) -> MessageHandler:
    return MessageHandler(enricher, service)


class TestDecode:
    @pytest.mark.parametrize(
        "body",
        [
            b"not json",
            b"{}",
            json.dumps({"source_id": "", "type": "note", "user_id": "u"}).encode(),
            json.dumps({"source_id": "x", "type": "note"}).encode(),
        ],
    )
    def test_poison_messages_are_rejected(self, handler, enricher, body) -> None:
        """Should reject undecodable bodies without touching the store."""
        assert handler.handle(body) is Disposition.REJECT
        enricher.enrich.assert_not_called()

    def test_decodes_valid_body(self) -> None:
        message = MessageHandler.decode(_body(type="link", user_id="user_7"))

        assert message.type == "link"
        assert message.user_id == "user_7"


class TestDispositions:
    def test_success_is_acked(self, handler, enricher, service) -> None:
        assert handler.handle(_body()) is Disposition.ACK
        service.process.assert_called_once_with(enricher.enrich.return_value)

    @pytest.mark.parametrize(
        "error",
        [
            InvalidIdentifierError("nope"),
            SourceNotFoundError("abc"),
        ],
    )
    def test_enrichment_failures_are_acked(self, handler, enricher, service, error) -> None:
        enricher.enrich.side_effect = error

        assert handler.handle(_body()) is Disposition.ACK
        service.process.assert_not_called()

    @pytest.mark.parametrize(
        "error",
        [ContentMissingError("no body"), UnknownSourceTypeError("video")],
    )
    def test_permanent_failures_are_acked(self, handler, service, error) -> None:
        service.process.side_effect = error

        assert handler.handle(_body()) is Disposition.ACK

    def test_blank_note_is_acked_without_embedding(
        self, enricher, make_job, mock_repository, fake_embedding_client, mock_vector_index
    ) -> None:
        """Should ack a whitespace-only note instead of republishing it."""
        mock_repository.get_note_content.return_value = "   \n  "
        enricher.enrich.return_value = make_job(type="note")
        service = SourceIndexingService(
            repository=mock_repository,
            dispatcher=ExtractorDispatcher(
                [
                    MagicMock(family=ExtractorFamily.LINK),
                    NoteExtractor(mock_repository),
                    MagicMock(family=ExtractorFamily.DOCUMENT),
                ]
            ),
            chunking_task=ChunkingTask(1000, 200),
            embedding_task=EmbeddingTask(fake_embedding_client),
            vector_store_task=VectorStoreTask(mock_vector_index),
        )

        assert MessageHandler(enricher, service).handle(_body()) is Disposition.ACK
        fake_embedding_client.embed.assert_not_called()
        mock_vector_index.upsert.assert_not_called()
        mock_repository.update_status.assert_called_once_with(
            enricher.enrich.return_value.source_id, SourceStatus.FAILED
        )

    def test_retryable_failure_is_retried(self, handler, service) -> None:
        service.process.side_effect = FetchFailedError("timeout")

        assert handler.handle(_body()) is Disposition.RETRY

    def test_database_error_is_retried(self, handler, enricher) -> None:
        enricher.enrich.side_effect = OperationalError("SELECT 1", {}, Exception("gone"))

        assert handler.handle(_body()) is Disposition.RETRY

    def test_unexpected_error_is_acked(self, handler, service) -> None:
        service.process.side_effect = KeyError("bug")

        assert handler.handle(_body()) is Disposition.ACK


class TestCorrelation:
    def test_correlation_id_is_scoped_to_delivery(self, handler, service) -> None:
        seen = []
        service.process.side_effect = lambda job: seen.append(get_correlation_id()) or MagicMock(
            source_id="s", vector_count=0, skipped_chunks=[]
        )

        handler.handle(_body())

        assert seen[0] != ""
        assert get_correlation_id() == ""
