"""Tests for chunking, embedding and upsert tasks."""

from unittest.mock import MagicMock

from source_service.core.exceptions import EmbeddingError
from source_service.core.processing.tasks import ChunkingTask, EmbeddingTask, VectorStoreTask
from source_service.models import Chunk, SourceType, Vector


class TestChunkingTask:
    def test_uses_configured_window(self, make_content) -> None:
        chunks = ChunkingTask(chunk_size=5, chunk_overlap=2).chunk(make_content("ABCDEFGHIJKL"))

        assert [c.text for c in chunks] == ["ABCDE", "DEFGH", "GHIJK", "JKL"]


class TestEmbeddingTask:
    def test_builds_vectors_in_chunk_order(self, make_job, make_content, fake_embedding_client, source_id) -> None:
        chunks = [Chunk(text="one", index=0), Chunk(text="two", index=1)]

        outcome = EmbeddingTask(fake_embedding_client).embed(
            chunks, make_job(), SourceType.NOTE, make_content(title="T")
        )

        assert [v.id for v in outcome.vectors] == [f"{source_id}_0", f"{source_id}_1"]
        assert [v.metadata["text"] for v in outcome.vectors] == ["one", "two"]
        assert outcome.skipped == []

    def test_failed_chunks_are_reported(self, make_job, make_content) -> None:
        client = MagicMock()
        client.embed.side_effect = EmbeddingError("text cannot be empty")

        outcome = EmbeddingTask(client).embed(
            [Chunk(text="", index=0)], make_job(), SourceType.NOTE, make_content()
        )

        assert outcome.vectors == []
        assert outcome.skipped == [0]


class TestVectorStoreTask:
    def test_namespace_is_user_id(self, make_job, mock_vector_index) -> None:
        vectors = [Vector(id="a_0", values=[0.1])]

        written = VectorStoreTask(mock_vector_index).upload(vectors, make_job(user_id="user_9"))

        mock_vector_index.upsert.assert_called_once_with("user_9", vectors)
        assert written == 1

    def test_empty_list_is_noop(self, make_job, mock_vector_index) -> None:
        assert VectorStoreTask(mock_vector_index).upload([], make_job()) == 0
        mock_vector_index.upsert.assert_not_called()
