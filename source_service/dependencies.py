"""
Dependency container.

Builds every collaborator of the worker from Settings and wires them into
the message handler. Tests build the pieces directly with fakes.

Dependencies: source_service.configs, source_service.boundary, source_service.core
System role: Composition root for the worker process
"""

import threading
from dataclasses import dataclass, field

from sqlalchemy import Engine

from source_service.boundary.aws.s3_client import BlobStoreClient
from source_service.boundary.db.connection import get_engine, get_session_factory
from source_service.boundary.db.source_repository import SourceRepository
from source_service.boundary.embeddings.gemini_client import GeminiEmbeddingClient
from source_service.boundary.parsing.llamaparse_client import LlamaParseClient
from source_service.boundary.vdb.pinecone_index import PineconeVectorIndex
from source_service.boundary.web.page_fetcher import PageFetcher
from source_service.configs import Settings
from source_service.core.processing.backfill import LinkMetadataBackfill
from source_service.core.processing.dispatcher import ExtractorDispatcher
from source_service.core.processing.enrichment import JobEnricher
from source_service.core.processing.extractors import (
    DocumentExtractor,
    LinkExtractor,
    NoteExtractor,
)
from source_service.core.processing.indexing_service import SourceIndexingService
from source_service.core.processing.tasks import ChunkingTask, EmbeddingTask, VectorStoreTask
from source_service.worker.handler import MessageHandler


@dataclass
class Container:
    """Long-lived collaborators owned by one worker process."""

    engine: Engine
    handler: MessageHandler
    page_fetcher: PageFetcher
    parse_client: LlamaParseClient
    cancel_event: threading.Event = field(default_factory=threading.Event)

    def close(self) -> None:
        self.page_fetcher.close()
        self.parse_client.close()
        self.engine.dispose()


def build_container(settings: Settings, cancel_event: threading.Event | None = None) -> Container:
    """
    Construct the worker's object graph.

    Args:
        settings: Application settings
        cancel_event: Shared shutdown signal (created when omitted)

    Returns:
        Container: Wired handler plus resources to release on shutdown
    """
    cancel_event = cancel_event or threading.Event()
    pipeline = settings.pipeline

    engine = get_engine(settings.database)
    repository = SourceRepository(get_session_factory(engine))
    blob_store = BlobStoreClient(settings.blob_store)
    page_fetcher = PageFetcher(timeout_seconds=pipeline.link_fetch_timeout_seconds)
    parse_client = LlamaParseClient(settings.parse_service, cancel_event=cancel_event)

    dispatcher = ExtractorDispatcher(
        [
            LinkExtractor(page_fetcher),
            NoteExtractor(repository),
            DocumentExtractor(blob_store, parse_client),
        ]
    )
    service = SourceIndexingService(
        repository=repository,
        dispatcher=dispatcher,
        chunking_task=ChunkingTask(pipeline.chunk_size, pipeline.chunk_overlap),
        embedding_task=EmbeddingTask(GeminiEmbeddingClient(settings.embedding)),
        vector_store_task=VectorStoreTask(
            PineconeVectorIndex(settings.vector_index, cancel_event=cancel_event)
        ),
        link_backfill=LinkMetadataBackfill(
            blob_store, repository, settings.blob_store.image_key_prefix
        ),
        fail_on_empty_embeddings=pipeline.fail_on_empty_embeddings,
        mark_unknown_type_failed=pipeline.mark_unknown_type_failed,
    )

    return Container(
        engine=engine,
        handler=MessageHandler(JobEnricher(repository), service),
        page_fetcher=page_fetcher,
        parse_client=parse_client,
        cancel_event=cancel_event,
    )
