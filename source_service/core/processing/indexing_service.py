"""
Source indexing service.

Drives one job through dispatch, extraction, chunking, embedding and
upsert, and writes exactly one terminal status per attempt.

Dependencies: extractors, tasks, step_policy, source repository
System role: Pipeline orchestration (coordinates only)
"""

import logging
import time

from source_service.core.exceptions import (
    ContentMissingError,
    EmbeddingError,
    UnknownSourceTypeError,
)
from source_service.core.processing.backfill import LinkMetadataBackfill
from source_service.core.processing.dispatcher import ExtractorDispatcher
from source_service.core.processing.step_policy import PipelineStep, run_step
from source_service.core.processing.tasks import ChunkingTask, EmbeddingTask, VectorStoreTask
from source_service.models import (
    ExtractorFamily,
    ProcessingJob,
    ProcessingResult,
    SourceStatus,
)
from source_service.observability.log_utils import log_exception_with_context

logger = logging.getLogger(__name__)


class SourceIndexingService:
    """Orchestrate extraction -> chunk -> embed -> upsert -> status for one job."""

    def __init__(
        self,
        repository,
        dispatcher: ExtractorDispatcher,
        chunking_task: ChunkingTask,
        embedding_task: EmbeddingTask,
        vector_store_task: VectorStoreTask,
        link_backfill: LinkMetadataBackfill | None = None,
        fail_on_empty_embeddings: bool = True,
        mark_unknown_type_failed: bool = True,
    ) -> None:
        """
        Initialize the service with its collaborators.

        Args:
            repository: SourceRepository used for status writes
            dispatcher: Type -> extractor routing
            chunking_task: Chunking stage
            embedding_task: Embedding stage
            vector_store_task: Upsert stage
            link_backfill: Title/image enrichment for links (optional)
            fail_on_empty_embeddings: Mark failed when no chunk embeds
            mark_unknown_type_failed: Mark failed when the type is unrecognized
        """
        self._repository = repository
        self._dispatcher = dispatcher
        self._chunking_task = chunking_task
        self._embedding_task = embedding_task
        self._vector_store_task = vector_store_task
        self._link_backfill = link_backfill
        self._fail_on_empty_embeddings = fail_on_empty_embeddings
        self._mark_unknown_type_failed = mark_unknown_type_failed

    def process(self, job: ProcessingJob) -> ProcessingResult:
        """
        Process a job end to end.

        Args:
            job: Enriched processing job

        Returns:
            ProcessingResult: Counts and the INDEXED status

        Raises:
            UnknownSourceTypeError: Type not recognized (marked failed if configured)
            SourceServiceError: Any fatal step failure, after marking failed
        """
        start_time = time.perf_counter()
        source_id = str(job.source_id)

        try:
            source_type = self._dispatcher.resolve_type(job.type, source_id)
        except UnknownSourceTypeError:
            logger.error(
                f"{__name__}:process - Unknown job type: {job.type}",
                extra={"source_id": source_id},
            )
            if self._mark_unknown_type_failed:
                self._mark(job, SourceStatus.FAILED)
            raise

        extractor = self._dispatcher.extractor_for(source_type)
        logger.info(
            f"{__name__}:process - Processing {source_type.value} source",
            extra={"source_id": source_id, "user_id": job.user_id},
        )

        try:
            content = run_step(PipelineStep.EXTRACT, extractor.extract, job)
            if not content.text.strip():
                raise ContentMissingError("extracted content is empty", source_id)

            if source_type.family is ExtractorFamily.LINK and self._link_backfill:
                self._link_backfill.apply(job, content)

            chunks = run_step(PipelineStep.CHUNK, self._chunking_task.chunk, content)
            outcome = self._embedding_task.embed(chunks, job, source_type, content)

            if not outcome.vectors and self._fail_on_empty_embeddings:
                raise EmbeddingError(
                    "No chunk could be embedded",
                    {"source_id": source_id, "chunk_count": len(chunks)},
                )

            written = run_step(
                PipelineStep.UPSERT,
                self._vector_store_task.upload,
                outcome.vectors,
                job,
            )
        except Exception as e:
            log_exception_with_context(
                logger,
                f"{__name__}:process - Failed to process {source_type.value} source",
                e,
                source_id=source_id,
            )
            self._mark(job, SourceStatus.FAILED)
            raise

        self._mark(job, SourceStatus.INDEXED)
        elapsed_ms = (time.perf_counter() - start_time) * 1000

        logger.info(
            f"{__name__}:process - Successfully processed and indexed {source_type.value}",
            extra={
                "source_id": source_id,
                "chunk_count": len(chunks),
                "vector_count": written,
                "processing_time_ms": elapsed_ms,
            },
        )
        return ProcessingResult(
            source_id=source_id,
            status=SourceStatus.INDEXED,
            chunk_count=len(chunks),
            vector_count=written,
            skipped_chunks=outcome.skipped,
            processing_time_ms=elapsed_ms,
        )

    def _mark(self, job: ProcessingJob, status: SourceStatus) -> None:
        run_step(PipelineStep.MARK_STATUS, self._repository.update_status, job.source_id, status)
