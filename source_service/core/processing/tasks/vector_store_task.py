"""
Vector upsert task.

Writes a source's vectors into the namespace of the user who owns it.

Dependencies: source_service.boundary.vdb (index passed in)
System role: Upsert stage of the ingestion pipeline
"""

import logging

from source_service.models import ProcessingJob, Vector

logger = logging.getLogger(__name__)


class VectorStoreTask:
    """Upsert vectors with per-user namespace isolation."""

    def __init__(self, vector_index) -> None:
        """
        Args:
            vector_index: Index exposing upsert(namespace, vectors) -> int
        """
        self._index = vector_index

    def upload(self, vectors: list[Vector], job: ProcessingJob) -> int:
        """
        Upsert vectors under the job owner's namespace.

        An empty vector list is a no-op.

        Args:
            vectors: Vectors to write
            job: Job being processed (user_id selects the namespace)

        Returns:
            int: Number of vectors written

        Raises:
            VectorStoreError: When the index rejects the upsert
        """
        if not vectors:
            logger.info(
                f"{__name__}:upload - No vectors to upsert",
                extra={"source_id": str(job.source_id)},
            )
            return 0
        return self._index.upsert(job.user_id, vectors)
