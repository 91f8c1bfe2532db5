"""
Pinecone vector index client.

Upserts chunk vectors into a per-user namespace. Vector IDs are
deterministic, so re-upserting a source overwrites its previous vectors.

Dependencies: pinecone, tenacity
System role: Vector index adapter
"""

import logging
import threading
from collections.abc import Sequence

from pinecone import Pinecone
from tenacity import (
    Retrying,
    retry_if_not_exception_type,
    stop_after_attempt,
    wait_exponential_jitter,
)

from source_service.configs.vector_index import VectorIndexSettings
from source_service.core.exceptions import JobCancelledError, VectorStoreError
from source_service.models import Vector

logger = logging.getLogger(__name__)

UPSERT_ATTEMPTS = 3


class PineconeVectorIndex:
    """Namespaced upserts into one Pinecone index."""

    def __init__(
        self,
        settings: VectorIndexSettings,
        index=None,
        cancel_event: threading.Event | None = None,
    ) -> None:
        """
        Initialize index client.

        Args:
            settings: Pinecone settings (key, host, batch size)
            index: Pre-built index handle (tests)
            cancel_event: Shutdown signal that cuts retry backoff short

        Raises:
            ValueError: When host is missing and no index handle is given
        """
        self._batch_size = max(1, settings.upsert_batch_size)
        if index is None:
            if not settings.host:
                raise ValueError("PINECONE_HOST cannot be empty")
            index = Pinecone(api_key=settings.api_key).Index(host=settings.host)
        self._index = index
        self._cancel_event = cancel_event or threading.Event()

    def _upsert_batch(self, records: list[dict], namespace: str) -> None:
        def attempt() -> None:
            if self._cancel_event.is_set():
                raise JobCancelledError("Upsert cancelled by shutdown")
            self._index.upsert(vectors=records, namespace=namespace)

        retrying = Retrying(
            retry=retry_if_not_exception_type(JobCancelledError),
            stop=stop_after_attempt(UPSERT_ATTEMPTS),
            wait=wait_exponential_jitter(initial=1, max=10, jitter=1),
            sleep=self._cancel_event.wait,
            before_sleep=lambda retry_state: logger.warning(
                f"{__name__}:_upsert_batch - Retry {retry_state.attempt_number}/{UPSERT_ATTEMPTS}"
            ),
            reraise=True,
        )
        retrying(attempt)

    def upsert(self, namespace: str, vectors: Sequence[Vector]) -> int:
        """
        Upsert vectors into a namespace in batches.

        Args:
            namespace: Tenant namespace (the owning user ID)
            vectors: Vectors to write

        Returns:
            int: Number of vectors written

        Raises:
            ValueError: When namespace is empty
            VectorStoreError: When a batch fails after retries
            JobCancelledError: When shutdown is signalled mid-upsert
        """
        if not namespace:
            raise ValueError("namespace cannot be empty")
        if not vectors:
            return 0

        records = [vector.to_record() for vector in vectors]
        for start in range(0, len(records), self._batch_size):
            batch = records[start : start + self._batch_size]
            try:
                self._upsert_batch(batch, namespace)
            except JobCancelledError:
                logger.warning(
                    f"{__name__}:upsert - Cancelled by shutdown",
                    extra={"namespace": namespace, "batch_start": start},
                )
                raise
            except Exception as e:
                logger.error(
                    f"{__name__}:upsert - {type(e).__name__}: {e}",
                    extra={"namespace": namespace, "batch_start": start},
                )
                raise VectorStoreError(
                    f"Failed to upsert vectors: {e}",
                    operation="upsert",
                    details={"namespace": namespace, "vector_count": len(records)},
                ) from e

        logger.info(
            f"{__name__}:upsert - Upserted vectors",
            extra={"namespace": namespace, "vector_count": len(records)},
        )
        return len(records)
