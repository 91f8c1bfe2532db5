"""
Job enrichment.

Combines a decoded queue message with the canonical source record.

Dependencies: source_service.boundary.db (repository passed in)
System role: First pipeline stage after message decode
"""

import uuid

from source_service.core.exceptions import InvalidIdentifierError, SourceNotFoundError
from source_service.models import ProcessingJob, SourceMessage


class JobEnricher:
    """Build immutable processing jobs from queue messages."""

    def __init__(self, repository) -> None:
        self._repository = repository

    def enrich(self, message: SourceMessage) -> ProcessingJob:
        """
        Load the source record and build the job.

        Args:
            message: Decoded queue message

        Returns:
            ProcessingJob: Message fields plus URL, bucket/key and title

        Raises:
            InvalidIdentifierError: source_id is not a UUID
            SourceNotFoundError: No record for source_id
        """
        try:
            source_uuid = uuid.UUID(message.source_id)
        except ValueError as e:
            raise InvalidIdentifierError(message.source_id) from e

        record = self._repository.get_source(source_uuid)
        if record is None:
            raise SourceNotFoundError(str(source_uuid))

        return ProcessingJob(
            source_id=source_uuid,
            type=message.type,
            user_id=message.user_id,
            original_url=record.original_url or "",
            s3_bucket=record.s3_bucket or "",
            s3_key=record.s3_key or "",
            title=record.title,
        )
