"""
Delivery handler.

Decodes one raw queue delivery, enriches it, runs the indexing service
and maps the outcome onto a broker disposition. Transport concerns
(ack, reject, republish) stay in the consumer.

Dependencies: pydantic, sqlalchemy, source_service.core
System role: Per-delivery control flow for the worker
"""

import enum
import logging

from pydantic import ValidationError
from sqlalchemy.exc import SQLAlchemyError

from source_service.core.exceptions import MessageParseError, SourceServiceError
from source_service.core.processing.enrichment import JobEnricher
from source_service.core.processing.indexing_service import SourceIndexingService
from source_service.models import SourceMessage
from source_service.observability.correlation import clear_correlation_id, set_correlation_id
from source_service.observability.log_utils import log_exception_with_context

logger = logging.getLogger(__name__)


class Disposition(str, enum.Enum):
    """What the consumer should do with a delivery."""

    ACK = "ack"
    RETRY = "retry"
    REJECT = "reject"


class MessageHandler:
    """Turn raw deliveries into pipeline runs."""

    def __init__(self, enricher: JobEnricher, service: SourceIndexingService) -> None:
        self._enricher = enricher
        self._service = service

    @staticmethod
    def decode(body: bytes | str) -> SourceMessage:
        """
        Parse a delivery body.

        Raises:
            MessageParseError: Body is not JSON or lacks required fields
        """
        try:
            return SourceMessage.model_validate_json(body)
        except ValidationError as e:
            raise MessageParseError(
                "Invalid source message",
                {"errors": e.error_count(), "body": body[:200]},
            ) from e

    def handle(self, body: bytes | str) -> Disposition:
        """
        Process one delivery.

        Args:
            body: Raw message body

        Returns:
            Disposition: REJECT for poison messages, RETRY for transient
            failures, ACK otherwise
        """
        correlation_id = set_correlation_id()
        try:
            try:
                message = self.decode(body)
            except MessageParseError as e:
                log_exception_with_context(
                    logger, f"{__name__}:handle - Discarding malformed message", e
                )
                return Disposition.REJECT

            logger.info(
                f"{__name__}:handle - Received message",
                extra={
                    "source_id": message.source_id,
                    "type": message.type,
                    "correlation_id": correlation_id,
                },
            )

            try:
                job = self._enricher.enrich(message)
                result = self._service.process(job)
            except SourceServiceError as e:
                log_exception_with_context(
                    logger,
                    f"{__name__}:handle - Processing failed",
                    e,
                    source_id=message.source_id,
                )
                return Disposition.RETRY if e.retryable else Disposition.ACK
            except SQLAlchemyError as e:
                log_exception_with_context(
                    logger,
                    f"{__name__}:handle - Database error",
                    e,
                    source_id=message.source_id,
                )
                return Disposition.RETRY
            except Exception as e:  # pylint: disable=broad-except
                log_exception_with_context(
                    logger,
                    f"{__name__}:handle - Unexpected error",
                    e,
                    source_id=message.source_id,
                )
                return Disposition.ACK

            logger.info(
                f"{__name__}:handle - Source indexed",
                extra={
                    "source_id": result.source_id,
                    "vector_count": result.vector_count,
                    "skipped_chunks": len(result.skipped_chunks),
                },
            )
            return Disposition.ACK
        finally:
            clear_correlation_id()
