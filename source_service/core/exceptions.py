"""
Exception hierarchy for the source ingestion service.

Provides layered exception structure for domain-specific errors.
All exceptions include context for observability and debugging, and
declare whether a redelivery of the same job could succeed.

Dependencies: None (pure domain layer)
System role: Centralized exception handling across the worker
"""

from typing import Any


class SourceServiceError(Exception):
    """Base exception for all source service errors."""

    retryable: bool = False

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        """
        Initialize base exception with message and optional context.

        Args:
            message: Human-readable error message
            details: Optional dictionary of additional context for debugging
        """
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def __str__(self) -> str:
        """Return string representation including details."""
        if self.details:
            return f"{self.message} | Details: {self.details}"
        return self.message


class MessageParseError(SourceServiceError):
    """Raised when a queue delivery is not a valid job description."""


class InvalidIdentifierError(SourceServiceError):
    """Raised when a source ID is not a well-formed UUID."""

    def __init__(self, source_id: str) -> None:
        super().__init__(f"Invalid source ID: {source_id!r}", {"source_id": source_id})


class SourceNotFoundError(SourceServiceError):
    """Raised when no source record exists for an ID."""

    def __init__(self, source_id: str) -> None:
        super().__init__(f"Source not found: {source_id}", {"source_id": source_id})


class UnknownSourceTypeError(SourceServiceError):
    """Raised when a job declares a type no extractor handles."""

    def __init__(self, source_type: str, source_id: str | None = None) -> None:
        details: dict[str, Any] = {"type": source_type}
        if source_id:
            details["source_id"] = source_id
        super().__init__(f"Unknown source type: {source_type!r}", details)


class ExtractionError(SourceServiceError):
    """Base exception for content extraction errors."""

    def __init__(
        self,
        message: str,
        source_id: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize extraction error.

        Args:
            message: Error message
            source_id: ID of the source that failed
            details: Additional context
        """
        details = details or {}
        if source_id:
            details["source_id"] = source_id
        super().__init__(message, details)


class MissingInputError(ExtractionError):
    """Raised when a job lacks a field its extractor requires (URL, bucket/key)."""


class UnsupportedFormatError(ExtractionError):
    """Raised when a document's file extension cannot be extracted."""

    def __init__(
        self,
        extension: str,
        source_id: str | None = None,
    ) -> None:
        super().__init__(
            f"Unsupported file extension: {extension or '<none>'}",
            source_id,
            {"file_type": extension},
        )


class ContentMissingError(ExtractionError):
    """Raised when a source has no stored body or its extracted text is blank."""


class FetchFailedError(ExtractionError):
    """Raised when a link cannot be fetched or its content extracted."""

    retryable = True


class BlobDownloadError(ExtractionError):
    """Raised when a document blob cannot be downloaded."""

    retryable = True


class BlobNotFoundError(ExtractionError):
    """Raised when the referenced document blob does not exist."""


class ParseServiceError(ExtractionError):
    """Raised when the parse service rejects a request or is unreachable."""

    retryable = True


class ParseJobFailedError(ExtractionError):
    """Raised when the parse service reports a terminal failure for a job."""


class PollExhaustedError(ExtractionError):
    """Raised when a remote job stays pending past its retry budget."""

    retryable = True

    def __init__(self, attempts: int, details: dict[str, Any] | None = None) -> None:
        details = details or {}
        details["attempts"] = attempts
        self.attempts = attempts
        super().__init__(
            f"Max poll retries ({attempts}) exceeded, job still pending",
            details=details,
        )


class JobCancelledError(SourceServiceError):
    """Raised when shutdown interrupts a job mid-flight."""

    retryable = True


class EmbeddingError(SourceServiceError):
    """Raised when embedding generation fails."""

    retryable = True


class VectorStoreError(SourceServiceError):
    """Raised when vector index operations fail."""

    retryable = True

    def __init__(
        self,
        message: str,
        operation: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize vector store error.

        Args:
            message: Error message
            operation: Operation that failed (upsert)
            details: Additional context
        """
        details = details or {}
        if operation:
            details["operation"] = operation
        super().__init__(message, details)
