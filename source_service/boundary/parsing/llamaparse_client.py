"""
LlamaParse client.

Implements the asynchronous parse protocol: submit a file, poll the job
until it reaches a terminal status, then fetch the extracted markdown.

Dependencies: httpx, source_service.core.processing.polling
System role: Parse service adapter for complex document formats
"""

import enum
import logging
import threading
from pathlib import Path

import httpx

from source_service.configs.parse_service import ParseServiceSettings
from source_service.core.exceptions import ParseJobFailedError, ParseServiceError
from source_service.core.processing.polling import poll_until

logger = logging.getLogger(__name__)


class ParseJobStatus(str, enum.Enum):
    """Job states reported by the parse service."""

    PENDING = "PENDING"
    SUCCESS = "SUCCESS"
    ERROR = "ERROR"
    FAILED = "FAILED"
    CANCELED = "CANCELED"

    @property
    def is_terminal(self) -> bool:
        return self is not ParseJobStatus.PENDING


class LlamaParseClient:
    """Submit/poll/fetch client for the LlamaParse REST API."""

    def __init__(
        self,
        settings: ParseServiceSettings,
        http_client: httpx.Client | None = None,
        cancel_event: threading.Event | None = None,
    ) -> None:
        """
        Initialize parse client.

        Args:
            settings: Parse service settings
            http_client: Pre-built httpx client (tests)
            cancel_event: Shutdown signal that aborts polling
        """
        self._base_url = settings.base_url.rstrip("/")
        self._poll_interval = settings.poll_interval_seconds
        self._max_retries = settings.max_retries
        self._cancel_event = cancel_event
        self._client = http_client or httpx.Client(
            timeout=settings.request_timeout_seconds,
            headers={"Authorization": f"Bearer {settings.api_key}"},
        )

    def close(self) -> None:
        self._client.close()

    def parse_file(self, file_path: str | Path) -> str:
        """
        Parse a local file and return its extracted markdown.

        Args:
            file_path: Path to the document

        Returns:
            str: Extracted markdown text

        Raises:
            ParseServiceError: Transport or HTTP error from the service
            ParseJobFailedError: The service reported the job as failed
            PollExhaustedError: The job stayed pending past the retry budget
            JobCancelledError: Shutdown interrupted polling
        """
        job_id = self.submit(file_path)
        status = self.wait_for_job(job_id)
        if status is not ParseJobStatus.SUCCESS:
            raise ParseJobFailedError(
                f"Parsing failed with status: {status.value}",
                details={"job_id": job_id},
            )
        return self.fetch_result(job_id)

    def submit(self, file_path: str | Path) -> str:
        """
        Upload a file for parsing.

        Args:
            file_path: Path to the document

        Returns:
            str: Parse job ID
        """
        path = Path(file_path)
        with path.open("rb") as handle:
            payload = self._request(
                "POST",
                "/upload",
                files={"file": (path.name, handle)},
            )
        job_id = payload.get("id")
        if not job_id:
            raise ParseServiceError("Upload response did not include a job id")

        logger.info(f"{__name__}:submit - Submitted parse job", extra={"job_id": job_id})
        return job_id

    def get_status(self, job_id: str) -> ParseJobStatus:
        """Fetch a job's current status."""
        payload = self._request("GET", f"/job/{job_id}")
        raw_status = str(payload.get("status", "")).upper()
        try:
            status = ParseJobStatus(raw_status)
        except ValueError:
            logger.warning(
                f"{__name__}:get_status - Unrecognized status {raw_status!r}, treating as pending",
                extra={"job_id": job_id},
            )
            return ParseJobStatus.PENDING

        if status in (ParseJobStatus.ERROR, ParseJobStatus.FAILED) and payload.get("error"):
            raise ParseJobFailedError(
                f"Parsing failed: {payload['error']}",
                details={"job_id": job_id},
            )
        return status

    def wait_for_job(self, job_id: str) -> ParseJobStatus:
        """
        Poll a job until it leaves PENDING.

        Args:
            job_id: Parse job ID

        Returns:
            ParseJobStatus: Terminal status
        """
        return poll_until(
            lambda: self.get_status(job_id),
            lambda status: status.is_terminal,
            interval=self._poll_interval,
            max_attempts=self._max_retries,
            cancel_event=self._cancel_event,
        )

    def fetch_result(self, job_id: str) -> str:
        """Fetch the markdown result of a finished job."""
        payload = self._request("GET", f"/job/{job_id}/result/markdown")
        return payload.get("markdown", "")

    def _request(self, method: str, path: str, **kwargs) -> dict:
        try:
            response = self._client.request(method, f"{self._base_url}{path}", **kwargs)
        except httpx.HTTPError as e:
            raise ParseServiceError(f"Parse service request failed: {e}") from e

        if response.status_code != httpx.codes.OK:
            raise ParseServiceError(self._error_message(response), details={"path": path})

        try:
            payload = response.json()
        except ValueError as e:
            raise ParseServiceError(f"Invalid JSON from parse service: {e}") from e
        if not isinstance(payload, dict):
            raise ParseServiceError(
                f"Expected a JSON object from parse service, got {type(payload).__name__}",
                details={"path": path},
            )
        return payload

    @staticmethod
    def _error_message(response: httpx.Response) -> str:
        try:
            payload = response.json()
        except ValueError:
            payload = None
        detail = payload.get("detail") if isinstance(payload, dict) else None
        if detail:
            return f"llamaparse error (status {response.status_code}): {detail}"
        return f"llamaparse request failed (status {response.status_code}): {response.text}"
