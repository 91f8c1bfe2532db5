"""
Document extractor.

Downloads an uploaded document into a scratch file and extracts its text:
complex formats go through the parse service, plain text formats are
read directly.

Dependencies: source_service.boundary.aws, source_service.boundary.parsing
System role: Extractor for pdf/ppt/doc sources
"""

import logging
from pathlib import Path, PurePosixPath

from source_service.core.exceptions import (
    ExtractionError,
    MissingInputError,
    UnsupportedFormatError,
)
from source_service.core.processing.extractors.base import ContentExtractor
from source_service.models import ExtractorFamily, ProcessedContent, ProcessingJob

logger = logging.getLogger(__name__)

PARSED_EXTENSIONS = frozenset({".pdf", ".ppt", ".pptx", ".doc", ".docx"})
PLAIN_TEXT_EXTENSIONS = frozenset({".txt", ".md", ".csv"})


class DocumentExtractor(ContentExtractor):
    """Extract text from documents stored in the blob store."""

    family = ExtractorFamily.DOCUMENT

    def __init__(self, blob_store, parse_client=None) -> None:
        """
        Args:
            blob_store: BlobStoreClient providing scratch_download()
            parse_client: LlamaParseClient for complex formats (optional)
        """
        self._blob_store = blob_store
        self._parse_client = parse_client

    def extract(self, job: ProcessingJob) -> ProcessedContent:
        source_id = str(job.source_id)
        if not job.s3_bucket or not job.s3_key:
            raise MissingInputError("missing s3 bucket or key", source_id)

        extension = PurePosixPath(job.s3_key).suffix.lower()
        if extension not in PARSED_EXTENSIONS | PLAIN_TEXT_EXTENSIONS:
            raise UnsupportedFormatError(extension, source_id)

        logger.info(
            f"{__name__}:extract - Processing document",
            extra={"source_id": source_id, "bucket": job.s3_bucket, "key": job.s3_key},
        )
        with self._blob_store.scratch_download(job.s3_bucket, job.s3_key) as local_path:
            if extension in PARSED_EXTENSIONS:
                text = self._parse(local_path, source_id)
            else:
                text = self._read_plain_text(local_path, source_id)

        return ProcessedContent(
            title=PurePosixPath(job.s3_key).name,
            text=text,
            metadata={
                "s3_key": job.s3_key,
                "s3_bucket": job.s3_bucket,
                "file_type": extension,
                "source": "s3_document",
            },
        )

    def _parse(self, local_path: Path, source_id: str) -> str:
        if self._parse_client is None:
            raise ExtractionError("parse service client not configured", source_id)
        return self._parse_client.parse_file(local_path)

    @staticmethod
    def _read_plain_text(local_path: Path, source_id: str) -> str:
        try:
            return local_path.read_text(encoding="utf-8", errors="replace")
        except OSError as e:
            raise ExtractionError(f"failed to read local file: {e}", source_id) from e
