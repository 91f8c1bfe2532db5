"""
Note extractor.

Note bodies are written by the upstream API; extraction only reads them.

Dependencies: source_service.boundary.db (via the repository passed in)
System role: Extractor for note sources
"""

from source_service.core.exceptions import ContentMissingError
from source_service.core.processing.extractors.base import ContentExtractor
from source_service.models import ExtractorFamily, ProcessedContent, ProcessingJob

DEFAULT_NOTE_TITLE = "Note"


class NoteExtractor(ContentExtractor):
    """Read a note's stored body."""

    family = ExtractorFamily.NOTE

    def __init__(self, repository) -> None:
        self._repository = repository

    def extract(self, job: ProcessingJob) -> ProcessedContent:
        text = self._repository.get_note_content(job.source_id)
        if text is None or not text.strip():
            raise ContentMissingError(
                f"no content found for source id: {job.source_id}",
                str(job.source_id),
            )
        return ProcessedContent(
            title=job.title or DEFAULT_NOTE_TITLE,
            text=text,
            metadata={},
        )
