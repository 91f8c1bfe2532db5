"""
Extractor interface.

Dependencies: source_service.models
System role: Common capability shared by link, note and document extraction
"""

from abc import ABC, abstractmethod

from source_service.models import ExtractorFamily, ProcessedContent, ProcessingJob


class ContentExtractor(ABC):
    """Convert a processing job into normalized content."""

    family: ExtractorFamily

    @abstractmethod
    def extract(self, job: ProcessingJob) -> ProcessedContent:
        """
        Extract title, text and metadata for a job.

        Args:
            job: Enriched processing job

        Returns:
            ProcessedContent: Normalized content

        Raises:
            ExtractionError: Any extraction failure
        """
