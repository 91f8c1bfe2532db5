"""
Link extractor.

Fetches a page and returns its readable main content.

Dependencies: source_service.boundary.web
System role: Extractor for link sources
"""

import logging

from source_service.core.exceptions import MissingInputError
from source_service.core.processing.extractors.base import ContentExtractor
from source_service.models import ExtractorFamily, ProcessedContent, ProcessingJob

logger = logging.getLogger(__name__)


class LinkExtractor(ContentExtractor):
    """Extract article text from a link's URL."""

    family = ExtractorFamily.LINK

    def __init__(self, page_fetcher) -> None:
        """
        Args:
            page_fetcher: PageFetcher (or compatible) used to download pages
        """
        self._fetcher = page_fetcher

    def extract(self, job: ProcessingJob) -> ProcessedContent:
        if not job.original_url:
            raise MissingInputError("original URL is missing", str(job.source_id))

        logger.info(
            f"{__name__}:extract - Fetching link",
            extra={"source_id": str(job.source_id), "url": job.original_url},
        )
        page = self._fetcher.fetch(job.original_url)

        return ProcessedContent(
            title=page.title or job.title,
            text=page.text,
            metadata={
                "original_url": job.original_url,
                "site_name": page.site_name,
                "image_url": page.image_url,
                "favicon": page.favicon,
            },
        )
