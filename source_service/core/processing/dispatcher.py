"""
Type dispatcher.

Maps a job's declared type onto exactly one extractor. Every extractor
family must be registered, so any recognized type always has a handler;
unrecognized tags surface as UnknownSourceTypeError.

Dependencies: source_service.core.processing.extractors
System role: Routing between enrichment and extraction
"""

from collections.abc import Iterable

from source_service.core.exceptions import UnknownSourceTypeError
from source_service.core.processing.extractors.base import ContentExtractor
from source_service.models import ExtractorFamily, SourceType


class ExtractorDispatcher:
    """Route source types to extractors."""

    def __init__(self, extractors: Iterable[ContentExtractor]) -> None:
        """
        Args:
            extractors: One extractor per ExtractorFamily

        Raises:
            ValueError: When a family has no extractor
        """
        self._by_family: dict[ExtractorFamily, ContentExtractor] = {
            extractor.family: extractor for extractor in extractors
        }
        missing = [family.value for family in ExtractorFamily if family not in self._by_family]
        if missing:
            raise ValueError(f"No extractor registered for: {', '.join(missing)}")

    @staticmethod
    def resolve_type(tag: str, source_id: str | None = None) -> SourceType:
        """
        Parse a declared type tag.

        Raises:
            UnknownSourceTypeError: Tag is not a known SourceType
        """
        try:
            return SourceType(tag)
        except ValueError as e:
            raise UnknownSourceTypeError(tag, source_id) from e

    def extractor_for(self, source_type: SourceType) -> ContentExtractor:
        return self._by_family[source_type.family]
