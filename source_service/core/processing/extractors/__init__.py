"""
Content extractors, one per extractor family.

Exports: ContentExtractor, LinkExtractor, DocumentExtractor, NoteExtractor
"""

from .base import ContentExtractor
from .document_extractor import DocumentExtractor
from .link_extractor import LinkExtractor
from .note_extractor import NoteExtractor

__all__ = [
    "ContentExtractor",
    "LinkExtractor",
    "DocumentExtractor",
    "NoteExtractor",
]
