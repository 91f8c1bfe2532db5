"""
Web page boundary.

Exports: PageFetcher, FetchedPage
"""

from source_service.boundary.web.page_fetcher import FetchedPage, PageFetcher

__all__ = ["PageFetcher", "FetchedPage"]
