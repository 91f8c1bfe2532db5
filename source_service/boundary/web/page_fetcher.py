"""
Web page fetcher.

Downloads a page and extracts its readable main content and metadata.

Dependencies: httpx, trafilatura, beautifulsoup4
System role: Link content source
"""

import logging
from dataclasses import dataclass
from urllib.parse import urljoin

import httpx
import trafilatura
from bs4 import BeautifulSoup

from source_service.core.exceptions import FetchFailedError

logger = logging.getLogger(__name__)

USER_AGENT = "Mozilla/5.0 (compatible; source-service/1.0)"


@dataclass(frozen=True)
class FetchedPage:
    """Readable content of a web page."""

    url: str
    title: str
    text: str
    site_name: str
    image_url: str
    favicon: str = ""


def find_favicon(html: str, base_url: str) -> str:
    """Return the absolute URL of the first <link rel="icon"> in the page, or ""."""
    soup = BeautifulSoup(html, "html.parser")
    for link in soup.find_all("link", href=True):
        rel = link.get("rel") or []
        if isinstance(rel, str):
            rel = rel.split()
        if "icon" in (value.lower() for value in rel):
            return urljoin(base_url, link["href"].strip())
    return ""


class PageFetcher:
    """Fetch pages with a bounded timeout and extract their main text."""

    def __init__(self, timeout_seconds: float = 30.0, http_client: httpx.Client | None = None) -> None:
        self._client = http_client or httpx.Client(
            timeout=timeout_seconds,
            follow_redirects=True,
            headers={"User-Agent": USER_AGENT},
        )

    def close(self) -> None:
        self._client.close()

    def fetch(self, url: str) -> FetchedPage:
        """
        Fetch a URL and extract its article content.

        Args:
            url: Page URL

        Returns:
            FetchedPage: Title, text and metadata

        Raises:
            FetchFailedError: Network, HTTP status or extraction failure
        """
        try:
            response = self._client.get(url)
            response.raise_for_status()
        except httpx.HTTPError as e:
            raise FetchFailedError(f"failed to scrape url: {e}", details={"url": url}) from e

        html = response.text
        text = trafilatura.extract(
            html,
            url=url,
            include_comments=False,
            include_tables=True,
            include_images=False,
        )
        if not text:
            raise FetchFailedError("No readable content extracted", details={"url": url})

        metadata = trafilatura.extract_metadata(html, default_url=url)
        page = FetchedPage(
            url=url,
            title=getattr(metadata, "title", None) or "",
            text=text,
            site_name=getattr(metadata, "sitename", None) or "",
            image_url=getattr(metadata, "image", None) or "",
            favicon=find_favicon(html, url),
        )
        logger.info(
            f"{__name__}:fetch - Extracted page",
            extra={"url": url, "chars": len(page.text)},
        )
        return page
