"""Tests for link, note and document extractors."""

from contextlib import contextmanager
from pathlib import Path
from unittest.mock import MagicMock

import pytest

from source_service.boundary.web.page_fetcher import FetchedPage
from source_service.core.exceptions import (
    BlobDownloadError,
    ContentMissingError,
    ExtractionError,
    FetchFailedError,
    MissingInputError,
    UnsupportedFormatError,
)
from source_service.core.processing.extractors import (
    DocumentExtractor,
    LinkExtractor,
    NoteExtractor,
)


class FakeBlobStore:
    """Writes a fixed payload into a scratch file and records its cleanup."""

    def __init__(self, tmp_path: Path, payload: bytes = b"", error: Exception | None = None):
        self._tmp_path = tmp_path
        self._payload = payload
        self._error = error
        self.downloads: list[tuple[str, str]] = []
        self.scratch_paths: list[Path] = []

    @contextmanager
    def scratch_download(self, bucket: str, key: str):
        self.downloads.append((bucket, key))
        if self._error:
            raise self._error
        path = self._tmp_path / Path(key).name
        path.write_bytes(self._payload)
        self.scratch_paths.append(path)
        try:
            yield path
        finally:
            path.unlink()


# ============================================================================
# Link
# ============================================================================


class TestLinkExtractor:
    def test_returns_page_content_and_metadata(self, make_job) -> None:
        fetcher = MagicMock()
        fetcher.fetch.return_value = FetchedPage(
            url="https://example.com/a",
            title="A Title",
            text="Body text",
            site_name="Example",
            image_url="https://example.com/a.png",
            favicon="https://example.com/favicon.ico",
        )
        job = make_job(type="link", original_url="https://example.com/a")

        content = LinkExtractor(fetcher).extract(job)

        fetcher.fetch.assert_called_once_with("https://example.com/a")
        assert content.title == "A Title"
        assert content.text == "Body text"
        assert content.metadata == {
            "original_url": "https://example.com/a",
            "site_name": "Example",
            "image_url": "https://example.com/a.png",
            "favicon": "https://example.com/favicon.ico",
        }

    def test_falls_back_to_record_title(self, make_job) -> None:
        fetcher = MagicMock()
        fetcher.fetch.return_value = FetchedPage("u", "", "Body", "", "")

        content = LinkExtractor(fetcher).extract(
            make_job(type="link", original_url="u", title="Saved title")
        )

        assert content.title == "Saved title"

    def test_missing_url_raises_before_fetch(self, make_job) -> None:
        fetcher = MagicMock()

        with pytest.raises(MissingInputError, match="original URL is missing"):
            LinkExtractor(fetcher).extract(make_job(type="link"))
        fetcher.fetch.assert_not_called()

    def test_fetch_failure_propagates(self, make_job) -> None:
        fetcher = MagicMock()
        fetcher.fetch.side_effect = FetchFailedError("failed to scrape url: 404")

        with pytest.raises(FetchFailedError):
            LinkExtractor(fetcher).extract(make_job(type="link", original_url="u"))


# ============================================================================
# Note
# ============================================================================


class TestNoteExtractor:
    def test_reads_stored_body(self, make_job, mock_repository, source_id) -> None:
        mock_repository.get_note_content.return_value = "hello world"

        content = NoteExtractor(mock_repository).extract(make_job(title="My note"))

        mock_repository.get_note_content.assert_called_once_with(source_id)
        assert content.text == "hello world"
        assert content.title == "My note"

    def test_untitled_note_uses_default_title(self, make_job, mock_repository) -> None:
        assert NoteExtractor(mock_repository).extract(make_job(title="")).title == "Note"

    def test_missing_body_raises(self, make_job, mock_repository) -> None:
        """Should treat a missing body as permanent."""
        mock_repository.get_note_content.return_value = None

        with pytest.raises(ContentMissingError) as exc_info:
            NoteExtractor(mock_repository).extract(make_job())
        assert exc_info.value.retryable is False

    @pytest.mark.parametrize("body", ["", "   \n  "])
    def test_blank_body_raises(self, make_job, mock_repository, body) -> None:
        """Should treat an empty or whitespace-only body as permanent."""
        mock_repository.get_note_content.return_value = body

        with pytest.raises(ContentMissingError) as exc_info:
            NoteExtractor(mock_repository).extract(make_job())
        assert exc_info.value.retryable is False
        mock_repository.get_note_content.assert_called_once()


# ============================================================================
# Document
# ============================================================================


class TestDocumentExtractor:
    def test_plain_text_is_read_locally(self, make_job, tmp_path) -> None:
        """Should read .txt files without the parse service and clean up."""
        blob_store = FakeBlobStore(tmp_path, "plain body".encode("utf-8"))
        parse_client = MagicMock()
        job = make_job(type="doc", s3_bucket="docs", s3_key="u/notes.txt")

        content = DocumentExtractor(blob_store, parse_client).extract(job)

        assert content.text == "plain body"
        assert content.title == "notes.txt"
        assert content.metadata == {
            "s3_key": "u/notes.txt",
            "s3_bucket": "docs",
            "file_type": ".txt",
            "source": "s3_document",
        }
        parse_client.parse_file.assert_not_called()
        assert not blob_store.scratch_paths[0].exists()

    def test_pdf_goes_through_parse_service(self, make_job, tmp_path) -> None:
        blob_store = FakeBlobStore(tmp_path, b"%PDF-1.4")
        parse_client = MagicMock()
        parse_client.parse_file.return_value = "# Parsed"
        job = make_job(type="pdf", s3_bucket="docs", s3_key="u/Report.PDF")

        content = DocumentExtractor(blob_store, parse_client).extract(job)

        assert content.text == "# Parsed"
        assert content.metadata["file_type"] == ".pdf"
        parse_client.parse_file.assert_called_once_with(blob_store.scratch_paths[0])
        assert not blob_store.scratch_paths[0].exists()

    def test_scratch_file_removed_when_parsing_fails(self, make_job, tmp_path) -> None:
        blob_store = FakeBlobStore(tmp_path, b"data")
        parse_client = MagicMock()
        parse_client.parse_file.side_effect = ExtractionError("parse failed")

        with pytest.raises(ExtractionError):
            DocumentExtractor(blob_store, parse_client).extract(
                make_job(type="ppt", s3_bucket="b", s3_key="deck.pptx")
            )
        assert not blob_store.scratch_paths[0].exists()

    @pytest.mark.parametrize("bucket,key", [("", "a.pdf"), ("b", "")])
    def test_missing_location_raises(self, make_job, tmp_path, bucket, key) -> None:
        blob_store = FakeBlobStore(tmp_path)

        with pytest.raises(MissingInputError):
            DocumentExtractor(blob_store).extract(make_job(type="pdf", s3_bucket=bucket, s3_key=key))
        assert blob_store.downloads == []

    def test_unsupported_extension_raises_before_download(self, make_job, tmp_path) -> None:
        blob_store = FakeBlobStore(tmp_path)

        with pytest.raises(UnsupportedFormatError, match=".exe"):
            DocumentExtractor(blob_store).extract(
                make_job(type="doc", s3_bucket="b", s3_key="setup.exe")
            )
        assert blob_store.downloads == []

    def test_download_failure_propagates(self, make_job, tmp_path) -> None:
        blob_store = FakeBlobStore(tmp_path, error=BlobDownloadError("boom"))

        with pytest.raises(BlobDownloadError):
            DocumentExtractor(blob_store).extract(make_job(type="pdf", s3_bucket="b", s3_key="a.pdf"))

    def test_parse_client_required_for_complex_formats(self, make_job, tmp_path) -> None:
        blob_store = FakeBlobStore(tmp_path, b"data")

        with pytest.raises(ExtractionError, match="parse service client not configured"):
            DocumentExtractor(blob_store).extract(make_job(type="pdf", s3_bucket="b", s3_key="a.pdf"))
