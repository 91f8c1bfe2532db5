"""
S3-compatible blob store client.

Downloads uploaded documents into scratch files whose lifetime is scoped
to a ``with`` block, and copies link preview images into the bucket.

Dependencies: boto3, httpx
System role: Blob store adapter for the document extractor and link backfill
"""

import logging
import shutil
import tempfile
import time
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path, PurePosixPath

import boto3
import httpx
from botocore.exceptions import BotoCoreError, ClientError

from source_service.configs.blob_store import BlobStoreSettings
from source_service.core.exceptions import BlobDownloadError, BlobNotFoundError

logger = logging.getLogger(__name__)

IMAGE_FETCH_TIMEOUT_SECONDS = 30.0

_IMAGE_EXTENSIONS = (
    ("png", ".png"),
    ("gif", ".gif"),
    ("webp", ".webp"),
)


class BlobStoreClient:
    """Client for the S3-compatible document bucket."""

    def __init__(self, settings: BlobStoreSettings, s3_client=None) -> None:
        """
        Initialize blob store client.

        Args:
            settings: Blob store settings (endpoint, credentials, bucket)
            s3_client: Pre-built boto3 client (tests)
        """
        self._bucket = settings.bucket
        self._endpoint = settings.endpoint
        self._s3_client = s3_client or boto3.client(
            "s3",
            region_name=settings.region or None,
            endpoint_url=settings.endpoint or None,
            aws_access_key_id=settings.access_key or None,
            aws_secret_access_key=settings.secret_key or None,
        )

    @property
    def bucket(self) -> str:
        return self._bucket

    @contextmanager
    def scratch_download(self, bucket: str, key: str) -> Iterator[Path]:
        """
        Download an object to a scratch file that is removed on exit.

        The scratch directory is deleted however the block exits: normal
        return, exception, or KeyboardInterrupt/SystemExit during shutdown.

        Args:
            bucket: Bucket name (falls back to the configured bucket when empty)
            key: Object key

        Yields:
            Path: Local path of the downloaded file (keeps the key's extension)

        Raises:
            BlobNotFoundError: The object does not exist
            BlobDownloadError: Any other download failure
        """
        bucket = bucket or self._bucket
        filename = PurePosixPath(key).name
        if not filename:
            raise BlobNotFoundError(f"Invalid object key: {key!r}", details={"key": key})

        temp_dir = tempfile.mkdtemp(prefix="source_service_")
        local_path = Path(temp_dir) / filename
        try:
            try:
                self._s3_client.download_file(
                    Bucket=bucket,
                    Key=key,
                    Filename=str(local_path),
                )
            except ClientError as e:
                error_code = e.response.get("Error", {}).get("Code", "Unknown")
                if error_code in ("404", "NoSuchKey"):
                    raise BlobNotFoundError(
                        f"File not found in blob store: {bucket}/{key}",
                        details={"bucket": bucket, "key": key},
                    ) from e
                raise BlobDownloadError(
                    f"Failed to download from blob store: {e}",
                    details={"bucket": bucket, "key": key},
                ) from e
            except BotoCoreError as e:
                raise BlobDownloadError(
                    f"Failed to download from blob store: {e}",
                    details={"bucket": bucket, "key": key},
                ) from e

            logger.info(
                f"{__name__}:scratch_download - Downloaded object",
                extra={"bucket": bucket, "key": key, "path": str(local_path)},
            )
            yield local_path
        finally:
            shutil.rmtree(temp_dir, ignore_errors=True)

    def upload_from_url(self, image_url: str, key_prefix: str) -> str:
        """
        Copy an image from a URL into the bucket.

        Args:
            image_url: Remote image URL
            key_prefix: Key prefix (e.g. "links/{user_id}")

        Returns:
            str: Public URL of the uploaded object ("" when image_url is empty)

        Raises:
            httpx.HTTPError: Image download failed
            ClientError: Upload failed
        """
        if not image_url:
            return ""

        response = httpx.get(image_url, timeout=IMAGE_FETCH_TIMEOUT_SECONDS, follow_redirects=True)
        response.raise_for_status()

        content_type = response.headers.get("Content-Type", "") or "application/octet-stream"
        key = f"{key_prefix}/{time.time_ns()}{self._extension_for(content_type)}"

        self._s3_client.put_object(
            Bucket=self._bucket,
            Key=key,
            Body=response.content,
            ContentType=content_type,
            ACL="public-read",
        )
        return self.public_url(key)

    def public_url(self, key: str) -> str:
        """
        Build the virtual-hosted style public URL for a key.

        Args:
            key: Object key

        Returns:
            str: https://{bucket}.{endpoint host}/{key}
        """
        host = self._endpoint.removeprefix("https://").removeprefix("http://").rstrip("/")
        if not host:
            host = "s3.amazonaws.com"
        return f"https://{self._bucket}.{host}/{key}"

    @staticmethod
    def _extension_for(content_type: str) -> str:
        for marker, extension in _IMAGE_EXTENSIONS:
            if marker in content_type:
                return extension
        return ".jpg"

