"""
Link metadata backfill.

Copies a link's preview image into the blob store and writes the page
title and image URL back to the source record. Both steps are best
effort: failures are logged and never change the job's outcome.

Dependencies: source_service.boundary.aws, source_service.boundary.db
System role: Collateral enrichment for link sources
"""

import logging

from source_service.core.processing.step_policy import PipelineStep, run_step
from source_service.models import ProcessedContent, ProcessingJob

logger = logging.getLogger(__name__)


class LinkMetadataBackfill:
    """Best-effort title and image enrichment for links."""

    def __init__(self, blob_store, repository, image_key_prefix: str = "links") -> None:
        self._blob_store = blob_store
        self._repository = repository
        self._image_key_prefix = image_key_prefix

    def apply(self, job: ProcessingJob, content: ProcessedContent) -> str:
        """
        Copy the preview image and update title/image on the record.

        Args:
            job: Link job
            content: Extracted link content

        Returns:
            str: Stored image URL ("" when no image was copied)
        """
        context = {"source_id": str(job.source_id)}
        image_url = ""
        remote_image = content.metadata.get("image_url") or ""
        if remote_image:
            image_url = run_step(
                PipelineStep.IMAGE_BACKFILL,
                self._blob_store.upload_from_url,
                remote_image,
                f"{self._image_key_prefix}/{job.user_id}",
                fallback="",
                context=context,
            )
            if image_url:
                logger.info(f"{__name__}:apply - Image uploaded: {image_url}", extra=context)

        run_step(
            PipelineStep.TITLE_BACKFILL,
            self._repository.update_title_and_image,
            job.source_id,
            content.title,
            image_url or None,
            context=context,
        )
        return image_url
