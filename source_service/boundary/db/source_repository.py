"""
Source repository.

Reads canonical source records and note bodies, and writes terminal
status and link enrichment. Each write is a single UPDATE in its own
transaction; there is no concurrency token, so the last write wins.

Dependencies: sqlalchemy, source_service.boundary.db.source_model
System role: Store adapter for enrichment and status tracking
"""

import logging
import uuid

from sqlalchemy import select, update
from sqlalchemy.orm import Session, sessionmaker

from source_service.boundary.db.source_model import SourceContentModel, SourceModel
from source_service.core.exceptions import SourceNotFoundError
from source_service.models import SourceRecord, SourceStatus

logger = logging.getLogger(__name__)


class SourceRepository:
    """Store operations needed by the ingestion pipeline."""

    def __init__(self, session_factory: sessionmaker) -> None:
        """
        Initialize repository.

        Args:
            session_factory: Factory producing SQLAlchemy sessions
        """
        self._session_factory = session_factory

    def get_source(self, source_id: uuid.UUID) -> SourceRecord | None:
        """
        Load a source record by ID.

        Args:
            source_id: Source UUID

        Returns:
            SourceRecord | None: Record, or None when no row exists
        """
        with self._session_factory() as session:
            row = session.get(SourceModel, source_id)
            if row is None:
                return None
            return SourceRecord(
                id=row.id,
                type=row.type,
                user_id=row.user_id,
                original_url=row.original_url,
                s3_bucket=row.s3_bucket,
                s3_key=row.s3_key,
                title=row.title or "",
                status=row.status.value,
            )

    def get_note_content(self, source_id: uuid.UUID) -> str | None:
        """
        Return the most recently stored body for a source.

        Args:
            source_id: Source UUID

        Returns:
            str | None: Body text, or None when nothing is stored
        """
        stmt = (
            select(SourceContentModel.content_text)
            .where(SourceContentModel.source_id == source_id)
            .order_by(SourceContentModel.created_at.desc())
            .limit(1)
        )
        with self._session_factory() as session:
            return session.execute(stmt).scalar_one_or_none()

    def update_status(self, source_id: uuid.UUID, status: SourceStatus) -> None:
        """
        Overwrite a source's status.

        Args:
            source_id: Source UUID
            status: New status

        Raises:
            SourceNotFoundError: No row matched
        """
        self._update(source_id, status=status)
        logger.info(
            f"{__name__}:update_status - Source marked as {status.value.upper()}",
            extra={"source_id": str(source_id)},
        )

    def update_title_and_image(
        self,
        source_id: uuid.UUID,
        title: str,
        image_url: str | None,
    ) -> None:
        """
        Backfill a link's title and preview image.

        Empty values leave the stored column untouched.

        Args:
            source_id: Source UUID
            title: Extracted page title
            image_url: Copied preview image URL
        """
        values: dict = {}
        if title:
            values["title"] = title
        if image_url:
            values["image_url"] = image_url
        if not values:
            return
        self._update(source_id, **values)

    def _update(self, source_id: uuid.UUID, **values) -> None:
        stmt = update(SourceModel).where(SourceModel.id == source_id).values(**values)
        session: Session
        with self._session_factory() as session:
            try:
                result = session.execute(stmt)
                if result.rowcount == 0:
                    raise SourceNotFoundError(str(source_id))
                session.commit()
            except Exception as e:
                logger.error(f"{__name__}:_update - {type(e).__name__}: {e}")
                session.rollback()
                raise
