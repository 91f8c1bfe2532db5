"""
Source ORM models.

The tables are owned by the upstream API that creates sources; this
worker reads them and writes back status and link enrichment only.

Dependencies: sqlalchemy, source_service.boundary.db.base
System role: Source persistence mapping
"""

import uuid

from sqlalchemy import Enum, ForeignKey, String, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from source_service.boundary.db.base import Base, TimestampMixin, UUIDMixin
from source_service.models import SourceStatus


class SourceModel(Base, UUIDMixin, TimestampMixin):
    """
    Source ORM model tracking ingestion state.

    Attributes:
        id: UUID primary key
        type: Declared type (link, note, pdf, ppt, doc)
        user_id: Owning user
        original_url: Page URL for links
        s3_bucket: Blob bucket for uploaded documents
        s3_key: Blob key for uploaded documents
        title: Display title (backfilled for links)
        image_url: Preview image copied into the blob store (links)
        status: Processing state
    """

    __tablename__ = "sources"

    type: Mapped[str] = mapped_column(String(32), nullable=False)
    user_id: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    original_url: Mapped[str | None] = mapped_column(Text, nullable=True)
    s3_bucket: Mapped[str | None] = mapped_column(String(255), nullable=True)
    s3_key: Mapped[str | None] = mapped_column(Text, nullable=True)
    title: Mapped[str] = mapped_column(Text, nullable=False, default="")
    image_url: Mapped[str | None] = mapped_column(Text, nullable=True)
    status: Mapped[SourceStatus] = mapped_column(
        Enum(
            SourceStatus,
            name="source_status",
            values_callable=lambda enum_cls: [member.value for member in enum_cls],
        ),
        nullable=False,
        default=SourceStatus.PROCESSING,
    )

    def __repr__(self) -> str:
        return f"<SourceModel(id={self.id}, type={self.type}, status={self.status})>"


class SourceContentModel(Base, UUIDMixin, TimestampMixin):
    """Plain text persisted for a source (note bodies)."""

    __tablename__ = "source_contents"

    source_id: Mapped[uuid.UUID] = mapped_column(
        Uuid(as_uuid=True),
        ForeignKey("sources.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    content_text: Mapped[str] = mapped_column(Text, nullable=False)
