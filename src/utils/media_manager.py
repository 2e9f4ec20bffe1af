"""Media record management.

Media rows describe files kept by ``MediaStorage``. A row may only be
deleted while no project image still references its URL.
"""

import logging
from typing import List

from sqlalchemy.orm import Session

from core.exceptions import ConflictError, NotFoundError
from models.media import MediaModel
from models.project import ProjectImageModel
from utils.upload_validator import MediaStorage

logger = logging.getLogger(__name__)


class MediaNotFoundError(NotFoundError):
    """Exception raised when a media record is not found."""

    default_message = "Image not found"


class MediaInUseError(ConflictError):
    """Exception raised when deleting media that projects still reference."""

    def __init__(self, usage_count: int):
        """Initialize the exception.

        Args:
            usage_count: Number of project images referencing the media URL.
        """
        self.usage_count = usage_count
        super().__init__(
            "Cannot delete image. It is currently in use by one or more projects.",
            usageCount=usage_count,
        )


class MediaManager:
    """Manages media records and their stored files."""

    def __init__(self, db: Session, storage: MediaStorage):
        self.db = db
        self.storage = storage

    def list_media(self) -> List[MediaModel]:
        return (
            self.db.query(MediaModel)
            .order_by(MediaModel.uploaded_at.desc(), MediaModel.id.desc())
            .all()
        )

    def get_media(self, media_id: int) -> MediaModel:
        media = self.db.query(MediaModel).filter(MediaModel.id == media_id).first()
        if media is None:
            raise MediaNotFoundError()
        return media

    def create_media(
        self,
        filename: str,
        original_name: str,
        mime_type: str,
        size: int,
        url: str,
    ) -> MediaModel:
        """Create a media record for a file that is already stored."""
        media = MediaModel(
            filename=filename,
            original_name=original_name,
            mime_type=mime_type,
            size=size,
            url=url,
        )
        try:
            self.db.add(media)
            self.db.commit()
        except Exception:
            self.db.rollback()
            raise
        self.db.refresh(media)
        logger.info("Created media record %s for %s", media.id, filename)
        return media

    def count_references(self, url: str) -> int:
        """Count project images whose src equals the given media URL."""
        return (
            self.db.query(ProjectImageModel)
            .filter(ProjectImageModel.src == url)
            .count()
        )

    def delete_media(self, media_id: int) -> None:
        """Delete a media record and its file unless something references it.

        The lookup, reference count and deletion share one transaction; the
        media row is locked where the database supports ``FOR UPDATE``.

        Raises:
            MediaNotFoundError: If no record has this id.
            MediaInUseError: If project images still reference the media URL.
            OSError: If the stored file exists but cannot be removed.
        """
        try:
            media = (
                self.db.query(MediaModel)
                .filter(MediaModel.id == media_id)
                .with_for_update()
                .first()
            )
            if media is None:
                raise MediaNotFoundError()

            usage_count = self.count_references(media.url)
            if usage_count > 0:
                logger.info(
                    "Refused to delete media %s: referenced %d time(s)",
                    media_id,
                    usage_count,
                )
                raise MediaInUseError(usage_count)

            filename = media.filename
            # Flush the row delete first so a database failure leaves the file in place
            self.db.delete(media)
            self.db.flush()
            self.storage.remove(filename)
            self.db.commit()
        except Exception:
            self.db.rollback()
            raise

        logger.info("Deleted media %s (%s)", media_id, filename)
