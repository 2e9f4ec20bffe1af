from sqlalchemy import Column, DateTime, Integer, String

from .base import Base
from .timestamps import utcnow


class MediaModel(Base):
    """An uploaded image stored under UPLOAD_DIR."""

    __tablename__ = "media"

    id = Column(Integer, primary_key=True, index=True)
    filename = Column(String(255), nullable=False, index=True)  # generated storage name
    original_name = Column(String(255), nullable=False)
    mime_type = Column(String(100), nullable=False, index=True)
    size = Column(Integer, nullable=False)
    url = Column(String(500), nullable=False, unique=True)
    uploaded_at = Column(DateTime(timezone=True), nullable=False, default=utcnow, index=True)
    created_at = Column(DateTime(timezone=True), nullable=False, default=utcnow)
    updated_at = Column(
        DateTime(timezone=True), nullable=False, default=utcnow, onupdate=utcnow
    )
