"""Inquiry database model.

Contact form submissions from website visitors.
"""

from sqlalchemy import Column, DateTime, Integer, String, Text

from .base import Base
from .timestamps import utcnow

INQUIRY_STATUSES = ("unread", "read", "resolved")


class InquiryModel(Base):
    """Inquiry database model."""

    __tablename__ = "inquiries"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(255), nullable=False)
    email = Column(String(255), nullable=False, index=True)
    phone = Column(String(50), nullable=True)
    message = Column(Text, nullable=False)
    status = Column(String(20), nullable=False, default="unread", index=True)
    created_at = Column(DateTime(timezone=True), nullable=False, default=utcnow, index=True)
    updated_at = Column(
        DateTime(timezone=True), nullable=False, default=utcnow, onupdate=utcnow
    )
