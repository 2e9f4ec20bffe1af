"""Service database model.

Construction services offered by the company.
"""

from sqlalchemy import Column, DateTime, Integer, String, Text

from .base import Base
from .timestamps import utcnow


class ServiceModel(Base):
    """Service database model."""

    __tablename__ = "services"

    id = Column(Integer, primary_key=True, index=True)
    title = Column(String(255), nullable=False, index=True)
    description = Column(Text, nullable=False)
    icon = Column(String(255), nullable=False)
    created_at = Column(DateTime(timezone=True), nullable=False, default=utcnow, index=True)
    updated_at = Column(
        DateTime(timezone=True), nullable=False, default=utcnow, onupdate=utcnow
    )
