"""Company information database model.

A single row holding the company profile shown on the website.
"""

from sqlalchemy import Column, DateTime, Integer, String, Text

from .base import Base
from .timestamps import utcnow


class CompanyInfoModel(Base):
    """Company information database model."""

    __tablename__ = "company_info"

    id = Column(Integer, primary_key=True, index=True)
    company_name = Column(String(255), nullable=False)
    history = Column(Text, nullable=False)
    mission = Column(Text, nullable=False)
    team_info = Column(Text, nullable=True)
    address = Column(String(500), nullable=True)
    phone = Column(String(50), nullable=True)
    email = Column(String(255), nullable=True)
    created_at = Column(DateTime(timezone=True), nullable=False, default=utcnow)
    updated_at = Column(
        DateTime(timezone=True), nullable=False, default=utcnow, onupdate=utcnow
    )
