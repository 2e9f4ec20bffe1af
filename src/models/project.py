from sqlalchemy import Column, DateTime, ForeignKey, Integer, String, Text
from sqlalchemy.orm import relationship

from .base import Base
from .timestamps import utcnow


class ProjectModel(Base):
    __tablename__ = "projects"

    id = Column(Integer, primary_key=True, index=True)
    title = Column(String(255), nullable=False)
    description = Column(Text, nullable=False)
    category = Column(String(100), nullable=False, index=True)
    completion_date = Column(DateTime(timezone=True), nullable=False, index=True)
    location = Column(String(255), nullable=False)
    created_at = Column(DateTime(timezone=True), nullable=False, default=utcnow)
    updated_at = Column(
        DateTime(timezone=True), nullable=False, default=utcnow, onupdate=utcnow
    )

    images = relationship(
        "ProjectImageModel",
        back_populates="project",
        cascade="all, delete-orphan",
        order_by="ProjectImageModel.id",
    )


class ProjectImageModel(Base):
    __tablename__ = "project_images"

    id = Column(Integer, primary_key=True, index=True)
    project_id = Column(
        Integer, ForeignKey("projects.id", ondelete="CASCADE"), nullable=False, index=True
    )
    # Media URL this image points at; media deletion is blocked while it matches
    src = Column(String(500), nullable=False, index=True)
    alt = Column(String(255), nullable=True)
    thumbnail = Column(String(500), nullable=True)
    created_at = Column(DateTime(timezone=True), nullable=False, default=utcnow)
    updated_at = Column(
        DateTime(timezone=True), nullable=False, default=utcnow, onupdate=utcnow
    )

    project = relationship("ProjectModel", back_populates="images")
