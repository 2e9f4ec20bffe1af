"""Project portfolio schemas."""

from datetime import datetime
from typing import List, Optional

from pydantic import Field

from schemas.common import CamelModel


class ProjectImageIn(CamelModel):
    src: str = Field(min_length=1, max_length=500, description="Image URL, usually a media URL")
    alt: Optional[str] = Field(default=None, max_length=255)
    thumbnail: Optional[str] = Field(default=None, max_length=500)


class ProjectImageInfo(CamelModel):
    id: int
    src: str
    alt: Optional[str] = None
    thumbnail: Optional[str] = None


class ProjectCreateRequest(CamelModel):
    title: str = Field(min_length=1, max_length=255)
    description: str = Field(min_length=1)
    category: str = Field(min_length=1, max_length=100)
    completion_date: datetime
    location: str = Field(min_length=1, max_length=255)
    images: List[ProjectImageIn] = Field(default_factory=list)


class ProjectUpdateRequest(CamelModel):
    """Partial update. An ``images`` list replaces every existing image."""

    title: Optional[str] = Field(default=None, max_length=255)
    description: Optional[str] = None
    category: Optional[str] = Field(default=None, max_length=100)
    completion_date: Optional[datetime] = None
    location: Optional[str] = Field(default=None, max_length=255)
    images: Optional[List[ProjectImageIn]] = None


class ProjectInfo(CamelModel):
    id: int
    title: str
    description: str
    category: str
    completion_date: datetime
    location: str
    images: List[ProjectImageInfo] = Field(default_factory=list)
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class ProjectResponse(CamelModel):
    success: bool = True
    message: Optional[str] = None
    data: ProjectInfo


class ProjectListResponse(CamelModel):
    success: bool = True
    count: int
    data: List[ProjectInfo]
