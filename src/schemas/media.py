"""Media schemas."""

from datetime import datetime
from typing import List, Optional

from schemas.common import CamelModel


class MediaInfo(CamelModel):
    id: int
    filename: str
    original_name: str
    mime_type: str
    size: int
    url: str
    uploaded_at: datetime
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class MediaResponse(CamelModel):
    success: bool = True
    message: Optional[str] = None
    data: MediaInfo


class MediaListResponse(CamelModel):
    success: bool = True
    count: int
    data: List[MediaInfo]
