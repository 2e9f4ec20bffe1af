"""Construction service schemas."""

from datetime import datetime
from typing import List, Optional

from pydantic import Field

from schemas.common import CamelModel


class ServiceCreateRequest(CamelModel):
    title: str = Field(min_length=1, max_length=255)
    description: str = Field(min_length=1)
    icon: str = Field(min_length=1, max_length=255, description="Icon name or URL")


class ServiceUpdateRequest(CamelModel):
    """Partial update. Missing or blank fields keep their current value."""

    title: Optional[str] = Field(default=None, max_length=255)
    description: Optional[str] = None
    icon: Optional[str] = Field(default=None, max_length=255)


class ServiceInfo(CamelModel):
    id: int
    title: str
    description: str
    icon: str
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class ServiceResponse(CamelModel):
    success: bool = True
    message: Optional[str] = None
    data: ServiceInfo


class ServiceListResponse(CamelModel):
    success: bool = True
    count: int
    data: List[ServiceInfo]
