"""Contact form inquiry schemas."""

from datetime import datetime
from typing import List, Literal, Optional

from pydantic import EmailStr, Field

from schemas.common import CamelModel

InquiryStatus = Literal["unread", "read", "resolved"]


class InquiryCreateRequest(CamelModel):
    name: str = Field(min_length=1, max_length=255)
    email: EmailStr
    phone: Optional[str] = Field(default=None, max_length=50)
    message: str = Field(min_length=1)


class InquiryStatusUpdateRequest(CamelModel):
    status: Optional[str] = None


class InquiryInfo(CamelModel):
    id: int
    name: str
    email: str
    phone: Optional[str] = None
    message: str
    status: InquiryStatus
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class InquiryResponse(CamelModel):
    success: bool = True
    message: Optional[str] = None
    data: InquiryInfo


class InquiryListResponse(CamelModel):
    success: bool = True
    count: int
    data: List[InquiryInfo]


class UnreadCountResponse(CamelModel):
    success: bool = True
    count: int
