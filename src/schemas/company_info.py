"""Company information schemas."""

from datetime import datetime
from typing import Optional

from pydantic import EmailStr, Field

from schemas.common import CamelModel


class CompanyInfoUpdateRequest(CamelModel):
    """Update for the company profile.

    Name, history and mission keep their value when blank. The optional
    contact fields are replaced whenever they are present, so ``null`` clears
    them.
    """

    company_name: Optional[str] = Field(default=None, max_length=255)
    history: Optional[str] = None
    mission: Optional[str] = None
    team_info: Optional[str] = None
    address: Optional[str] = Field(default=None, max_length=500)
    phone: Optional[str] = Field(default=None, max_length=50)
    email: Optional[EmailStr] = None


class CompanyInfo(CamelModel):
    id: int
    company_name: str
    history: str
    mission: str
    team_info: Optional[str] = None
    address: Optional[str] = None
    phone: Optional[str] = None
    email: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class CompanyInfoResponse(CamelModel):
    success: bool = True
    message: Optional[str] = None
    data: CompanyInfo
