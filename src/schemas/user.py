"""Admin user and authentication schemas."""

from datetime import datetime
from typing import Optional

from pydantic import Field

from schemas.common import CamelModel


class AdminUser(CamelModel):
    """Public view of an admin user. Never includes the password hash."""

    id: int
    username: str
    email: Optional[str] = None
    name: str
    role: str
    last_login: Optional[datetime] = None


class LoginRequest(CamelModel):
    # Optional so that missing fields produce the login-specific 400 message
    username: Optional[str] = Field(default=None, description="Admin username")
    password: Optional[str] = Field(default=None, description="Plain text password")


class LoginResponse(CamelModel):
    success: bool = True
    message: str = "Login successful"
    token: str
    user: AdminUser


class VerifyResponse(CamelModel):
    success: bool = True
    valid: bool = True
    user: AdminUser
