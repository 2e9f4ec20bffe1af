"""Admin user database model.

This module defines the AdminUser database model using SQLAlchemy.
"""

from sqlalchemy import Column, DateTime, Integer, String
from sqlalchemy.orm import validates

from .base import Base
from .timestamps import utcnow

# Prefixes produced by bcrypt.hashpw
BCRYPT_HASH_PREFIXES = ("$2a$", "$2b$", "$2y$")


class AdminUserModel(Base):
    """Admin user database model."""

    __tablename__ = "admin_users"

    id = Column(Integer, primary_key=True, index=True)
    username = Column(String(100), unique=True, index=True, nullable=False)
    email = Column(String(255), nullable=True, index=True)
    password_hash = Column(String(255), nullable=False)
    name = Column(String(255), nullable=False)
    role = Column(String(50), nullable=False, default="admin")
    last_login = Column(DateTime(timezone=True), nullable=True)
    created_at = Column(DateTime(timezone=True), nullable=False, default=utcnow)
    updated_at = Column(
        DateTime(timezone=True), nullable=False, default=utcnow, onupdate=utcnow
    )

    @validates("password_hash")
    def _validate_password_hash(self, key, value):
        # Only bcrypt output may be stored; plaintext never reaches the table.
        if not isinstance(value, str) or not value.startswith(BCRYPT_HASH_PREFIXES):
            raise ValueError("password_hash must be a bcrypt hash")
        return value
