"""Admin user management utilities.

This module provides the credential store: admin user persistence, password
hashing and password verification. Every write of a password goes through
``hash_password``; the plaintext is never stored.
"""

import logging
from datetime import datetime
from typing import List, Optional

import bcrypt
import pytz
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from config import BCRYPT_ROUNDS
from core.exceptions import ConflictError, NotFoundError, ValidationError
from models.user import AdminUserModel

logger = logging.getLogger(__name__)

MIN_PASSWORD_LENGTH = 6
# bcrypt ignores everything past 72 bytes
BCRYPT_MAX_BYTES = 72


class UserNotFoundError(NotFoundError):
    """Exception raised when an admin user is not found."""

    default_message = "User not found"


class UserAlreadyExistsError(ConflictError):
    """Exception raised when trying to create a user that already exists."""

    default_message = "Username already exists"


def _password_bytes(password: str) -> bytes:
    if isinstance(password, bytes):
        password_bytes = password
    else:
        password_bytes = str(password).encode("utf-8")
    return password_bytes[:BCRYPT_MAX_BYTES]


def validate_password(password: Optional[str]) -> None:
    """Reject passwords that are missing or too short.

    Raises:
        ValidationError: If the password is unusable.
    """
    if not password:
        raise ValidationError("Password is required")
    if len(password) < MIN_PASSWORD_LENGTH:
        raise ValidationError(
            f"Password must be at least {MIN_PASSWORD_LENGTH} characters"
        )


class AdminUserManager:
    """Manages admin user persistence and credential checks using SQLAlchemy."""

    def __init__(self, db: Session, rounds: int = BCRYPT_ROUNDS):
        """Initialize AdminUserManager.

        Args:
            db: SQLAlchemy Session.
            rounds: bcrypt cost factor, never below 10.
        """
        self.db = db
        self.rounds = max(10, rounds)

    def hash_password(self, password: str) -> str:
        """Hash a password using bcrypt.

        Args:
            password: Plain text password.

        Returns:
            Hashed password (bcrypt hash string).
        """
        salt = bcrypt.gensalt(rounds=self.rounds)
        return bcrypt.hashpw(_password_bytes(password), salt).decode("utf-8")

    def verify_password(self, plain_password: str, hashed_password: str) -> bool:
        """Verify a password against a bcrypt hash.

        Args:
            plain_password: Plain text password to verify.
            hashed_password: Bcrypt hash string to verify against.

        Returns:
            True if password matches, False otherwise.
        """
        if not plain_password or not hashed_password:
            return False
        try:
            return bcrypt.checkpw(
                _password_bytes(plain_password), hashed_password.encode("utf-8")
            )
        except ValueError as e:
            logger.error("Password verification error: %s", e)
            return False

    def create_user(
        self,
        username: str,
        password: str,
        name: str,
        email: Optional[str] = None,
        role: str = "admin",
    ) -> AdminUserModel:
        """Create a new admin user.

        Args:
            username: Unique username.
            password: Plain text password, hashed before it is stored.
            name: Display name.
            email: Optional email address.
            role: Role string, "admin" by default.

        Returns:
            Created AdminUserModel.

        Raises:
            ValidationError: If any field is invalid.
            UserAlreadyExistsError: If username already exists.
        """
        username = (username or "").strip()
        name = (name or "").strip()
        role = (role or "").strip()
        if not username:
            raise ValidationError("Username is required")
        if len(username) > 100:
            raise ValidationError("Username must be between 1 and 100 characters")
        if not name:
            raise ValidationError("Name is required")
        if not role:
            raise ValidationError("Role is required")
        validate_password(password)

        if self.get_user_by_username(username) is not None:
            raise UserAlreadyExistsError(f"User '{username}' already exists")

        user = AdminUserModel(
            username=username,
            email=(email or "").strip() or None,
            password_hash=self.hash_password(password),
            name=name,
            role=role,
        )

        # Unique constraint catches a concurrent create that passed the check above
        try:
            self.db.add(user)
            self.db.commit()
            self.db.refresh(user)
        except IntegrityError as e:
            self.db.rollback()
            raise UserAlreadyExistsError(f"User '{username}' already exists") from e

        logger.info("Created admin user: %s", username)
        return user

    def get_user_by_username(self, username: str) -> Optional[AdminUserModel]:
        return (
            self.db.query(AdminUserModel)
            .filter(AdminUserModel.username == username)
            .first()
        )

    def get_user_by_id(self, user_id: int) -> Optional[AdminUserModel]:
        return self.db.query(AdminUserModel).filter(AdminUserModel.id == user_id).first()

    def require_user(self, user_id: int) -> AdminUserModel:
        user = self.get_user_by_id(user_id)
        if user is None:
            raise UserNotFoundError()
        return user

    def list_users(self) -> List[AdminUserModel]:
        return self.db.query(AdminUserModel).order_by(AdminUserModel.created_at.asc()).all()

    def authenticate(self, username: str, password: str) -> Optional[AdminUserModel]:
        """Return the user if the password matches its stored hash."""
        user = self.get_user_by_username(username)
        if user is None:
            # Burn a comparable amount of time so unknown usernames are not obvious
            self.verify_password(password, _DUMMY_HASH)
            return None
        if not self.verify_password(password, user.password_hash):
            return None
        return user

    def touch_last_login(self, user: AdminUserModel) -> AdminUserModel:
        user.last_login = datetime.now(pytz.utc)
        self.db.commit()
        self.db.refresh(user)
        return user

    def update_password(self, user_id: int, new_password: str) -> AdminUserModel:
        """Replace a user's password, re-hashing it on write."""
        validate_password(new_password)
        user = self.require_user(user_id)
        user.password_hash = self.hash_password(new_password)
        self.db.commit()
        self.db.refresh(user)
        logger.info("Password changed for admin user: %s", user.username)
        return user

    def update_user(self, user_id: int, **fields) -> AdminUserModel:
        """Update profile fields. A ``password`` entry is hashed, never stored raw."""
        user = self.require_user(user_id)
        password = fields.pop("password", None)
        for key in ("name", "email", "role"):
            if key not in fields or fields[key] is None:
                continue
            value = str(fields[key]).strip()
            if key in ("name", "role") and not value:
                raise ValidationError(f"{key.capitalize()} is required")
            setattr(user, key, value or None)
        if password is not None:
            validate_password(password)
            user.password_hash = self.hash_password(password)
        self.db.commit()
        self.db.refresh(user)
        return user


# Same cost as real hashes so unknown usernames take as long to reject
_DUMMY_HASH = bcrypt.hashpw(
    b"not-a-real-password", bcrypt.gensalt(rounds=max(10, BCRYPT_ROUNDS))
).decode("utf-8")
