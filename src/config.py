"""Configuration module for the Construction Site API.

This module provides centralized configuration management, including directory
paths, API server settings, authentication and upload limits.
All configuration values can be overridden via environment variables.
"""

import os
import re
from datetime import timedelta
from pathlib import Path
from typing import FrozenSet, List, Optional

from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()


def parse_duration(value: str) -> timedelta:
    """Parse a duration string such as "24h" into a timedelta.

    Supported units are s, m, h and d. A bare number is read as seconds.

    Args:
        value: Duration string, e.g. "45s", "30m", "24h", "7d" or "3600".

    Returns:
        The parsed timedelta.

    Raises:
        ValueError: If the value is not a recognised duration.
    """
    match = re.fullmatch(r"\s*(\d+)\s*([smhd]?)\s*", str(value).lower())
    if not match:
        raise ValueError(f"Invalid duration: {value!r}")
    amount = int(match.group(1))
    unit = match.group(2) or "s"
    seconds_per_unit = {"s": 1, "m": 60, "h": 3600, "d": 86400}
    return timedelta(seconds=amount * seconds_per_unit[unit])


# --- Directory Configuration ---

# Root directory of the project
ROOT_DIR = Path(__file__).parent.parent.resolve()

DATA_DIR = Path(os.getenv("DATA_DIR", str(ROOT_DIR / "data")))

# Uploaded images are stored here and served under UPLOAD_URL_PREFIX
UPLOAD_DIR = Path(os.getenv("UPLOAD_DIR", str(ROOT_DIR / "uploads")))
UPLOAD_URL_PREFIX = "/uploads"

# --- Database Configuration ---

DATABASE_URL: str = os.getenv(
    "DATABASE_URL", f"sqlite:///{DATA_DIR / 'construction.db'}"
)

# --- API Server Configuration ---

API_HOST: str = os.getenv("API_HOST", "0.0.0.0")
API_PORT: int = int(os.getenv("API_PORT", "5000"))

# "development" exposes exception details in error responses
APP_ENV: str = os.getenv("APP_ENV", "production").strip().lower()
IS_DEVELOPMENT: bool = APP_ENV == "development"

LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()

# CORS allowed origins (comma-separated list)
_CORS_ALLOWED_ORIGINS_STR: str = os.getenv(
    "CORS_ALLOWED_ORIGINS",
    "http://localhost:5173,http://127.0.0.1:5173,http://localhost:3000,"
    "http://127.0.0.1:3000",
)
CORS_ALLOWED_ORIGINS: List[str] = [
    origin.strip()
    for origin in _CORS_ALLOWED_ORIGINS_STR.split(",")
    if origin.strip()
]

# --- Authentication Configuration ---

# Signing secret for access tokens. There is deliberately no default.
JWT_SECRET: Optional[str] = os.getenv("JWT_SECRET") or None
JWT_ALGORITHM = "HS256"
JWT_EXPIRES_IN: timedelta = parse_duration(os.getenv("JWT_EXPIRES_IN", "24h"))

# bcrypt cost factor, never below 10
BCRYPT_ROUNDS: int = max(10, int(os.getenv("BCRYPT_ROUNDS", "12")))

ADMIN_ROLES: FrozenSet[str] = frozenset(
    role.strip()
    for role in os.getenv("ADMIN_ROLES", "admin").split(",")
    if role.strip()
)

# --- Upload Configuration ---

MAX_FILE_SIZE: int = int(os.getenv("MAX_FILE_SIZE", str(5 * 1024 * 1024)))

ALLOWED_IMAGE_MIME_TYPES: FrozenSet[str] = frozenset(
    {
        "image/jpeg",
        "image/jpg",
        "image/png",
        "image/gif",
        "image/webp",
    }
)
