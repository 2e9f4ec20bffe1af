"""Access token issuance and verification.

Tokens are stateless HS256 JWTs. Validity depends only on the signature and
the ``exp`` claim; there is no revocation list, so logging out means the
client discards its token.
"""

import logging
import re
from datetime import datetime, timedelta
from typing import Any, Dict, Iterable, Optional

import pytz
from jose import ExpiredSignatureError, JWTError, jwt

from core.exceptions import ConfigurationError, InvalidTokenError, TokenExpiredError

logger = logging.getLogger(__name__)

# Compact JWS: three base64url segments. The decoder skips stray
# whitespace, so anything else is refused before decoding.
_COMPACT_TOKEN = re.compile(r"[A-Za-z0-9_-]+\.[A-Za-z0-9_-]+\.[A-Za-z0-9_-]*")


class TokenService:
    """Issues and verifies signed, time-limited bearer tokens."""

    def __init__(
        self,
        secret: Optional[str],
        expires_in: timedelta = timedelta(hours=24),
        algorithm: str = "HS256",
    ):
        """Initialize TokenService.

        Args:
            secret: Server-held signing secret.
            expires_in: Token time-to-live.
            algorithm: JWT signing algorithm.

        Raises:
            ConfigurationError: If no signing secret is configured.
        """
        if not secret:
            raise ConfigurationError("JWT_SECRET is not configured")
        self._secret = secret
        self.expires_in = expires_in
        self.algorithm = algorithm

    def issue(self, user: Any, now: Optional[datetime] = None) -> str:
        """Create a token for an admin user.

        Args:
            user: Object exposing id, username, email and role.
            now: Issue time; defaults to the current UTC time.

        Returns:
            Encoded JWT string.
        """
        issued_at = now or datetime.now(pytz.utc)
        expire = issued_at + self.expires_in
        claims = {
            "user_id": user.id,
            "username": user.username,
            "email": user.email,
            "role": user.role,
            "iat": int(issued_at.timestamp()),
            "exp": int(expire.timestamp()),
        }
        return jwt.encode(claims, self._secret, algorithm=self.algorithm)

    def verify(self, token: str) -> Dict[str, Any]:
        """Decode a token, checking its signature and expiry.

        Args:
            token: Encoded JWT string.

        Returns:
            Decoded claims.

        Raises:
            TokenExpiredError: If the signature is valid but ``exp`` has passed.
            InvalidTokenError: If the token is malformed or wrongly signed.
        """
        if not isinstance(token, str) or not _COMPACT_TOKEN.fullmatch(token):
            raise InvalidTokenError()
        try:
            return jwt.decode(token, self._secret, algorithms=[self.algorithm])
        except ExpiredSignatureError as exc:
            raise TokenExpiredError() from exc
        except JWTError as exc:
            logger.debug("Rejected token: %s", exc)
            raise InvalidTokenError() from exc


def role_allowed(claims: Optional[Dict[str, Any]], allowed_roles: Iterable[str]) -> bool:
    """Return True if the claimed role is one of the allowed roles."""
    if not claims:
        return False
    role = claims.get("role")
    if not role:
        return False
    return role in set(allowed_roles)
