"""Authentication routes.

This module handles login, logout and token verification, and provides the
``verify_token`` and ``require_role`` dependencies that guard every
protected route.
"""

import logging
from typing import Any, Callable, Dict

from fastapi import APIRouter, Depends, Request

from config import ADMIN_ROLES
from core.dependencies import TokenServiceDep, UserManagerDep
from core.exceptions import (
    AuthenticationError,
    AuthorizationError,
    ConstructionApiError,
    InvalidCredentialsError,
    TokenVerificationError,
    ValidationError,
)
from core.security import role_allowed
from models.user import AdminUserModel
from schemas.common import MessageResponse
from schemas.user import AdminUser, LoginRequest, LoginResponse, VerifyResponse
from utils.user_manager import UserNotFoundError

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/auth", tags=["Auth"])

BEARER_PREFIX = "Bearer "


def verify_token(request: Request, token_service: TokenServiceDep) -> Dict[str, Any]:
    """Verify the bearer token from the Authorization header.

    The decoded claims are attached to ``request.state.user``.

    Args:
        request: Incoming request.
        token_service: Injected TokenService.

    Returns:
        Decoded token claims.

    Raises:
        AuthenticationError: If the header is missing or malformed, or the
            token is expired or invalid.
    """
    auth_header = request.headers.get("Authorization")
    if auth_header is None:
        raise AuthenticationError("No authorization header provided")

    if not auth_header.startswith(BEARER_PREFIX):
        raise AuthenticationError(
            "Invalid authorization header format. Use: Bearer <token>"
        )

    # Taken verbatim; padding around the token makes it invalid
    token = auth_header[len(BEARER_PREFIX):]
    if not token:
        raise AuthenticationError("No token provided")

    try:
        claims = token_service.verify(token)
    except ConstructionApiError:
        raise
    except Exception as e:
        logger.error("Token verification error: %s", e)
        raise TokenVerificationError() from e

    request.state.user = claims
    return claims


def require_role(*allowed_roles: str) -> Callable[..., Dict[str, Any]]:
    """Build a dependency that authenticates and then checks the claimed role.

    Args:
        *allowed_roles: Roles permitted to pass.

    Returns:
        A FastAPI dependency returning the verified claims.
    """
    roles = frozenset(allowed_roles)

    def _check_role(claims: Dict[str, Any] = Depends(verify_token)) -> Dict[str, Any]:
        if not role_allowed(claims, roles):
            raise AuthorizationError()
        return claims

    return _check_role


require_admin = require_role(*ADMIN_ROLES)


def _user_to_info(user: AdminUserModel) -> AdminUser:
    return AdminUser(
        id=user.id,
        username=user.username,
        email=user.email,
        name=user.name,
        role=user.role,
        last_login=user.last_login,
    )


@router.post("/login", response_model=LoginResponse, summary="Admin login")
def login(
    req: LoginRequest,
    user_manager: UserManagerDep,
    token_service: TokenServiceDep,
) -> LoginResponse:
    """Login with username and password.

    Args:
        req: Login request with username and password.
        user_manager: Injected AdminUserManager instance.
        token_service: Injected TokenService instance.

    Returns:
        LoginResponse with user information and JWT token.

    Raises:
        ValidationError: If either field is missing.
        InvalidCredentialsError: If the credentials do not match.
    """
    if not req.username or not req.password:
        raise ValidationError("Username and password are required")

    user = user_manager.authenticate(req.username, req.password)
    if user is None:
        logger.info("Failed login attempt for username: %s", req.username)
        raise InvalidCredentialsError()

    token = token_service.issue(user)
    user = user_manager.touch_last_login(user)
    logger.info("Admin user logged in: %s", user.username)

    return LoginResponse(token=token, user=_user_to_info(user))


@router.post("/logout", response_model=MessageResponse, summary="Admin logout")
def logout() -> MessageResponse:
    """Logout endpoint.

    Note: Since we're using stateless JWT tokens, logout is handled
    client-side by removing the token. This endpoint exists for API
    consistency.

    Returns:
        MessageResponse with success message.
    """
    return MessageResponse(message="Logout successful")


@router.get("/verify", response_model=VerifyResponse, summary="Verify access token")
def verify(
    user_manager: UserManagerDep,
    claims: Dict[str, Any] = Depends(verify_token),
) -> VerifyResponse:
    """Confirm the token is valid and return the user it belongs to.

    Raises:
        UserNotFoundError: If the user has been removed since the token was issued.
    """
    user = user_manager.get_user_by_id(claims.get("user_id"))
    if user is None:
        raise UserNotFoundError("User associated with this token no longer exists")
    return VerifyResponse(user=_user_to_info(user))
