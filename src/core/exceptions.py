"""Custom exception classes for the Construction Site API.

Every exception carries the HTTP status code, a short error title and a
human readable message. The handlers registered in ``app.py`` render them
as a ``{"error": ..., "message": ...}`` JSON envelope.
"""

from typing import Any, Dict, Optional


class ConstructionApiError(Exception):
    """Base exception for all Construction Site API errors."""

    status_code: int = 500
    error: str = "Server Error"
    default_message: str = "An unexpected error occurred"

    def __init__(self, message: Optional[str] = None, **extra: Any):
        """Initialize the exception.

        Args:
            message: Caller-visible message. Falls back to the class default.
            **extra: Additional fields rendered into the error envelope.
        """
        self.message = message or self.default_message
        self.extra = extra
        super().__init__(self.message)

    def to_dict(self) -> Dict[str, Any]:
        """Return the JSON error envelope for this exception."""
        body: Dict[str, Any] = {"error": self.error, "message": self.message}
        body.update(self.extra)
        return body


class ValidationError(ConstructionApiError):
    """Raised when request input is missing or malformed."""

    status_code = 400
    error = "Validation Error"
    default_message = "Invalid input data"


class MissingFileError(ValidationError):
    """Raised when an upload request carries no file."""

    default_message = "No file uploaded"


class FileTypeError(ValidationError):
    """Raised when an uploaded file has a disallowed MIME type."""

    error = "Invalid File Type"
    default_message = (
        "Invalid file type. Only JPEG, PNG, GIF, and WebP images are allowed."
    )


class FileTooLargeError(ValidationError):
    """Raised when an uploaded file reaches the configured size ceiling."""

    error = "File Too Large"
    default_message = "File size must be less than 5MB"


class AuthenticationError(ConstructionApiError):
    """Raised when credentials or a bearer token are missing or unusable."""

    status_code = 401
    error = "Authentication Required"
    default_message = "Authentication is required to access this resource"


class InvalidCredentialsError(AuthenticationError):
    """Raised when a username/password pair does not match."""

    error = "Authentication Failed"
    default_message = "Invalid username or password"


class TokenExpiredError(AuthenticationError):
    """Raised when a correctly signed token is past its expiry."""

    error = "Token Expired"
    default_message = "Your session has expired. Please login again."


class InvalidTokenError(AuthenticationError):
    """Raised when a token is malformed or signed with another secret."""

    error = "Invalid Token"
    default_message = "The provided token is invalid"


class TokenVerificationError(AuthenticationError):
    """Raised when verifying a token fails for an unexpected reason."""

    error = "Authentication Failed"
    default_message = "Token verification failed"


class AuthorizationError(ConstructionApiError):
    """Raised when a known identity lacks the required role."""

    status_code = 403
    error = "Access Denied"
    default_message = "You do not have permission to access this resource"


class NotFoundError(ConstructionApiError):
    """Raised when a requested record does not exist."""

    status_code = 404
    error = "Not Found"
    default_message = "Resource not found"


class ConflictError(ConstructionApiError):
    """Raised when an operation would break referential integrity."""

    status_code = 409
    error = "Conflict"
    default_message = "The request conflicts with existing data"


class ConfigurationError(ConstructionApiError):
    """Raised when there is a configuration error."""

    pass
