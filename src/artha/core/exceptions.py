"""Centralized exception hierarchy for the application.

All HTTP-facing errors inherit from AppException, which provides:
- Consistent error response format
- HTTP status codes
- Machine-readable error codes
- Optional details dict for additional context

Exception handlers in main.py convert these to JSON responses. Token errors
are kept outside this hierarchy: they describe why a token was rejected and
are translated to ForbiddenError at the request boundary.
"""

from typing import Any


class AppException(Exception):
    """Base exception for all application errors.

    Provides a consistent structure for error responses with:
    - message: Human-readable error description
    - error_code: Machine-readable code (e.g., "FORBIDDEN")
    - status_code: HTTP status code
    - details: Optional dict with additional context
    """

    def __init__(
        self,
        message: str,
        error_code: str,
        status_code: int = 500,
        details: dict[str, Any] | None = None,
    ):
        self.message = message
        self.error_code = error_code
        self.status_code = status_code
        self.details = details or {}
        super().__init__(message)

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to a dict for JSON serialization."""
        return {
            "error_code": self.error_code,
            "message": self.message,
            "details": self.details,
        }


class ValidationError(AppException):
    """Request input is missing or malformed."""

    def __init__(
        self,
        message: str,
        field: str | None = None,
        error_code: str = "VALIDATION_ERROR",
    ):
        super().__init__(
            message,
            error_code,
            400,
            {"field": field} if field else {},
        )


class TextTooLongError(ValidationError):
    """Translation input exceeds the accepted length."""

    def __init__(self, max_length: int):
        super().__init__(
            f"Text too long. Please limit to {max_length} characters.",
            field="text",
            error_code="TEXT_TOO_LONG",
        )
        self.details["max_length"] = max_length


class UnauthorizedError(AppException):
    """No credential was presented."""

    def __init__(self, message: str = "Access token required"):
        super().__init__(message, "UNAUTHORIZED", 401)


class InvalidCredentialsError(AppException):
    """Email/password pair did not match. Never says which one was wrong."""

    def __init__(self, message: str = "Invalid email or password"):
        super().__init__(message, "INVALID_CREDENTIALS", 401)


class ForbiddenError(AppException):
    """Credential was rejected or lacks the required role."""

    def __init__(self, message: str = "Permission denied"):
        super().__init__(message, "FORBIDDEN", 403)


class ResourceNotFoundError(AppException):
    """Requested resource does not exist."""

    def __init__(self, resource: str, identifier: str | None = None):
        msg = f"{resource} not found"
        if identifier:
            msg = f"{resource} not found: {identifier}"
        super().__init__(
            msg,
            f"{resource.upper().replace(' ', '_')}_NOT_FOUND",
            404,
            {"resource": resource, "id": identifier}
            if identifier
            else {"resource": resource},
        )


class DuplicateIdentityError(AppException):
    """Registration collided with an existing email."""

    def __init__(self, message: str = "User already exists with this email"):
        super().__init__(message, "USER_EXISTS", 400, {"field": "email"})


class ProviderUnavailableError(AppException):
    """External translation provider failed, timed out or answered garbage."""

    def __init__(
        self,
        provider: str,
        message: str = "Translation service is currently unavailable. Please try again later.",
    ):
        super().__init__(
            message,
            "PROVIDER_UNAVAILABLE",
            503,
            {"service": provider},
        )


class InternalError(AppException):
    """Unexpected fault. The message is generic; detail stays in the logs."""

    def __init__(self, message: str = "Internal server error"):
        super().__init__(message, "INTERNAL_ERROR", 500)


class TokenError(Exception):
    """Base class for bearer token rejections."""


class InvalidTokenError(TokenError):
    """Token is malformed, carries a bad signature, or lacks required claims."""


class ExpiredTokenError(TokenError):
    """Token signature is valid but its validity window has passed."""
