"""
Application error taxonomy.

Every error carries the HTTP status it maps to and a human-readable message.
The handlers registered in main.py turn these into ``{"error": message}``
JSON bodies; stack traces stay in the server log.
"""
from typing import Any, Dict, Optional


class AppError(Exception):
    """Base class for errors that map onto an HTTP response."""
    status_code: int = 500
    default_message: str = "Internal server error"

    def __init__(self, message: Optional[str] = None, **extra: Any):
        self.message = message or self.default_message
        self.extra: Dict[str, Any] = extra
        super().__init__(self.message)

    def to_body(self) -> Dict[str, Any]:
        body = {"error": self.message}
        body.update(self.extra)
        return body


class ValidationError(AppError):
    status_code = 400
    default_message = "Invalid request data"


class ConflictError(AppError):
    status_code = 400
    default_message = "User already exists"


class InvalidCredentialsError(AppError):
    # Same status as validation so unknown email and wrong password look alike
    status_code = 400
    default_message = "Invalid credentials"


class UnauthenticatedError(AppError):
    status_code = 401
    default_message = "Authentication required"


class InvalidTokenError(AppError):
    status_code = 403
    default_message = "Invalid or expired token"


class NotFoundError(AppError):
    status_code = 404
    default_message = "User not found"


class LimitExceededError(AppError):
    status_code = 429
    default_message = "Daily limit reached. Please sign up or log in to generate more content ideas."

    def __init__(self, message: Optional[str] = None, **extra: Any):
        extra.setdefault("requiresAuth", True)
        super().__init__(message, **extra)


class ConfigurationError(AppError):
    status_code = 500
    default_message = "Generative API key not configured"


class UpstreamError(AppError):
    status_code = 500
    default_message = "Failed to generate content"
