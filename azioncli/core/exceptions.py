"""
Custom Exceptions.

Application-specific exception classes for consistent error handling.
Every failure a command can hit is one of these; the CLI layer prints
the message and exits non-zero.
"""


class ApplicationError(Exception):
    """Base exception for all application errors."""

    def __init__(self, message: str, code: str = "SYS_INTERNAL_ERROR") -> None:
        self.message = message
        self.code = code
        super().__init__(self.message)


class InternalServerError(ApplicationError):
    """Raised when the API gave no response or answered with a 5xx status."""

    def __init__(self, resource: str | None = None) -> None:
        self.resource = resource
        message = "Internal server error. Please try again later"
        if resource:
            message = f"Failed to reach {resource} API. {message}"
        super().__init__(message, code="SYS_INTERNAL_ERROR")


class RequestError(ApplicationError):
    """Raised when the API rejects a request (any non-5xx error status)."""

    def __init__(
        self,
        message: str,
        status_code: int,
        body: str = "",
        code: str = "REQ_FAILED",
    ) -> None:
        self.status_code = status_code
        self.body = body
        if body:
            message = f"{message}: {body}"
        super().__init__(message, code=code)


class NotFoundError(RequestError):
    """Raised when a resource cannot be found."""

    def __init__(self, message: str = "Resource not found", body: str = "") -> None:
        super().__init__(message, status_code=404, body=body, code="RES_NOT_FOUND")


class ValidationError(ApplicationError):
    """Raised when local flag or input validation fails."""

    def __init__(self, message: str = "Validation failed", details: dict | None = None) -> None:
        self.details = details or {}
        super().__init__(message, code="VAL_VALIDATION_ERROR")


class AuthenticationError(ApplicationError):
    """Raised when no API token is available."""

    def __init__(self, message: str = "Authentication required") -> None:
        super().__init__(message, code="AUTH_UNAUTHORIZED")


class ConfigurationError(ApplicationError):
    """Raised when a settings file is missing or invalid."""

    def __init__(self, message: str = "Invalid configuration") -> None:
        super().__init__(message, code="CFG_INVALID")
