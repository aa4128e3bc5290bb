"""
Application Error Taxonomy

Typed errors raised by domain and application code. Each carries the HTTP
status code and machine-readable code used by the API error envelope.
"""

from typing import Any, Dict, List, Optional, Union


class AppError(Exception):
    """Base application error with status code and error code"""

    def __init__(
        self,
        code: str,
        status_code: int,
        message: str,
        details: Optional[Any] = None,
    ):
        self.code = code
        self.status_code = status_code
        self.message = message
        self.details = details
        super().__init__(message)


class ValidationError(AppError):
    """400 - one entry per violated field, never just the first"""

    def __init__(self, errors: List[Dict[str, str]], message: str = "Validation failed"):
        self.errors = errors
        super().__init__("VALIDATION_ERROR", 400, message, errors)


class AuthenticationError(AppError):
    """401 - missing, invalid or expired credentials"""

    def __init__(self, message: str = "Authentication failed", code: str = "AUTH_ERROR"):
        super().__init__(code, 401, message)


class AuthorizationError(AppError):
    """403 - authenticated but not allowed"""

    def __init__(self, message: str = "Access denied"):
        super().__init__("AUTHZ_ERROR", 403, message)


class NotFoundError(AppError):
    """404"""

    def __init__(self, resource: str):
        super().__init__("NOT_FOUND", 404, f"{resource} not found")


class MethodNotAllowedError(AppError):
    """405"""

    def __init__(self, method: str):
        super().__init__("METHOD_NOT_ALLOWED", 405, f"Method {method} not allowed")


class ConflictError(AppError):
    """409"""

    def __init__(self, message: str):
        super().__init__("CONFLICT", 409, message)


class RateLimitError(AppError):
    """429"""

    def __init__(self, message: str = "Too many requests"):
        super().__init__("RATE_LIMIT", 429, message)


class DatabaseError(AppError):
    """500 - storage failure; details only carried in development"""

    def __init__(self, message: str = "Database operation failed", details: Optional[Any] = None):
        super().__init__("DB_ERROR", 500, message, details)


class TransactionStateError(RuntimeError):
    """Savepoint or batch used after it was already finished"""


def ensure(condition: bool, error: Union[AppError, str]) -> None:
    """Raise `error` when `condition` is false. Strings become a 500 assertion error."""
    if not condition:
        if isinstance(error, str):
            raise AppError("ASSERTION_ERROR", 500, error)
        raise error
