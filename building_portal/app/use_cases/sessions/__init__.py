"""
Session Use Cases

Credential checks and the session lifecycle: create, validate, delete.
"""

from .authenticate_credentials_use_case import AuthenticateCredentialsUseCase
from .create_session_use_case import CreateSessionUseCase
from .validate_session_use_case import ValidateSessionUseCase
from .delete_session_use_case import DeleteSessionUseCase
from .dtos import (
    AuthenticationResult,
    CreateSessionResponse,
    SanitizedUser,
    SessionSnapshot,
)

__all__ = [
    # Use Cases
    "AuthenticateCredentialsUseCase",
    "CreateSessionUseCase",
    "ValidateSessionUseCase",
    "DeleteSessionUseCase",
    # DTOs - Responses
    "AuthenticationResult",
    "CreateSessionResponse",
    # DTOs - Nested Models
    "SanitizedUser",
    "SessionSnapshot",
]
