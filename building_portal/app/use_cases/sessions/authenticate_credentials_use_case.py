"""
Authenticate Credentials Use Case

Checks a username/password pair against the user directory.
"""

from typing import Optional

from building_portal.app.services.password_hasher import IPasswordHasher
from building_portal.app.services.unit_of_work import UnitOfWork
from building_portal.domain.entities import UserStatus
from .dtos import AuthenticationResult


class AuthenticateCredentialsUseCase:
    """
    Use case for credential verification.

    Business Rules:
    - Lookup is by username only, never by password
    - Password is verified against the stored bcrypt hash
    - Only status=verified accounts authenticate
    - Returns a result instead of raising so callers choose what to disclose
    """

    def __init__(self, uow: UnitOfWork, hasher: Optional[IPasswordHasher] = None):
        self.uow = uow
        self.hasher = hasher or uow.users.hasher

    async def execute(self, username: str, password: str) -> AuthenticationResult:
        user = await self.uow.users.get_by_username(username)

        if user is None:
            # Keep timing uniform with the wrong-password path
            self.hasher.verify_dummy(password)
            return AuthenticationResult(
                success=False,
                reason="USER_NOT_FOUND",
                field="username",
                message="User not found",
            )

        if not self.hasher.verify(password, user.password_hash):
            return AuthenticationResult(
                success=False,
                reason="INVALID_PASSWORD",
                field="password",
                message="Invalid password",
            )

        if user.status != UserStatus.verified:
            return AuthenticationResult(
                success=False,
                reason="NOT_VERIFIED",
                field="username",
                message="User account is not verified",
            )

        return AuthenticationResult(success=True, user=user)
