"""
Create Session Use Case

Issues a fresh session for an authenticated user.
"""

import json
import secrets
from datetime import datetime, timedelta
from typing import Callable, Optional

from config import ApplicationConfig
from building_portal.app.services.unit_of_work import UnitOfWork
from building_portal.domain.base import utc_now
from building_portal.domain.entities import Session, SessionStatus, User, role_name_for
from .dtos import CreateSessionResponse, SanitizedUser


def generate_secret() -> str:
    """256-bit random value as 64 hex characters"""
    return secrets.token_hex(32)


class CreateSessionUseCase:
    """
    Use case for session issuance.

    Business Rules:
    - session_id and token are generated independently
    - Lifetime is fixed from creation (15 minutes by default), no renewal
    - The user row is copied onto the session as a snapshot
    - Every login creates a new row; older sessions stay valid
    """

    def __init__(
        self,
        uow: UnitOfWork,
        ttl: Optional[timedelta] = None,
        clock: Callable[[], datetime] = utc_now,
    ):
        self.uow = uow
        self.ttl = ttl or timedelta(minutes=ApplicationConfig.SESSION_TTL_MINUTES)
        self.clock = clock

    async def execute(self, user: User) -> CreateSessionResponse:
        now = self.clock()
        session = Session(
            session_id=generate_secret(),
            token=generate_secret(),
            user_id=user.user_id,
            username=user.username,
            email=user.email,
            full_name=user.full_name,
            phone=user.phone,
            legal_sin_or_bn=user.legal_sin_or_bn or "",
            profile_type=user.profile_type.value,
            role_id=user.role_id,
            role_name=role_name_for(user.role_id).value,
            properties=json.dumps(user.properties),
            status=SessionStatus.active.value,
            created_at=now,
            expires_at=now + self.ttl,
        )

        async with self.uow:
            await self.uow.sessions.create(session)
            await self.uow.commit()

        return CreateSessionResponse(
            session_id=session.session_id,
            token=session.token,
            expires_at=session.expires_at,
            user=SanitizedUser.from_user(user),
        )
