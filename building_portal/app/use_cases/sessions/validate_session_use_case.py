"""
Validate Session Use Case

Resolves a (session_id, token) pair to its snapshot.
"""

import re
from datetime import datetime
from typing import Callable

from building_portal.app.services.unit_of_work import UnitOfWork
from building_portal.domain.base import utc_now
from building_portal.domain.errors import AuthenticationError
from building_portal.logger import LogContext, logger
from .dtos import SessionSnapshot

_SECRET_PATTERN = re.compile(r"^[0-9a-f]{64}$")


def is_well_formed(value: str) -> bool:
    return bool(value) and _SECRET_PATTERN.match(value) is not None


class ValidateSessionUseCase:
    """
    Use case for session validation.

    Business Rules:
    - Both identifiers must match the same row
    - Valid only while now < expires_at
    - Malformed or unknown pairs are security events (possible forgery)
    - Expired sessions are logged as informational, not security
    """

    def __init__(self, uow: UnitOfWork, clock: Callable[[], datetime] = utc_now):
        self.uow = uow
        self.clock = clock

    async def execute(self, session_id: str, token: str) -> SessionSnapshot:
        if not is_well_formed(session_id) or not is_well_formed(token):
            logger.log_security(
                "Malformed session credentials",
                LogContext(session_id=(session_id or "")[:64]),
            )
            raise AuthenticationError("Invalid session", code="INVALID_SESSION")

        async with self.uow:
            session = await self.uow.sessions.get_by_credentials(session_id, token)
            snapshot = SessionSnapshot.from_session(session) if session is not None else None

        if snapshot is None:
            logger.log_security(
                "Invalid session token used", LogContext(session_id=session_id)
            )
            raise AuthenticationError("Invalid session", code="INVALID_SESSION")

        if snapshot.expires_at <= self.clock():
            logger.info(
                "Session expired",
                LogContext(session_id=session_id, username=snapshot.username),
            )
            raise AuthenticationError("Session expired", code="SESSION_EXPIRED")

        return snapshot
