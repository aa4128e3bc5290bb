"""
Delete Session Use Case

Explicit logout.
"""

from building_portal.app.services.unit_of_work import UnitOfWork
from building_portal.domain.errors import AuthenticationError
from building_portal.logger import LogContext, logger
from .dtos import SessionSnapshot


class DeleteSessionUseCase:
    """
    Use case for logout.

    Business Rules:
    - Both identifiers must match before anything is deleted
    - An unknown pair fails instead of silently succeeding
    - Expired rows can still be deleted
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, session_id: str, token: str) -> SessionSnapshot:
        async with self.uow:
            session = await self.uow.sessions.get_by_credentials(session_id, token)
            if session is None:
                logger.log_security(
                    "Logout attempted with unknown session",
                    LogContext(session_id=session_id),
                )
                raise AuthenticationError("Session not found", code="INVALID_SESSION")

            snapshot = SessionSnapshot.from_session(session)
            await self.uow.sessions.delete_by_credentials(session_id, token)
            await self.uow.commit()

        return snapshot
