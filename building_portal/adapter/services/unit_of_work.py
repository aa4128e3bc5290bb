from sqlmodel.ext.asyncio.session import AsyncSession

from building_portal.adapter.repositories.maintenance_request_repository import (
    MaintenanceRequestRepository,
)
from building_portal.adapter.repositories.occupant_repository import OccupantRepository
from building_portal.adapter.repositories.session_repository import SessionRepository
from building_portal.adapter.services.transaction import as_typed_error, rollback_after
from building_portal.app.repositories.user_repository import IUserRepository
from building_portal.app.services.unit_of_work import UnitOfWork
from building_portal.domain.errors import AppError


class SqlAlchemyUnitOfWork(UnitOfWork):
    """
    SQLAlchemy implementation of UnitOfWork pattern.

    Every `async with` block opens its own AsyncSession, so one instance can
    serve several sequential transactional units within a request.
    """

    def __init__(self, session_factory, users: IUserRepository):
        self.session_factory = session_factory
        self.users = users
        self.session: AsyncSession = None

    async def __aenter__(self):
        self.session = self.session_factory()
        # Initialize all repositories with the session
        self.sessions = SessionRepository(self.session)
        self.occupants = OccupantRepository(self.session)
        self.maintenance_requests = MaintenanceRequestRepository(self.session)
        return self

    async def __aexit__(self, exc_type, exc, tb):
        try:
            if exc is None:
                # Uncommitted work is discarded by close(); loaded rows keep their state.
                self.session.expunge_all()
            else:
                await rollback_after(self.session, exc)
        finally:
            await self.session.close()

        if isinstance(exc, Exception) and not isinstance(exc, AppError):
            raise as_typed_error(exc) from exc
        return False

    async def commit(self):
        await self.session.commit()

    async def rollback(self):
        await self.session.rollback()
