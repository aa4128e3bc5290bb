from abc import ABC, abstractmethod
from typing import Callable

from sqlmodel.ext.asyncio.session import AsyncSession

from building_portal.app.repositories.maintenance_request_repository import (
    IMaintenanceRequestRepository,
)
from building_portal.app.repositories.occupant_repository import IOccupantRepository
from building_portal.app.repositories.session_repository import ISessionRepository
from building_portal.app.repositories.user_repository import IUserRepository


class UnitOfWork(ABC):
    """Abstract UnitOfWork - defines repository access and transaction management"""

    # Repository properties (initialized in __aenter__)
    sessions: ISessionRepository
    occupants: IOccupantRepository
    maintenance_requests: IMaintenanceRequestRepository

    # In-memory directory, available outside a transaction
    users: IUserRepository

    # Factory for standalone transactional units (batch builder, bulk helpers)
    session_factory: Callable[[], AsyncSession]

    @abstractmethod
    async def __aenter__(self):
        pass

    @abstractmethod
    async def __aexit__(self, *args):
        pass

    @abstractmethod
    async def commit(self):
        pass

    @abstractmethod
    async def rollback(self):
        pass
