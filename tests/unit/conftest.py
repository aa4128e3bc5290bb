import pytest
from unittest.mock import AsyncMock, MagicMock

from building_portal.adapter.services.password_hasher import BcryptPasswordHasher


def assign_id(attribute: str, value: int = 1):
    """Stand-in for a repository create that lets the database pick the id"""

    def create(entity):
        setattr(entity, attribute, value)
        return entity

    return create


@pytest.fixture(scope="session")
def hasher():
    return BcryptPasswordHasher(rounds=4)


@pytest.fixture
def mock_uow(hasher):
    uow = MagicMock()
    uow.__aenter__ = AsyncMock(return_value=uow)
    uow.__aexit__ = AsyncMock(return_value=False)  # Must return False to not suppress exceptions
    uow.commit = AsyncMock()
    uow.rollback = AsyncMock()

    uow.users = MagicMock()
    uow.users.hasher = hasher
    uow.users.get_by_username = AsyncMock()

    uow.sessions = MagicMock()
    uow.sessions.create = AsyncMock()
    uow.sessions.get_by_credentials = AsyncMock()
    uow.sessions.delete_by_credentials = AsyncMock()

    uow.occupants = MagicMock()
    uow.occupants.list = AsyncMock(return_value=[])
    uow.occupants.create = AsyncMock(side_effect=assign_id("occupant_id"))
    uow.occupants.update = AsyncMock()
    uow.occupants.delete = AsyncMock()

    uow.maintenance_requests = MagicMock()
    uow.maintenance_requests.list = AsyncMock(return_value=[])
    uow.maintenance_requests.create = AsyncMock(side_effect=assign_id("id"))
    return uow
