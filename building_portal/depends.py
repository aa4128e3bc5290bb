from functools import lru_cache

from config import ApplicationConfig
from building_portal.adapter.repositories.seed_data import SEED_USERS
from building_portal.adapter.repositories.user_repository import InMemoryUserRepository
from building_portal.adapter.services.database import create_engine, create_session_factory
from building_portal.adapter.services.password_hasher import BcryptPasswordHasher
from building_portal.adapter.services.unit_of_work import SqlAlchemyUnitOfWork

engine = create_engine(ApplicationConfig.DB_URI)

AsyncSessionLocal = create_session_factory(engine)


@lru_cache(maxsize=1)
def get_user_repository() -> InMemoryUserRepository:
    """Process-wide user directory, hashed once on first use"""
    return InMemoryUserRepository(
        BcryptPasswordHasher(rounds=ApplicationConfig.BCRYPT_ROUNDS), SEED_USERS
    )


async def get_unit_of_work():
    yield SqlAlchemyUnitOfWork(AsyncSessionLocal, get_user_repository())
