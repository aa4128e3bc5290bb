import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlmodel import SQLModel

from config import ApplicationConfig
from building_portal.adapter.repositories.seed_data import SEED_USERS
from building_portal.adapter.repositories.user_repository import InMemoryUserRepository
from building_portal.adapter.services.database import create_engine, create_session_factory
from building_portal.adapter.services.password_hasher import BcryptPasswordHasher
from building_portal.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from building_portal.api.routes.sessions import login_rate_limiter
from building_portal.depends import get_unit_of_work
from tests.fixtures.json_loader import TestDataLoader
from tests.utils.session_helpers import login


@pytest.fixture
def test_data():
    return TestDataLoader()


@pytest.fixture(scope="session")
def users():
    return InMemoryUserRepository(BcryptPasswordHasher(rounds=4), SEED_USERS)


@pytest.fixture(autouse=True)
def reset_login_rate_limiter():
    login_rate_limiter.reset()
    yield
    login_rate_limiter.reset()


@pytest_asyncio.fixture
async def engine(tmp_path):
    engine = create_engine(f"sqlite+aiosqlite:///{tmp_path / 'test.db'}")
    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest_asyncio.fixture
async def session_factory(engine):
    return create_session_factory(engine)


@pytest_asyncio.fixture
async def client(session_factory, users):
    from building_portal.api.app import create_app

    app = create_app(ApplicationConfig)

    async def override_get_unit_of_work():
        yield SqlAlchemyUnitOfWork(session_factory, users)

    app.dependency_overrides[get_unit_of_work] = override_get_unit_of_work

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


@pytest_asyncio.fixture
async def renter_headers(client):
    return await login(client, "john_renter", "password123")


@pytest_asyncio.fixture
async def manager_headers(client):
    return await login(client, "admin_manager", "asade123")
