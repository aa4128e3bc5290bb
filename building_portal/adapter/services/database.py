"""
Database bootstrap

Engine construction with SQLite connection hooks, idempotent schema creation
and one-time seed rows.
"""

from datetime import datetime

from sqlalchemy import event, func, select
from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlmodel import SQLModel
from sqlmodel.ext.asyncio.session import AsyncSession

from building_portal.domain.entities import Occupant
from building_portal.logger import logger

SEED_OCCUPANTS = [
    dict(
        lease_id=2,
        property_id=2,
        unit_id=3,
        name="Alice Chen",
        email="alice@corporate.com",
        phone="416-555-0002",
        relationship_to_leaseholder="Primary Leaseholder",
        registration_date="2024-06-01",
        status="active",
        created_at=datetime(2024, 6, 1),
    ),
    dict(
        lease_id=2,
        property_id=2,
        unit_id=3,
        name="Bob Smith",
        email="bob@corporate.com",
        phone="416-555-0020",
        relationship_to_leaseholder="Co-occupant",
        registration_date="2024-07-15",
        status="active",
        created_at=datetime(2024, 7, 15),
    ),
]


def create_engine(db_uri: str) -> AsyncEngine:
    """
    Build the async engine.

    SQLite connections get WAL journaling and foreign keys. The driver's own
    implicit BEGIN is disabled and SQLAlchemy emits BEGIN itself, which is
    what makes SAVEPOINT behave under aiosqlite.
    """
    engine = create_async_engine(db_uri, echo=False, future=True)

    if engine.dialect.name == "sqlite":

        @event.listens_for(engine.sync_engine, "connect")
        def on_connect(dbapi_connection, connection_record):
            dbapi_connection.isolation_level = None
            cursor = dbapi_connection.cursor()
            cursor.execute("PRAGMA journal_mode=WAL")
            cursor.execute("PRAGMA foreign_keys=ON")
            cursor.close()

        @event.listens_for(engine.sync_engine, "begin")
        def on_begin(conn):
            conn.exec_driver_sql("BEGIN")

    return engine


def create_session_factory(engine: AsyncEngine):
    return sessionmaker(
        engine, class_=AsyncSession, expire_on_commit=False, autoflush=False
    )


async def initialize_database(engine: AsyncEngine) -> None:
    """Create tables if absent and seed occupants when that table is empty."""
    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)

    async with create_session_factory(engine)() as session:
        result = await session.execute(select(func.count()).select_from(Occupant))
        if result.scalar_one() == 0:
            session.add_all([Occupant(**row) for row in SEED_OCCUPANTS])
            await session.commit()
            logger.info("Seed data inserted", metadata={"occupants": len(SEED_OCCUPANTS)})

    logger.info("Database initialized")
