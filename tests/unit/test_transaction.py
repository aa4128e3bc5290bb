from datetime import datetime

import pytest
import pytest_asyncio
from sqlalchemy import func, select
from sqlmodel import SQLModel

from building_portal.adapter.services.database import create_engine, create_session_factory
from building_portal.adapter.services.transaction import (
    CascadeSpec,
    RecordUpdate,
    SavePoint,
    TransactionBuilder,
    delete_with_cascade,
    update_with_validation,
    with_transaction,
)
from building_portal.domain.entities import MaintenanceRequest, Occupant
from building_portal.domain.errors import DatabaseError, NotFoundError, TransactionStateError


@pytest_asyncio.fixture
async def session_factory(tmp_path):
    engine = create_engine(f"sqlite+aiosqlite:///{tmp_path / 'transactions.db'}")
    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)
    yield create_session_factory(engine)
    await engine.dispose()


def occupant(name: str, lease_id: int = 2) -> Occupant:
    return Occupant(
        lease_id=lease_id,
        property_id=2,
        unit_id=3,
        name=name,
        email=f"{name.lower()}@example.com",
        registration_date="2025-01-01",
        created_at=datetime(2025, 1, 1),
    )


def maintenance(lease_id: int = 2, status: str = "pending") -> MaintenanceRequest:
    return MaintenanceRequest(
        lease_id=lease_id,
        property_id=2,
        unit_number="3",
        description="Heating does not turn on",
        priority="medium",
        status=status,
        submitted_date="2025-01-02",
        created_at=datetime(2025, 1, 2),
    )


async def count(session_factory, model) -> int:
    async with session_factory() as session:
        result = await session.execute(select(func.count()).select_from(model))
        return result.scalar_one()


async def seed(session_factory, *rows):
    async with session_factory() as session:
        session.add_all(rows)
        await session.commit()
        return [getattr(row, "id", None) or getattr(row, "occupant_id", None) for row in rows]


# ============================================================================
# with_transaction
# ============================================================================


@pytest.mark.asyncio
async def test_with_transaction_commits_all_effects(session_factory):
    async def body(session):
        session.add(occupant("Ana"))
        session.add(occupant("Ben"))
        await session.flush()
        return "done"

    assert await with_transaction(session_factory, body) == "done"
    assert await count(session_factory, Occupant) == 2


@pytest.mark.asyncio
async def test_with_transaction_rolls_back_partial_work(session_factory):
    async def body(session):
        session.add(occupant("Ana"))
        await session.flush()
        session.add(occupant("Ben"))
        await session.flush()
        raise RuntimeError("third statement failed")

    with pytest.raises(DatabaseError) as exc_info:
        await with_transaction(session_factory, body)

    assert exc_info.value.message == "Database transaction failed"
    assert exc_info.value.details == "third statement failed"
    assert await count(session_factory, Occupant) == 0


@pytest.mark.asyncio
async def test_with_transaction_keeps_typed_errors(session_factory):
    async def body(session):
        session.add(occupant("Ana"))
        await session.flush()
        raise NotFoundError("Lease 8")

    with pytest.raises(NotFoundError):
        await with_transaction(session_factory, body)

    assert await count(session_factory, Occupant) == 0


# ============================================================================
# SavePoint
# ============================================================================


@pytest.mark.asyncio
async def test_savepoint_rollback_keeps_outer_work(session_factory):
    async def body(session):
        session.add(occupant("Kept"))
        await session.flush()

        savepoint = await SavePoint.open(session, "household")
        session.add(occupant("Discarded"))
        await session.flush()
        await savepoint.rollback()
        assert savepoint.is_released

    await with_transaction(session_factory, body)

    async with session_factory() as session:
        names = (await session.execute(select(Occupant.name))).scalars().all()
    assert names == ["Kept"]


@pytest.mark.asyncio
async def test_savepoint_release_twice_fails_loudly(session_factory):
    async with session_factory() as session:
        savepoint = await SavePoint.open(session, "sp1")
        await savepoint.release()

        with pytest.raises(TransactionStateError, match="Savepoint sp1 already released"):
            await savepoint.release()
        with pytest.raises(TransactionStateError):
            await savepoint.rollback()

        await session.rollback()


# ============================================================================
# TransactionBuilder
# ============================================================================


def insert(row):
    async def operation(session):
        session.add(row)
        await session.flush()
        return row.occupant_id

    return operation


@pytest.mark.asyncio
async def test_builder_runs_operations_in_one_transaction(session_factory):
    builder = TransactionBuilder(session_factory)
    builder.add_operation(insert(occupant("Ana"))).add_operation(insert(occupant("Ben")))

    ids = await builder.execute()

    assert len(ids) == 2
    assert ids[0] < ids[1]
    assert await count(session_factory, Occupant) == 2


@pytest.mark.asyncio
async def test_builder_failure_rolls_back_every_operation(session_factory):
    async def failing(session):
        raise ValueError("constraint violated")

    builder = TransactionBuilder(session_factory)
    builder.add_operation(insert(occupant("Ana"))).add_operation(failing)

    with pytest.raises(DatabaseError, match="Transaction batch failed"):
        await builder.execute()

    assert await count(session_factory, Occupant) == 0


@pytest.mark.asyncio
async def test_builder_cannot_be_reused(session_factory):
    builder = TransactionBuilder(session_factory)
    await builder.execute()

    with pytest.raises(TransactionStateError, match="already executed"):
        await builder.execute()
    with pytest.raises(TransactionStateError, match="Cannot add operations"):
        builder.add_operation(insert(occupant("Late")))


# ============================================================================
# update_with_validation / delete_with_cascade
# ============================================================================


def only_status(data):
    return set(data) == {"status"} and data["status"] in {"pending", "in_progress", "completed"}


@pytest.mark.asyncio
async def test_update_with_validation_applies_all(session_factory):
    first, second = await seed(session_factory, maintenance(), maintenance())

    updated = await update_with_validation(
        session_factory,
        "maintenance_requests",
        [
            RecordUpdate(id=first, data={"status": "completed"}),
            RecordUpdate(id=second, data={"status": "in_progress"}),
        ],
        only_status,
    )

    assert updated == 2
    async with session_factory() as session:
        rows = (await session.execute(select(MaintenanceRequest))).scalars().all()
    assert {row.status for row in rows} == {"completed", "in_progress"}
    assert all(row.updated_at is not None for row in rows)


@pytest.mark.asyncio
async def test_update_with_validation_aborts_whole_batch(session_factory):
    first, second = await seed(session_factory, maintenance(), maintenance())

    with pytest.raises(DatabaseError, match=f"record {second}"):
        await update_with_validation(
            session_factory,
            "maintenance_requests",
            [
                RecordUpdate(id=first, data={"status": "completed"}),
                RecordUpdate(id=second, data={"status": "exploded"}),
            ],
            only_status,
        )

    async with session_factory() as session:
        statuses = (await session.execute(select(MaintenanceRequest.status))).scalars().all()
    assert statuses == ["pending", "pending"]


@pytest.mark.asyncio
async def test_update_with_validation_rejects_unknown_table(session_factory):
    with pytest.raises(DatabaseError, match="Unknown table"):
        await update_with_validation(
            session_factory, "users; DROP TABLE sessions", [], lambda data: True
        )


@pytest.mark.asyncio
async def test_delete_with_cascade_returns_total_rows(session_factory):
    await seed(
        session_factory,
        occupant("Ana", lease_id=5),
        occupant("Ben", lease_id=5),
        occupant("Cal", lease_id=6),
        maintenance(lease_id=5),
    )

    removed = await delete_with_cascade(
        session_factory,
        [
            CascadeSpec(table="occupants", where={"lease_id": 5}),
            CascadeSpec(table="maintenance_requests", where={"lease_id": 5}),
        ],
    )

    assert removed == 3
    assert await count(session_factory, Occupant) == 1
    assert await count(session_factory, MaintenanceRequest) == 0


@pytest.mark.asyncio
async def test_delete_with_cascade_requires_conditions(session_factory):
    await seed(session_factory, occupant("Ana"))

    with pytest.raises(DatabaseError, match="without conditions"):
        await delete_with_cascade(session_factory, [CascadeSpec(table="occupants", where={})])
    with pytest.raises(DatabaseError, match="Unknown column"):
        await delete_with_cascade(
            session_factory, [CascadeSpec(table="occupants", where={"password": "x"})]
        )

    assert await count(session_factory, Occupant) == 1
