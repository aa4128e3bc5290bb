"""
Transactional Write Layer

Groups related writes so they either all apply or none do. Every failure
leaves this layer as a typed error: AppErrors raised by the caller's body
pass through unchanged after rollback, anything else becomes DatabaseError.
"""

import time
from typing import Any, Awaitable, Callable, Dict, Iterable, List, TypeVar

from pydantic import BaseModel
from sqlalchemy import Table, delete, update
from sqlmodel import SQLModel
from sqlmodel.ext.asyncio.session import AsyncSession

from config import ApplicationConfig
from building_portal.domain.base import utc_now
from building_portal.domain.errors import AppError, DatabaseError, TransactionStateError
from building_portal.logger import logger

T = TypeVar("T")

SessionFactory = Callable[[], AsyncSession]
Operation = Callable[[AsyncSession], Awaitable[Any]]


class RecordUpdate(BaseModel):
    """Partial update for one row, addressed by primary key"""

    id: int
    data: Dict[str, Any]


class CascadeSpec(BaseModel):
    """Equality conditions for deleting from one table"""

    table: str
    where: Dict[str, Any]


def as_typed_error(exc: Exception, message: str = "Database transaction failed") -> AppError:
    if isinstance(exc, AppError):
        return exc
    return DatabaseError(
        message, str(exc) if ApplicationConfig.IS_DEVELOPMENT else None
    )


async def rollback_after(session: AsyncSession, exc: BaseException) -> None:
    """Roll back; a failed rollback is logged without masking the original error."""
    try:
        await session.rollback()
        logger.warn("Transaction rolled back due to error", metadata={"error": str(exc)})
    except Exception as rollback_exc:
        logger.error("Rollback failed", error=rollback_exc)


async def with_transaction(
    session_factory: SessionFactory,
    body: Callable[[AsyncSession], Awaitable[T]],
    failure_message: str = "Database transaction failed",
) -> T:
    """
    Run `body` inside one transaction on a fresh connection.

    Commits on normal return. On error rolls back and raises a typed error.
    The connection is always released.
    """
    session = session_factory()
    started = time.perf_counter()
    try:
        result = await body(session)
        await session.commit()
        logger.debug(
            f"Transaction completed in {(time.perf_counter() - started) * 1000:.0f}ms"
        )
        return result
    except Exception as exc:
        await rollback_after(session, exc)
        error = as_typed_error(exc, failure_message)
        if error is exc:
            raise
        raise error from exc
    finally:
        await session.close()


class SavePoint:
    """
    Nested rollback point inside an open transaction.

    Released or rolled back exactly once; a second call is a programming
    error and raises TransactionStateError.
    """

    def __init__(self, name: str, transaction):
        self.name = name
        self._transaction = transaction
        self._released = False

    @classmethod
    async def open(cls, session: AsyncSession, name: str) -> "SavePoint":
        transaction = await session.begin_nested()
        logger.debug(f"Savepoint {name} opened")
        return cls(name, transaction)

    @property
    def is_released(self) -> bool:
        return self._released

    def _ensure_open(self) -> None:
        if self._released:
            raise TransactionStateError(f"Savepoint {self.name} already released")

    async def rollback(self) -> None:
        """Undo everything since the savepoint was opened"""
        self._ensure_open()
        await self._transaction.rollback()
        self._released = True

    async def release(self) -> None:
        """Keep the work done since the savepoint was opened"""
        self._ensure_open()
        await self._transaction.commit()
        self._released = True


class TransactionBuilder:
    """Accumulates operations and runs them all in one transaction."""

    def __init__(self, session_factory: SessionFactory):
        self._session_factory = session_factory
        self._operations: List[Operation] = []
        self._executed = False

    def add_operation(self, operation: Operation) -> "TransactionBuilder":
        if self._executed:
            raise TransactionStateError("Cannot add operations after transaction execution")
        self._operations.append(operation)
        return self

    async def execute(self) -> List[Any]:
        """Run every operation in order; returns their results."""
        if self._executed:
            raise TransactionStateError("Transaction already executed")
        self._executed = True

        async def run_all(session: AsyncSession) -> List[Any]:
            return [await operation(session) for operation in self._operations]

        results = await with_transaction(
            self._session_factory, run_all, "Transaction batch failed"
        )
        logger.debug(f"Transaction batch executed with {len(self._operations)} operations")
        return results


def _table(name: str) -> Table:
    table = SQLModel.metadata.tables.get(name)
    if table is None:
        raise DatabaseError(f"Unknown table {name}")
    return table


def _check_columns(table: Table, columns: Iterable[str]) -> None:
    unknown = sorted(column for column in columns if column not in table.c)
    if unknown:
        raise DatabaseError(f"Unknown column(s) for {table.name}: {', '.join(unknown)}")


async def update_with_validation(
    session_factory: SessionFactory,
    table: str,
    records: List[RecordUpdate],
    validate: Callable[[Dict[str, Any]], bool],
) -> int:
    """
    Apply partial updates in one transaction.

    Each record is validated just before its update is issued; one invalid
    record rolls back the whole batch. Returns how many rows changed.
    """
    target = _table(table)
    primary_key = next(iter(target.primary_key.columns))

    async def apply(session: AsyncSession) -> int:
        updated = 0
        for record in records:
            if not record.data or not validate(record.data):
                raise DatabaseError(f"Invalid data for {table} record {record.id}")
            _check_columns(target, record.data.keys())
            if primary_key.name in record.data:
                raise DatabaseError(f"Primary key of {table} cannot be updated")

            values = dict(record.data)
            if "updated_at" in target.c:
                values["updated_at"] = utc_now()

            result = await session.execute(
                update(target).where(primary_key == record.id).values(**values)
            )
            if result.rowcount:
                updated += 1
        return updated

    return await with_transaction(session_factory, apply)


async def delete_with_cascade(
    session_factory: SessionFactory, specs: List[CascadeSpec]
) -> int:
    """Delete from several tables in one transaction. Returns total rows removed."""
    targets = []
    for spec in specs:
        target = _table(spec.table)
        if not spec.where:
            raise DatabaseError(f"Refusing to delete from {spec.table} without conditions")
        _check_columns(target, spec.where.keys())
        targets.append((spec, target))

    async def apply(session: AsyncSession) -> int:
        total = 0
        for spec, target in targets:
            conditions = [target.c[column] == value for column, value in spec.where.items()]
            result = await session.execute(delete(target).where(*conditions))
            total += result.rowcount or 0
        return total

    return await with_transaction(session_factory, apply)
