"""
Register Occupants Use Case

Registers a whole household in one transaction.
"""

from datetime import datetime
from typing import Callable, List

from sqlmodel.ext.asyncio.session import AsyncSession

from building_portal.adapter.services.transaction import TransactionBuilder
from building_portal.app.services.unit_of_work import UnitOfWork
from building_portal.domain.base import utc_now
from building_portal.domain.entities import Occupant
from .create_occupant_use_case import build_occupant
from .dtos import CreateOccupantCommand, RegisterOccupantsResponse


def _insert(occupant: Occupant):
    async def operation(session: AsyncSession) -> int:
        session.add(occupant)
        await session.flush()
        return occupant.occupant_id

    return operation


class RegisterOccupantsUseCase:
    """
    Use case for batch occupant registration.

    Business Rules:
    - Either every occupant is created or none is
    - Defaults are the same as single registration
    """

    def __init__(self, uow: UnitOfWork, clock: Callable[[], datetime] = utc_now):
        self.uow = uow
        self.clock = clock

    async def execute(self, commands: List[CreateOccupantCommand]) -> RegisterOccupantsResponse:
        now = self.clock()
        builder = TransactionBuilder(self.uow.session_factory)
        for command in commands:
            builder.add_operation(_insert(build_occupant(command, now)))

        occupant_ids = await builder.execute()
        return RegisterOccupantsResponse(occupant_ids=occupant_ids)
