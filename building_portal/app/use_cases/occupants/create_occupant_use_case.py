"""
Create Occupant Use Case
"""

from datetime import datetime
from typing import Callable

from config import ApplicationConfig
from building_portal.app.services.unit_of_work import UnitOfWork
from building_portal.domain.base import utc_now
from building_portal.domain.entities import Occupant, OccupantRelationship, OccupantStatus
from .dtos import CreateOccupantCommand, OccupantResponse


def build_occupant(command: CreateOccupantCommand, now: datetime) -> Occupant:
    """Apply creation defaults to a command"""
    return Occupant(
        lease_id=command.lease_id or ApplicationConfig.DEFAULT_LEASE_ID,
        property_id=command.property_id,
        unit_id=command.unit_id or ApplicationConfig.DEFAULT_UNIT_ID,
        name=command.name,
        email=command.email,
        phone=command.phone or "",
        relationship_to_leaseholder=(
            command.relationship_to_leaseholder or OccupantRelationship.co_occupant.value
        ),
        registration_date=command.registration_date or now.date().isoformat(),
        status=command.status or OccupantStatus.active.value,
        created_at=now,
    )


class CreateOccupantUseCase:
    """
    Use case for registering a single occupant.

    Business Rules:
    - lease_id and unit_id fall back to the configured defaults
    - status defaults to active, registration date to today
    """

    def __init__(self, uow: UnitOfWork, clock: Callable[[], datetime] = utc_now):
        self.uow = uow
        self.clock = clock

    async def execute(self, command: CreateOccupantCommand) -> OccupantResponse:
        occupant = build_occupant(command, self.clock())

        async with self.uow:
            occupant = await self.uow.occupants.create(occupant)
            await self.uow.commit()
            return OccupantResponse.from_entity(occupant)
