from datetime import datetime
from typing import Callable

from config import ApplicationConfig
from building_portal.app.services.unit_of_work import UnitOfWork
from building_portal.domain.base import utc_now
from building_portal.domain.entities import MaintenanceRequest, MaintenanceStatus
from .dtos import CreateMaintenanceRequestCommand, MaintenanceRequestResponse


class CreateMaintenanceRequestUseCase:
    """Record a new maintenance request; status defaults to pending."""

    def __init__(self, uow: UnitOfWork, clock: Callable[[], datetime] = utc_now):
        self.uow = uow
        self.clock = clock

    async def execute(
        self, command: CreateMaintenanceRequestCommand
    ) -> MaintenanceRequestResponse:
        now = self.clock()
        request = MaintenanceRequest(
            lease_id=command.lease_id or ApplicationConfig.DEFAULT_LEASE_ID,
            property_id=command.property_id,
            unit_number=command.unit_number,
            description=command.description,
            priority=command.priority,
            status=command.status or MaintenanceStatus.pending.value,
            submitted_date=now.date().isoformat(),
            created_at=now,
        )

        async with self.uow:
            request = await self.uow.maintenance_requests.create(request)
            await self.uow.commit()
            return MaintenanceRequestResponse.from_entity(request)
