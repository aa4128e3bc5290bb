from typing import List, Optional

from building_portal.app.services.unit_of_work import UnitOfWork
from .dtos import MaintenanceRequestResponse


class ListMaintenanceRequestsUseCase:
    """List maintenance requests newest first, optionally by property and status."""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, property_id: Optional[int] = None, status: Optional[str] = None
    ) -> List[MaintenanceRequestResponse]:
        async with self.uow:
            requests = await self.uow.maintenance_requests.list(
                property_id=property_id, status=status
            )
            return [MaintenanceRequestResponse.from_entity(r) for r in requests]
