from typing import List, Optional

from building_portal.app.services.unit_of_work import UnitOfWork
from .dtos import OccupantResponse


class ListOccupantsUseCase:
    """List occupants newest first; filters combine, none returns all rows."""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self,
        property_id: Optional[int] = None,
        unit_id: Optional[int] = None,
        lease_id: Optional[int] = None,
    ) -> List[OccupantResponse]:
        async with self.uow:
            occupants = await self.uow.occupants.list(
                property_id=property_id, unit_id=unit_id, lease_id=lease_id
            )
            return [OccupantResponse.from_entity(o) for o in occupants]
