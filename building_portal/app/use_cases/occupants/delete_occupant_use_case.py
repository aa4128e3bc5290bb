from building_portal.app.services.unit_of_work import UnitOfWork
from building_portal.domain.errors import NotFoundError


class DeleteOccupantUseCase:
    """Physically remove one occupant; unknown id is a NotFoundError."""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, occupant_id: int) -> None:
        async with self.uow:
            deleted = await self.uow.occupants.delete(occupant_id)
            if deleted == 0:
                raise NotFoundError(f"Occupant with ID {occupant_id}")
            await self.uow.commit()
