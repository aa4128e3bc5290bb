"""
Update Occupant Use Case
"""

from typing import Any, Dict

from building_portal.app.services.unit_of_work import UnitOfWork
from building_portal.domain.errors import NotFoundError, ValidationError

# Columns a partial update may touch
UPDATABLE_COLUMNS = frozenset(
    {
        "lease_id",
        "property_id",
        "unit_id",
        "name",
        "email",
        "phone",
        "relationship_to_leaseholder",
        "registration_date",
        "status",
    }
)


class UpdateOccupantUseCase:
    """
    Use case for partial occupant updates.

    Business Rules:
    - At least one column besides the id must be given
    - Only allow-listed columns can be written
    - Zero rows matched is a NotFoundError
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, occupant_id: int, fields: Dict[str, Any]) -> None:
        if not fields:
            raise ValidationError(
                [{"path": "body", "message": "No fields to update"}],
                message="No fields to update",
            )

        unknown = sorted(set(fields) - UPDATABLE_COLUMNS)
        if unknown:
            raise ValidationError(
                [{"path": name, "message": "Field cannot be updated"} for name in unknown]
            )

        async with self.uow:
            updated = await self.uow.occupants.update(occupant_id, fields)
            if updated == 0:
                raise NotFoundError(f"Occupant with ID {occupant_id}")
            await self.uow.commit()
