"""
Close Out Lease Use Case

Removes every record attached to a lease in one transaction.
"""

from building_portal.adapter.services.transaction import CascadeSpec, delete_with_cascade
from building_portal.app.services.unit_of_work import UnitOfWork
from building_portal.domain.entities import MANAGER_ROLES
from building_portal.domain.errors import AuthorizationError, NotFoundError


class CloseOutLeaseUseCase:
    """
    Use case for lease close-out.

    Business Rules:
    - Only manager roles may close out a lease
    - Occupants and maintenance requests go together or not at all
    - Nothing to remove is a NotFoundError
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, lease_id: int, requesting_role: str) -> int:
        if requesting_role not in {role.value for role in MANAGER_ROLES}:
            raise AuthorizationError("Only managers can close out a lease")

        removed = await delete_with_cascade(
            self.uow.session_factory,
            [
                CascadeSpec(table="occupants", where={"lease_id": lease_id}),
                CascadeSpec(table="maintenance_requests", where={"lease_id": lease_id}),
            ],
        )
        if removed == 0:
            raise NotFoundError(f"Records for lease {lease_id}")
        return removed
