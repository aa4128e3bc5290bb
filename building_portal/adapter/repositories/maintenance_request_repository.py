from typing import List, Optional

from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from building_portal.app.repositories.maintenance_request_repository import (
    IMaintenanceRequestRepository,
)
from building_portal.domain.entities import MaintenanceRequest


class MaintenanceRequestRepository(IMaintenanceRequestRepository):
    """Maintenance request repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def list(
        self, property_id: Optional[int] = None, status: Optional[str] = None
    ) -> List[MaintenanceRequest]:
        stmt = select(MaintenanceRequest)
        if property_id is not None:
            stmt = stmt.where(MaintenanceRequest.property_id == property_id)
        if status is not None:
            stmt = stmt.where(MaintenanceRequest.status == status)
        stmt = stmt.order_by(
            MaintenanceRequest.created_at.desc(), MaintenanceRequest.id.desc()
        )
        result = await self.session.execute(stmt)
        return [row for row in result.scalars().all()]

    async def create(self, request: MaintenanceRequest) -> MaintenanceRequest:
        self.session.add(request)
        await self.session.flush()
        await self.session.refresh(request)
        return request
