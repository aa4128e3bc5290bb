from typing import Any, Dict, List, Optional

from sqlalchemy import delete
from sqlmodel import select, update
from sqlmodel.ext.asyncio.session import AsyncSession

from building_portal.app.repositories.occupant_repository import IOccupantRepository
from building_portal.domain.entities import Occupant


class OccupantRepository(IOccupantRepository):
    """Occupant repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def list(
        self,
        property_id: Optional[int] = None,
        unit_id: Optional[int] = None,
        lease_id: Optional[int] = None,
    ) -> List[Occupant]:
        """List occupants, newest created first"""
        stmt = select(Occupant)
        if property_id is not None:
            stmt = stmt.where(Occupant.property_id == property_id)
        if unit_id is not None:
            stmt = stmt.where(Occupant.unit_id == unit_id)
        if lease_id is not None:
            stmt = stmt.where(Occupant.lease_id == lease_id)
        stmt = stmt.order_by(Occupant.created_at.desc(), Occupant.occupant_id.desc())

        result = await self.session.execute(stmt)
        return [row for row in result.scalars().all()]

    async def create(self, occupant: Occupant) -> Occupant:
        """Create a new occupant"""
        self.session.add(occupant)
        await self.session.flush()
        await self.session.refresh(occupant)
        return occupant

    async def update(self, occupant_id: int, fields: Dict[str, Any]) -> int:
        """Update allow-listed columns of one occupant"""
        stmt = (
            update(Occupant)
            .where(Occupant.occupant_id == occupant_id)
            .values(**fields)
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount

    async def delete(self, occupant_id: int) -> int:
        """Physically delete one occupant"""
        stmt = delete(Occupant).where(Occupant.occupant_id == occupant_id)
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount
