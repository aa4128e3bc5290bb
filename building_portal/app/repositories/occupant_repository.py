from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional

from building_portal.domain.entities import Occupant


class IOccupantRepository(ABC):
    """Occupant repository interface - application layer"""

    @abstractmethod
    async def list(
        self,
        property_id: Optional[int] = None,
        unit_id: Optional[int] = None,
        lease_id: Optional[int] = None,
    ) -> List[Occupant]:
        """List occupants newest first, filtered by any given ids"""
        pass

    @abstractmethod
    async def create(self, occupant: Occupant) -> Occupant:
        """Create a new occupant"""
        pass

    @abstractmethod
    async def update(self, occupant_id: int, fields: Dict[str, Any]) -> int:
        """Apply allow-listed column updates. Returns rows affected."""
        pass

    @abstractmethod
    async def delete(self, occupant_id: int) -> int:
        """Physically delete an occupant. Returns rows affected."""
        pass
