from abc import ABC, abstractmethod
from typing import List, Optional

from building_portal.domain.entities import MaintenanceRequest


class IMaintenanceRequestRepository(ABC):
    """Maintenance request repository interface - application layer"""

    @abstractmethod
    async def list(
        self, property_id: Optional[int] = None, status: Optional[str] = None
    ) -> List[MaintenanceRequest]:
        """List requests newest first"""
        pass

    @abstractmethod
    async def create(self, request: MaintenanceRequest) -> MaintenanceRequest:
        """Create a new maintenance request"""
        pass
