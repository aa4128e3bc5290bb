"""
Maintenance Use Case DTOs (Data Transfer Objects)
"""

from datetime import datetime
from typing import Any, Dict, Optional

from pydantic import BaseModel

from building_portal.domain.entities import MaintenanceRequest


# ============================================================================
# Command DTOs
# ============================================================================


class CreateMaintenanceRequestCommand(BaseModel):
    property_id: int
    unit_number: str
    description: str
    priority: str
    status: Optional[str] = None
    lease_id: Optional[int] = None


class MaintenanceUpdate(BaseModel):
    """Partial update of one request, addressed by id"""

    id: int
    data: Dict[str, Any]


# ============================================================================
# Response DTOs
# ============================================================================


class MaintenanceRequestResponse(BaseModel):
    id: int
    lease_id: int
    property_id: int
    unit_number: str
    description: str
    status: str
    priority: str
    submitted_date: str
    completed_date: Optional[str] = None
    created_at: datetime
    updated_at: Optional[datetime] = None

    @classmethod
    def from_entity(cls, request: MaintenanceRequest) -> "MaintenanceRequestResponse":
        return cls.model_validate(request.model_dump())


class BulkUpdateResponse(BaseModel):
    requested: int
    updated: int
