"""
Occupant Use Case DTOs (Data Transfer Objects)

Wire names `relationshipToLeaseholder` and `registrationDate` are kept as
aliases for existing portal clients.
"""

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from building_portal.domain.entities import Occupant


# ============================================================================
# Command DTOs
# ============================================================================


class CreateOccupantCommand(BaseModel):
    """Validated intent to register one occupant; unset fields get defaults"""

    model_config = ConfigDict(populate_by_name=True)

    name: str
    email: str
    property_id: int
    lease_id: Optional[int] = None
    unit_id: Optional[int] = None
    phone: Optional[str] = None
    relationship_to_leaseholder: Optional[str] = Field(
        default=None, alias="relationshipToLeaseholder"
    )
    registration_date: Optional[str] = Field(default=None, alias="registrationDate")
    status: Optional[str] = None


# ============================================================================
# Response DTOs
# ============================================================================


class OccupantResponse(BaseModel):
    """Occupant snapshot returned by the API"""

    model_config = ConfigDict(populate_by_name=True)

    occupant_id: int
    lease_id: int
    property_id: int
    unit_id: int
    name: str
    email: str
    phone: str
    relationship_to_leaseholder: str = Field(alias="relationshipToLeaseholder")
    registration_date: str = Field(alias="registrationDate")
    status: str
    created_at: datetime

    @classmethod
    def from_entity(cls, occupant: Occupant) -> "OccupantResponse":
        return cls(
            occupant_id=occupant.occupant_id,
            lease_id=occupant.lease_id,
            property_id=occupant.property_id,
            unit_id=occupant.unit_id,
            name=occupant.name,
            email=occupant.email,
            phone=occupant.phone,
            relationship_to_leaseholder=occupant.relationship_to_leaseholder,
            registration_date=occupant.registration_date,
            status=occupant.status,
            created_at=occupant.created_at,
        )


class RegisterOccupantsResponse(BaseModel):
    """Ids created by a household registration, in request order"""

    occupant_ids: List[int]
