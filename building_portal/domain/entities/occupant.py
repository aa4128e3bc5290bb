"""
Occupant Entity

Registered inhabitant or sub-tenant of a leased unit.
"""

from datetime import datetime
from typing import Optional

from sqlmodel import Column, DateTime, Field, Index, SQLModel

from ..base import utc_now
from .enums import OccupantRelationship, OccupantStatus


class Occupant(SQLModel, table=True):
    """
    Occupant entity.

    Business Rules:
    - name, email and property_id are mandatory on creation
    - Deletion is physical (no soft delete)
    """

    __tablename__ = "occupants"

    occupant_id: Optional[int] = Field(default=None, primary_key=True)
    lease_id: int = Field(nullable=False, index=True)
    property_id: int = Field(nullable=False, index=True)
    unit_id: int = Field(nullable=False, index=True)
    name: str
    email: str
    phone: str = Field(default="")
    relationship_to_leaseholder: str = Field(
        default=OccupantRelationship.co_occupant.value
    )
    registration_date: str  # YYYY-MM-DD
    status: str = Field(default=OccupantStatus.active.value)

    created_at: datetime = Field(default_factory=utc_now, sa_column=Column(DateTime))

    __table_args__ = (Index("idx_occupant_created_at", "created_at"),)
