"""
Maintenance Request Entity
"""

from datetime import datetime
from typing import Optional

from sqlmodel import Column, DateTime, Field, SQLModel

from ..base import utc_now
from .enums import MaintenancePriority, MaintenanceStatus


class MaintenanceRequest(SQLModel, table=True):
    """Repair or service request raised against a unit."""

    __tablename__ = "maintenance_requests"

    id: Optional[int] = Field(default=None, primary_key=True)
    lease_id: int = Field(nullable=False, index=True)
    property_id: int = Field(nullable=False, index=True)
    unit_number: str
    description: str
    status: str = Field(default=MaintenanceStatus.pending.value)
    priority: str = Field(default=MaintenancePriority.medium.value)
    submitted_date: str  # YYYY-MM-DD
    completed_date: Optional[str] = None

    created_at: datetime = Field(default_factory=utc_now, sa_column=Column(DateTime))
    updated_at: Optional[datetime] = Field(default=None, sa_column=Column(DateTime))
