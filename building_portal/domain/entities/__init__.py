"""
Building Portal Domain Entities

All domain entities organized by model.
Each entity in its own file for better maintainability.
"""

# Export all enums
from .enums import (
    MANAGER_ROLES,
    MaintenancePriority,
    MaintenanceStatus,
    OccupantRelationship,
    OccupantStatus,
    ProfileType,
    RoleName,
    SessionStatus,
    UserStatus,
    role_name_for,
)

# Export all entities
from .user import User
from .session import Session
from .occupant import Occupant
from .maintenance_request import MaintenanceRequest

__all__ = [
    # Enums
    "MANAGER_ROLES",
    "MaintenancePriority",
    "MaintenanceStatus",
    "OccupantRelationship",
    "OccupantStatus",
    "ProfileType",
    "RoleName",
    "SessionStatus",
    "UserStatus",
    "role_name_for",
    # Entities
    "User",
    "Session",
    "Occupant",
    "MaintenanceRequest",
]
