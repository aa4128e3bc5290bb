"""
Use Cases

Organized by resource:
- sessions/: Login, session validation, logout
- occupants/: Occupant registration and maintenance
- maintenance/: Maintenance requests
- leases/: Lease close-out
"""

from .sessions import (
    AuthenticateCredentialsUseCase,
    CreateSessionUseCase,
    ValidateSessionUseCase,
    DeleteSessionUseCase,
)
from .occupants import (
    ListOccupantsUseCase,
    CreateOccupantUseCase,
    UpdateOccupantUseCase,
    DeleteOccupantUseCase,
    RegisterOccupantsUseCase,
)
from .maintenance import (
    ListMaintenanceRequestsUseCase,
    CreateMaintenanceRequestUseCase,
    BulkUpdateMaintenanceRequestsUseCase,
)
from .leases import CloseOutLeaseUseCase

__all__ = [
    "AuthenticateCredentialsUseCase",
    "CreateSessionUseCase",
    "ValidateSessionUseCase",
    "DeleteSessionUseCase",
    "ListOccupantsUseCase",
    "CreateOccupantUseCase",
    "UpdateOccupantUseCase",
    "DeleteOccupantUseCase",
    "RegisterOccupantsUseCase",
    "ListMaintenanceRequestsUseCase",
    "CreateMaintenanceRequestUseCase",
    "BulkUpdateMaintenanceRequestsUseCase",
    "CloseOutLeaseUseCase",
]
