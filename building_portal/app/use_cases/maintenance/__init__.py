"""
Maintenance Use Cases
"""

from .list_maintenance_requests_use_case import ListMaintenanceRequestsUseCase
from .create_maintenance_request_use_case import CreateMaintenanceRequestUseCase
from .bulk_update_maintenance_requests_use_case import (
    BulkUpdateMaintenanceRequestsUseCase,
    is_valid_maintenance_update,
)
from .dtos import (
    BulkUpdateResponse,
    CreateMaintenanceRequestCommand,
    MaintenanceRequestResponse,
    MaintenanceUpdate,
)

__all__ = [
    "ListMaintenanceRequestsUseCase",
    "CreateMaintenanceRequestUseCase",
    "BulkUpdateMaintenanceRequestsUseCase",
    "is_valid_maintenance_update",
    "BulkUpdateResponse",
    "CreateMaintenanceRequestCommand",
    "MaintenanceRequestResponse",
    "MaintenanceUpdate",
]
