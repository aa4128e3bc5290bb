"""
Bulk Update Maintenance Requests Use Case

Applies a list of partial updates all-or-nothing.
"""

import re
from typing import Any, Dict, List

from building_portal.adapter.services.transaction import RecordUpdate, update_with_validation
from building_portal.app.services.unit_of_work import UnitOfWork
from building_portal.domain.entities import MaintenancePriority, MaintenanceStatus
from .dtos import BulkUpdateResponse, MaintenanceUpdate

_DATE_PATTERN = re.compile(r"^\d{4}-\d{2}-\d{2}$")

_STATUSES = {s.value for s in MaintenanceStatus}
_PRIORITIES = {p.value for p in MaintenancePriority}


def is_valid_maintenance_update(data: Dict[str, Any]) -> bool:
    """Only status, priority, description and completed_date, each well-formed"""
    allowed = {"status", "priority", "description", "completed_date"}
    if not data or not set(data) <= allowed:
        return False
    if "status" in data and data["status"] not in _STATUSES:
        return False
    if "priority" in data and data["priority"] not in _PRIORITIES:
        return False
    if "description" in data:
        description = data["description"]
        if not isinstance(description, str) or not 10 <= len(description) <= 1000:
            return False
    if "completed_date" in data:
        completed = data["completed_date"]
        if completed is not None and (
            not isinstance(completed, str) or not _DATE_PATTERN.match(completed)
        ):
            return False
    return True


class BulkUpdateMaintenanceRequestsUseCase:
    """
    Use case for bulk edits to maintenance requests.

    Business Rules:
    - Every record is validated before its update is issued
    - One invalid record aborts the whole batch
    - Open to any session holder; no role restriction
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, updates: List[MaintenanceUpdate]) -> BulkUpdateResponse:
        records = [RecordUpdate(id=u.id, data=u.data) for u in updates]
        updated = await update_with_validation(
            self.uow.session_factory,
            "maintenance_requests",
            records,
            is_valid_maintenance_update,
        )
        return BulkUpdateResponse(requested=len(records), updated=updated)
