from typing import Any, Dict, List, Optional

from fastapi import APIRouter, Request, status
from pydantic import BaseModel, Field

from building_portal.api.middleware import (
    RequestContext,
    compose,
    success,
    with_audit,
    with_middleware,
    with_query_validation,
    with_session,
    with_validation,
)
from building_portal.app.use_cases.maintenance import (
    BulkUpdateMaintenanceRequestsUseCase,
    CreateMaintenanceRequestCommand,
    CreateMaintenanceRequestUseCase,
    ListMaintenanceRequestsUseCase,
    MaintenanceUpdate,
)
from building_portal.domain.entities import MaintenancePriority, MaintenanceStatus

router = APIRouter(prefix="/maintenance-requests", tags=["Maintenance"])

audited = compose(with_middleware, with_session, with_audit("maintenance_requests"))


class MaintenanceQuery(BaseModel):
    property_id: Optional[int] = Field(default=None, gt=0)
    status: Optional[MaintenanceStatus] = None


class MaintenanceCreate(BaseModel):
    property_id: int = Field(..., gt=0)
    unit_number: str = Field(..., min_length=1, max_length=20)
    description: str = Field(..., min_length=10, max_length=1000)
    priority: MaintenancePriority
    status: Optional[MaintenanceStatus] = None
    lease_id: Optional[int] = Field(default=None, gt=0)


class MaintenanceUpdateItem(BaseModel):
    id: int = Field(..., gt=0)
    data: Dict[str, Any]


class MaintenanceBulkUpdate(BaseModel):
    updates: List[MaintenanceUpdateItem] = Field(..., min_length=1)


@router.get("")
@with_middleware
@with_session
@with_query_validation(MaintenanceQuery)
async def list_maintenance_requests(request: Request, context: RequestContext):
    query: MaintenanceQuery = context.query
    requests = await ListMaintenanceRequestsUseCase(context.uow).execute(
        property_id=query.property_id,
        status=query.status.value if query.status else None,
    )
    return success({"maintenance_requests": requests})


@router.post("", status_code=status.HTTP_201_CREATED)
@audited
@with_validation(MaintenanceCreate)
async def create_maintenance_request(request: Request, context: RequestContext):
    """
    Submit Maintenance Request

    status defaults to pending, lease_id to the configured fallback.
    """
    body: MaintenanceCreate = context.body
    command = CreateMaintenanceRequestCommand(**body.model_dump(mode="json"))
    created = await CreateMaintenanceRequestUseCase(context.uow).execute(command)
    return success(
        {"maintenance_request": created, "message": "Maintenance request created successfully"},
        status_code=status.HTTP_201_CREATED,
    )


@router.put("")
@audited
@with_validation(MaintenanceBulkUpdate)
async def update_maintenance_requests(request: Request, context: RequestContext):
    """
    Bulk Update Maintenance Requests

    All updates apply or none do. Only status, priority, description and
    completed_date can change.

    Raises:
        - 400 Bad Request: Malformed body
        - 500 Internal Server Error: A record failed validation (batch rolled back)
    """
    body: MaintenanceBulkUpdate = context.body
    result = await BulkUpdateMaintenanceRequestsUseCase(context.uow).execute(
        [MaintenanceUpdate(id=item.id, data=item.data) for item in body.updates]
    )
    return success(
        {
            "updated": result.updated,
            "message": f"{result.updated} maintenance requests updated",
        }
    )
