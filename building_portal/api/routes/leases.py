from fastapi import APIRouter, Request

from building_portal.api.middleware import (
    RequestContext,
    success,
    with_audit,
    with_middleware,
    with_session,
)
from building_portal.app.use_cases.leases import CloseOutLeaseUseCase

router = APIRouter(prefix="/leases", tags=["Leases"])


@router.delete("/{lease_id:int}")
@with_middleware
@with_session
@with_audit("leases")
async def close_out_lease(request: Request, context: RequestContext):
    """
    Close Out Lease

    Removes the lease's occupants and maintenance requests together.

    Authorization:
    - ADMIN, BUILDING_MANAGER and SOCIAL_HOUSING_MANAGER only

    Raises:
        - 403 Forbidden: Not a manager
        - 404 Not Found: Nothing recorded against the lease
    """
    lease_id = request.path_params["lease_id"]
    removed = await CloseOutLeaseUseCase(context.uow).execute(
        lease_id, context.session.role_name
    )
    return success({"lease_id": lease_id, "removed": removed})
