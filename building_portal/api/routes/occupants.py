"""
Occupants API

Wire names `relationshipToLeaseholder` and `registrationDate` are camelCase;
every other field is snake_case.
"""

import re
from typing import Annotated, List, Optional

from fastapi import APIRouter, Request, status
from pydantic import AfterValidator, BaseModel, ConfigDict, Field

from building_portal.api.middleware import (
    RequestContext,
    success,
    with_middleware,
    with_query_validation,
    with_session,
    with_validation,
)
from building_portal.app.use_cases.occupants import (
    CreateOccupantCommand,
    CreateOccupantUseCase,
    DeleteOccupantUseCase,
    ListOccupantsUseCase,
    RegisterOccupantsUseCase,
    UpdateOccupantUseCase,
)
from building_portal.domain.entities import OccupantRelationship, OccupantStatus
from building_portal.logger import logger

router = APIRouter(prefix="/occupants", tags=["Occupants"])

EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")
DATE_PATTERN = r"^\d{4}-\d{2}-\d{2}$"


def _check_email(value: str) -> str:
    if not EMAIL_PATTERN.match(value):
        raise ValueError("Invalid email format")
    return value


Email = Annotated[str, AfterValidator(_check_email)]


class OccupantQuery(BaseModel):
    property_id: Optional[int] = Field(default=None, gt=0)
    unit_id: Optional[int] = Field(default=None, gt=0)
    lease_id: Optional[int] = Field(default=None, gt=0)


class OccupantCreate(BaseModel):
    """New occupant; only name, email and property_id are required"""

    model_config = ConfigDict(populate_by_name=True)

    name: str = Field(..., min_length=2, max_length=100)
    email: Email
    property_id: int = Field(..., gt=0)
    phone: Optional[str] = Field(default=None, max_length=20)
    lease_id: Optional[int] = Field(default=None, gt=0)
    unit_id: Optional[int] = Field(default=None, gt=0)
    relationship_to_leaseholder: Optional[OccupantRelationship] = Field(
        default=None, alias="relationshipToLeaseholder"
    )
    registration_date: Optional[str] = Field(
        default=None, alias="registrationDate", pattern=DATE_PATTERN
    )
    status: Optional[OccupantStatus] = None

    def to_command(self, lease_id: Optional[int] = None) -> CreateOccupantCommand:
        data = self.model_dump(exclude_none=True, mode="json")
        if lease_id is not None and "lease_id" not in data:
            data["lease_id"] = lease_id
        return CreateOccupantCommand(**data)


class OccupantUpdate(BaseModel):
    """Partial update; keys outside this schema are rejected"""

    model_config = ConfigDict(populate_by_name=True, extra="forbid")

    occupant_id: int = Field(..., gt=0)
    name: Optional[str] = Field(default=None, min_length=2, max_length=100)
    email: Optional[Email] = None
    phone: Optional[str] = Field(default=None, max_length=20)
    lease_id: Optional[int] = Field(default=None, gt=0)
    property_id: Optional[int] = Field(default=None, gt=0)
    unit_id: Optional[int] = Field(default=None, gt=0)
    relationship_to_leaseholder: Optional[OccupantRelationship] = Field(
        default=None, alias="relationshipToLeaseholder"
    )
    registration_date: Optional[str] = Field(
        default=None, alias="registrationDate", pattern=DATE_PATTERN
    )
    status: Optional[OccupantStatus] = None


class OccupantDeleteQuery(BaseModel):
    occupant_id: int = Field(..., gt=0)


class OccupantBatchCreate(BaseModel):
    """Household registration; lease_id applies to members that omit one"""

    lease_id: Optional[int] = Field(default=None, gt=0)
    occupants: List[OccupantCreate] = Field(..., min_length=1, max_length=50)


@router.get("")
@with_middleware
@with_session
@with_query_validation(OccupantQuery)
async def list_occupants(request: Request, context: RequestContext):
    """Occupants newest first; filters combine"""
    query: OccupantQuery = context.query
    occupants = await ListOccupantsUseCase(context.uow).execute(
        property_id=query.property_id, unit_id=query.unit_id, lease_id=query.lease_id
    )
    logger.debug(f"Retrieved {len(occupants)} occupants", context.log_context())
    return success(
        {"occupants": [o.model_dump(by_alias=True, mode="json") for o in occupants]}
    )


@router.post("", status_code=status.HTTP_201_CREATED)
@with_middleware
@with_session
@with_validation(OccupantCreate)
async def create_occupant(request: Request, context: RequestContext):
    """
    Register Occupant

    lease_id and unit_id default to the configured fallbacks, status to
    active and registrationDate to today.

    Raises:
        - 400 Bad Request: Missing name/email/property_id or invalid values
        - 401 Unauthorized: No valid session
    """
    body: OccupantCreate = context.body
    occupant = await CreateOccupantUseCase(context.uow).execute(body.to_command())

    logger.log_audit("CREATE_OCCUPANT", "occupants", context.log_context())
    return success(
        {
            "occupant_id": occupant.occupant_id,
            "message": "Occupant created successfully",
        },
        status_code=status.HTTP_201_CREATED,
    )


@router.post("/batch", status_code=status.HTTP_201_CREATED)
@with_middleware
@with_session
@with_validation(OccupantBatchCreate)
async def register_household(request: Request, context: RequestContext):
    """
    Register Household

    Creates every listed occupant in one transaction, or none of them.
    """
    body: OccupantBatchCreate = context.body
    commands = [member.to_command(body.lease_id) for member in body.occupants]
    result = await RegisterOccupantsUseCase(context.uow).execute(commands)

    logger.log_audit("CREATE_OCCUPANT", "occupants/batch", context.log_context())
    return success(
        {
            "occupant_ids": result.occupant_ids,
            "message": f"{len(result.occupant_ids)} occupants created successfully",
        },
        status_code=status.HTTP_201_CREATED,
    )


@router.put("")
@with_middleware
@with_session
@with_validation(OccupantUpdate)
async def update_occupant(request: Request, context: RequestContext):
    """
    Update Occupant

    Raises:
        - 400 Bad Request: No fields besides occupant_id, or unknown fields
        - 404 Not Found: No occupant with that id
    """
    body: OccupantUpdate = context.body
    fields = body.model_dump(exclude={"occupant_id"}, exclude_none=True, mode="json")
    await UpdateOccupantUseCase(context.uow).execute(body.occupant_id, fields)

    logger.log_audit(
        "UPDATE_OCCUPANT", f"occupants/{body.occupant_id}", context.log_context()
    )
    return success({"message": "Occupant updated successfully"})


@router.delete("")
@with_middleware
@with_session
@with_query_validation(OccupantDeleteQuery)
async def delete_occupant(request: Request, context: RequestContext):
    """
    Remove Occupant

    Raises:
        - 400 Bad Request: occupant_id missing
        - 404 Not Found: No occupant with that id
    """
    query: OccupantDeleteQuery = context.query
    await DeleteOccupantUseCase(context.uow).execute(query.occupant_id)

    logger.log_audit(
        "DELETE_OCCUPANT", f"occupants/{query.occupant_id}", context.log_context()
    )
    return success({"message": "Occupant deleted successfully"})
