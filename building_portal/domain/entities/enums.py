"""
Building Portal Domain Enums

All enumeration types used across domain entities.
"""

from enum import Enum


class UserStatus(str, Enum):
    """User account status"""

    active = "active"
    inactive = "inactive"
    verified = "verified"
    pending = "pending"


class ProfileType(str, Enum):
    """Legal profile of a user account"""

    individual = "Individual"
    corporate = "Corporate"
    ngo = "NGO"
    government = "Government"


class SessionStatus(str, Enum):
    """Session row status"""

    active = "active"


class OccupantStatus(str, Enum):
    """Occupant registration status"""

    active = "active"
    inactive = "inactive"


class OccupantRelationship(str, Enum):
    """Relationship of an occupant to the leaseholder"""

    primary_leaseholder = "Primary Leaseholder"
    co_occupant = "Co-occupant"
    dependent = "Dependent"
    other = "Other"


class MaintenanceStatus(str, Enum):
    """Maintenance request lifecycle"""

    pending = "pending"
    in_progress = "in_progress"
    completed = "completed"


class MaintenancePriority(str, Enum):
    """Maintenance request priority"""

    low = "low"
    medium = "medium"
    high = "high"


class RoleName(str, Enum):
    """Portal roles, keyed by role id in ROLE_NAMES_BY_ID"""

    renter = "RENTER"
    leaseholder = "LEASEHOLDER"
    owner = "OWNER"
    corporate_owner = "CORPORATE_OWNER"
    coop_member = "COOP_MEMBER"
    shelter_resident = "SHELTER_RESIDENT"
    social_housing_manager = "SOCIAL_HOUSING_MANAGER"
    building_manager = "BUILDING_MANAGER"
    support_services = "SUPPORT_SERVICES"
    government_authority = "GOVERNMENT_AUTHORITY"
    admin = "ADMIN"
    user = "USER"


ROLE_NAMES_BY_ID = {
    1: RoleName.renter,
    2: RoleName.leaseholder,
    3: RoleName.owner,
    4: RoleName.corporate_owner,
    5: RoleName.coop_member,
    6: RoleName.shelter_resident,
    7: RoleName.social_housing_manager,
    8: RoleName.building_manager,
    9: RoleName.support_services,
    10: RoleName.government_authority,
    11: RoleName.admin,
}

MANAGER_ROLES = frozenset(
    {RoleName.admin, RoleName.building_manager, RoleName.social_housing_manager}
)


def role_name_for(role_id: int) -> RoleName:
    return ROLE_NAMES_BY_ID.get(role_id, RoleName.user)
