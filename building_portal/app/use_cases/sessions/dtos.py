"""
Session Use Case DTOs (Data Transfer Objects)

Command and Response classes for the session domain.
"""

import json
from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel

from building_portal.domain.entities import Session, User


# ============================================================================
# Nested Models
# ============================================================================


class SanitizedUser(BaseModel):
    """User view safe to return to clients (no password material)"""

    user_id: int
    username: str
    email: str
    full_name: str
    phone: str
    legal_sin_or_bn: Optional[str] = None
    profile_type: str
    role_id: int
    status: str

    @classmethod
    def from_user(cls, user: User) -> "SanitizedUser":
        return cls(
            user_id=user.user_id,
            username=user.username,
            email=user.email,
            full_name=user.full_name,
            phone=user.phone,
            legal_sin_or_bn=user.legal_sin_or_bn,
            profile_type=user.profile_type.value,
            role_id=user.role_id,
            status=user.status.value,
        )


class SessionSnapshot(BaseModel):
    """Denormalized user snapshot stored on a session row"""

    session_id: str
    user_id: int
    username: str
    email: str
    full_name: str
    phone: str
    legal_sin_or_bn: Optional[str] = None
    profile_type: str
    role_id: int
    role_name: str
    properties: List[int]
    status: str
    created_at: datetime
    expires_at: datetime

    @classmethod
    def from_session(cls, session: Session) -> "SessionSnapshot":
        return cls(
            session_id=session.session_id,
            user_id=session.user_id,
            username=session.username,
            email=session.email,
            full_name=session.full_name,
            phone=session.phone,
            legal_sin_or_bn=session.legal_sin_or_bn,
            profile_type=session.profile_type,
            role_id=session.role_id,
            role_name=session.role_name,
            properties=json.loads(session.properties or "[]"),
            status=session.status,
            created_at=session.created_at,
            expires_at=session.expires_at,
        )


# ============================================================================
# Response DTOs
# ============================================================================


class AuthenticationResult(BaseModel):
    """
    Outcome of a credential check.

    On failure `reason` says which check failed (USER_NOT_FOUND,
    INVALID_PASSWORD, NOT_VERIFIED) and `field` names the input it concerns.
    """

    success: bool
    user: Optional[User] = None
    reason: Optional[str] = None
    field: Optional[str] = None
    message: Optional[str] = None


class CreateSessionResponse(BaseModel):
    """Response for session creation use case"""

    session_id: str
    token: str
    expires_at: datetime
    user: SanitizedUser
