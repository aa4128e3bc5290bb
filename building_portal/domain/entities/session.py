"""
Session Entity

Server-issued, time-limited credential pair with a denormalized user snapshot.
"""

from datetime import datetime
from typing import Optional

from sqlmodel import Column, DateTime, Field, Index, SQLModel

from ..base import utc_now


class Session(SQLModel, table=True):
    """
    Session entity - one row per successful login.

    Business Rules:
    - session_id and token are independent 256-bit hex secrets
    - A lookup needs both; session_id alone never resolves a session
    - Valid only while expires_at is strictly in the future
    - User fields are a point-in-time snapshot, not refreshed later
    - A user may hold several concurrent sessions
    """

    __tablename__ = "sessions"

    session_id: str = Field(primary_key=True, max_length=64)
    token: str = Field(max_length=64, nullable=False)

    user_id: int = Field(nullable=False, index=True)
    username: str
    email: str
    full_name: str
    phone: str
    legal_sin_or_bn: Optional[str] = None
    profile_type: str
    role_id: int
    role_name: str
    properties: str = Field(default="[]")  # JSON-encoded list of property ids
    status: str = Field(default="active")

    # Timestamps
    created_at: datetime = Field(default_factory=utc_now, sa_column=Column(DateTime))
    expires_at: datetime = Field(sa_column=Column(DateTime, nullable=False))

    __table_args__ = (Index("idx_session_expires_at", "expires_at"),)
