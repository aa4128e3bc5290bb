"""
User Entity

A portal account from the pre-seeded user directory.
"""

from datetime import datetime
from typing import List, Optional

from sqlmodel import Field, SQLModel

from .enums import ProfileType, UserStatus


class User(SQLModel):
    """
    User entity - an account that can open sessions.

    Business Rules:
    - Username is unique across the directory
    - Only status=verified accounts may authenticate
    - Password is kept as a bcrypt hash, never in plaintext
    """

    user_id: int
    username: str
    password_hash: str
    email: str
    full_name: str
    phone: str
    legal_sin_or_bn: Optional[str] = None
    role_id: int
    profile_type: ProfileType
    status: UserStatus
    properties: List[int] = Field(default_factory=list)
    created_at: datetime
