from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional

from building_portal.app.services.password_hasher import IPasswordHasher
from building_portal.domain.entities import User


class IUserRepository(ABC):
    """User directory interface - application layer"""

    # Hasher used for the stored password hashes
    hasher: IPasswordHasher

    @abstractmethod
    async def get_by_id(self, user_id: int) -> Optional[User]:
        """Get user by ID"""
        pass

    @abstractmethod
    async def get_by_username(self, username: str) -> Optional[User]:
        """Get user by username"""
        pass

    @abstractmethod
    async def list_all(self) -> List[User]:
        """List every user"""
        pass

    @abstractmethod
    async def create(self, user: User) -> User:
        """Add a user; user_id is assigned by the directory"""
        pass

    @abstractmethod
    async def update(self, user_id: int, updates: Dict[str, Any]) -> Optional[User]:
        """Update a user. Returns None when the id is unknown."""
        pass

    @abstractmethod
    async def delete(self, user_id: int) -> bool:
        """Delete a user. Returns True when a user was removed."""
        pass
