from abc import ABC, abstractmethod
from typing import Optional

from building_portal.domain.entities import Session


class ISessionRepository(ABC):
    """Session repository interface - application layer"""

    @abstractmethod
    async def create(self, session: Session) -> Session:
        """Persist a new session row"""
        pass

    @abstractmethod
    async def get_by_credentials(self, session_id: str, token: str) -> Optional[Session]:
        """Get session matching both session_id and token"""
        pass

    @abstractmethod
    async def delete_by_credentials(self, session_id: str, token: str) -> int:
        """Delete session matching both session_id and token. Returns rows removed."""
        pass
