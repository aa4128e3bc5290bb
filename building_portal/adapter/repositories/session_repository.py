from typing import Optional

from sqlalchemy import delete
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from building_portal.app.repositories.session_repository import ISessionRepository
from building_portal.domain.entities import Session


class SessionRepository(ISessionRepository):
    """Session repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def create(self, session_obj: Session) -> Session:
        """Create a new session"""
        self.session.add(session_obj)
        await self.session.flush()
        await self.session.refresh(session_obj)
        return session_obj

    async def get_by_credentials(self, session_id: str, token: str) -> Optional[Session]:
        """Get session by the conjunction of session_id and token"""
        stmt = select(Session).where(
            Session.session_id == session_id, Session.token == token
        )
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def delete_by_credentials(self, session_id: str, token: str) -> int:
        """Delete session only when both identifiers match"""
        stmt = delete(Session).where(
            Session.session_id == session_id, Session.token == token
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount
