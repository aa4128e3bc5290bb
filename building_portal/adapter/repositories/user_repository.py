from typing import Any, Dict, Iterable, List, Optional

from building_portal.app.repositories.user_repository import IUserRepository
from building_portal.app.services.password_hasher import IPasswordHasher
from building_portal.domain.base import utc_now
from building_portal.domain.entities import User


class InMemoryUserRepository(IUserRepository):
    """
    Pre-seeded user directory held in process memory.

    Each instance owns its own table; nothing is shared between instances.
    Seed rows carry a plaintext `password` that is hashed on load.
    """

    def __init__(self, hasher: IPasswordHasher, seed: Iterable[Dict[str, Any]] = ()):
        self.hasher = hasher
        self._users: Dict[int, User] = {}
        for row in seed:
            row = dict(row)
            password = row.pop("password")
            user = User.model_validate({**row, "password_hash": hasher.hash(password)})
            self._users[user.user_id] = user

    async def get_by_id(self, user_id: int) -> Optional[User]:
        return self._users.get(user_id)

    async def get_by_username(self, username: str) -> Optional[User]:
        for user in self._users.values():
            if user.username == username:
                return user
        return None

    async def list_all(self) -> List[User]:
        return list(self._users.values())

    async def create(self, user: User) -> User:
        next_id = max(self._users, default=0) + 1
        created = user.model_copy(update={"user_id": next_id, "created_at": utc_now()})
        self._users[next_id] = created
        return created

    async def update(self, user_id: int, updates: Dict[str, Any]) -> Optional[User]:
        current = self._users.get(user_id)
        if current is None:
            return None
        updates = {k: v for k, v in updates.items() if k not in ("user_id", "created_at")}
        updated = User.model_validate({**current.model_dump(), **updates})
        self._users[user_id] = updated
        return updated

    async def delete(self, user_id: int) -> bool:
        return self._users.pop(user_id, None) is not None
