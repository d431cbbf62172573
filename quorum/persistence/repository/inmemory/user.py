"""In-memory user repository."""

from typing import Optional

from quorum.domain.model.user import User
from quorum.domain.repository.user import UserRepository
from quorum.domain.value import UserId

from .store import InMemoryStore


class InMemoryUserRepository(UserRepository):
    def __init__(self, store: InMemoryStore | None = None) -> None:
        self._users = (store or InMemoryStore()).users

    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        return self._users.get(user_id)

    async def save(self, user: User) -> User:
        self._users[user.id] = user
        return user
