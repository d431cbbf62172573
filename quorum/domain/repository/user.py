"""User repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from quorum.domain.model.user import User
from quorum.domain.value import UserId


class UserRepository(ABC):
    """Read access to identity-service users.

    save exists for provisioning sync and fixtures; the API never creates
    users itself.
    """

    @abstractmethod
    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        pass

    @abstractmethod
    async def save(self, user: User) -> User:
        """Insert the user, or refresh username and reputation if known."""
        pass
