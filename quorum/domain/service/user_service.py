"""User domain service."""

from typing import Optional

import logfire

from quorum.domain.repository import UserRepository
from quorum.domain.value import UserId

from .base import Service


class UserService(Service):
    """Resolves user ids to the names shown in notification text."""

    def __init__(self, user_repository: UserRepository) -> None:
        self.user_repository = user_repository

    async def get_display_name(self, user_id: Optional[UserId]) -> Optional[str]:
        """Return the username, or None when there is no such user."""
        if user_id is None:
            return None

        user = await self.user_repository.find_by_id(user_id)
        if user is None:
            logfire.debug("No user behind actor id", user_id=str(user_id))
            return None
        return str(user.username)
