"""Unread notification count use case."""

from uuid import UUID

from pydantic import BaseModel

from quorum.domain.service import NotificationDispatcher
from quorum.domain.value import UserId


class GetUnreadCountRequest(BaseModel):
    """Unread count request."""

    user_id: UUID


class GetUnreadCountResponse(BaseModel):
    """Unread count response."""

    unread_count: int


class GetUnreadCountUseCase:
    """Use case for the unread badge."""

    def __init__(self, notification_dispatcher: NotificationDispatcher) -> None:
        """Initialize unread count use case.

        Args:
            notification_dispatcher: Notification dispatcher
        """
        self.notification_dispatcher = notification_dispatcher

    async def execute(self, request: GetUnreadCountRequest) -> GetUnreadCountResponse:
        """Count unread notifications."""
        count = await self.notification_dispatcher.unread_count(UserId(request.user_id))
        return GetUnreadCountResponse(unread_count=count)
