"""List notifications use case."""

from uuid import UUID

from pydantic import BaseModel, Field

from quorum.application.usecase.views import NotificationView
from quorum.domain.service import NotificationDispatcher
from quorum.domain.value import UserId


class ListNotificationsRequest(BaseModel):
    """List notifications request."""

    user_id: UUID
    unread_only: bool = False
    limit: int = Field(default=20, ge=1, le=100)
    offset: int = Field(default=0, ge=0)


class ListNotificationsResponse(BaseModel):
    """List notifications response."""

    notifications: list[NotificationView]
    total: int
    unread_count: int
    limit: int
    offset: int


class ListNotificationsUseCase:
    """Use case for reading the notification inbox."""

    def __init__(self, notification_dispatcher: NotificationDispatcher) -> None:
        """Initialize list notifications use case.

        Args:
            notification_dispatcher: Notification dispatcher
        """
        self.notification_dispatcher = notification_dispatcher

    async def execute(
        self, request: ListNotificationsRequest
    ) -> ListNotificationsResponse:
        """Execute list notifications flow."""
        user_id = UserId(request.user_id)
        notifications, total = await self.notification_dispatcher.list_for_recipient(
            user_id,
            unread_only=request.unread_only,
            limit=request.limit,
            offset=request.offset,
        )
        unread = await self.notification_dispatcher.unread_count(user_id)

        return ListNotificationsResponse(
            notifications=[
                NotificationView.from_notification(n) for n in notifications
            ],
            total=total,
            unread_count=unread,
            limit=request.limit,
            offset=request.offset,
        )
