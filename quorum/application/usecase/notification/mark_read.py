"""Mark notification read use cases."""

from uuid import UUID

from pydantic import BaseModel

from quorum.application.usecase.views import NotificationView
from quorum.domain.service import NotificationDispatcher
from quorum.domain.value import NotificationId, UserId


class MarkNotificationReadRequest(BaseModel):
    """Mark one notification read."""

    notification_id: UUID
    user_id: UUID


class MarkNotificationReadUseCase:
    """Use case for reading one notification."""

    def __init__(self, notification_dispatcher: NotificationDispatcher) -> None:
        """Initialize mark read use case.

        Args:
            notification_dispatcher: Notification dispatcher
        """
        self.notification_dispatcher = notification_dispatcher

    async def execute(self, request: MarkNotificationReadRequest) -> NotificationView:
        """Mark the notification read.

        Raises:
            NotFoundError: If the notification does not exist
            ForbiddenError: If the user is not the recipient
        """
        notification = await self.notification_dispatcher.mark_read(
            NotificationId(request.notification_id), UserId(request.user_id)
        )
        return NotificationView.from_notification(notification)


class MarkAllNotificationsReadRequest(BaseModel):
    """Mark the whole inbox read."""

    user_id: UUID


class MarkAllNotificationsReadResponse(BaseModel):
    """Mark all read response."""

    updated: int


class MarkAllNotificationsReadUseCase:
    """Use case for clearing the unread badge."""

    def __init__(self, notification_dispatcher: NotificationDispatcher) -> None:
        """Initialize mark all read use case.

        Args:
            notification_dispatcher: Notification dispatcher
        """
        self.notification_dispatcher = notification_dispatcher

    async def execute(
        self, request: MarkAllNotificationsReadRequest
    ) -> MarkAllNotificationsReadResponse:
        """Mark every unread notification read."""
        updated = await self.notification_dispatcher.mark_all_read(
            UserId(request.user_id)
        )
        return MarkAllNotificationsReadResponse(updated=updated)
