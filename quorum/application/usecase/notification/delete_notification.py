"""Delete notification use case."""

from uuid import UUID

from pydantic import BaseModel

from quorum.domain.service import NotificationDispatcher
from quorum.domain.value import NotificationId, UserId


class DeleteNotificationRequest(BaseModel):
    """Delete notification request."""

    notification_id: UUID
    user_id: UUID


class DeleteNotificationResponse(BaseModel):
    """Delete notification response."""

    success: bool
    notification_id: str


class DeleteNotificationUseCase:
    """Use case for removing a notification from the inbox."""

    def __init__(self, notification_dispatcher: NotificationDispatcher) -> None:
        """Initialize delete notification use case.

        Args:
            notification_dispatcher: Notification dispatcher
        """
        self.notification_dispatcher = notification_dispatcher

    async def execute(
        self, request: DeleteNotificationRequest
    ) -> DeleteNotificationResponse:
        """Execute delete notification flow.

        Raises:
            NotFoundError: If the notification does not exist
            ForbiddenError: If the user is not the recipient
        """
        await self.notification_dispatcher.delete(
            NotificationId(request.notification_id), UserId(request.user_id)
        )
        return DeleteNotificationResponse(
            success=True, notification_id=str(request.notification_id)
        )
