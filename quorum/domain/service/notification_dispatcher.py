"""Notification dispatcher domain service.

Owns the notification inbox: renders, persists and publishes
notifications, and handles the read-state transition.
"""

from datetime import datetime
from typing import Optional
from uuid import uuid4

import logfire

from quorum.domain.error import ForbiddenError, NotFoundError
from quorum.domain.model import Notification
from quorum.domain.model.common import DomainModel
from quorum.domain.repository import NotificationRepository
from quorum.domain.value import (
    AnswerId,
    CommentId,
    NotificationId,
    NotificationType,
    QuestionId,
    UserId,
)

from .base import Service
from .live_channel import LiveChannel, user_topic
from .user_service import UserService

UNKNOWN_ACTOR = "Someone"

GENERIC_TEMPLATE = ("Notification", "You have a new notification")

# (title, message); message receives {actor} and {target}
TEMPLATES: dict[NotificationType, tuple[str, str]] = {
    NotificationType.NEW_ANSWER: ("New Answer", "{actor} answered your question"),
    NotificationType.NEW_COMMENT: ("New Comment", "{actor} commented on your {target}"),
    NotificationType.QUESTION_LIKE: ("Question Liked", "{actor} liked your question"),
    NotificationType.ANSWER_LIKE: ("Answer Liked", "{actor} liked your answer"),
    NotificationType.ANSWER_ACCEPTED: (
        "Answer Accepted",
        "{actor} accepted your answer",
    ),
    NotificationType.QUESTION_VOTE: ("Question Voted", "{actor} voted on your question"),
    NotificationType.ANSWER_VOTE: ("Answer Voted", "{actor} voted on your answer"),
    NotificationType.COMMENT_LIKE: ("Comment Liked", "{actor} liked your comment"),
}


class NotificationContext(DomainModel):
    """Entities that triggered a notification."""

    question_id: Optional[QuestionId] = None
    answer_id: Optional[AnswerId] = None
    comment_id: Optional[CommentId] = None


def render(
    notification_type: NotificationType, actor_name: str, context: NotificationContext
) -> tuple[str, str]:
    """Render the title and message for a notification.

    Types without a template get the generic one.
    """
    template = TEMPLATES.get(notification_type)
    if template is None:
        return GENERIC_TEMPLATE

    title, message = template
    target = "answer" if context.answer_id is not None else "question"
    return title, message.format(actor=actor_name, target=target)


class NotificationDispatcher(Service):
    """Domain service for the notification inbox and live delivery."""

    def __init__(
        self,
        notification_repository: NotificationRepository,
        user_service: UserService,
        live_channel: LiveChannel,
    ) -> None:
        """Initialize notification dispatcher.

        Args:
            notification_repository: Notification repository (the inbox)
            user_service: User service for actor display names
            live_channel: Channel publishing to connected clients
        """
        self.notification_repository = notification_repository
        self.user_service = user_service
        self.live_channel = live_channel

    async def notify(
        self,
        notification_type: NotificationType,
        recipient_id: UserId,
        actor_id: Optional[UserId],
        context: Optional[NotificationContext] = None,
    ) -> Optional[Notification]:
        """Create a notification and push it to the recipient.

        Nothing happens when the recipient is the actor. The notification is
        persisted before publishing; a failed publish is logged and ignored
        because the inbox stays authoritative.

        Args:
            notification_type: What happened
            recipient_id: Who is notified
            actor_id: Who caused it
            context: The question/answer/comment involved

        Returns:
            The stored notification, None if it was suppressed
        """
        context = context or NotificationContext()
        with logfire.span(
            "notification_dispatcher.notify",
            type=notification_type.value,
            recipient_id=str(recipient_id),
            actor_id=str(actor_id) if actor_id else None,
        ):
            if actor_id is not None and recipient_id == actor_id:
                logfire.debug(
                    "Self-notification suppressed",
                    type=notification_type.value,
                    user_id=str(recipient_id),
                )
                return None

            actor_name = await self.user_service.get_display_name(actor_id)
            title, message = render(
                notification_type, actor_name or UNKNOWN_ACTOR, context
            )

            notification = Notification(
                id=NotificationId(uuid4()),
                recipient_id=recipient_id,
                type=notification_type,
                title=title,
                message=message,
                question_id=context.question_id,
                answer_id=context.answer_id,
                comment_id=context.comment_id,
                actor_id=actor_id,
                created_at=datetime.now(),
            )
            saved = await self.notification_repository.save(notification)
            logfire.info(
                "Notification created",
                notification_id=str(saved.id),
                type=notification_type.value,
                recipient_id=str(recipient_id),
            )

            await self._publish(saved)
            return saved

    async def _publish(self, notification: Notification) -> None:
        try:
            await self.live_channel.publish(
                user_topic(notification.recipient_id),
                "notification",
                {"type": "new", "notification": notification.model_dump(mode="json")},
            )
        except Exception as e:
            logfire.error(
                "Live notification publish failed",
                notification_id=str(notification.id),
                recipient_id=str(notification.recipient_id),
                error=str(e),
            )

    async def mark_read(
        self, notification_id: NotificationId, requester_id: UserId
    ) -> Notification:
        """Mark a notification as read.

        Marking an already-read notification again keeps its read_at.

        Args:
            notification_id: The notification
            requester_id: The user asking

        Returns:
            The read notification

        Raises:
            NotFoundError: If the notification does not exist
            ForbiddenError: If the requester is not the recipient
        """
        with logfire.span(
            "notification_dispatcher.mark_read",
            notification_id=str(notification_id),
            requester_id=str(requester_id),
        ):
            notification = await self._get_owned(
                notification_id, requester_id, "mark read"
            )
            if notification.is_read:
                return notification

            updated = await self.notification_repository.mark_read(
                notification_id, datetime.now()
            )
            if updated is None:
                raise NotFoundError("Notification", str(notification_id))
            return updated

    async def mark_all_read(self, recipient_id: UserId) -> int:
        """Mark every unread notification of a recipient as read.

        Args:
            recipient_id: The recipient

        Returns:
            Number of notifications that became read
        """
        with logfire.span(
            "notification_dispatcher.mark_all_read", recipient_id=str(recipient_id)
        ):
            count = await self.notification_repository.mark_all_read(
                recipient_id, datetime.now()
            )
            logfire.info(
                "Notifications marked read", recipient_id=str(recipient_id), count=count
            )
            return count

    async def list_for_recipient(
        self,
        recipient_id: UserId,
        unread_only: bool = False,
        limit: int = 20,
        offset: int = 0,
    ) -> tuple[list[Notification], int]:
        """List a recipient's inbox, newest first.

        Returns:
            The page of notifications and the total matching count
        """
        with logfire.span(
            "notification_dispatcher.list_for_recipient",
            recipient_id=str(recipient_id),
            unread_only=unread_only,
        ):
            notifications = await self.notification_repository.find_by_recipient(
                recipient_id, unread_only=unread_only, limit=limit, offset=offset
            )
            total = await self.notification_repository.count(
                recipient_id, unread_only=unread_only
            )
            return notifications, total

    async def unread_count(self, recipient_id: UserId) -> int:
        """Count a recipient's unread notifications."""
        return await self.notification_repository.count(recipient_id, unread_only=True)

    async def delete(
        self, notification_id: NotificationId, requester_id: UserId
    ) -> None:
        """Delete a notification from the recipient's inbox.

        Raises:
            NotFoundError: If the notification does not exist
            ForbiddenError: If the requester is not the recipient
        """
        with logfire.span(
            "notification_dispatcher.delete",
            notification_id=str(notification_id),
            requester_id=str(requester_id),
        ):
            await self._get_owned(notification_id, requester_id, "delete")
            await self.notification_repository.delete(notification_id)
            logfire.info("Notification deleted", notification_id=str(notification_id))

    async def _get_owned(
        self, notification_id: NotificationId, requester_id: UserId, action: str
    ) -> Notification:
        notification = await self.notification_repository.find_by_id(notification_id)
        if notification is None:
            raise NotFoundError("Notification", str(notification_id))
        if notification.recipient_id != requester_id:
            logfire.warn(
                "Notification access by non-recipient",
                notification_id=str(notification_id),
                requester_id=str(requester_id),
            )
            raise ForbiddenError(
                action, "notification", str(notification_id), str(requester_id)
            )
        return notification
