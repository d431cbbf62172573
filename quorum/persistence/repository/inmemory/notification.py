"""In-memory notification repository for testing."""

from datetime import datetime
from typing import List, Optional

from quorum.domain.model.notification import Notification
from quorum.domain.repository.notification import NotificationRepository
from quorum.domain.value import NotificationId, UserId

from .store import InMemoryStore


class InMemoryNotificationRepository(NotificationRepository):
    """In-memory implementation of NotificationRepository for testing."""

    def __init__(self, store: InMemoryStore | None = None) -> None:
        self._notifications = (store or InMemoryStore()).notifications

    async def save(self, notification: Notification) -> Notification:
        """Persist a new notification."""
        self._notifications[notification.id] = notification
        return notification

    async def find_by_id(
        self, notification_id: NotificationId
    ) -> Optional[Notification]:
        """Find a notification by ID."""
        return self._notifications.get(notification_id)

    def _for_recipient(
        self, recipient_id: UserId, unread_only: bool
    ) -> List[Notification]:
        return [
            n
            for n in self._notifications.values()
            if n.recipient_id == recipient_id and not (unread_only and n.is_read)
        ]

    async def find_by_recipient(
        self,
        recipient_id: UserId,
        unread_only: bool = False,
        limit: int = 20,
        offset: int = 0,
    ) -> List[Notification]:
        """Find a recipient's notifications, newest first."""
        notifications = self._for_recipient(recipient_id, unread_only)[::-1]
        notifications.sort(key=lambda n: n.created_at, reverse=True)
        return notifications[offset : offset + limit]

    async def count(self, recipient_id: UserId, unread_only: bool = False) -> int:
        """Count a recipient's notifications."""
        return len(self._for_recipient(recipient_id, unread_only))

    async def mark_read(
        self, notification_id: NotificationId, read_at: datetime
    ) -> Optional[Notification]:
        """Mark a notification read if it is still unread."""
        notification = self._notifications.get(notification_id)
        if notification is None:
            return None
        notification = notification.marked_read(read_at)
        self._notifications[notification_id] = notification
        return notification

    async def mark_all_read(self, recipient_id: UserId, read_at: datetime) -> int:
        """Mark all of a recipient's unread notifications read."""
        unread = self._for_recipient(recipient_id, unread_only=True)
        for notification in unread:
            self._notifications[notification.id] = notification.marked_read(read_at)
        return len(unread)

    async def delete(self, notification_id: NotificationId) -> bool:
        """Delete a notification."""
        return self._notifications.pop(notification_id, None) is not None
