"""Notification repository interface."""

from abc import ABC, abstractmethod
from datetime import datetime
from typing import List, Optional

from quorum.domain.model.notification import Notification
from quorum.domain.value import NotificationId, UserId


class NotificationRepository(ABC):
    """Repository for Notification entity."""

    @abstractmethod
    async def save(self, notification: Notification) -> Notification:
        """Persist a new notification.

        Args:
            notification: The notification to store

        Returns:
            The stored notification
        """
        pass

    @abstractmethod
    async def find_by_id(
        self, notification_id: NotificationId
    ) -> Optional[Notification]:
        """Find a notification by ID.

        Args:
            notification_id: The notification's unique identifier

        Returns:
            The notification if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_recipient(
        self,
        recipient_id: UserId,
        unread_only: bool = False,
        limit: int = 20,
        offset: int = 0,
    ) -> List[Notification]:
        """Find a recipient's notifications, newest first.

        Args:
            recipient_id: The recipient's ID
            unread_only: Only return unread notifications
            limit: Maximum number of notifications to return
            offset: Number of notifications to skip

        Returns:
            List of notifications
        """
        pass

    @abstractmethod
    async def count(self, recipient_id: UserId, unread_only: bool = False) -> int:
        """Count a recipient's notifications.

        Args:
            recipient_id: The recipient's ID
            unread_only: Only count unread notifications

        Returns:
            Number of notifications
        """
        pass

    @abstractmethod
    async def mark_read(
        self, notification_id: NotificationId, read_at: datetime
    ) -> Optional[Notification]:
        """Mark a notification read if it is still unread.

        Already-read notifications keep their original read_at.

        Args:
            notification_id: The notification to mark
            read_at: Timestamp to record

        Returns:
            The notification after the update, None if it does not exist
        """
        pass

    @abstractmethod
    async def mark_all_read(self, recipient_id: UserId, read_at: datetime) -> int:
        """Mark all of a recipient's unread notifications read.

        Args:
            recipient_id: The recipient's ID
            read_at: Timestamp to record

        Returns:
            Number of notifications that changed state
        """
        pass

    @abstractmethod
    async def delete(self, notification_id: NotificationId) -> bool:
        """Delete a notification.

        Args:
            notification_id: The notification to delete

        Returns:
            True if a notification was deleted
        """
        pass
