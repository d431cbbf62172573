"""Notification use cases."""

from .delete_notification import (
    DeleteNotificationRequest,
    DeleteNotificationResponse,
    DeleteNotificationUseCase,
)
from .get_unread_count import (
    GetUnreadCountRequest,
    GetUnreadCountResponse,
    GetUnreadCountUseCase,
)
from .list_notifications import (
    ListNotificationsRequest,
    ListNotificationsResponse,
    ListNotificationsUseCase,
)
from .mark_read import (
    MarkAllNotificationsReadRequest,
    MarkAllNotificationsReadResponse,
    MarkAllNotificationsReadUseCase,
    MarkNotificationReadRequest,
    MarkNotificationReadUseCase,
)

__all__ = [
    "DeleteNotificationRequest",
    "DeleteNotificationResponse",
    "DeleteNotificationUseCase",
    "GetUnreadCountRequest",
    "GetUnreadCountResponse",
    "GetUnreadCountUseCase",
    "ListNotificationsRequest",
    "ListNotificationsResponse",
    "ListNotificationsUseCase",
    "MarkAllNotificationsReadRequest",
    "MarkAllNotificationsReadResponse",
    "MarkAllNotificationsReadUseCase",
    "MarkNotificationReadRequest",
    "MarkNotificationReadUseCase",
]
