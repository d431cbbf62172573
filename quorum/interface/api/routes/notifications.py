"""Notification routes."""

from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, Query

from quorum.application.usecase.notification import (
    DeleteNotificationRequest,
    DeleteNotificationResponse,
    DeleteNotificationUseCase,
    GetUnreadCountRequest,
    GetUnreadCountResponse,
    GetUnreadCountUseCase,
    ListNotificationsRequest,
    ListNotificationsResponse,
    ListNotificationsUseCase,
    MarkAllNotificationsReadRequest,
    MarkAllNotificationsReadResponse,
    MarkAllNotificationsReadUseCase,
    MarkNotificationReadRequest,
    MarkNotificationReadUseCase,
)
from quorum.application.usecase.views import NotificationView
from quorum.domain.service import JWTService
from quorum.interface.api.auth import require_user_id

router = APIRouter(
    prefix="/notifications", tags=["notifications"], route_class=DishkaRoute
)


@router.get("", response_model=ListNotificationsResponse)
async def list_notifications(
    list_notifications_use_case: FromDishka[ListNotificationsUseCase],
    jwt_service: FromDishka[JWTService],
    unread_only: bool = Query(default=False),
    limit: int = Query(default=20, ge=1, le=100),
    offset: int = Query(default=0, ge=0),
    auth_token: str | None = Cookie(default=None),
) -> ListNotificationsResponse:
    """The current user's inbox, newest first."""
    user_id = require_user_id(jwt_service, auth_token, "read notifications")
    return await list_notifications_use_case.execute(
        ListNotificationsRequest(
            user_id=user_id, unread_only=unread_only, limit=limit, offset=offset
        )
    )


@router.get("/unread-count", response_model=GetUnreadCountResponse)
async def unread_count(
    get_unread_count_use_case: FromDishka[GetUnreadCountUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> GetUnreadCountResponse:
    """Number of unread notifications."""
    user_id = require_user_id(jwt_service, auth_token, "read notifications")
    return await get_unread_count_use_case.execute(
        GetUnreadCountRequest(user_id=user_id)
    )


# Registered before /{notification_id}/read so "read-all" is not taken as an id
@router.put("/read-all", response_model=MarkAllNotificationsReadResponse)
async def mark_all_read(
    mark_all_use_case: FromDishka[MarkAllNotificationsReadUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> MarkAllNotificationsReadResponse:
    """Mark every unread notification read."""
    user_id = require_user_id(jwt_service, auth_token, "update notifications")
    return await mark_all_use_case.execute(
        MarkAllNotificationsReadRequest(user_id=user_id)
    )


@router.put("/{notification_id}/read", response_model=NotificationView)
async def mark_read(
    notification_id: UUID,
    mark_read_use_case: FromDishka[MarkNotificationReadUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> NotificationView:
    """Mark one notification read. Recipient only."""
    user_id = require_user_id(jwt_service, auth_token, "update notifications")
    return await mark_read_use_case.execute(
        MarkNotificationReadRequest(notification_id=notification_id, user_id=user_id)
    )


@router.delete("/{notification_id}", response_model=DeleteNotificationResponse)
async def delete_notification(
    notification_id: UUID,
    delete_notification_use_case: FromDishka[DeleteNotificationUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> DeleteNotificationResponse:
    """Delete one notification. Recipient only."""
    user_id = require_user_id(jwt_service, auth_token, "delete notifications")
    return await delete_notification_use_case.execute(
        DeleteNotificationRequest(notification_id=notification_id, user_id=user_id)
    )
