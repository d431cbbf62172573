"""PostgreSQL implementation of Notification repository."""

from datetime import datetime
from typing import List, Optional

import logfire
from sqlalchemy import delete, desc, func, insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from quorum.domain.model import Notification
from quorum.domain.repository.notification import NotificationRepository
from quorum.domain.value import NotificationId, UserId
from quorum.persistence.integrity import constraint_errors
from quorum.persistence.mappers import notification_to_dict, row_to_notification
from quorum.persistence.tables import notifications_table


class PostgresNotificationRepository(NotificationRepository):
    """PostgreSQL implementation of NotificationRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def save(self, notification: Notification) -> Notification:
        """Persist a new notification."""
        with logfire.span(
            "notification_repository.save", notification_id=str(notification.id)
        ):
            values = notification_to_dict(notification)
            async with constraint_errors(self.session, values):
                await self.session.execute(insert(notifications_table).values(**values))
                await self.session.flush()
            return notification

    async def find_by_id(
        self, notification_id: NotificationId
    ) -> Optional[Notification]:
        """Find a notification by ID."""
        stmt = select(notifications_table).where(
            notifications_table.c.id == notification_id
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_notification(row._asdict()) if row else None

    async def find_by_recipient(
        self,
        recipient_id: UserId,
        unread_only: bool = False,
        limit: int = 20,
        offset: int = 0,
    ) -> List[Notification]:
        """Find a recipient's notifications, newest first."""
        stmt = select(notifications_table).where(
            notifications_table.c.recipient_id == recipient_id
        )
        if unread_only:
            stmt = stmt.where(notifications_table.c.is_read.is_(False))

        stmt = (
            stmt.order_by(
                desc(notifications_table.c.created_at),
                desc(notifications_table.c.seq),
            )
            .limit(limit)
            .offset(offset)
        )
        result = await self.session.execute(stmt)
        return [row_to_notification(row._asdict()) for row in result.fetchall()]

    async def count(self, recipient_id: UserId, unread_only: bool = False) -> int:
        """Count a recipient's notifications."""
        stmt = (
            select(func.count())
            .select_from(notifications_table)
            .where(notifications_table.c.recipient_id == recipient_id)
        )
        if unread_only:
            stmt = stmt.where(notifications_table.c.is_read.is_(False))

        result = await self.session.execute(stmt)
        return result.scalar() or 0

    async def mark_read(
        self, notification_id: NotificationId, read_at: datetime
    ) -> Optional[Notification]:
        """Mark a notification read if it is still unread."""
        stmt = (
            update(notifications_table)
            .where(
                notifications_table.c.id == notification_id,
                notifications_table.c.is_read.is_(False),
            )
            .values(is_read=True, read_at=read_at)
        )
        await self.session.execute(stmt)
        await self.session.flush()
        # Re-read so an already-read row returns its original read_at
        return await self.find_by_id(notification_id)

    async def mark_all_read(self, recipient_id: UserId, read_at: datetime) -> int:
        """Mark all of a recipient's unread notifications read."""
        stmt = (
            update(notifications_table)
            .where(
                notifications_table.c.recipient_id == recipient_id,
                notifications_table.c.is_read.is_(False),
            )
            .values(is_read=True, read_at=read_at)
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount

    async def delete(self, notification_id: NotificationId) -> bool:
        """Delete a notification."""
        stmt = delete(notifications_table).where(
            notifications_table.c.id == notification_id
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount > 0
