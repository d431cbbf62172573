"""Notification entity.

Notifications are created by the dispatcher and never edited afterwards,
except for the one-way Unread -> Read transition.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field, model_validator

from quorum.domain.model.common import DomainModel
from quorum.domain.value import (
    AnswerId,
    CommentId,
    NotificationId,
    NotificationType,
    QuestionId,
    UserId,
)


class Notification(DomainModel):
    """Inbox entry for one recipient."""

    id: NotificationId
    recipient_id: UserId
    type: NotificationType
    title: str = Field(min_length=1)
    message: str = Field(min_length=1)
    question_id: Optional[QuestionId] = None
    answer_id: Optional[AnswerId] = None
    comment_id: Optional[CommentId] = None
    actor_id: Optional[UserId] = None
    is_read: bool = False
    read_at: Optional[datetime] = None
    created_at: datetime = Field(default_factory=datetime.now)

    @model_validator(mode="after")
    def validate_read_state(self) -> "Notification":
        """read_at is set exactly when the notification is read."""
        if self.is_read != (self.read_at is not None):
            raise ValueError("read_at must be set if and only if is_read")
        return self

    def marked_read(self, at: datetime) -> "Notification":
        """Return the read version of this notification.

        Already-read notifications are returned unchanged.
        """
        if self.is_read:
            return self
        return self.model_copy(update={"is_read": True, "read_at": at})
