"""Domain value objects for Quorum."""

from quorum.domain.value.identifiers import (
    AnswerId,
    CommentId,
    NotificationId,
    QuestionId,
    UserId,
)
from quorum.domain.value.types import (
    LikeOutcome,
    NotificationType,
    TargetKind,
    TargetRef,
    Username,
    VoteState,
    VoteType,
)

__all__ = [
    # Identifiers
    "UserId",
    "QuestionId",
    "AnswerId",
    "CommentId",
    "NotificationId",
    # Types
    "VoteType",
    "VoteState",
    "LikeOutcome",
    "TargetKind",
    "TargetRef",
    "NotificationType",
    "Username",
]
