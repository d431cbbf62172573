"""Response views shared by use cases."""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel

from quorum.domain.model import Answer, Comment, Notification, Question
from quorum.domain.value import NotificationType, TargetKind, UserId, VoteState


class QuestionView(BaseModel):
    """Question as returned to clients."""

    question_id: str
    title: str
    body: str
    tags: list[str]
    author_id: str
    views: int
    answer_count: int
    vote_count: int
    like_count: int
    accepted_answer_id: str | None
    is_answered: bool
    created_at: datetime
    updated_at: datetime
    user_vote: VoteState = VoteState.NONE
    liked: bool = False

    @classmethod
    def from_question(
        cls, question: Question, viewer_id: Optional[UserId] = None
    ) -> "QuestionView":
        return cls(
            question_id=str(question.id),
            title=question.title,
            body=question.body,
            tags=list(question.tags),
            author_id=str(question.author_id),
            views=question.views,
            answer_count=question.answer_count,
            vote_count=question.vote_count,
            like_count=question.like_count,
            accepted_answer_id=(
                str(question.accepted_answer_id)
                if question.accepted_answer_id
                else None
            ),
            is_answered=question.is_answered,
            created_at=question.created_at,
            updated_at=question.updated_at,
            user_vote=(
                question.vote_state_of(viewer_id) if viewer_id else VoteState.NONE
            ),
            liked=question.is_liked_by(viewer_id) if viewer_id else False,
        )


class AnswerView(BaseModel):
    """Answer as returned to clients."""

    answer_id: str
    question_id: str
    author_id: str
    body: str
    vote_count: int
    like_count: int
    is_accepted: bool
    accepted_at: datetime | None
    accepted_by: str | None
    created_at: datetime
    updated_at: datetime
    user_vote: VoteState = VoteState.NONE
    liked: bool = False

    @classmethod
    def from_answer(
        cls, answer: Answer, viewer_id: Optional[UserId] = None
    ) -> "AnswerView":
        return cls(
            answer_id=str(answer.id),
            question_id=str(answer.question_id),
            author_id=str(answer.author_id),
            body=answer.body,
            vote_count=answer.vote_count,
            like_count=answer.like_count,
            is_accepted=answer.is_accepted,
            accepted_at=answer.accepted_at,
            accepted_by=str(answer.accepted_by) if answer.accepted_by else None,
            created_at=answer.created_at,
            updated_at=answer.updated_at,
            user_vote=answer.vote_state_of(viewer_id) if viewer_id else VoteState.NONE,
            liked=answer.is_liked_by(viewer_id) if viewer_id else False,
        )


class CommentView(BaseModel):
    """Comment as returned to clients."""

    comment_id: str
    question_id: str
    answer_id: str | None
    author_id: str
    body: str
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_comment(cls, comment: Comment) -> "CommentView":
        answer_id = (
            str(comment.target.id)
            if comment.target.kind == TargetKind.ANSWER
            else None
        )
        return cls(
            comment_id=str(comment.id),
            question_id=str(comment.question_id),
            answer_id=answer_id,
            author_id=str(comment.author_id),
            body=comment.body,
            created_at=comment.created_at,
            updated_at=comment.updated_at,
        )


class NotificationView(BaseModel):
    """Notification as returned to clients."""

    notification_id: str
    type: NotificationType
    title: str
    message: str
    question_id: str | None
    answer_id: str | None
    comment_id: str | None
    actor_id: str | None
    is_read: bool
    read_at: datetime | None
    created_at: datetime

    @classmethod
    def from_notification(cls, notification: Notification) -> "NotificationView":
        def _str(value) -> str | None:
            return str(value) if value else None

        return cls(
            notification_id=str(notification.id),
            type=notification.type,
            title=notification.title,
            message=notification.message,
            question_id=_str(notification.question_id),
            answer_id=_str(notification.answer_id),
            comment_id=_str(notification.comment_id),
            actor_id=_str(notification.actor_id),
            is_read=notification.is_read,
            read_at=notification.read_at,
            created_at=notification.created_at,
        )
