"""Create comment use case."""

from uuid import UUID

from pydantic import BaseModel

from quorum.application.usecase.views import CommentView
from quorum.domain.error import InvalidInputError
from quorum.domain.service import (
    CommentService,
    FeedService,
    NotificationContext,
    NotificationDispatcher,
)
from quorum.domain.value import NotificationType, TargetKind, TargetRef, UserId


class CreateCommentRequest(BaseModel):
    """Create comment request.

    Exactly one of question_id and answer_id must be set.
    """

    author_id: UUID
    body: str
    question_id: UUID | None = None
    answer_id: UUID | None = None


def target_from(question_id: UUID | None, answer_id: UUID | None) -> TargetRef:
    """Build the comment target from the two optional parent ids.

    Raises:
        InvalidInputError: If neither or both are set
    """
    if (question_id is None) == (answer_id is None):
        raise InvalidInputError(
            "Comment must reference exactly one of question_id or answer_id"
        )
    if question_id is not None:
        return TargetRef.question(question_id)
    return TargetRef.answer(answer_id)


class CreateCommentUseCase:
    """Use case for commenting on a question or an answer."""

    def __init__(
        self,
        comment_service: CommentService,
        notification_dispatcher: NotificationDispatcher,
        feed_service: FeedService,
    ) -> None:
        """Initialize create comment use case.

        Args:
            comment_service: Comment domain service
            notification_dispatcher: Notification dispatcher
            feed_service: Feed broadcast service
        """
        self.comment_service = comment_service
        self.notification_dispatcher = notification_dispatcher
        self.feed_service = feed_service

    async def execute(self, request: CreateCommentRequest) -> CommentView:
        """Create the comment, notify the parent's author and announce it.

        Raises:
            InvalidInputError: If the target is ambiguous or the body is not
                2-500 characters
            NotFoundError: If the target does not exist
        """
        target = target_from(request.question_id, request.answer_id)
        body = request.body.strip()
        if not 2 <= len(body) <= 500:
            raise InvalidInputError("Comment must be between 2 and 500 characters")

        author_id = UserId(request.author_id)
        _, owner_id = await self.comment_service.resolve_target(target)
        comment = await self.comment_service.create_comment(target, author_id, body)

        await self.notification_dispatcher.notify(
            NotificationType.NEW_COMMENT,
            recipient_id=owner_id,
            actor_id=author_id,
            context=NotificationContext(
                question_id=comment.question_id,
                answer_id=target.id if target.kind == TargetKind.ANSWER else None,
                comment_id=comment.id,
            ),
        )

        view = CommentView.from_comment(comment)
        await self.feed_service.broadcast(
            "new-comment", {"comment": view.model_dump(mode="json")}
        )
        return view
