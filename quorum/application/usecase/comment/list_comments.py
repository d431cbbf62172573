"""List comments use case."""

from uuid import UUID

from pydantic import BaseModel

from quorum.application.usecase.comment.create_comment import target_from
from quorum.application.usecase.views import CommentView
from quorum.domain.service import CommentService


class ListCommentsRequest(BaseModel):
    """List comments request. Exactly one parent id must be set."""

    question_id: UUID | None = None
    answer_id: UUID | None = None


class ListCommentsResponse(BaseModel):
    """List comments response."""

    comments: list[CommentView]


class ListCommentsUseCase:
    """Use case for listing comments on a question or an answer."""

    def __init__(self, comment_service: CommentService) -> None:
        """Initialize list comments use case.

        Args:
            comment_service: Comment domain service
        """
        self.comment_service = comment_service

    async def execute(self, request: ListCommentsRequest) -> ListCommentsResponse:
        """Execute list comments flow.

        Raises:
            InvalidInputError: If neither or both parent ids are set
        """
        target = target_from(request.question_id, request.answer_id)
        comments = await self.comment_service.list_comments(target)
        return ListCommentsResponse(
            comments=[CommentView.from_comment(c) for c in comments]
        )
