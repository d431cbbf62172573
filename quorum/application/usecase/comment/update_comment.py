"""Update comment use case."""

from uuid import UUID

from pydantic import BaseModel

from quorum.application.usecase.views import CommentView
from quorum.domain.error import InvalidInputError
from quorum.domain.service import CommentService
from quorum.domain.value import CommentId, UserId


class UpdateCommentRequest(BaseModel):
    """Update comment request."""

    comment_id: UUID
    user_id: UUID
    body: str


class UpdateCommentUseCase:
    """Use case for the author editing a comment."""

    def __init__(self, comment_service: CommentService) -> None:
        """Initialize update comment use case.

        Args:
            comment_service: Comment domain service
        """
        self.comment_service = comment_service

    async def execute(self, request: UpdateCommentRequest) -> CommentView:
        """Execute update comment flow.

        Raises:
            InvalidInputError: If the body is not 2-500 characters
            NotFoundError: If the comment does not exist
            ForbiddenError: If the user is not the author
        """
        body = request.body.strip()
        if not 2 <= len(body) <= 500:
            raise InvalidInputError("Comment must be between 2 and 500 characters")

        comment = await self.comment_service.update_comment(
            CommentId(request.comment_id), UserId(request.user_id), body
        )
        return CommentView.from_comment(comment)
