"""Delete comment use case."""

from uuid import UUID

from pydantic import BaseModel

from quorum.domain.service import CommentService
from quorum.domain.value import CommentId, UserId


class DeleteCommentRequest(BaseModel):
    """Delete comment request."""

    comment_id: UUID
    user_id: UUID


class DeleteCommentResponse(BaseModel):
    """Delete comment response."""

    success: bool
    comment_id: str


class DeleteCommentUseCase:
    """Use case for the author deleting a comment."""

    def __init__(self, comment_service: CommentService) -> None:
        """Initialize delete comment use case.

        Args:
            comment_service: Comment domain service
        """
        self.comment_service = comment_service

    async def execute(self, request: DeleteCommentRequest) -> DeleteCommentResponse:
        """Execute delete comment flow.

        Raises:
            NotFoundError: If the comment does not exist
            ForbiddenError: If the user is not the author
        """
        await self.comment_service.delete_comment(
            CommentId(request.comment_id), UserId(request.user_id)
        )
        return DeleteCommentResponse(success=True, comment_id=str(request.comment_id))
