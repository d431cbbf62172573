"""Delete question use case."""

from uuid import UUID

from pydantic import BaseModel

from quorum.domain.service import QuestionService
from quorum.domain.value import QuestionId, UserId


class DeleteQuestionRequest(BaseModel):
    """Delete question request."""

    question_id: UUID
    user_id: UUID


class DeleteQuestionResponse(BaseModel):
    """Delete question response."""

    success: bool
    question_id: str


class DeleteQuestionUseCase:
    """Use case for the author deleting a question and its thread."""

    def __init__(self, question_service: QuestionService) -> None:
        """Initialize delete question use case.

        Args:
            question_service: Question domain service
        """
        self.question_service = question_service

    async def execute(self, request: DeleteQuestionRequest) -> DeleteQuestionResponse:
        """Execute delete question flow.

        Raises:
            NotFoundError: If the question does not exist
            ForbiddenError: If the user is not the author
        """
        await self.question_service.delete_question(
            QuestionId(request.question_id), UserId(request.user_id)
        )
        return DeleteQuestionResponse(
            success=True, question_id=str(request.question_id)
        )
