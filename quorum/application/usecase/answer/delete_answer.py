"""Delete answer use case."""

from uuid import UUID

from pydantic import BaseModel

from quorum.domain.service import AnswerService
from quorum.domain.value import AnswerId, UserId


class DeleteAnswerRequest(BaseModel):
    """Delete answer request."""

    answer_id: UUID
    user_id: UUID


class DeleteAnswerResponse(BaseModel):
    """Delete answer response."""

    success: bool
    answer_id: str


class DeleteAnswerUseCase:
    """Use case for the author deleting an answer."""

    def __init__(self, answer_service: AnswerService) -> None:
        """Initialize delete answer use case.

        Args:
            answer_service: Answer domain service
        """
        self.answer_service = answer_service

    async def execute(self, request: DeleteAnswerRequest) -> DeleteAnswerResponse:
        """Execute delete answer flow.

        Raises:
            NotFoundError: If the answer does not exist
            ForbiddenError: If the user is not the author
        """
        await self.answer_service.delete_answer(
            AnswerId(request.answer_id), UserId(request.user_id)
        )
        return DeleteAnswerResponse(success=True, answer_id=str(request.answer_id))
