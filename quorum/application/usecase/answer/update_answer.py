"""Update answer use case."""

from uuid import UUID

from pydantic import BaseModel, Field

from quorum.application.usecase.views import AnswerView
from quorum.domain.service import AnswerService
from quorum.domain.value import AnswerId, UserId


class UpdateAnswerRequest(BaseModel):
    """Update answer request."""

    answer_id: UUID
    user_id: UUID
    body: str = Field(min_length=1)


class UpdateAnswerUseCase:
    """Use case for the author editing an answer."""

    def __init__(self, answer_service: AnswerService) -> None:
        """Initialize update answer use case.

        Args:
            answer_service: Answer domain service
        """
        self.answer_service = answer_service

    async def execute(self, request: UpdateAnswerRequest) -> AnswerView:
        """Execute update answer flow.

        Raises:
            NotFoundError: If the answer does not exist
            ForbiddenError: If the user is not the author
        """
        user_id = UserId(request.user_id)
        answer = await self.answer_service.update_answer(
            AnswerId(request.answer_id), user_id, request.body
        )
        return AnswerView.from_answer(answer, user_id)
