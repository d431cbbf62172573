"""List answers use case."""

from uuid import UUID

from pydantic import BaseModel

from quorum.application.usecase.views import AnswerView
from quorum.domain.repository import AnswerSortOrder
from quorum.domain.service import AnswerService
from quorum.domain.value import QuestionId, UserId


class ListAnswersRequest(BaseModel):
    """List answers request."""

    question_id: UUID
    sort: AnswerSortOrder = AnswerSortOrder.VOTES
    user_id: UUID | None = None  # Current user ID (if authenticated)


class ListAnswersResponse(BaseModel):
    """List answers response."""

    answers: list[AnswerView]
    total: int


class ListAnswersUseCase:
    """Use case for listing the answers to a question."""

    def __init__(self, answer_service: AnswerService) -> None:
        """Initialize list answers use case.

        Args:
            answer_service: Answer domain service
        """
        self.answer_service = answer_service

    async def execute(self, request: ListAnswersRequest) -> ListAnswersResponse:
        """Execute list answers flow.

        Raises:
            NotFoundError: If the question does not exist
        """
        viewer_id = UserId(request.user_id) if request.user_id else None
        answers = await self.answer_service.list_answers(
            QuestionId(request.question_id), sort=request.sort
        )
        return ListAnswersResponse(
            answers=[AnswerView.from_answer(a, viewer_id) for a in answers],
            total=len(answers),
        )
