"""Get question use case."""

from uuid import UUID

from pydantic import BaseModel

from quorum.application.usecase.views import AnswerView, QuestionView
from quorum.domain.service import AnswerService, QuestionService
from quorum.domain.value import QuestionId, UserId


class GetQuestionRequest(BaseModel):
    """Get question request."""

    question_id: UUID
    user_id: UUID | None = None  # Current user ID (if authenticated)


class GetQuestionResponse(BaseModel):
    """Question detail with its answers."""

    question: QuestionView
    answers: list[AnswerView]


class GetQuestionUseCase:
    """Use case for the question detail page.

    Every call counts as a view.
    """

    def __init__(
        self, question_service: QuestionService, answer_service: AnswerService
    ) -> None:
        """Initialize get question use case.

        Args:
            question_service: Question domain service
            answer_service: Answer domain service
        """
        self.question_service = question_service
        self.answer_service = answer_service

    async def execute(self, request: GetQuestionRequest) -> GetQuestionResponse:
        """Record the view and load the question with its answers.

        Raises:
            NotFoundError: If the question does not exist
        """
        question_id = QuestionId(request.question_id)
        viewer_id = UserId(request.user_id) if request.user_id else None

        question = await self.question_service.view_question(question_id)
        answers = await self.answer_service.list_answers(question_id)

        return GetQuestionResponse(
            question=QuestionView.from_question(question, viewer_id),
            answers=[AnswerView.from_answer(a, viewer_id) for a in answers],
        )
