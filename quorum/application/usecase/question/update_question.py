"""Update question use case."""

from uuid import UUID

from pydantic import BaseModel, Field

from quorum.application.usecase.views import QuestionView
from quorum.domain.service import QuestionService
from quorum.domain.value import QuestionId, UserId


class UpdateQuestionRequest(BaseModel):
    """Update question request. Omitted fields stay unchanged."""

    question_id: UUID
    user_id: UUID
    title: str | None = Field(default=None, min_length=1, max_length=300)
    body: str | None = Field(default=None, min_length=1)
    tags: list[str] | None = Field(default=None, max_length=10)


class UpdateQuestionUseCase:
    """Use case for the author editing a question."""

    def __init__(self, question_service: QuestionService) -> None:
        """Initialize update question use case.

        Args:
            question_service: Question domain service
        """
        self.question_service = question_service

    async def execute(self, request: UpdateQuestionRequest) -> QuestionView:
        """Execute update question flow.

        Raises:
            NotFoundError: If the question does not exist
            ForbiddenError: If the user is not the author
        """
        user_id = UserId(request.user_id)
        question = await self.question_service.update_question(
            QuestionId(request.question_id),
            user_id,
            title=request.title,
            body=request.body,
            tags=request.tags,
        )
        return QuestionView.from_question(question, user_id)
