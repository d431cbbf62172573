"""List questions use case."""

from uuid import UUID

from pydantic import BaseModel, Field

from quorum.application.usecase.views import QuestionView
from quorum.domain.repository import QuestionSortOrder
from quorum.domain.service import QuestionService
from quorum.domain.value import UserId


class ListQuestionsRequest(BaseModel):
    """List questions request."""

    sort: QuestionSortOrder = QuestionSortOrder.RECENT
    search: str | None = Field(default=None, max_length=200)
    limit: int = Field(default=10, ge=1, le=100)
    offset: int = Field(default=0, ge=0)
    user_id: UUID | None = None  # Current user ID (if authenticated)


class ListQuestionsResponse(BaseModel):
    """List questions response."""

    questions: list[QuestionView]
    total: int
    limit: int
    offset: int


class ListQuestionsUseCase:
    """Use case for listing questions with search and pagination."""

    def __init__(self, question_service: QuestionService) -> None:
        """Initialize list questions use case.

        Args:
            question_service: Question domain service
        """
        self.question_service = question_service

    async def execute(self, request: ListQuestionsRequest) -> ListQuestionsResponse:
        """Execute list questions flow."""
        viewer_id = UserId(request.user_id) if request.user_id else None
        search = request.search.strip() if request.search else None

        questions, total = await self.question_service.list_questions(
            sort=request.sort,
            search=search or None,
            limit=request.limit,
            offset=request.offset,
        )

        return ListQuestionsResponse(
            questions=[QuestionView.from_question(q, viewer_id) for q in questions],
            total=total,
            limit=request.limit,
            offset=request.offset,
        )
