"""Create question use case."""

from uuid import UUID

from pydantic import BaseModel, Field

from quorum.application.usecase.views import QuestionView
from quorum.domain.service import FeedService, QuestionService
from quorum.domain.value import UserId


class CreateQuestionRequest(BaseModel):
    """Create question request."""

    author_id: UUID
    title: str = Field(min_length=1, max_length=300)
    body: str = Field(min_length=1)
    tags: list[str] = Field(default_factory=list, max_length=10)


class CreateQuestionUseCase:
    """Use case for asking a question."""

    def __init__(
        self, question_service: QuestionService, feed_service: FeedService
    ) -> None:
        """Initialize create question use case.

        Args:
            question_service: Question domain service
            feed_service: Feed broadcast service
        """
        self.question_service = question_service
        self.feed_service = feed_service

    async def execute(self, request: CreateQuestionRequest) -> QuestionView:
        """Create the question and announce it on the feed."""
        question = await self.question_service.create_question(
            author_id=UserId(request.author_id),
            title=request.title,
            body=request.body,
            tags=request.tags,
        )

        view = QuestionView.from_question(question)
        await self.feed_service.broadcast(
            "new-question", {"question": view.model_dump(mode="json")}
        )
        return view
