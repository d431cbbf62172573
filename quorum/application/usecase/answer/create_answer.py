"""Create answer use case."""

from uuid import UUID

from pydantic import BaseModel, Field

from quorum.application.usecase.views import AnswerView
from quorum.domain.service import (
    AnswerService,
    FeedService,
    NotificationContext,
    NotificationDispatcher,
    QuestionService,
)
from quorum.domain.value import NotificationType, QuestionId, UserId


class CreateAnswerRequest(BaseModel):
    """Create answer request."""

    question_id: UUID
    author_id: UUID
    body: str = Field(min_length=1)


class CreateAnswerUseCase:
    """Use case for answering a question."""

    def __init__(
        self,
        answer_service: AnswerService,
        question_service: QuestionService,
        notification_dispatcher: NotificationDispatcher,
        feed_service: FeedService,
    ) -> None:
        """Initialize create answer use case.

        Args:
            answer_service: Answer domain service
            question_service: Question domain service
            notification_dispatcher: Notification dispatcher
            feed_service: Feed broadcast service
        """
        self.answer_service = answer_service
        self.question_service = question_service
        self.notification_dispatcher = notification_dispatcher
        self.feed_service = feed_service

    async def execute(self, request: CreateAnswerRequest) -> AnswerView:
        """Create the answer, notify the asker and announce it on the feed.

        Raises:
            NotFoundError: If the question does not exist
            InvalidInputError: If the user already answered the question
        """
        question_id = QuestionId(request.question_id)
        author_id = UserId(request.author_id)

        question = await self.question_service.get_question(question_id)
        answer = await self.answer_service.create_answer(
            question_id, author_id, request.body
        )

        await self.notification_dispatcher.notify(
            NotificationType.NEW_ANSWER,
            recipient_id=question.author_id,
            actor_id=author_id,
            context=NotificationContext(question_id=question_id, answer_id=answer.id),
        )

        view = AnswerView.from_answer(answer, author_id)
        await self.feed_service.broadcast(
            "new-answer",
            {"question_id": str(question_id), "answer": view.model_dump(mode="json")},
        )
        return view
