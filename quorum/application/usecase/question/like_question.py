"""Like question use case."""

from uuid import UUID

from pydantic import BaseModel

from quorum.application.usecase.views import QuestionView
from quorum.domain.service import (
    NotificationContext,
    NotificationDispatcher,
    ReactionLedger,
)
from quorum.domain.value import LikeOutcome, NotificationType, TargetRef, UserId


class LikeQuestionRequest(BaseModel):
    """Like question request."""

    question_id: UUID
    user_id: UUID


class LikeQuestionResponse(BaseModel):
    """Like question response."""

    outcome: LikeOutcome
    question: QuestionView


class LikeQuestionUseCase:
    """Use case for toggling a like on a question."""

    def __init__(
        self,
        reaction_ledger: ReactionLedger,
        notification_dispatcher: NotificationDispatcher,
    ) -> None:
        """Initialize like question use case.

        Args:
            reaction_ledger: Reaction ledger
            notification_dispatcher: Notification dispatcher
        """
        self.reaction_ledger = reaction_ledger
        self.notification_dispatcher = notification_dispatcher

    async def execute(self, request: LikeQuestionRequest) -> LikeQuestionResponse:
        """Toggle the like; notify the author only when it became a like.

        Raises:
            NotFoundError: If the question does not exist
            ConflictError: If concurrent reactions kept winning
        """
        user_id = UserId(request.user_id)
        question, outcome = await self.reaction_ledger.toggle_like(
            TargetRef.question(request.question_id), user_id
        )

        if outcome == LikeOutcome.LIKED:
            await self.notification_dispatcher.notify(
                NotificationType.QUESTION_LIKE,
                recipient_id=question.author_id,
                actor_id=user_id,
                context=NotificationContext(question_id=question.id),
            )

        return LikeQuestionResponse(
            outcome=outcome, question=QuestionView.from_question(question, user_id)
        )
