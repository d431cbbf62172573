"""Like answer use case."""

from uuid import UUID

from pydantic import BaseModel

from quorum.application.usecase.views import AnswerView
from quorum.domain.service import (
    NotificationContext,
    NotificationDispatcher,
    ReactionLedger,
)
from quorum.domain.value import LikeOutcome, NotificationType, TargetRef, UserId


class LikeAnswerRequest(BaseModel):
    """Like answer request."""

    answer_id: UUID
    user_id: UUID


class LikeAnswerResponse(BaseModel):
    """Like answer response."""

    outcome: LikeOutcome
    answer: AnswerView


class LikeAnswerUseCase:
    """Use case for toggling a like on an answer."""

    def __init__(
        self,
        reaction_ledger: ReactionLedger,
        notification_dispatcher: NotificationDispatcher,
    ) -> None:
        """Initialize like answer use case.

        Args:
            reaction_ledger: Reaction ledger
            notification_dispatcher: Notification dispatcher
        """
        self.reaction_ledger = reaction_ledger
        self.notification_dispatcher = notification_dispatcher

    async def execute(self, request: LikeAnswerRequest) -> LikeAnswerResponse:
        """Toggle the like; notify the author only when it became a like.

        Raises:
            NotFoundError: If the answer does not exist
            ConflictError: If concurrent reactions kept winning
        """
        user_id = UserId(request.user_id)
        answer, outcome = await self.reaction_ledger.toggle_like(
            TargetRef.answer(request.answer_id), user_id
        )

        if outcome == LikeOutcome.LIKED:
            await self.notification_dispatcher.notify(
                NotificationType.ANSWER_LIKE,
                recipient_id=answer.author_id,
                actor_id=user_id,
                context=NotificationContext(
                    question_id=answer.question_id, answer_id=answer.id
                ),
            )

        return LikeAnswerResponse(
            outcome=outcome, answer=AnswerView.from_answer(answer, user_id)
        )
