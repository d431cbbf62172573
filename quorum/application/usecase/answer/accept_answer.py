"""Accept answer use case."""

from uuid import UUID

from pydantic import BaseModel

from quorum.application.usecase.views import AnswerView
from quorum.domain.service import (
    AcceptanceCoordinator,
    AnswerService,
    NotificationContext,
    NotificationDispatcher,
)
from quorum.domain.value import AnswerId, NotificationType, UserId


class AcceptAnswerRequest(BaseModel):
    """Accept answer request."""

    answer_id: UUID
    user_id: UUID


class AcceptAnswerUseCase:
    """Use case for the asker accepting an answer."""

    def __init__(
        self,
        answer_service: AnswerService,
        acceptance_coordinator: AcceptanceCoordinator,
        notification_dispatcher: NotificationDispatcher,
    ) -> None:
        """Initialize accept answer use case.

        Args:
            answer_service: Answer domain service
            acceptance_coordinator: Acceptance coordinator
            notification_dispatcher: Notification dispatcher
        """
        self.answer_service = answer_service
        self.acceptance_coordinator = acceptance_coordinator
        self.notification_dispatcher = notification_dispatcher

    async def execute(self, request: AcceptAnswerRequest) -> AnswerView:
        """Accept the answer and notify its author.

        A repeated accept of the same answer does not notify again.

        Raises:
            NotFoundError: If the answer does not exist
            ForbiddenError: If the user did not ask the question
        """
        user_id = UserId(request.user_id)
        answer = await self.answer_service.get_answer(AnswerId(request.answer_id))

        accepted, changed = await self.acceptance_coordinator.accept_answer(
            answer.question_id, answer.id, user_id
        )

        if changed:
            await self.notification_dispatcher.notify(
                NotificationType.ANSWER_ACCEPTED,
                recipient_id=accepted.author_id,
                actor_id=user_id,
                context=NotificationContext(
                    question_id=accepted.question_id, answer_id=accepted.id
                ),
            )

        return AnswerView.from_answer(accepted, user_id)
