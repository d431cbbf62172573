"""Cast vote use case."""

from uuid import UUID

from pydantic import BaseModel

from quorum.domain.service import (
    NotificationContext,
    NotificationDispatcher,
    ReactionLedger,
)
from quorum.domain.value import (
    NotificationType,
    TargetKind,
    TargetRef,
    UserId,
    VoteState,
    VoteType,
)


class CastVoteRequest(BaseModel):
    """Cast vote request.

    vote_type stays a plain string so unknown values reach the ledger and
    fail as invalid input rather than as schema errors.
    """

    target_kind: TargetKind
    target_id: UUID
    user_id: UUID
    vote_type: str


class CastVoteResponse(BaseModel):
    """Cast vote response."""

    target_kind: TargetKind
    target_id: str
    vote_count: int
    user_vote: VoteState


class CastVoteUseCase:
    """Use case for voting on a question or an answer.

    Only a newly cast upvote notifies the author. Removing a vote and
    downvoting stay silent.
    """

    def __init__(
        self,
        reaction_ledger: ReactionLedger,
        notification_dispatcher: NotificationDispatcher,
    ) -> None:
        """Initialize cast vote use case.

        Args:
            reaction_ledger: Reaction ledger
            notification_dispatcher: Notification dispatcher
        """
        self.reaction_ledger = reaction_ledger
        self.notification_dispatcher = notification_dispatcher

    async def execute(self, request: CastVoteRequest) -> CastVoteResponse:
        """Execute cast vote flow.

        Raises:
            InvalidVoteTypeError: If vote_type is not upvote or downvote
            NotFoundError: If the target does not exist
            ConflictError: If concurrent reactions kept winning
        """
        user_id = UserId(request.user_id)
        target = TargetRef(kind=request.target_kind, id=request.target_id)

        entity = await self.reaction_ledger.cast_vote(target, user_id, request.vote_type)
        user_vote = entity.vote_state_of(user_id)

        if request.vote_type == VoteType.UPVOTE and user_vote == VoteState.UPVOTED:
            await self._notify_upvote(target, entity, user_id)

        return CastVoteResponse(
            target_kind=target.kind,
            target_id=str(target.id),
            vote_count=entity.vote_count,
            user_vote=user_vote,
        )

    async def _notify_upvote(self, target: TargetRef, entity, user_id: UserId) -> None:
        if target.kind == TargetKind.QUESTION:
            notification_type = NotificationType.QUESTION_VOTE
            context = NotificationContext(question_id=entity.id)
        else:
            notification_type = NotificationType.ANSWER_VOTE
            context = NotificationContext(
                question_id=entity.question_id, answer_id=entity.id
            )

        await self.notification_dispatcher.notify(
            notification_type,
            recipient_id=entity.author_id,
            actor_id=user_id,
            context=context,
        )
