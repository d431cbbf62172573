"""Reaction ledger: votes and likes on questions and answers.

The pure functions apply one reaction to an in-memory votable. The
ReactionLedger service loads the votable, applies the reaction and writes
it back with an optimistic version check, retrying on conflicting writes.
"""

from typing import Callable, TypeVar, Union

import logfire

from quorum.config import ReactionSettings
from quorum.domain.error import ConflictError, InvalidVoteTypeError, NotFoundError
from quorum.domain.model import Answer, Question, Votable
from quorum.domain.repository import AnswerRepository, QuestionRepository
from quorum.domain.value import LikeOutcome, TargetKind, TargetRef, UserId, VoteType

from .base import Service

VotableT = TypeVar("VotableT", bound=Votable)
OutcomeT = TypeVar("OutcomeT")

_VOTER_FIELDS = {
    VoteType.UPVOTE: "upvoters",
    VoteType.DOWNVOTE: "downvoters",
}


def parse_vote_type(vote_type: object) -> VoteType:
    """Coerce a raw vote type.

    Raises:
        InvalidVoteTypeError: If the value is not upvote or downvote
    """
    try:
        return VoteType(vote_type)
    except ValueError:
        raise InvalidVoteTypeError(vote_type)


def apply_vote(
    entity: VotableT, user_id: UserId, vote_type: Union[VoteType, str]
) -> VotableT:
    """Apply a vote to a votable.

    Voting the same way twice removes the vote. Voting the other way moves
    the user from the opposite set. The returned entity carries the next
    version; vote_count is derived from the sets.

    Args:
        entity: The question or answer as read
        user_id: The voting user
        vote_type: upvote or downvote

    Returns:
        The updated entity

    Raises:
        InvalidVoteTypeError: If vote_type is not recognized
    """
    vote_type = parse_vote_type(vote_type)
    requested_field = _VOTER_FIELDS[vote_type]
    opposite_field = _VOTER_FIELDS[vote_type.opposite]

    requested: frozenset[UserId] = getattr(entity, requested_field)
    opposite: frozenset[UserId] = getattr(entity, opposite_field)

    if user_id in requested:
        requested = requested - {user_id}
    else:
        requested = requested | {user_id}
        opposite = opposite - {user_id}

    return entity.model_copy(
        update={
            requested_field: requested,
            opposite_field: opposite,
            "version": entity.version + 1,
        }
    )


def toggle_like(entity: VotableT, user_id: UserId) -> tuple[VotableT, LikeOutcome]:
    """Like or unlike a votable.

    Args:
        entity: The question or answer as read
        user_id: The liking user

    Returns:
        The updated entity and whether it is now liked or unliked
    """
    if user_id in entity.likers:
        likers = entity.likers - {user_id}
        outcome = LikeOutcome.UNLIKED
    else:
        likers = entity.likers | {user_id}
        outcome = LikeOutcome.LIKED

    updated = entity.model_copy(
        update={"likers": likers, "version": entity.version + 1}
    )
    return updated, outcome


class ReactionLedger(Service):
    """Domain service applying reactions with optimistic concurrency."""

    def __init__(
        self,
        question_repository: QuestionRepository,
        answer_repository: AnswerRepository,
        reaction_settings: ReactionSettings,
    ) -> None:
        """Initialize reaction ledger.

        Args:
            question_repository: Question repository
            answer_repository: Answer repository
            reaction_settings: Retry settings for conflicting writes
        """
        self.question_repository = question_repository
        self.answer_repository = answer_repository
        self.reaction_settings = reaction_settings

    async def cast_vote(
        self, target: TargetRef, user_id: UserId, vote_type: Union[VoteType, str]
    ) -> Votable:
        """Vote on a question or answer.

        Args:
            target: The question or answer to vote on
            user_id: The voting user
            vote_type: upvote or downvote

        Returns:
            The entity after the vote

        Raises:
            InvalidVoteTypeError: If vote_type is not recognized
            NotFoundError: If the target does not exist
            ConflictError: If concurrent writes kept winning
        """
        parsed = parse_vote_type(vote_type)
        with logfire.span(
            "reaction_ledger.cast_vote",
            target=str(target),
            user_id=str(user_id),
            vote_type=parsed.value,
        ):
            entity, _ = await self._apply(
                target, lambda e: (apply_vote(e, user_id, parsed), None)
            )
            logfire.info(
                "Vote applied",
                target=str(target),
                user_id=str(user_id),
                vote_state=entity.vote_state_of(user_id).value,
                vote_count=entity.vote_count,
            )
            return entity

    async def toggle_like(
        self, target: TargetRef, user_id: UserId
    ) -> tuple[Votable, LikeOutcome]:
        """Like or unlike a question or answer.

        Args:
            target: The question or answer
            user_id: The liking user

        Returns:
            The entity after the toggle and the outcome

        Raises:
            NotFoundError: If the target does not exist
            ConflictError: If concurrent writes kept winning
        """
        with logfire.span(
            "reaction_ledger.toggle_like", target=str(target), user_id=str(user_id)
        ):
            entity, outcome = await self._apply(
                target, lambda e: toggle_like(e, user_id)
            )
            logfire.info(
                "Like toggled",
                target=str(target),
                user_id=str(user_id),
                outcome=outcome.value,
                like_count=entity.like_count,
            )
            return entity, outcome

    async def _apply(
        self,
        target: TargetRef,
        mutate: Callable[[Votable], tuple[Votable, OutcomeT]],
    ) -> tuple[Votable, OutcomeT]:
        """Read, mutate and compare-and-set until the write lands."""
        attempts = max(1, self.reaction_settings.max_retries)

        for attempt in range(1, attempts + 1):
            entity = await self._load(target)
            updated, outcome = mutate(entity)

            if await self._compare_and_set(target, updated, entity.version):
                return updated, outcome

            logfire.warn(
                "Reaction write lost a race, retrying",
                target=str(target),
                attempt=attempt,
                expected_version=entity.version,
            )

        logfire.error(
            "Reaction write failed after retries", target=str(target), attempts=attempts
        )
        raise ConflictError(f"Too many concurrent reactions on {target}, try again")

    async def _load(self, target: TargetRef) -> Votable:
        entity: Union[Question, Answer, None]
        if target.kind == TargetKind.QUESTION:
            entity = await self.question_repository.find_by_id(target.id)
        else:
            entity = await self.answer_repository.find_by_id(target.id)

        if entity is None:
            raise NotFoundError(target.kind.value.capitalize(), str(target.id))
        return entity

    async def _compare_and_set(
        self, target: TargetRef, updated: Votable, expected_version: int
    ) -> bool:
        if target.kind == TargetKind.QUESTION:
            return await self.question_repository.compare_and_set(
                updated, expected_version
            )
        return await self.answer_repository.compare_and_set(updated, expected_version)
