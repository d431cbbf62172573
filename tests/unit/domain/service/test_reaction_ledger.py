"""Unit tests for the reaction ledger."""

import asyncio
from uuid import uuid4

import pytest

from quorum.config import ReactionSettings
from quorum.domain.error import ConflictError, InvalidVoteTypeError, NotFoundError
from quorum.domain.model import Answer
from quorum.domain.repository import AnswerRepository, QuestionRepository
from quorum.domain.service import ReactionLedger, apply_vote, toggle_like
from quorum.domain.value import LikeOutcome, TargetRef, UserId, VoteState, VoteType
from quorum.persistence.repository.inmemory import (
    InMemoryAnswerRepository,
    InMemoryQuestionRepository,
    InMemoryStore,
)
from tests.conftest import make_answer, make_question
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


def _assert_consistent(entity) -> None:
    assert entity.vote_count == len(entity.upvoters) - len(entity.downvoters)
    assert not (entity.upvoters & entity.downvoters)


class TestApplyVote:
    """Tests for the pure vote transition."""

    def test_upvote_then_upvote_again_toggles_off(self):
        """Scenario A: a repeated upvote removes the vote."""
        user = UserId(uuid4())
        answer = make_answer(make_question().id)

        upvoted = apply_vote(answer, user, VoteType.UPVOTE)
        assert upvoted.vote_count == 1
        assert upvoted.vote_state_of(user) == VoteState.UPVOTED

        cleared = apply_vote(upvoted, user, VoteType.UPVOTE)
        assert cleared.vote_count == 0
        assert cleared.vote_state_of(user) == VoteState.NONE
        _assert_consistent(cleared)

    def test_downvote_then_upvote_switches(self):
        """Scenario B: voting the other way moves the user between sets."""
        user = UserId(uuid4())
        answer = make_answer(make_question().id)

        downvoted = apply_vote(answer, user, "downvote")
        assert downvoted.vote_count == -1

        switched = apply_vote(downvoted, user, "upvote")
        assert user not in switched.downvoters
        assert user in switched.upvoters
        assert switched.vote_count == 1
        _assert_consistent(switched)

    def test_vote_bumps_version_and_leaves_input_untouched(self):
        """Votes return a new entity with the next version."""
        user = UserId(uuid4())
        answer = make_answer(make_question().id)

        voted = apply_vote(answer, user, VoteType.DOWNVOTE)

        assert voted.version == answer.version + 1
        assert answer.downvoters == frozenset()

    def test_other_users_votes_are_preserved(self):
        """A vote only moves the voting user."""
        alice, bob = UserId(uuid4()), UserId(uuid4())
        answer = make_answer(make_question().id, upvoters=frozenset({alice}))

        voted = apply_vote(answer, bob, VoteType.DOWNVOTE)

        assert voted.upvoters == frozenset({alice})
        assert voted.downvoters == frozenset({bob})
        assert voted.vote_count == 0

    @pytest.mark.parametrize("vote_type", ["up", "UPVOTE", "", None, 1])
    def test_invalid_vote_type_rejected(self, vote_type):
        """Anything but upvote/downvote is invalid input."""
        answer = make_answer(make_question().id)

        with pytest.raises(InvalidVoteTypeError):
            apply_vote(answer, UserId(uuid4()), vote_type)


class TestToggleLike:
    """Tests for the pure like transition."""

    def test_like_twice_returns_to_original(self):
        """Toggling twice restores likers and like_count."""
        user = UserId(uuid4())
        question = make_question(likers=frozenset({UserId(uuid4())}))

        liked, first = toggle_like(question, user)
        unliked, second = toggle_like(liked, user)

        assert first == LikeOutcome.LIKED
        assert second == LikeOutcome.UNLIKED
        assert liked.like_count == question.like_count + 1
        assert unliked.likers == question.likers
        assert unliked.like_count == question.like_count

    def test_like_does_not_touch_votes(self):
        """Likes and votes are independent."""
        user = UserId(uuid4())
        question = make_question(upvoters=frozenset({user}))

        liked, _ = toggle_like(question, user)

        assert liked.upvoters == frozenset({user})
        assert liked.is_liked_by(user)


class TestReactionLedger:
    """Tests for ReactionLedger against the in-memory store."""

    @pytest.mark.asyncio
    async def test_cast_vote_persists(self, unit_env):
        """A vote is written back to the repository."""
        ledger = await unit_env.get(ReactionLedger)
        question_repo = await unit_env.get(QuestionRepository)
        answer_repo = await unit_env.get(AnswerRepository)

        question = await question_repo.save(make_question())
        answer = await answer_repo.save(make_answer(question.id))
        user = UserId(uuid4())

        result = await ledger.cast_vote(answer.target, user, VoteType.UPVOTE)

        stored = await answer_repo.find_by_id(answer.id)
        assert result.vote_count == 1
        assert stored.upvoters == frozenset({user})
        assert stored.version == 1

    @pytest.mark.asyncio
    async def test_toggle_like_on_question(self, unit_env):
        """Likes on questions are persisted and reported."""
        ledger = await unit_env.get(ReactionLedger)
        question_repo = await unit_env.get(QuestionRepository)
        question = await question_repo.save(make_question())
        user = UserId(uuid4())

        entity, outcome = await ledger.toggle_like(question.target, user)

        assert outcome == LikeOutcome.LIKED
        assert entity.like_count == 1
        assert (await question_repo.find_by_id(question.id)).likers == {user}

    @pytest.mark.asyncio
    async def test_missing_target_raises_not_found(self, unit_env):
        """Reactions on unknown entities fail with NotFound."""
        ledger = await unit_env.get(ReactionLedger)

        with pytest.raises(NotFoundError, match="Answer not found"):
            await ledger.cast_vote(
                TargetRef.answer(uuid4()), UserId(uuid4()), VoteType.UPVOTE
            )

    @pytest.mark.asyncio
    async def test_invalid_vote_type_leaves_entity_unchanged(self, unit_env):
        """A rejected vote writes nothing."""
        ledger = await unit_env.get(ReactionLedger)
        question_repo = await unit_env.get(QuestionRepository)
        question = await question_repo.save(make_question())

        with pytest.raises(InvalidVoteTypeError):
            await ledger.cast_vote(question.target, UserId(uuid4()), "sideways")

        assert (await question_repo.find_by_id(question.id)).version == 0

    @pytest.mark.asyncio
    async def test_concurrent_upvotes_both_land(self, unit_env):
        """Scenario F: concurrent upvotes from different users are not lost."""
        ledger = await unit_env.get(ReactionLedger)
        question_repo = await unit_env.get(QuestionRepository)
        answer_repo = await unit_env.get(AnswerRepository)
        question = await question_repo.save(make_question())
        answer = await answer_repo.save(make_answer(question.id))
        voters = [UserId(uuid4()) for _ in range(5)]

        await asyncio.gather(
            *(ledger.cast_vote(answer.target, v, VoteType.UPVOTE) for v in voters)
        )

        stored = await answer_repo.find_by_id(answer.id)
        assert stored.upvoters == frozenset(voters)
        assert stored.vote_count == 5
        _assert_consistent(stored)


class RacingAnswerRepository(InMemoryAnswerRepository):
    """Lets another user's vote land between each read and write."""

    def __init__(self, store: InMemoryStore, races: int) -> None:
        super().__init__(store)
        self.races = races
        self.attempts = 0

    async def compare_and_set(self, answer: Answer, expected_version: int) -> bool:
        self.attempts += 1
        if self.races > 0:
            self.races -= 1
            rival = await self.find_by_id(answer.id)
            await super().compare_and_set(
                apply_vote(rival, UserId(uuid4()), VoteType.UPVOTE), rival.version
            )
        return await super().compare_and_set(answer, expected_version)


class TestReactionLedgerRetries:
    """Tests for the optimistic retry loop."""

    def _ledger(self, store: InMemoryStore, races: int, max_retries: int = 5):
        answers = RacingAnswerRepository(store, races)
        ledger = ReactionLedger(
            question_repository=InMemoryQuestionRepository(store),
            answer_repository=answers,
            reaction_settings=ReactionSettings(max_retries=max_retries),
        )
        return ledger, answers

    @pytest.mark.asyncio
    async def test_lost_race_is_retried_without_losing_the_rival_vote(self):
        """A stale write is retried on fresh state."""
        store = InMemoryStore()
        question = make_question()
        answer = make_answer(question.id)
        store.questions[question.id] = question
        store.answers[answer.id] = answer
        ledger, answers = self._ledger(store, races=2)
        user = UserId(uuid4())

        result = await ledger.cast_vote(answer.target, user, VoteType.UPVOTE)

        assert answers.attempts == 3
        assert user in result.upvoters
        assert store.answers[answer.id].vote_count == 3
        _assert_consistent(store.answers[answer.id])

    @pytest.mark.asyncio
    async def test_gives_up_with_conflict_after_max_retries(self):
        """Persistent contention surfaces as ConflictError."""
        store = InMemoryStore()
        question = make_question()
        answer = make_answer(question.id)
        store.questions[question.id] = question
        store.answers[answer.id] = answer
        ledger, answers = self._ledger(store, races=10, max_retries=3)
        user = UserId(uuid4())

        with pytest.raises(ConflictError):
            await ledger.cast_vote(answer.target, user, VoteType.UPVOTE)

        assert answers.attempts == 3
        assert user not in store.answers[answer.id].upvoters
