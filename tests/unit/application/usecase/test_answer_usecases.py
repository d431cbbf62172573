"""Unit tests for answer use cases."""

import asyncio
from uuid import uuid4

import pytest

from quorum.application.usecase.answer import (
    AcceptAnswerRequest,
    AcceptAnswerUseCase,
    CreateAnswerRequest,
    CreateAnswerUseCase,
    DeleteAnswerRequest,
    DeleteAnswerUseCase,
    ListAnswersRequest,
    ListAnswersUseCase,
    UpdateAnswerRequest,
    UpdateAnswerUseCase,
)
from quorum.domain.error import ForbiddenError, InvalidInputError, NotFoundError
from quorum.domain.repository import (
    AnswerRepository,
    NotificationRepository,
    QuestionRepository,
    UserRepository,
)
from quorum.domain.service import (
    AcceptanceCoordinator,
    AnswerService,
    LiveChannel,
    NotificationDispatcher,
)
from quorum.domain.value import NotificationType, UserId
from quorum.persistence.repository.inmemory import (
    InMemoryAnswerRepository,
    InMemoryCommentRepository,
    InMemoryQuestionRepository,
    InMemoryStore,
)
from tests.conftest import make_answer, make_question, make_user
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class YieldingAnswerRepository(InMemoryAnswerRepository):
    """Gives other requests a chance to run on every read."""

    async def find_by_id(self, answer_id):
        await asyncio.sleep(0)
        return await super().find_by_id(answer_id)


async def _accept_use_case(unit_env) -> AcceptAnswerUseCase:
    store = await unit_env.get(InMemoryStore)
    answers = YieldingAnswerRepository(store)
    questions = InMemoryQuestionRepository(store)
    return AcceptAnswerUseCase(
        answer_service=AnswerService(
            answer_repository=answers,
            question_repository=questions,
            comment_repository=InMemoryCommentRepository(store),
        ),
        acceptance_coordinator=AcceptanceCoordinator(
            question_repository=questions, answer_repository=answers
        ),
        notification_dispatcher=await unit_env.get(NotificationDispatcher),
    )


class TestCreateAnswer:
    """Tests for CreateAnswerUseCase."""

    @pytest.mark.asyncio
    async def test_answer_notifies_asker_and_feed(self, unit_env):
        """A new answer reaches the asker's inbox and the public feed."""
        use_case = await unit_env.get(CreateAnswerUseCase)
        question_repo = await unit_env.get(QuestionRepository)
        user_repo = await unit_env.get(UserRepository)
        notification_repo = await unit_env.get(NotificationRepository)
        live = await unit_env.get(LiveChannel)
        helper = await user_repo.save(make_user("bob"))
        question = await question_repo.save(make_question())

        view = await use_case.execute(
            CreateAnswerRequest(
                question_id=question.id, author_id=helper.id, body="Use reversed()."
            )
        )

        stored = await question_repo.find_by_id(question.id)
        assert stored.answer_count == 1
        [notification] = await notification_repo.find_by_recipient(question.author_id)
        assert notification.type == NotificationType.NEW_ANSWER
        assert "bob" in notification.message
        assert str(notification.answer_id) == view.answer_id
        [event] = live.on_topic("feed")
        assert event.event == "new-answer"
        assert event.payload["question_id"] == str(question.id)
        assert event.payload["answer"]["answer_id"] == view.answer_id

    @pytest.mark.asyncio
    async def test_answering_own_question_is_silent(self, unit_env):
        """Askers answering themselves get no notification."""
        use_case = await unit_env.get(CreateAnswerUseCase)
        question_repo = await unit_env.get(QuestionRepository)
        notification_repo = await unit_env.get(NotificationRepository)
        question = await question_repo.save(make_question())

        await use_case.execute(
            CreateAnswerRequest(
                question_id=question.id, author_id=question.author_id, body="Solved it."
            )
        )

        assert await notification_repo.count(question.author_id) == 0

    @pytest.mark.asyncio
    async def test_second_answer_by_same_user_rejected(self, unit_env):
        """A user answers a question at most once."""
        use_case = await unit_env.get(CreateAnswerUseCase)
        question_repo = await unit_env.get(QuestionRepository)
        question = await question_repo.save(make_question())
        request = CreateAnswerRequest(
            question_id=question.id, author_id=uuid4(), body="First take."
        )
        await use_case.execute(request)

        with pytest.raises(InvalidInputError):
            await use_case.execute(request)

        stored = await question_repo.find_by_id(question.id)
        assert stored.answer_count == 1

    @pytest.mark.asyncio
    async def test_answer_to_missing_question(self, unit_env):
        """Answers need an existing question."""
        use_case = await unit_env.get(CreateAnswerUseCase)

        with pytest.raises(NotFoundError):
            await use_case.execute(
                CreateAnswerRequest(question_id=uuid4(), author_id=uuid4(), body="Hi")
            )


class TestAcceptAnswer:
    """Tests for AcceptAnswerUseCase."""

    @pytest.mark.asyncio
    async def test_accept_notifies_answer_author_once(self, unit_env):
        """Re-accepting the same answer does not notify again."""
        use_case = await unit_env.get(AcceptAnswerUseCase)
        question_repo = await unit_env.get(QuestionRepository)
        answer_repo = await unit_env.get(AnswerRepository)
        notification_repo = await unit_env.get(NotificationRepository)
        question = await question_repo.save(make_question())
        answer = await answer_repo.save(make_answer(question.id))
        request = AcceptAnswerRequest(answer_id=answer.id, user_id=question.author_id)

        first = await use_case.execute(request)
        second = await use_case.execute(request)

        assert first.is_accepted and second.is_accepted
        assert first.accepted_by == str(question.author_id)
        [notification] = await notification_repo.find_by_recipient(answer.author_id)
        assert notification.type == NotificationType.ANSWER_ACCEPTED
        assert notification.question_id == question.id

    @pytest.mark.asyncio
    async def test_simultaneous_accepts_notify_once(self, unit_env):
        """Two requests accepting the same answer send one notification."""
        use_case = await _accept_use_case(unit_env)
        question_repo = await unit_env.get(QuestionRepository)
        answer_repo = await unit_env.get(AnswerRepository)
        notification_repo = await unit_env.get(NotificationRepository)
        question = await question_repo.save(make_question())
        answer = await answer_repo.save(make_answer(question.id))
        request = AcceptAnswerRequest(answer_id=answer.id, user_id=question.author_id)

        await asyncio.gather(use_case.execute(request), use_case.execute(request))

        assert await notification_repo.count(answer.author_id) == 1

    @pytest.mark.asyncio
    async def test_accepting_back_notifies_again(self, unit_env):
        """Moving acceptance away and back notifies the author both times."""
        use_case = await unit_env.get(AcceptAnswerUseCase)
        question_repo = await unit_env.get(QuestionRepository)
        answer_repo = await unit_env.get(AnswerRepository)
        notification_repo = await unit_env.get(NotificationRepository)
        question = await question_repo.save(make_question())
        first = await answer_repo.save(make_answer(question.id))
        second = await answer_repo.save(make_answer(question.id))

        for answer in (first, second, first):
            await use_case.execute(
                AcceptAnswerRequest(answer_id=answer.id, user_id=question.author_id)
            )

        assert await notification_repo.count(first.author_id) == 2

    @pytest.mark.asyncio
    async def test_only_asker_accepts(self, unit_env):
        """Accepting someone else's question is forbidden."""
        use_case = await unit_env.get(AcceptAnswerUseCase)
        question_repo = await unit_env.get(QuestionRepository)
        answer_repo = await unit_env.get(AnswerRepository)
        notification_repo = await unit_env.get(NotificationRepository)
        question = await question_repo.save(make_question())
        answer = await answer_repo.save(make_answer(question.id))

        with pytest.raises(ForbiddenError):
            await use_case.execute(
                AcceptAnswerRequest(answer_id=answer.id, user_id=answer.author_id)
            )

        assert await notification_repo.count(answer.author_id) == 0

    @pytest.mark.asyncio
    async def test_accept_missing_answer(self, unit_env):
        """Unknown answers raise NotFound."""
        use_case = await unit_env.get(AcceptAnswerUseCase)

        with pytest.raises(NotFoundError):
            await use_case.execute(
                AcceptAnswerRequest(answer_id=uuid4(), user_id=uuid4())
            )


class TestEditAndDeleteAnswer:
    """Tests for update, delete and list answer use cases."""

    @pytest.mark.asyncio
    async def test_author_updates_body(self, unit_env):
        """Authors can rewrite their answer."""
        use_case = await unit_env.get(UpdateAnswerUseCase)
        question_repo = await unit_env.get(QuestionRepository)
        answer_repo = await unit_env.get(AnswerRepository)
        question = await question_repo.save(make_question())
        answer = await answer_repo.save(make_answer(question.id))

        view = await use_case.execute(
            UpdateAnswerRequest(
                answer_id=answer.id, user_id=answer.author_id, body="Use list.reverse()."
            )
        )

        assert view.body == "Use list.reverse()."

    @pytest.mark.asyncio
    async def test_stranger_cannot_update(self, unit_env):
        """Only the author edits an answer."""
        use_case = await unit_env.get(UpdateAnswerUseCase)
        question_repo = await unit_env.get(QuestionRepository)
        answer_repo = await unit_env.get(AnswerRepository)
        question = await question_repo.save(make_question())
        answer = await answer_repo.save(make_answer(question.id))

        with pytest.raises(ForbiddenError):
            await use_case.execute(
                UpdateAnswerRequest(answer_id=answer.id, user_id=uuid4(), body="Mine now")
            )

    @pytest.mark.asyncio
    async def test_deleting_accepted_answer_reopens_question(self, unit_env):
        """Deleting the accepted answer clears the question's acceptance."""
        accept = await unit_env.get(AcceptAnswerUseCase)
        delete = await unit_env.get(DeleteAnswerUseCase)
        list_answers = await unit_env.get(ListAnswersUseCase)
        question_repo = await unit_env.get(QuestionRepository)
        answer_repo = await unit_env.get(AnswerRepository)
        question = await question_repo.save(make_question(answer_count=1))
        answer = await answer_repo.save(make_answer(question.id))
        await accept.execute(
            AcceptAnswerRequest(answer_id=answer.id, user_id=question.author_id)
        )

        response = await delete.execute(
            DeleteAnswerRequest(answer_id=answer.id, user_id=answer.author_id)
        )

        assert response.success
        stored = await question_repo.find_by_id(question.id)
        assert stored.accepted_answer_id is None
        assert not stored.is_answered
        assert stored.answer_count == 0
        listed = await list_answers.execute(ListAnswersRequest(question_id=question.id))
        assert listed.total == 0

    @pytest.mark.asyncio
    async def test_list_answers_shows_viewer_vote(self, unit_env):
        """Views carry the viewer's own vote state."""
        use_case = await unit_env.get(ListAnswersUseCase)
        question_repo = await unit_env.get(QuestionRepository)
        answer_repo = await unit_env.get(AnswerRepository)
        viewer = UserId(uuid4())
        question = await question_repo.save(make_question())
        await answer_repo.save(
            make_answer(question.id, upvoters=frozenset({viewer}))
        )

        response = await use_case.execute(
            ListAnswersRequest(question_id=question.id, user_id=viewer)
        )

        [view] = response.answers
        assert view.user_vote == "upvoted"
