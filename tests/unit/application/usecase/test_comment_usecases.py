"""Unit tests for comment use cases."""

from uuid import uuid4

import pytest

from quorum.application.usecase.comment import (
    CreateCommentRequest,
    CreateCommentUseCase,
    DeleteCommentRequest,
    DeleteCommentUseCase,
    ListCommentsRequest,
    ListCommentsUseCase,
    UpdateCommentRequest,
    UpdateCommentUseCase,
)
from quorum.domain.error import ForbiddenError, InvalidInputError, NotFoundError
from quorum.domain.repository import (
    AnswerRepository,
    NotificationRepository,
    QuestionRepository,
)
from quorum.domain.service import LiveChannel
from quorum.domain.value import NotificationType
from tests.conftest import make_answer, make_question
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


async def _comment_on_question(unit_env, body: str = "Have you tried reversed()?"):
    use_case = await unit_env.get(CreateCommentUseCase)
    question_repo = await unit_env.get(QuestionRepository)
    question = await question_repo.save(make_question())
    view = await use_case.execute(
        CreateCommentRequest(author_id=uuid4(), body=body, question_id=question.id)
    )
    return question, view


class TestCreateComment:
    """Tests for CreateCommentUseCase."""

    @pytest.mark.asyncio
    async def test_comment_on_question_notifies_asker(self, unit_env):
        """The question's author hears about new comments."""
        notification_repo = await unit_env.get(NotificationRepository)
        live = await unit_env.get(LiveChannel)

        question, view = await _comment_on_question(unit_env)

        assert view.question_id == str(question.id)
        assert view.answer_id is None
        [notification] = await notification_repo.find_by_recipient(question.author_id)
        assert notification.type == NotificationType.NEW_COMMENT
        assert notification.message.endswith("commented on your question")
        assert str(notification.comment_id) == view.comment_id
        [event] = live.on_topic("feed")
        assert event.event == "new-comment"

    @pytest.mark.asyncio
    async def test_comment_on_answer_joins_question_thread(self, unit_env):
        """Answer comments notify the answerer and keep the question id."""
        use_case = await unit_env.get(CreateCommentUseCase)
        question_repo = await unit_env.get(QuestionRepository)
        answer_repo = await unit_env.get(AnswerRepository)
        notification_repo = await unit_env.get(NotificationRepository)
        question = await question_repo.save(make_question())
        answer = await answer_repo.save(make_answer(question.id))

        view = await use_case.execute(
            CreateCommentRequest(
                author_id=uuid4(), body="Works for me", answer_id=answer.id
            )
        )

        assert view.question_id == str(question.id)
        assert view.answer_id == str(answer.id)
        [notification] = await notification_repo.find_by_recipient(answer.author_id)
        assert notification.answer_id == answer.id
        assert notification.message.endswith("commented on your answer")
        assert await notification_repo.count(question.author_id) == 0

    @pytest.mark.asyncio
    @pytest.mark.parametrize("with_question,with_answer", [(False, False), (True, True)])
    async def test_exactly_one_target_required(
        self, unit_env, with_question, with_answer
    ):
        """Comments point at a question or an answer, never both or neither."""
        use_case = await unit_env.get(CreateCommentUseCase)

        with pytest.raises(InvalidInputError):
            await use_case.execute(
                CreateCommentRequest(
                    author_id=uuid4(),
                    body="Hello there",
                    question_id=uuid4() if with_question else None,
                    answer_id=uuid4() if with_answer else None,
                )
            )

    @pytest.mark.asyncio
    @pytest.mark.parametrize("body", ["x", "   y   ", "z" * 501])
    async def test_body_length_bounds(self, unit_env, body):
        """Bodies are 2-500 characters after trimming."""
        use_case = await unit_env.get(CreateCommentUseCase)
        question_repo = await unit_env.get(QuestionRepository)
        question = await question_repo.save(make_question())

        with pytest.raises(InvalidInputError):
            await use_case.execute(
                CreateCommentRequest(
                    author_id=uuid4(), body=body, question_id=question.id
                )
            )

    @pytest.mark.asyncio
    async def test_body_at_upper_bound_accepted(self, unit_env):
        """Exactly 500 characters is allowed."""
        _, view = await _comment_on_question(unit_env, body="z" * 500)

        assert len(view.body) == 500

    @pytest.mark.asyncio
    async def test_missing_answer_target(self, unit_env):
        """Comments on unknown answers raise NotFound."""
        use_case = await unit_env.get(CreateCommentUseCase)

        with pytest.raises(NotFoundError):
            await use_case.execute(
                CreateCommentRequest(author_id=uuid4(), body="Hmm", answer_id=uuid4())
            )


class TestManageComments:
    """Tests for list, update and delete comment use cases."""

    @pytest.mark.asyncio
    async def test_list_comments_for_question(self, unit_env):
        """Listing returns the target's comments."""
        list_comments = await unit_env.get(ListCommentsUseCase)
        question, view = await _comment_on_question(unit_env)

        response = await list_comments.execute(
            ListCommentsRequest(question_id=question.id)
        )

        assert [c.comment_id for c in response.comments] == [view.comment_id]

    @pytest.mark.asyncio
    async def test_list_requires_one_target(self, unit_env):
        """Listing needs exactly one parent id."""
        list_comments = await unit_env.get(ListCommentsUseCase)

        with pytest.raises(InvalidInputError):
            await list_comments.execute(ListCommentsRequest())

    @pytest.mark.asyncio
    async def test_author_updates_comment(self, unit_env):
        """Authors can edit; bodies are trimmed."""
        update = await unit_env.get(UpdateCommentUseCase)
        _, view = await _comment_on_question(unit_env)

        updated = await update.execute(
            UpdateCommentRequest(
                comment_id=view.comment_id,
                user_id=view.author_id,
                body="  Edited comment  ",
            )
        )

        assert updated.body == "Edited comment"

    @pytest.mark.asyncio
    async def test_stranger_cannot_delete(self, unit_env):
        """Only the author deletes a comment."""
        delete = await unit_env.get(DeleteCommentUseCase)
        _, view = await _comment_on_question(unit_env)

        with pytest.raises(ForbiddenError):
            await delete.execute(
                DeleteCommentRequest(comment_id=view.comment_id, user_id=uuid4())
            )

    @pytest.mark.asyncio
    async def test_author_deletes_comment(self, unit_env):
        """Deleted comments disappear from listings."""
        delete = await unit_env.get(DeleteCommentUseCase)
        list_comments = await unit_env.get(ListCommentsUseCase)
        question, view = await _comment_on_question(unit_env)

        response = await delete.execute(
            DeleteCommentRequest(comment_id=view.comment_id, user_id=view.author_id)
        )

        assert response.success
        listed = await list_comments.execute(
            ListCommentsRequest(question_id=question.id)
        )
        assert listed.comments == []
