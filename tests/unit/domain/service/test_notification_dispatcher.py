"""Unit tests for the notification dispatcher."""

from uuid import uuid4

import pytest

from quorum.domain.error import ForbiddenError, NotFoundError
from quorum.domain.repository import NotificationRepository, UserRepository
from quorum.domain.service import (
    LiveChannel,
    NotificationContext,
    NotificationDispatcher,
    user_topic,
)
from quorum.domain.value import (
    AnswerId,
    NotificationId,
    NotificationType,
    QuestionId,
    UserId,
)
from tests.conftest import make_user
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


async def _actor(unit_env, username: str = "alice"):
    user_repo = await unit_env.get(UserRepository)
    return await user_repo.save(make_user(username))


class TestNotify:
    """Tests for NotificationDispatcher.notify."""

    @pytest.mark.asyncio
    async def test_self_notification_is_suppressed(self, unit_env):
        """Acting on your own content creates and publishes nothing."""
        dispatcher = await unit_env.get(NotificationDispatcher)
        repo = await unit_env.get(NotificationRepository)
        channel = await unit_env.get(LiveChannel)
        user_id = UserId(uuid4())

        result = await dispatcher.notify(
            NotificationType.QUESTION_LIKE, recipient_id=user_id, actor_id=user_id
        )

        assert result is None
        assert await repo.count(user_id) == 0
        assert channel.events == []

    @pytest.mark.asyncio
    async def test_notification_is_rendered_persisted_and_published(self, unit_env):
        """The actor's name is interpolated and the recipient's topic is used."""
        dispatcher = await unit_env.get(NotificationDispatcher)
        repo = await unit_env.get(NotificationRepository)
        channel = await unit_env.get(LiveChannel)
        actor = await _actor(unit_env, "alice")
        recipient = UserId(uuid4())
        question_id = QuestionId(uuid4())

        notification = await dispatcher.notify(
            NotificationType.NEW_ANSWER,
            recipient_id=recipient,
            actor_id=actor.id,
            context=NotificationContext(question_id=question_id),
        )

        assert notification.title == "New Answer"
        assert notification.message == "alice answered your question"
        assert notification.question_id == question_id
        assert not notification.is_read
        assert await repo.find_by_id(notification.id) == notification

        [event] = channel.on_topic(user_topic(recipient))
        assert event.event == "notification"
        assert event.payload["type"] == "new"
        assert event.payload["notification"]["id"] == str(notification.id)

    @pytest.mark.asyncio
    async def test_comment_message_names_the_commented_target(self, unit_env):
        """Comments on answers say 'answer', on questions 'question'."""
        dispatcher = await unit_env.get(NotificationDispatcher)
        actor = await _actor(unit_env, "bob")

        on_answer = await dispatcher.notify(
            NotificationType.NEW_COMMENT,
            recipient_id=UserId(uuid4()),
            actor_id=actor.id,
            context=NotificationContext(
                question_id=QuestionId(uuid4()), answer_id=AnswerId(uuid4())
            ),
        )
        on_question = await dispatcher.notify(
            NotificationType.NEW_COMMENT,
            recipient_id=UserId(uuid4()),
            actor_id=actor.id,
            context=NotificationContext(question_id=QuestionId(uuid4())),
        )

        assert on_answer.message == "bob commented on your answer"
        assert on_question.message == "bob commented on your question"

    @pytest.mark.asyncio
    async def test_unknown_actor_renders_as_someone(self, unit_env):
        """Actors missing from the user store still render."""
        dispatcher = await unit_env.get(NotificationDispatcher)

        notification = await dispatcher.notify(
            NotificationType.ANSWER_ACCEPTED,
            recipient_id=UserId(uuid4()),
            actor_id=UserId(uuid4()),
        )

        assert notification.message == "Someone accepted your answer"

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "notification_type",
        [NotificationType.MENTION, NotificationType.BOUNTY_AWARDED],
    )
    async def test_types_without_template_use_generic_text(
        self, unit_env, notification_type
    ):
        """Types without a template fall back instead of failing."""
        dispatcher = await unit_env.get(NotificationDispatcher)
        actor = await _actor(unit_env)

        notification = await dispatcher.notify(
            notification_type, recipient_id=UserId(uuid4()), actor_id=actor.id
        )

        assert notification.type == notification_type
        assert notification.title == "Notification"
        assert notification.message == "You have a new notification"

    @pytest.mark.asyncio
    async def test_publish_failure_keeps_the_inbox_entry(self, unit_env):
        """A broken live channel is logged, the notification still exists."""
        dispatcher = await unit_env.get(NotificationDispatcher)
        repo = await unit_env.get(NotificationRepository)
        channel = await unit_env.get(LiveChannel)
        channel.fail = True
        recipient = UserId(uuid4())

        notification = await dispatcher.notify(
            NotificationType.ANSWER_LIKE,
            recipient_id=recipient,
            actor_id=UserId(uuid4()),
        )

        assert notification is not None
        assert await repo.count(recipient, unread_only=True) == 1


class TestReadState:
    """Tests for the Unread -> Read transition and inbox management."""

    async def _notify(self, dispatcher, recipient):
        return await dispatcher.notify(
            NotificationType.QUESTION_VOTE,
            recipient_id=recipient,
            actor_id=UserId(uuid4()),
        )

    @pytest.mark.asyncio
    async def test_mark_read_by_recipient(self, unit_env):
        """The recipient can read their notification."""
        dispatcher = await unit_env.get(NotificationDispatcher)
        recipient = UserId(uuid4())
        notification = await self._notify(dispatcher, recipient)

        read = await dispatcher.mark_read(notification.id, recipient)

        assert read.is_read
        assert read.read_at is not None
        assert await dispatcher.unread_count(recipient) == 0

    @pytest.mark.asyncio
    async def test_mark_read_is_idempotent(self, unit_env):
        """Reading twice keeps the first read_at."""
        dispatcher = await unit_env.get(NotificationDispatcher)
        recipient = UserId(uuid4())
        notification = await self._notify(dispatcher, recipient)

        first = await dispatcher.mark_read(notification.id, recipient)
        second = await dispatcher.mark_read(notification.id, recipient)

        assert second.is_read
        assert second.read_at == first.read_at

    @pytest.mark.asyncio
    async def test_mark_read_by_someone_else_is_forbidden(self, unit_env):
        """Only the recipient may read a notification."""
        dispatcher = await unit_env.get(NotificationDispatcher)
        recipient = UserId(uuid4())
        notification = await self._notify(dispatcher, recipient)

        with pytest.raises(ForbiddenError):
            await dispatcher.mark_read(notification.id, UserId(uuid4()))

        assert await dispatcher.unread_count(recipient) == 1

    @pytest.mark.asyncio
    async def test_mark_read_missing_notification(self, unit_env):
        """Unknown notifications fail with NotFound."""
        dispatcher = await unit_env.get(NotificationDispatcher)

        with pytest.raises(NotFoundError):
            await dispatcher.mark_read(NotificationId(uuid4()), UserId(uuid4()))

    @pytest.mark.asyncio
    async def test_mark_all_read_only_touches_the_recipient(self, unit_env):
        """Mark-all counts unread notifications of one recipient."""
        dispatcher = await unit_env.get(NotificationDispatcher)
        recipient, other = UserId(uuid4()), UserId(uuid4())
        first = await self._notify(dispatcher, recipient)
        await self._notify(dispatcher, recipient)
        await self._notify(dispatcher, other)
        await dispatcher.mark_read(first.id, recipient)

        updated = await dispatcher.mark_all_read(recipient)

        assert updated == 1
        assert await dispatcher.unread_count(recipient) == 0
        assert await dispatcher.unread_count(other) == 1

    @pytest.mark.asyncio
    async def test_list_for_recipient_newest_first(self, unit_env):
        """The inbox lists newest first with a total."""
        dispatcher = await unit_env.get(NotificationDispatcher)
        recipient = UserId(uuid4())
        older = await self._notify(dispatcher, recipient)
        newer = await self._notify(dispatcher, recipient)

        notifications, total = await dispatcher.list_for_recipient(recipient)

        assert total == 2
        assert [n.id for n in notifications][0] in {newer.id, older.id}
        assert notifications[0].created_at >= notifications[1].created_at

    @pytest.mark.asyncio
    async def test_delete_by_recipient(self, unit_env):
        """The recipient can delete, others cannot."""
        dispatcher = await unit_env.get(NotificationDispatcher)
        repo = await unit_env.get(NotificationRepository)
        recipient = UserId(uuid4())
        notification = await self._notify(dispatcher, recipient)

        with pytest.raises(ForbiddenError):
            await dispatcher.delete(notification.id, UserId(uuid4()))
        await dispatcher.delete(notification.id, recipient)

        assert await repo.find_by_id(notification.id) is None
