"""Test configuration and fixtures."""

from datetime import datetime, timedelta
from uuid import UUID, uuid4

import logfire

from quorum.config import Settings
from quorum.domain.model import Answer, Notification, Question, User
from quorum.domain.value import (
    AnswerId,
    NotificationId,
    NotificationType,
    QuestionId,
    UserId,
    Username,
)
from quorum.util.jwt import create_token

# Keep logfire quiet and local during tests
logfire.configure(send_to_logfire=False, console=False)


def make_user(username: str = "alice") -> User:
    """Build a user with a fresh ID."""
    return User(id=UserId(uuid4()), username=Username(username))


def make_question(
    author_id: UserId | None = None,
    title: str = "How do I reverse a list?",
    body: str = "I have a list and want it backwards.",
    created_at: datetime | None = None,
    **fields,
) -> Question:
    """Build a question with sensible defaults."""
    created_at = created_at or datetime.now()
    return Question(
        id=QuestionId(uuid4()),
        title=title,
        body=body,
        author_id=author_id or UserId(uuid4()),
        created_at=created_at,
        updated_at=created_at,
        **fields,
    )


def make_answer(
    question_id: QuestionId,
    author_id: UserId | None = None,
    body: str = "Use reversed() or slice with [::-1].",
    age: timedelta = timedelta(0),
    **fields,
) -> Answer:
    """Build an answer to a question; age pushes created_at into the past."""
    created_at = datetime.now() - age
    return Answer(
        id=AnswerId(uuid4()),
        question_id=question_id,
        author_id=author_id or UserId(uuid4()),
        body=body,
        created_at=created_at,
        updated_at=created_at,
        **fields,
    )


def make_notification(recipient_id: UserId, **fields) -> Notification:
    """Build an unread new-answer notification for a recipient."""
    return Notification(
        id=NotificationId(uuid4()),
        recipient_id=recipient_id,
        type=NotificationType.NEW_ANSWER,
        title="New Answer",
        message="bob answered your question",
        **fields,
    )


def voters(count: int) -> frozenset[UserId]:
    """Build a set of distinct voter IDs."""
    return frozenset(UserId(uuid4()) for _ in range(count))


def auth_headers(user_id: UUID | str, username: str = "alice") -> dict[str, str]:
    """Cookie header carrying a signed token for the user."""
    token = create_token(str(user_id), username, Settings().auth)
    return {"Cookie": f"auth_token={token}"}
