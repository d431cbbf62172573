"""Shared state for the in-memory repositories."""

import asyncio
from collections import defaultdict

from quorum.domain.model import Answer, Comment, Notification, Question, User
from quorum.domain.value import (
    AnswerId,
    CommentId,
    NotificationId,
    QuestionId,
    UserId,
)


class InMemoryStore:
    """Dictionaries backing the in-memory repositories.

    One store lives for the lifetime of a test container, so repositories
    created for different requests see the same data.
    """

    def __init__(self) -> None:
        self.users: dict[UserId, User] = {}
        self.questions: dict[QuestionId, Question] = {}
        self.answers: dict[AnswerId, Answer] = {}
        self.comments: dict[CommentId, Comment] = {}
        self.notifications: dict[NotificationId, Notification] = {}
        self.question_locks: defaultdict[QuestionId, asyncio.Lock] = defaultdict(
            asyncio.Lock
        )
