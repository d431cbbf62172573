"""Mock persistence providers for testing."""

from dishka import Scope, provide

from quorum.domain.repository import (
    AnswerRepository,
    CommentRepository,
    NotificationRepository,
    QuestionRepository,
    UserRepository,
)
from quorum.persistence.repository.inmemory import (
    InMemoryAnswerRepository,
    InMemoryCommentRepository,
    InMemoryNotificationRepository,
    InMemoryQuestionRepository,
    InMemoryStore,
    InMemoryUserRepository,
)
from quorum.util.di.infrastructure.persistence import PersistenceProvider


class MockPersistenceProvider(PersistenceProvider):
    """Mock persistence provider using in-memory repositories.

    The store is APP-scoped so data written in one request is visible to the
    next; each container (one per test) starts empty.
    """

    __is_mock__ = True

    @provide(scope=Scope.APP)
    def get_store(self) -> InMemoryStore:
        """Provide the shared in-memory store."""
        return InMemoryStore()

    @provide(scope=Scope.REQUEST)
    def get_user_repository(self, store: InMemoryStore) -> UserRepository:
        """Provide in-memory user repository."""
        return InMemoryUserRepository(store)

    @provide(scope=Scope.REQUEST)
    def get_question_repository(self, store: InMemoryStore) -> QuestionRepository:
        """Provide in-memory question repository."""
        return InMemoryQuestionRepository(store)

    @provide(scope=Scope.REQUEST)
    def get_answer_repository(self, store: InMemoryStore) -> AnswerRepository:
        """Provide in-memory answer repository."""
        return InMemoryAnswerRepository(store)

    @provide(scope=Scope.REQUEST)
    def get_comment_repository(self, store: InMemoryStore) -> CommentRepository:
        """Provide in-memory comment repository."""
        return InMemoryCommentRepository(store)

    @provide(scope=Scope.REQUEST)
    def get_notification_repository(
        self, store: InMemoryStore
    ) -> NotificationRepository:
        """Provide in-memory notification repository."""
        return InMemoryNotificationRepository(store)
