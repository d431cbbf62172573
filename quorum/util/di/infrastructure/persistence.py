"""Persistence infrastructure providers."""

from collections.abc import AsyncIterator

from dishka import Scope, provide
import logfire
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from quorum.config import Settings
from quorum.domain.repository import (
    AnswerRepository,
    CommentRepository,
    NotificationRepository,
    QuestionRepository,
    UserRepository,
)
from quorum.persistence.database import create_engine, create_session_factory
from quorum.persistence.repository import (
    PostgresAnswerRepository,
    PostgresCommentRepository,
    PostgresNotificationRepository,
    PostgresQuestionRepository,
    PostgresUserRepository,
)
from quorum.util.di.base import ProviderBase
from quorum.util.observability import instrument_sqlalchemy


class PersistenceProvider(ProviderBase):
    """Persistence component base."""

    __mock_component__ = "persistence"


class ProdPersistenceProvider(PersistenceProvider):
    """Production persistence provider using PostgreSQL.

    One engine per process; each request gets its own session and every
    repository in that request shares it, so a use case commits or rolls
    back as a unit.
    """

    __is_mock__ = False

    @provide(scope=Scope.APP)
    async def get_engine(self, settings: Settings) -> AsyncIterator[AsyncEngine]:
        """Provide database engine, disposed when the container closes."""
        engine = create_engine(settings)
        instrument_sqlalchemy(engine)
        yield engine
        await engine.dispose()

    @provide(scope=Scope.APP)
    def get_session_factory(
        self, engine: AsyncEngine
    ) -> async_sessionmaker[AsyncSession]:
        """Provide session factory."""
        return create_session_factory(engine)

    @provide(scope=Scope.REQUEST)
    async def get_session(
        self, session_factory: async_sessionmaker[AsyncSession]
    ) -> AsyncIterator[AsyncSession]:
        """Open the request transaction.

        Commits when the request succeeds and rolls back when it raises.
        Row locks taken by acceptance are released at this point.
        """
        async with session_factory() as session:
            try:
                yield session
                await session.commit()
                logfire.debug("Request transaction committed")
            except Exception as e:
                logfire.warn(
                    "Request transaction rolled back",
                    error_type=type(e).__name__,
                    error=str(e),
                )
                await session.rollback()
                raise

    user_repository = provide(
        PostgresUserRepository, provides=UserRepository, scope=Scope.REQUEST
    )
    question_repository = provide(
        PostgresQuestionRepository, provides=QuestionRepository, scope=Scope.REQUEST
    )
    answer_repository = provide(
        PostgresAnswerRepository, provides=AnswerRepository, scope=Scope.REQUEST
    )
    comment_repository = provide(
        PostgresCommentRepository, provides=CommentRepository, scope=Scope.REQUEST
    )
    notification_repository = provide(
        PostgresNotificationRepository,
        provides=NotificationRepository,
        scope=Scope.REQUEST,
    )
