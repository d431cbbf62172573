"""Domain layer DI providers."""

from dishka import Scope, provide

from quorum.config import AuthSettings, ReactionSettings
from quorum.domain.repository import (
    AnswerRepository,
    CommentRepository,
    NotificationRepository,
    QuestionRepository,
    UserRepository,
)
from quorum.domain.service import (
    AcceptanceCoordinator,
    AnswerService,
    CommentService,
    FeedService,
    JWTService,
    LiveChannel,
    NotificationDispatcher,
    QuestionService,
    ReactionLedger,
    UserService,
)
from quorum.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Domain services.

    REQUEST-scoped like the repositories they wrap, so a service never
    outlives the transaction it reads through. The live channel is the
    exception and comes from the APP-scoped live provider.
    """

    scope = Scope.REQUEST

    @provide
    def get_jwt_service(self, auth_settings: AuthSettings) -> JWTService:
        """Provide JWT token domain service."""
        return JWTService(auth_settings=auth_settings)

    @provide
    def get_user_service(self, user_repository: UserRepository) -> UserService:
        """Provide user domain service."""
        return UserService(user_repository=user_repository)

    @provide
    def get_question_service(
        self,
        question_repository: QuestionRepository,
        answer_repository: AnswerRepository,
        comment_repository: CommentRepository,
    ) -> QuestionService:
        """Provide question domain service."""
        return QuestionService(
            question_repository=question_repository,
            answer_repository=answer_repository,
            comment_repository=comment_repository,
        )

    @provide
    def get_answer_service(
        self,
        answer_repository: AnswerRepository,
        question_repository: QuestionRepository,
        comment_repository: CommentRepository,
    ) -> AnswerService:
        """Provide answer domain service."""
        return AnswerService(
            answer_repository=answer_repository,
            question_repository=question_repository,
            comment_repository=comment_repository,
        )

    @provide
    def get_comment_service(
        self,
        comment_repository: CommentRepository,
        question_repository: QuestionRepository,
        answer_repository: AnswerRepository,
    ) -> CommentService:
        """Provide comment domain service."""
        return CommentService(
            comment_repository=comment_repository,
            question_repository=question_repository,
            answer_repository=answer_repository,
        )

    @provide
    def get_reaction_ledger(
        self,
        question_repository: QuestionRepository,
        answer_repository: AnswerRepository,
        reaction_settings: ReactionSettings,
    ) -> ReactionLedger:
        """Provide reaction ledger."""
        return ReactionLedger(
            question_repository=question_repository,
            answer_repository=answer_repository,
            reaction_settings=reaction_settings,
        )

    @provide
    def get_acceptance_coordinator(
        self,
        question_repository: QuestionRepository,
        answer_repository: AnswerRepository,
    ) -> AcceptanceCoordinator:
        """Provide acceptance coordinator."""
        return AcceptanceCoordinator(
            question_repository=question_repository,
            answer_repository=answer_repository,
        )

    @provide
    def get_notification_dispatcher(
        self,
        notification_repository: NotificationRepository,
        user_service: UserService,
        live_channel: LiveChannel,
    ) -> NotificationDispatcher:
        """Provide notification dispatcher."""
        return NotificationDispatcher(
            notification_repository=notification_repository,
            user_service=user_service,
            live_channel=live_channel,
        )

    @provide
    def get_feed_service(self, live_channel: LiveChannel) -> FeedService:
        """Provide feed broadcast service."""
        return FeedService(live_channel=live_channel)
