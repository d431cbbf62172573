"""Application layer DI providers."""

from dishka import Scope, provide

from quorum.application.usecase.answer import (
    AcceptAnswerUseCase,
    CreateAnswerUseCase,
    DeleteAnswerUseCase,
    LikeAnswerUseCase,
    ListAnswersUseCase,
    UpdateAnswerUseCase,
)
from quorum.application.usecase.comment import (
    CreateCommentUseCase,
    DeleteCommentUseCase,
    ListCommentsUseCase,
    UpdateCommentUseCase,
)
from quorum.application.usecase.notification import (
    DeleteNotificationUseCase,
    GetUnreadCountUseCase,
    ListNotificationsUseCase,
    MarkAllNotificationsReadUseCase,
    MarkNotificationReadUseCase,
)
from quorum.application.usecase.question import (
    CreateQuestionUseCase,
    DeleteQuestionUseCase,
    GetQuestionUseCase,
    LikeQuestionUseCase,
    ListQuestionsUseCase,
    UpdateQuestionUseCase,
)
from quorum.application.usecase.reaction import CastVoteUseCase
from quorum.domain.service import (
    AcceptanceCoordinator,
    AnswerService,
    CommentService,
    FeedService,
    NotificationDispatcher,
    QuestionService,
    ReactionLedger,
)
from quorum.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    # Question use cases
    @provide(scope=Scope.REQUEST)
    def get_create_question_use_case(
        self, question_service: QuestionService, feed_service: FeedService
    ) -> CreateQuestionUseCase:
        """Provide create question use case."""
        return CreateQuestionUseCase(
            question_service=question_service, feed_service=feed_service
        )

    @provide(scope=Scope.REQUEST)
    def get_get_question_use_case(
        self, question_service: QuestionService, answer_service: AnswerService
    ) -> GetQuestionUseCase:
        """Provide get question use case."""
        return GetQuestionUseCase(
            question_service=question_service, answer_service=answer_service
        )

    @provide(scope=Scope.REQUEST)
    def get_list_questions_use_case(
        self, question_service: QuestionService
    ) -> ListQuestionsUseCase:
        """Provide list questions use case."""
        return ListQuestionsUseCase(question_service=question_service)

    @provide(scope=Scope.REQUEST)
    def get_update_question_use_case(
        self, question_service: QuestionService
    ) -> UpdateQuestionUseCase:
        """Provide update question use case."""
        return UpdateQuestionUseCase(question_service=question_service)

    @provide(scope=Scope.REQUEST)
    def get_delete_question_use_case(
        self, question_service: QuestionService
    ) -> DeleteQuestionUseCase:
        """Provide delete question use case."""
        return DeleteQuestionUseCase(question_service=question_service)

    @provide(scope=Scope.REQUEST)
    def get_like_question_use_case(
        self,
        reaction_ledger: ReactionLedger,
        notification_dispatcher: NotificationDispatcher,
    ) -> LikeQuestionUseCase:
        """Provide like question use case."""
        return LikeQuestionUseCase(
            reaction_ledger=reaction_ledger,
            notification_dispatcher=notification_dispatcher,
        )

    # Answer use cases
    @provide(scope=Scope.REQUEST)
    def get_create_answer_use_case(
        self,
        answer_service: AnswerService,
        question_service: QuestionService,
        notification_dispatcher: NotificationDispatcher,
        feed_service: FeedService,
    ) -> CreateAnswerUseCase:
        """Provide create answer use case."""
        return CreateAnswerUseCase(
            answer_service=answer_service,
            question_service=question_service,
            notification_dispatcher=notification_dispatcher,
            feed_service=feed_service,
        )

    @provide(scope=Scope.REQUEST)
    def get_list_answers_use_case(
        self, answer_service: AnswerService
    ) -> ListAnswersUseCase:
        """Provide list answers use case."""
        return ListAnswersUseCase(answer_service=answer_service)

    @provide(scope=Scope.REQUEST)
    def get_update_answer_use_case(
        self, answer_service: AnswerService
    ) -> UpdateAnswerUseCase:
        """Provide update answer use case."""
        return UpdateAnswerUseCase(answer_service=answer_service)

    @provide(scope=Scope.REQUEST)
    def get_delete_answer_use_case(
        self, answer_service: AnswerService
    ) -> DeleteAnswerUseCase:
        """Provide delete answer use case."""
        return DeleteAnswerUseCase(answer_service=answer_service)

    @provide(scope=Scope.REQUEST)
    def get_accept_answer_use_case(
        self,
        answer_service: AnswerService,
        acceptance_coordinator: AcceptanceCoordinator,
        notification_dispatcher: NotificationDispatcher,
    ) -> AcceptAnswerUseCase:
        """Provide accept answer use case."""
        return AcceptAnswerUseCase(
            answer_service=answer_service,
            acceptance_coordinator=acceptance_coordinator,
            notification_dispatcher=notification_dispatcher,
        )

    @provide(scope=Scope.REQUEST)
    def get_like_answer_use_case(
        self,
        reaction_ledger: ReactionLedger,
        notification_dispatcher: NotificationDispatcher,
    ) -> LikeAnswerUseCase:
        """Provide like answer use case."""
        return LikeAnswerUseCase(
            reaction_ledger=reaction_ledger,
            notification_dispatcher=notification_dispatcher,
        )

    # Comment use cases
    @provide(scope=Scope.REQUEST)
    def get_create_comment_use_case(
        self,
        comment_service: CommentService,
        notification_dispatcher: NotificationDispatcher,
        feed_service: FeedService,
    ) -> CreateCommentUseCase:
        """Provide create comment use case."""
        return CreateCommentUseCase(
            comment_service=comment_service,
            notification_dispatcher=notification_dispatcher,
            feed_service=feed_service,
        )

    @provide(scope=Scope.REQUEST)
    def get_list_comments_use_case(
        self, comment_service: CommentService
    ) -> ListCommentsUseCase:
        """Provide list comments use case."""
        return ListCommentsUseCase(comment_service=comment_service)

    @provide(scope=Scope.REQUEST)
    def get_update_comment_use_case(
        self, comment_service: CommentService
    ) -> UpdateCommentUseCase:
        """Provide update comment use case."""
        return UpdateCommentUseCase(comment_service=comment_service)

    @provide(scope=Scope.REQUEST)
    def get_delete_comment_use_case(
        self, comment_service: CommentService
    ) -> DeleteCommentUseCase:
        """Provide delete comment use case."""
        return DeleteCommentUseCase(comment_service=comment_service)

    # Vote use cases
    @provide(scope=Scope.REQUEST)
    def get_cast_vote_use_case(
        self,
        reaction_ledger: ReactionLedger,
        notification_dispatcher: NotificationDispatcher,
    ) -> CastVoteUseCase:
        """Provide cast vote use case."""
        return CastVoteUseCase(
            reaction_ledger=reaction_ledger,
            notification_dispatcher=notification_dispatcher,
        )

    # Notification use cases
    @provide(scope=Scope.REQUEST)
    def get_list_notifications_use_case(
        self, notification_dispatcher: NotificationDispatcher
    ) -> ListNotificationsUseCase:
        """Provide list notifications use case."""
        return ListNotificationsUseCase(notification_dispatcher=notification_dispatcher)

    @provide(scope=Scope.REQUEST)
    def get_unread_count_use_case(
        self, notification_dispatcher: NotificationDispatcher
    ) -> GetUnreadCountUseCase:
        """Provide unread count use case."""
        return GetUnreadCountUseCase(notification_dispatcher=notification_dispatcher)

    @provide(scope=Scope.REQUEST)
    def get_mark_notification_read_use_case(
        self, notification_dispatcher: NotificationDispatcher
    ) -> MarkNotificationReadUseCase:
        """Provide mark notification read use case."""
        return MarkNotificationReadUseCase(
            notification_dispatcher=notification_dispatcher
        )

    @provide(scope=Scope.REQUEST)
    def get_mark_all_notifications_read_use_case(
        self, notification_dispatcher: NotificationDispatcher
    ) -> MarkAllNotificationsReadUseCase:
        """Provide mark all notifications read use case."""
        return MarkAllNotificationsReadUseCase(
            notification_dispatcher=notification_dispatcher
        )

    @provide(scope=Scope.REQUEST)
    def get_delete_notification_use_case(
        self, notification_dispatcher: NotificationDispatcher
    ) -> DeleteNotificationUseCase:
        """Provide delete notification use case."""
        return DeleteNotificationUseCase(
            notification_dispatcher=notification_dispatcher
        )
