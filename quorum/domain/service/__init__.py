"""Domain services."""

from .acceptance_coordinator import AcceptanceCoordinator
from .answer_service import AnswerService
from .base import Service
from .comment_service import CommentService
from .feed_service import FeedService
from .jwt_service import JWTService
from .live_channel import FEED_TOPIC, LiveChannel, user_topic
from .notification_dispatcher import NotificationContext, NotificationDispatcher
from .question_service import QuestionService
from .reaction_ledger import ReactionLedger, apply_vote, toggle_like
from .user_service import UserService

__all__ = [
    "AcceptanceCoordinator",
    "AnswerService",
    "CommentService",
    "FEED_TOPIC",
    "FeedService",
    "JWTService",
    "LiveChannel",
    "NotificationContext",
    "NotificationDispatcher",
    "QuestionService",
    "ReactionLedger",
    "Service",
    "UserService",
    "apply_vote",
    "toggle_like",
    "user_topic",
]
