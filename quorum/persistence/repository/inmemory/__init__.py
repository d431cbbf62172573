"""In-memory repository implementations for testing."""

from .answer import InMemoryAnswerRepository
from .comment import InMemoryCommentRepository
from .notification import InMemoryNotificationRepository
from .question import InMemoryQuestionRepository
from .store import InMemoryStore
from .user import InMemoryUserRepository

__all__ = [
    "InMemoryAnswerRepository",
    "InMemoryCommentRepository",
    "InMemoryNotificationRepository",
    "InMemoryQuestionRepository",
    "InMemoryStore",
    "InMemoryUserRepository",
]
