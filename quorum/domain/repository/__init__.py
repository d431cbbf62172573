"""Repository interfaces for the Quorum domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the infrastructure layer.
"""

from quorum.domain.repository.answer import AnswerRepository, AnswerSortOrder
from quorum.domain.repository.comment import CommentRepository
from quorum.domain.repository.notification import NotificationRepository
from quorum.domain.repository.question import QuestionRepository, QuestionSortOrder
from quorum.domain.repository.user import UserRepository

__all__ = [
    "UserRepository",
    "QuestionRepository",
    "QuestionSortOrder",
    "AnswerRepository",
    "AnswerSortOrder",
    "CommentRepository",
    "NotificationRepository",
]
