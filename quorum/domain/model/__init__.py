"""Domain model entities for Quorum."""

from quorum.domain.model.answer import Answer
from quorum.domain.model.comment import Comment
from quorum.domain.model.notification import Notification
from quorum.domain.model.question import Question
from quorum.domain.model.user import User
from quorum.domain.model.votable import Votable

__all__ = [
    "User",
    "Votable",
    "Question",
    "Answer",
    "Comment",
    "Notification",
]
