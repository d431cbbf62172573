"""Domain value objects for Quorum.

Value objects are immutable and defined by their values, not identity.
"""

from enum import Enum
from uuid import UUID

from pydantic import BaseModel, ConfigDict, RootModel, field_validator


class ValueObject(BaseModel):
    """Immutable value compared by its fields."""

    model_config = ConfigDict(frozen=True)


class StrValueObject(RootModel[str]):
    """Immutable wrapper around one string; str() gives the raw value."""

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        return self.root


class VoteType(str, Enum):
    """Direction of a vote."""

    UPVOTE = "upvote"
    DOWNVOTE = "downvote"

    @property
    def opposite(self) -> "VoteType":
        """The vote type this one displaces."""
        if self is VoteType.UPVOTE:
            return VoteType.DOWNVOTE
        return VoteType.UPVOTE


class VoteState(str, Enum):
    """A user's standing vote on a votable after a vote is applied."""

    UPVOTED = "upvoted"
    DOWNVOTED = "downvoted"
    NONE = "none"


class LikeOutcome(str, Enum):
    """Result of toggling a like."""

    LIKED = "liked"
    UNLIKED = "unliked"


class TargetKind(str, Enum):
    """Kind of entity a reaction or comment points at."""

    QUESTION = "question"
    ANSWER = "answer"


class TargetRef(ValueObject):
    """Reference to a question or an answer.

    Vote, like and comment logic accept a TargetRef instead of
    guessing the entity kind from which fields are present.
    """

    kind: TargetKind
    id: UUID

    @classmethod
    def question(cls, question_id: UUID) -> "TargetRef":
        """Reference a question."""
        return cls(kind=TargetKind.QUESTION, id=question_id)

    @classmethod
    def answer(cls, answer_id: UUID) -> "TargetRef":
        """Reference an answer."""
        return cls(kind=TargetKind.ANSWER, id=answer_id)

    def __str__(self) -> str:
        return f"{self.kind.value}:{self.id}"


class NotificationType(str, Enum):
    """Closed set of notification types."""

    NEW_ANSWER = "new_answer"
    NEW_COMMENT = "new_comment"
    QUESTION_LIKE = "question_like"
    ANSWER_LIKE = "answer_like"
    ANSWER_ACCEPTED = "answer_accepted"
    QUESTION_VOTE = "question_vote"
    ANSWER_VOTE = "answer_vote"
    COMMENT_LIKE = "comment_like"
    MENTION = "mention"
    BOUNTY_AWARDED = "bounty_awarded"


class Username(StrValueObject):
    """Public display name of a user.

    Interpolated into notification messages.
    """

    @field_validator("root")
    @classmethod
    def validate_username(cls, v: str) -> str:
        """Validate username is not blank and within length limits."""
        v = v.strip()
        if len(v) < 1 or len(v) > 50:
            raise ValueError("Username must be 1-50 characters")
        return v
