"""Comment entity.

Comments hang off exactly one question or one answer.
"""

from datetime import datetime

from pydantic import Field, model_validator

from quorum.domain.model.common import DomainModel
from quorum.domain.value import CommentId, QuestionId, TargetKind, TargetRef, UserId


class Comment(DomainModel):
    """Comment on a question or an answer.

    - target: the single parent (question or answer)
    - question_id: the question whose thread holds the comment; equals
      target.id for comments made directly on a question
    """

    id: CommentId
    target: TargetRef
    question_id: QuestionId
    author_id: UserId
    body: str = Field(min_length=2, max_length=500)
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)

    @model_validator(mode="after")
    def validate_thread(self) -> "Comment":
        """A comment on a question must belong to that question's thread."""
        if self.target.kind == TargetKind.QUESTION and self.target.id != self.question_id:
            raise ValueError("Question comment must belong to its own question thread")
        return self
