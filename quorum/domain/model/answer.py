"""Answer entity."""

from datetime import datetime
from typing import Optional

from pydantic import Field, model_validator

from quorum.domain.model.votable import Votable
from quorum.domain.value import AnswerId, QuestionId, TargetRef, UserId


class Answer(Votable):
    """Answer to a question.

    Acceptance fields are only written by the acceptance coordinator.
    An answer that is not accepted carries no acceptance timestamp or actor.
    """

    id: AnswerId
    question_id: QuestionId
    author_id: UserId
    body: str = Field(min_length=1)
    is_accepted: bool = False
    accepted_at: Optional[datetime] = None
    accepted_by: Optional[UserId] = None
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)

    @model_validator(mode="after")
    def validate_acceptance_fields(self) -> "Answer":
        """Acceptance metadata is present exactly when the answer is accepted."""
        if not self.is_accepted and (
            self.accepted_at is not None or self.accepted_by is not None
        ):
            raise ValueError("Unaccepted answer cannot carry acceptance metadata")
        return self

    @property
    def target(self) -> TargetRef:
        """Reference to this answer."""
        return TargetRef.answer(self.id)

    def accepted(self, by: UserId, at: datetime) -> "Answer":
        """Return a copy marked as accepted."""
        return self.model_copy(
            update={"is_accepted": True, "accepted_at": at, "accepted_by": by}
        )

    def unaccepted(self) -> "Answer":
        """Return a copy with acceptance cleared."""
        return self.model_copy(
            update={"is_accepted": False, "accepted_at": None, "accepted_by": None}
        )
