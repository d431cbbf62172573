"""Question aggregate root."""

from datetime import datetime
from typing import Optional

from pydantic import Field, computed_field

from quorum.domain.model.votable import Votable
from quorum.domain.value import AnswerId, QuestionId, TargetRef, UserId


class Question(Votable):
    """Question aggregate root.

    Business rules:
    - accepted_answer_id points at the single accepted answer, if any
    - views only ever goes up, once per detail view (no deduplication)
    - tags are passed through as given by the client
    """

    id: QuestionId
    title: str = Field(min_length=1, max_length=300)
    body: str = Field(min_length=1)
    tags: tuple[str, ...] = ()
    author_id: UserId
    views: int = Field(default=0, ge=0)
    answer_count: int = Field(default=0, ge=0)
    accepted_answer_id: Optional[AnswerId] = None
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)

    @computed_field
    @property
    def is_answered(self) -> bool:
        """Whether the author has accepted an answer."""
        return self.accepted_answer_id is not None

    @property
    def target(self) -> TargetRef:
        """Reference to this question."""
        return TargetRef.question(self.id)
