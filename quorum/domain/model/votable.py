"""Votable base entity.

Questions and answers carry the voter sets that reactions mutate. Counters
are derived from the sets so they can never drift from them.
"""

from pydantic import Field, computed_field, model_validator

from quorum.domain.model.common import DomainModel
from quorum.domain.value import UserId, VoteState


class Votable(DomainModel):
    """Entity that can be upvoted, downvoted and liked.

    Invariants:
    - A user id is in at most one of upvoters/downvoters
    - vote_count == len(upvoters) - len(downvoters)
    - like_count == len(likers)

    The version is an optimistic concurrency token. Every reaction write
    bumps it, and writes are rejected when the stored version has moved.
    """

    upvoters: frozenset[UserId] = frozenset()
    downvoters: frozenset[UserId] = frozenset()
    likers: frozenset[UserId] = frozenset()
    version: int = Field(default=0, ge=0)

    @computed_field
    @property
    def vote_count(self) -> int:
        """Net votes."""
        return len(self.upvoters) - len(self.downvoters)

    @computed_field
    @property
    def like_count(self) -> int:
        """Number of likes."""
        return len(self.likers)

    @model_validator(mode="after")
    def validate_voter_sets_disjoint(self) -> "Votable":
        """Reject a user that is both an upvoter and a downvoter."""
        overlap = self.upvoters & self.downvoters
        if overlap:
            raise ValueError(
                f"Users cannot both upvote and downvote: {sorted(str(u) for u in overlap)}"
            )
        return self

    def vote_state_of(self, user_id: UserId) -> VoteState:
        """Return how a user currently votes on this entity."""
        if user_id in self.upvoters:
            return VoteState.UPVOTED
        if user_id in self.downvoters:
            return VoteState.DOWNVOTED
        return VoteState.NONE

    def is_liked_by(self, user_id: UserId) -> bool:
        """Check whether a user has liked this entity."""
        return user_id in self.likers
