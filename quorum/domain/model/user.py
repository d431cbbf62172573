"""User entity.

Users are provisioned by the identity service. The Q&A core only reads
them, mostly to render actor names into notifications.
"""

from datetime import datetime

from pydantic import Field

from quorum.domain.model.common import DomainModel
from quorum.domain.value import UserId, Username


class User(DomainModel):
    id: UserId
    username: Username
    reputation: int = Field(default=0, ge=0)
    created_at: datetime = Field(default_factory=datetime.now)
