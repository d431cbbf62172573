"""Base service class for domain services."""

from typing import Protocol

from quorum.domain.error import ForbiddenError
from quorum.domain.value import UserId


class Authored(Protocol):
    """Anything a user wrote: questions, answers and comments."""

    @property
    def id(self): ...

    @property
    def author_id(self) -> UserId: ...


class Service:
    """Base class for all domain services.

    Edits and deletions of user content are author-only; services share
    that check through ensure_author.
    """

    @staticmethod
    def ensure_author(
        entity: Authored, requester_id: UserId, action: str, resource: str
    ) -> None:
        """Reject a requester who did not write the entity.

        Raises:
            ForbiddenError: If requester_id is not the entity's author
        """
        if entity.author_id != requester_id:
            raise ForbiddenError(action, resource, str(entity.id), str(requester_id))
