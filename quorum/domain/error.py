"""Domain layer errors."""


class DomainError(Exception):
    """Base domain error."""

    pass


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")


class ForbiddenError(DomainError):
    """Raised when a user acts on a resource they have no authority over."""

    def __init__(self, action: str, resource: str, resource_id: str, user_id: str):
        self.action = action
        self.resource = resource
        self.resource_id = resource_id
        self.user_id = user_id
        super().__init__(
            f"User {user_id} is not allowed to {action} {resource} {resource_id}"
        )


class InvalidInputError(DomainError):
    """Raised for malformed input that passed schema validation."""

    pass


class InvalidVoteTypeError(InvalidInputError):
    """Raised when a vote type is neither upvote nor downvote."""

    def __init__(self, vote_type: object):
        self.vote_type = vote_type
        super().__init__(f"Invalid vote type: {vote_type!r}")


class ConflictError(DomainError):
    """Raised when a concurrent write could not be applied; retry is safe."""

    pass
