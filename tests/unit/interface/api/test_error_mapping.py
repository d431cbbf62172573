"""Unit tests for domain error to HTTP status mapping."""

import pytest

from quorum.domain.error import (
    ConflictError,
    DomainError,
    ForbiddenError,
    InvalidInputError,
    InvalidVoteTypeError,
    NotFoundError,
)
from quorum.interface.api.errors import status_code_for


@pytest.mark.parametrize(
    "error,expected",
    [
        (NotFoundError("Question", "abc"), 404),
        (ForbiddenError("accept", "answer", "abc", "u1"), 403),
        (InvalidInputError("bad"), 400),
        (InvalidVoteTypeError("sideways"), 400),
        (ConflictError("busy"), 409),
        (DomainError("unknown"), 400),
    ],
)
def test_status_code_for(error, expected):
    """Subclasses inherit their parent's status."""
    assert status_code_for(error) == expected
