"""Constraint violations translated into domain errors."""

from collections.abc import AsyncIterator, Mapping
from contextlib import asynccontextmanager
from typing import Any, Optional

import logfire
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from quorum.domain.error import (
    ConflictError,
    DomainError,
    InvalidInputError,
    NotFoundError,
)

# Foreign key -> (missing parent, column holding its id)
MISSING_PARENTS: dict[str, tuple[str, str]] = {
    "fk_questions_author_id": ("User", "author_id"),
    "fk_answers_question_id": ("Question", "question_id"),
    "fk_answers_author_id": ("User", "author_id"),
    "fk_comments_question_id": ("Question", "question_id"),
    "fk_comments_author_id": ("User", "author_id"),
    "fk_notifications_recipient_id": ("User", "recipient_id"),
}

DUPLICATES: dict[str, str] = {
    "uq_answers_question_author": "You have already answered this question",
}


def constraint_name(error: IntegrityError) -> Optional[str]:
    # The asyncpg exception is chained as the cause of the DBAPI wrapper
    cause = getattr(error.orig, "__cause__", None)
    return getattr(cause, "constraint_name", None)


def to_domain_error(error: IntegrityError, values: Mapping[str, Any]) -> DomainError:
    """Map a constraint violation on a written row to the matching domain error.

    A foreign key pointing nowhere means the parent is gone (or the user was
    never provisioned), so it reads as NotFound. Known unique constraints
    become invalid input. Anything else is reported as a conflict.
    """
    name = constraint_name(error)
    if name in MISSING_PARENTS:
        resource, column = MISSING_PARENTS[name]
        return NotFoundError(resource, str(values.get(column)))
    if name in DUPLICATES:
        return InvalidInputError(DUPLICATES[name])
    return ConflictError(f"Write rejected by constraint {name or 'unknown'}")


@asynccontextmanager
async def constraint_errors(
    session: AsyncSession, values: Mapping[str, Any]
) -> AsyncIterator[None]:
    """Run a write in a savepoint and raise domain errors for violations.

    The savepoint keeps the surrounding transaction usable after a
    violation. Flush inside the block so the database checks run there.
    """
    try:
        async with session.begin_nested():
            yield
    except IntegrityError as e:
        domain_error = to_domain_error(e, values)
        logfire.warn(
            "Write rejected by constraint",
            constraint=constraint_name(e),
            error=str(domain_error),
        )
        raise domain_error from e
