"""PostgreSQL implementation of Comment repository."""

from typing import List, Optional

import logfire
from sqlalchemy import asc, delete, select
from sqlalchemy.dialects.postgresql import insert
from sqlalchemy.ext.asyncio import AsyncSession

from quorum.domain.model import Comment
from quorum.domain.repository.comment import CommentRepository
from quorum.domain.value import CommentId, QuestionId, TargetRef
from quorum.persistence.integrity import constraint_errors
from quorum.persistence.mappers import comment_to_dict, row_to_comment
from quorum.persistence.tables import comments_table


def _target_clause(target: TargetRef):
    return (comments_table.c.target_kind == target.kind.value) & (
        comments_table.c.target_id == target.id
    )


class PostgresCommentRepository(CommentRepository):
    """PostgreSQL implementation of CommentRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID."""
        stmt = select(comments_table).where(comments_table.c.id == comment_id)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_comment(row._asdict()) if row else None

    async def find_by_target(self, target: TargetRef) -> List[Comment]:
        """Find comments on a question or answer, oldest first."""
        with logfire.span("comment_repository.find_by_target", target=str(target)):
            stmt = (
                select(comments_table)
                .where(_target_clause(target))
                .order_by(asc(comments_table.c.created_at))
            )
            result = await self.session.execute(stmt)
            return [row_to_comment(row._asdict()) for row in result.fetchall()]

    async def save(self, comment: Comment) -> Comment:
        """Insert a comment or update its body."""
        with logfire.span("comment_repository.save", comment_id=str(comment.id)):
            values = comment_to_dict(comment)
            stmt = insert(comments_table).values(**values)
            stmt = stmt.on_conflict_do_update(
                index_elements=[comments_table.c.id],
                set_={
                    "body": stmt.excluded.body,
                    "updated_at": stmt.excluded.updated_at,
                },
            ).returning(comments_table)

            async with constraint_errors(self.session, values):
                result = await self.session.execute(stmt)
                row = result.fetchone()
                await self.session.flush()
            return row_to_comment(row._asdict())

    async def delete(self, comment_id: CommentId) -> bool:
        """Delete a comment."""
        stmt = delete(comments_table).where(comments_table.c.id == comment_id)
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount > 0

    async def delete_by_target(self, target: TargetRef) -> int:
        """Delete comments attached directly to a question or answer."""
        stmt = delete(comments_table).where(_target_clause(target))
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount

    async def delete_by_question(self, question_id: QuestionId) -> int:
        """Delete every comment in a question's thread."""
        stmt = delete(comments_table).where(comments_table.c.question_id == question_id)
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount
