"""PostgreSQL implementation of Question repository."""

from contextlib import asynccontextmanager
from typing import AsyncIterator, List, Optional

import logfire
from sqlalchemy import delete, desc, func, or_, select, update
from sqlalchemy.dialects.postgresql import insert
from sqlalchemy.ext.asyncio import AsyncSession

from quorum.domain.model import Question
from quorum.domain.repository.question import QuestionRepository, QuestionSortOrder
from quorum.domain.value import AnswerId, QuestionId
from quorum.persistence.integrity import constraint_errors
from quorum.persistence.mappers import (
    question_to_dict,
    reactions_to_dict,
    row_to_question,
)
from quorum.persistence.tables import questions_table

_SORT_COLUMNS = {
    QuestionSortOrder.RECENT: questions_table.c.created_at,
    QuestionSortOrder.VOTES: questions_table.c.vote_count,
    QuestionSortOrder.VIEWS: questions_table.c.views,
    QuestionSortOrder.LIKES: questions_table.c.like_count,
}


def _search_clause(search: str):
    return or_(
        questions_table.c.title.icontains(search, autoescape=True),
        questions_table.c.body.icontains(search, autoescape=True),
    )


class PostgresQuestionRepository(QuestionRepository):
    """PostgreSQL implementation of QuestionRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, question_id: QuestionId) -> Optional[Question]:
        """Find a question by ID."""
        with logfire.span("question_repository.find_by_id", question_id=str(question_id)):
            stmt = select(questions_table).where(questions_table.c.id == question_id)
            result = await self.session.execute(stmt)
            row = result.fetchone()

            if not row:
                logfire.debug("Question not found", question_id=str(question_id))
                return None

            return row_to_question(row._asdict())

    async def find_all(
        self,
        sort: QuestionSortOrder = QuestionSortOrder.RECENT,
        search: Optional[str] = None,
        limit: int = 10,
        offset: int = 0,
    ) -> List[Question]:
        """Find questions with filtering and pagination."""
        with logfire.span(
            "question_repository.find_all",
            sort=sort.value,
            search=search,
            limit=limit,
            offset=offset,
        ):
            stmt = select(questions_table)

            if search:
                stmt = stmt.where(_search_clause(search))

            # Newest first breaks ties on every sort
            stmt = stmt.order_by(
                desc(_SORT_COLUMNS[sort]), desc(questions_table.c.created_at)
            )
            stmt = stmt.limit(limit).offset(offset)

            result = await self.session.execute(stmt)
            questions = [row_to_question(row._asdict()) for row in result.fetchall()]
            logfire.info("Found questions", count=len(questions))
            return questions

    async def count(self, search: Optional[str] = None) -> int:
        """Count questions matching the search."""
        stmt = select(func.count()).select_from(questions_table)
        if search:
            stmt = stmt.where(_search_clause(search))

        result = await self.session.execute(stmt)
        return result.scalar() or 0

    async def save(self, question: Question) -> Question:
        """Insert a question or update its editable content."""
        with logfire.span("question_repository.save", question_id=str(question.id)):
            values = question_to_dict(question)
            stmt = insert(questions_table).values(**values)
            stmt = stmt.on_conflict_do_update(
                index_elements=[questions_table.c.id],
                set_={
                    "title": stmt.excluded.title,
                    "body": stmt.excluded.body,
                    "tags": stmt.excluded.tags,
                    "updated_at": stmt.excluded.updated_at,
                },
            ).returning(questions_table)

            async with constraint_errors(self.session, values):
                result = await self.session.execute(stmt)
                row = result.fetchone()
                await self.session.flush()
            return row_to_question(row._asdict())

    async def delete(self, question_id: QuestionId) -> bool:
        """Delete a question (hard delete)."""
        stmt = delete(questions_table).where(questions_table.c.id == question_id)
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount > 0

    async def increment_views(self, question_id: QuestionId) -> Optional[Question]:
        """Atomically increment views by 1."""
        stmt = (
            update(questions_table)
            .where(questions_table.c.id == question_id)
            .values(views=questions_table.c.views + 1)
            .returning(questions_table)
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        await self.session.flush()
        return row_to_question(row._asdict()) if row else None

    async def compare_and_set(self, question: Question, expected_version: int) -> bool:
        """Write reaction state if the stored version still matches."""
        with logfire.span(
            "question_repository.compare_and_set",
            question_id=str(question.id),
            expected_version=expected_version,
        ):
            stmt = (
                update(questions_table)
                .where(
                    questions_table.c.id == question.id,
                    questions_table.c.version == expected_version,
                )
                .values(**reactions_to_dict(question))
            )
            result = await self.session.execute(stmt)
            await self.session.flush()
            return result.rowcount == 1

    @asynccontextmanager
    async def acceptance_lock(
        self, question_id: QuestionId
    ) -> AsyncIterator[Optional[Question]]:
        """Lock the question row until the request transaction ends.

        SELECT ... FOR UPDATE blocks other acceptance writers on the same
        question; the lock is released on commit or rollback.
        """
        stmt = (
            select(questions_table)
            .where(questions_table.c.id == question_id)
            .with_for_update()
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        logfire.debug(
            "Question row locked for acceptance",
            question_id=str(question_id),
            found=row is not None,
        )
        yield row_to_question(row._asdict()) if row else None

    async def set_accepted_answer(
        self, question_id: QuestionId, answer_id: Optional[AnswerId]
    ) -> None:
        """Point the question at its accepted answer (or clear it)."""
        stmt = (
            update(questions_table)
            .where(questions_table.c.id == question_id)
            .values(accepted_answer_id=answer_id)
        )
        await self.session.execute(stmt)
        await self.session.flush()

    async def adjust_answer_count(self, question_id: QuestionId, delta: int) -> None:
        """Atomically adjust the answer count, floored at zero."""
        stmt = (
            update(questions_table)
            .where(questions_table.c.id == question_id)
            .values(
                answer_count=func.greatest(questions_table.c.answer_count + delta, 0)
            )
        )
        await self.session.execute(stmt)
        await self.session.flush()
