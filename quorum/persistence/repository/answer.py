"""PostgreSQL implementation of Answer repository."""

from datetime import datetime
from typing import List, Optional

import logfire
from sqlalchemy import asc, delete, desc, select, update
from sqlalchemy.dialects.postgresql import insert
from sqlalchemy.ext.asyncio import AsyncSession

from quorum.domain.model import Answer
from quorum.domain.repository.answer import AnswerRepository, AnswerSortOrder
from quorum.domain.value import AnswerId, QuestionId, UserId
from quorum.persistence.integrity import constraint_errors
from quorum.persistence.mappers import answer_to_dict, reactions_to_dict, row_to_answer
from quorum.persistence.tables import answers_table


class PostgresAnswerRepository(AnswerRepository):
    """PostgreSQL implementation of AnswerRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, answer_id: AnswerId) -> Optional[Answer]:
        """Find an answer by ID."""
        stmt = select(answers_table).where(answers_table.c.id == answer_id)
        result = await self.session.execute(stmt)
        row = result.fetchone()

        if not row:
            logfire.debug("Answer not found", answer_id=str(answer_id))
            return None

        return row_to_answer(row._asdict())

    async def find_by_question(
        self,
        question_id: QuestionId,
        sort: AnswerSortOrder = AnswerSortOrder.VOTES,
    ) -> List[Answer]:
        """Find all answers to a question."""
        with logfire.span(
            "answer_repository.find_by_question",
            question_id=str(question_id),
            sort=sort.value,
        ):
            stmt = select(answers_table).where(
                answers_table.c.question_id == question_id
            )
            if sort == AnswerSortOrder.VOTES:
                stmt = stmt.order_by(
                    desc(answers_table.c.vote_count), asc(answers_table.c.created_at)
                )
            else:
                stmt = stmt.order_by(desc(answers_table.c.created_at))

            result = await self.session.execute(stmt)
            return [row_to_answer(row._asdict()) for row in result.fetchall()]

    async def find_by_question_and_author(
        self, question_id: QuestionId, author_id: UserId
    ) -> Optional[Answer]:
        """Find a user's answer to a question."""
        stmt = select(answers_table).where(
            answers_table.c.question_id == question_id,
            answers_table.c.author_id == author_id,
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_answer(row._asdict()) if row else None

    async def find_accepted(self, question_id: QuestionId) -> List[Answer]:
        """Find accepted answers to a question."""
        stmt = select(answers_table).where(
            answers_table.c.question_id == question_id,
            answers_table.c.is_accepted.is_(True),
        )
        result = await self.session.execute(stmt)
        return [row_to_answer(row._asdict()) for row in result.fetchall()]

    async def save(self, answer: Answer) -> Answer:
        """Insert an answer or update its body."""
        with logfire.span("answer_repository.save", answer_id=str(answer.id)):
            values = answer_to_dict(answer)
            stmt = insert(answers_table).values(**values)
            stmt = stmt.on_conflict_do_update(
                index_elements=[answers_table.c.id],
                set_={
                    "body": stmt.excluded.body,
                    "updated_at": stmt.excluded.updated_at,
                },
            ).returning(answers_table)

            async with constraint_errors(self.session, values):
                result = await self.session.execute(stmt)
                row = result.fetchone()
                await self.session.flush()
            return row_to_answer(row._asdict())

    async def delete(self, answer_id: AnswerId) -> bool:
        """Delete an answer (hard delete)."""
        stmt = delete(answers_table).where(answers_table.c.id == answer_id)
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount > 0

    async def delete_by_question(self, question_id: QuestionId) -> int:
        """Delete every answer to a question."""
        stmt = delete(answers_table).where(answers_table.c.question_id == question_id)
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount

    async def compare_and_set(self, answer: Answer, expected_version: int) -> bool:
        """Write reaction state if the stored version still matches."""
        with logfire.span(
            "answer_repository.compare_and_set",
            answer_id=str(answer.id),
            expected_version=expected_version,
        ):
            stmt = (
                update(answers_table)
                .where(
                    answers_table.c.id == answer.id,
                    answers_table.c.version == expected_version,
                )
                .values(**reactions_to_dict(answer))
            )
            result = await self.session.execute(stmt)
            await self.session.flush()
            return result.rowcount == 1

    async def mark_accepted(
        self, answer_id: AnswerId, accepted_by: UserId, accepted_at: datetime
    ) -> None:
        """Set the acceptance fields of an answer."""
        stmt = (
            update(answers_table)
            .where(answers_table.c.id == answer_id)
            .values(is_accepted=True, accepted_at=accepted_at, accepted_by=accepted_by)
        )
        await self.session.execute(stmt)
        await self.session.flush()

    async def clear_acceptance(self, answer_id: AnswerId) -> None:
        """Clear the acceptance fields of an answer."""
        stmt = (
            update(answers_table)
            .where(answers_table.c.id == answer_id)
            .values(is_accepted=False, accepted_at=None, accepted_by=None)
        )
        await self.session.execute(stmt)
        await self.session.flush()
