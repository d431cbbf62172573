"""Answer domain service."""

from datetime import datetime
from uuid import uuid4

import logfire

from quorum.domain.error import InvalidInputError, NotFoundError
from quorum.domain.model import Answer
from quorum.domain.repository import (
    AnswerRepository,
    AnswerSortOrder,
    CommentRepository,
    QuestionRepository,
)
from quorum.domain.value import AnswerId, QuestionId, TargetRef, UserId

from .base import Service


class AnswerService(Service):
    """Domain service for answer operations.

    Acceptance itself lives in AcceptanceCoordinator; deletion takes the
    same per-question lock so it never races an accept.
    """

    def __init__(
        self,
        answer_repository: AnswerRepository,
        question_repository: QuestionRepository,
        comment_repository: CommentRepository,
    ) -> None:
        """Initialize answer service.

        Args:
            answer_repository: Answer repository
            question_repository: Question repository
            comment_repository: Comment repository (cascade deletion)
        """
        self.answer_repository = answer_repository
        self.question_repository = question_repository
        self.comment_repository = comment_repository

    async def create_answer(
        self, question_id: QuestionId, author_id: UserId, body: str
    ) -> Answer:
        """Answer a question. Each user answers a question at most once.

        Args:
            question_id: The question being answered
            author_id: The answering user
            body: Answer body

        Returns:
            The created answer

        Raises:
            NotFoundError: If the question does not exist
            InvalidInputError: If the user already answered this question
        """
        with logfire.span(
            "answer_service.create_answer",
            question_id=str(question_id),
            author_id=str(author_id),
        ):
            question = await self.question_repository.find_by_id(question_id)
            if question is None:
                raise NotFoundError("Question", str(question_id))

            existing = await self.answer_repository.find_by_question_and_author(
                question_id, author_id
            )
            if existing is not None:
                logfire.warn(
                    "Duplicate answer attempt",
                    question_id=str(question_id),
                    author_id=str(author_id),
                )
                raise InvalidInputError("You have already answered this question")

            now = datetime.now()
            answer = Answer(
                id=AnswerId(uuid4()),
                question_id=question_id,
                author_id=author_id,
                body=body,
                created_at=now,
                updated_at=now,
            )
            saved = await self.answer_repository.save(answer)
            await self.question_repository.adjust_answer_count(question_id, 1)
            logfire.info(
                "Answer created", answer_id=str(saved.id), question_id=str(question_id)
            )
            return saved

    async def get_answer(self, answer_id: AnswerId) -> Answer:
        """Get an answer by ID.

        Raises:
            NotFoundError: If the answer does not exist
        """
        answer = await self.answer_repository.find_by_id(answer_id)
        if answer is None:
            raise NotFoundError("Answer", str(answer_id))
        return answer

    async def list_answers(
        self, question_id: QuestionId, sort: AnswerSortOrder = AnswerSortOrder.VOTES
    ) -> list[Answer]:
        """List the answers to a question.

        Raises:
            NotFoundError: If the question does not exist
        """
        with logfire.span(
            "answer_service.list_answers", question_id=str(question_id), sort=sort.value
        ):
            if await self.question_repository.find_by_id(question_id) is None:
                raise NotFoundError("Question", str(question_id))
            return await self.answer_repository.find_by_question(question_id, sort=sort)

    async def update_answer(
        self, answer_id: AnswerId, requester_id: UserId, body: str
    ) -> Answer:
        """Edit an answer's body.

        Raises:
            NotFoundError: If the answer does not exist
            ForbiddenError: If the requester is not the author
        """
        with logfire.span(
            "answer_service.update_answer",
            answer_id=str(answer_id),
            requester_id=str(requester_id),
        ):
            answer = await self.get_answer(answer_id)
            self.ensure_author(answer, requester_id, "edit", "answer")

            updated = answer.revised(body=body, updated_at=datetime.now())
            saved = await self.answer_repository.save(updated)
            logfire.info("Answer updated", answer_id=str(answer_id))
            return saved

    async def delete_answer(self, answer_id: AnswerId, requester_id: UserId) -> None:
        """Delete an answer and its comments.

        If the answer was accepted, the question loses its accepted answer
        in the same locked step.

        Raises:
            NotFoundError: If the answer does not exist
            ForbiddenError: If the requester is not the author
        """
        with logfire.span(
            "answer_service.delete_answer",
            answer_id=str(answer_id),
            requester_id=str(requester_id),
        ):
            answer = await self.get_answer(answer_id)
            self.ensure_author(answer, requester_id, "delete", "answer")

            async with self.question_repository.acceptance_lock(
                answer.question_id
            ) as question:
                if question is not None and question.accepted_answer_id == answer_id:
                    await self.question_repository.set_accepted_answer(
                        answer.question_id, None
                    )
                    logfire.info(
                        "Accepted answer deleted, question reopened",
                        question_id=str(answer.question_id),
                    )

                comments = await self.comment_repository.delete_by_target(
                    TargetRef.answer(answer_id)
                )
                if await self.answer_repository.delete(answer_id):
                    await self.question_repository.adjust_answer_count(
                        answer.question_id, -1
                    )

            logfire.info(
                "Answer deleted", answer_id=str(answer_id), comments_deleted=comments
            )
