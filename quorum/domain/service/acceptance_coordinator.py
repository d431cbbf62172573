"""Acceptance coordinator domain service."""

from datetime import datetime

import logfire

from quorum.domain.error import ForbiddenError, NotFoundError
from quorum.domain.model import Answer
from quorum.domain.repository import AnswerRepository, QuestionRepository
from quorum.domain.value import AnswerId, QuestionId, UserId

from .base import Service


class AcceptanceCoordinator(Service):
    """Keeps at most one accepted answer per question.

    All acceptance writes for a question happen while holding that
    question's acceptance lock, so concurrent accepts serialize and readers
    never observe two accepted answers or a dangling accepted_answer_id.
    """

    def __init__(
        self,
        question_repository: QuestionRepository,
        answer_repository: AnswerRepository,
    ) -> None:
        """Initialize acceptance coordinator.

        Args:
            question_repository: Question repository
            answer_repository: Answer repository
        """
        self.question_repository = question_repository
        self.answer_repository = answer_repository

    async def accept_answer(
        self, question_id: QuestionId, answer_id: AnswerId, requester_id: UserId
    ) -> tuple[Answer, bool]:
        """Mark an answer as the accepted solution of its question.

        Clears any previously accepted answer, marks the target and points
        the question at it. Accepting the already-accepted answer changes
        nothing. Whether anything changed is decided under the lock, so of
        several racing accepts of one answer exactly one reports a change.

        Args:
            question_id: The question
            answer_id: The answer to accept
            requester_id: The user asking for acceptance

        Returns:
            The accepted answer and whether this call accepted it

        Raises:
            NotFoundError: If the question or answer is missing, or the answer
                belongs to another question
            ForbiddenError: If the requester is not the question author
        """
        with logfire.span(
            "acceptance_coordinator.accept_answer",
            question_id=str(question_id),
            answer_id=str(answer_id),
            requester_id=str(requester_id),
        ):
            async with self.question_repository.acceptance_lock(
                question_id
            ) as question:
                if question is None:
                    raise NotFoundError("Question", str(question_id))

                answer = await self.answer_repository.find_by_id(answer_id)
                if answer is None or answer.question_id != question_id:
                    logfire.warn(
                        "Answer not found on question",
                        question_id=str(question_id),
                        answer_id=str(answer_id),
                    )
                    raise NotFoundError("Answer", str(answer_id))

                if question.author_id != requester_id:
                    logfire.warn(
                        "Non-author tried to accept answer",
                        question_id=str(question_id),
                        requester_id=str(requester_id),
                    )
                    raise ForbiddenError(
                        "accept answers on", "question", str(question_id), str(requester_id)
                    )

                if answer.is_accepted and question.accepted_answer_id == answer_id:
                    logfire.info("Answer already accepted", answer_id=str(answer_id))
                    return answer, False

                for previous in await self.answer_repository.find_accepted(question_id):
                    if previous.id != answer_id:
                        await self.answer_repository.clear_acceptance(previous.id)
                        logfire.info(
                            "Previously accepted answer cleared",
                            question_id=str(question_id),
                            answer_id=str(previous.id),
                        )

                accepted_at = datetime.now()
                await self.answer_repository.mark_accepted(
                    answer_id, requester_id, accepted_at
                )
                await self.question_repository.set_accepted_answer(
                    question_id, answer_id
                )

            logfire.info(
                "Answer accepted",
                question_id=str(question_id),
                answer_id=str(answer_id),
            )
            return answer.accepted(by=requester_id, at=accepted_at), True
