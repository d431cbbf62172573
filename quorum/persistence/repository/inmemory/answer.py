"""In-memory answer repository for testing."""

from datetime import datetime
from typing import List, Optional

from quorum.domain.error import InvalidInputError
from quorum.domain.model.answer import Answer
from quorum.domain.repository.answer import AnswerRepository, AnswerSortOrder
from quorum.domain.value import AnswerId, QuestionId, UserId

from .store import InMemoryStore


class InMemoryAnswerRepository(AnswerRepository):
    """In-memory implementation of AnswerRepository for testing."""

    def __init__(self, store: InMemoryStore | None = None) -> None:
        self._answers = (store or InMemoryStore()).answers

    async def find_by_id(self, answer_id: AnswerId) -> Optional[Answer]:
        """Find an answer by ID."""
        return self._answers.get(answer_id)

    async def find_by_question(
        self,
        question_id: QuestionId,
        sort: AnswerSortOrder = AnswerSortOrder.VOTES,
    ) -> List[Answer]:
        """Find all answers to a question."""
        answers = [a for a in self._answers.values() if a.question_id == question_id]
        if sort == AnswerSortOrder.VOTES:
            # Oldest first within equal vote counts
            answers.sort(key=lambda a: a.created_at)
            answers.sort(key=lambda a: a.vote_count, reverse=True)
        else:
            answers.sort(key=lambda a: a.created_at, reverse=True)
        return answers

    async def find_by_question_and_author(
        self, question_id: QuestionId, author_id: UserId
    ) -> Optional[Answer]:
        """Find a user's answer to a question."""
        for answer in self._answers.values():
            if answer.question_id == question_id and answer.author_id == author_id:
                return answer
        return None

    async def find_accepted(self, question_id: QuestionId) -> List[Answer]:
        """Find accepted answers to a question."""
        return [
            a
            for a in self._answers.values()
            if a.question_id == question_id and a.is_accepted
        ]

    async def save(self, answer: Answer) -> Answer:
        """Insert an answer or update its body."""
        existing = self._answers.get(answer.id)
        if existing is not None:
            answer = existing.model_copy(
                update={"body": answer.body, "updated_at": answer.updated_at}
            )
        elif any(
            a.question_id == answer.question_id and a.author_id == answer.author_id
            for a in self._answers.values()
        ):
            raise InvalidInputError("You have already answered this question")
        self._answers[answer.id] = answer
        return answer

    async def delete(self, answer_id: AnswerId) -> bool:
        """Delete an answer."""
        return self._answers.pop(answer_id, None) is not None

    async def delete_by_question(self, question_id: QuestionId) -> int:
        """Delete every answer to a question."""
        doomed = [a.id for a in self._answers.values() if a.question_id == question_id]
        for answer_id in doomed:
            del self._answers[answer_id]
        return len(doomed)

    async def compare_and_set(self, answer: Answer, expected_version: int) -> bool:
        """Write reaction state if the stored version still matches."""
        stored = self._answers.get(answer.id)
        if stored is None or stored.version != expected_version:
            return False
        self._answers[answer.id] = stored.model_copy(
            update={
                "upvoters": answer.upvoters,
                "downvoters": answer.downvoters,
                "likers": answer.likers,
                "version": answer.version,
            }
        )
        return True

    async def mark_accepted(
        self, answer_id: AnswerId, accepted_by: UserId, accepted_at: datetime
    ) -> None:
        """Set the acceptance fields of an answer."""
        answer = self._answers.get(answer_id)
        if answer is not None:
            self._answers[answer_id] = answer.accepted(by=accepted_by, at=accepted_at)

    async def clear_acceptance(self, answer_id: AnswerId) -> None:
        """Clear the acceptance fields of an answer."""
        answer = self._answers.get(answer_id)
        if answer is not None:
            self._answers[answer_id] = answer.unaccepted()
