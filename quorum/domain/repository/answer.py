"""Answer repository interface."""

from abc import ABC, abstractmethod
from datetime import datetime
from enum import Enum
from typing import List, Optional

from quorum.domain.model.answer import Answer
from quorum.domain.value import AnswerId, QuestionId, UserId


class AnswerSortOrder(str, Enum):
    """Sort order for answers to a question."""

    VOTES = "votes"
    RECENT = "recent"


class AnswerRepository(ABC):
    """Repository for Answer entity."""

    @abstractmethod
    async def find_by_id(self, answer_id: AnswerId) -> Optional[Answer]:
        """Find an answer by ID.

        Args:
            answer_id: The answer's unique identifier

        Returns:
            The answer if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_question(
        self,
        question_id: QuestionId,
        sort: AnswerSortOrder = AnswerSortOrder.VOTES,
    ) -> List[Answer]:
        """Find all answers to a question.

        Args:
            question_id: The question's ID
            sort: VOTES orders by vote_count descending then oldest first,
                RECENT orders newest first

        Returns:
            List of answers to the question
        """
        pass

    @abstractmethod
    async def find_by_question_and_author(
        self, question_id: QuestionId, author_id: UserId
    ) -> Optional[Answer]:
        """Find a user's answer to a question.

        Args:
            question_id: The question's ID
            author_id: The author's ID

        Returns:
            The answer if the user already answered, None otherwise
        """
        pass

    @abstractmethod
    async def find_accepted(self, question_id: QuestionId) -> List[Answer]:
        """Find answers to a question that are marked accepted.

        Args:
            question_id: The question's ID

        Returns:
            Accepted answers (at most one when the store is consistent)
        """
        pass

    @abstractmethod
    async def save(self, answer: Answer) -> Answer:
        """Save an answer.

        Inserts new answers. For existing answers only the body and
        updated_at are written.

        Args:
            answer: The answer to save

        Returns:
            The stored answer

        Raises:
            InvalidInputError: If the author already answered the question
            NotFoundError: If the question or the author does not exist
        """
        pass

    @abstractmethod
    async def delete(self, answer_id: AnswerId) -> bool:
        """Delete an answer.

        Args:
            answer_id: The answer to delete

        Returns:
            True if an answer was deleted
        """
        pass

    @abstractmethod
    async def delete_by_question(self, question_id: QuestionId) -> int:
        """Delete every answer to a question.

        Args:
            question_id: The question's ID

        Returns:
            Number of answers deleted
        """
        pass

    @abstractmethod
    async def compare_and_set(self, answer: Answer, expected_version: int) -> bool:
        """Write reaction state if the stored version still matches.

        Args:
            answer: Answer carrying the new reaction state and version
            expected_version: Version the caller read

        Returns:
            True if the write happened, False if the version had moved
        """
        pass

    @abstractmethod
    async def mark_accepted(
        self, answer_id: AnswerId, accepted_by: UserId, accepted_at: datetime
    ) -> None:
        """Set the acceptance fields of an answer.

        Args:
            answer_id: The answer being accepted
            accepted_by: The user accepting it
            accepted_at: When it was accepted
        """
        pass

    @abstractmethod
    async def clear_acceptance(self, answer_id: AnswerId) -> None:
        """Clear the acceptance fields of an answer.

        Args:
            answer_id: The answer losing acceptance
        """
        pass
