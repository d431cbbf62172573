"""Question repository interface."""

from abc import ABC, abstractmethod
from contextlib import AbstractAsyncContextManager
from enum import Enum
from typing import List, Optional

from quorum.domain.model.question import Question
from quorum.domain.value import AnswerId, QuestionId


class QuestionSortOrder(str, Enum):
    """Sort order for question listings."""

    RECENT = "recent"  # created_at DESC
    VOTES = "votes"  # vote_count DESC
    VIEWS = "views"  # views DESC
    LIKES = "likes"  # like_count DESC


class QuestionRepository(ABC):
    """Repository for Question aggregate.

    Reaction fields (voter sets, likers, version) are only written through
    compare_and_set. Acceptance is only written through set_accepted_answer
    while holding acceptance_lock.
    """

    @abstractmethod
    async def find_by_id(self, question_id: QuestionId) -> Optional[Question]:
        """Find a question by ID.

        Args:
            question_id: The question's unique identifier

        Returns:
            The question if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_all(
        self,
        sort: QuestionSortOrder = QuestionSortOrder.RECENT,
        search: Optional[str] = None,
        limit: int = 10,
        offset: int = 0,
    ) -> List[Question]:
        """Find questions with filtering and pagination.

        Args:
            sort: Sort order
            search: Case-insensitive substring matched against title and body
            limit: Maximum number of questions to return
            offset: Number of questions to skip

        Returns:
            List of questions matching the criteria
        """
        pass

    @abstractmethod
    async def count(self, search: Optional[str] = None) -> int:
        """Count questions matching the search.

        Args:
            search: Case-insensitive substring matched against title and body

        Returns:
            Total number of matching questions
        """
        pass

    @abstractmethod
    async def save(self, question: Question) -> Question:
        """Save a question.

        Inserts new questions. For existing questions only the editable
        content (title, body, tags, updated_at) is written.

        Args:
            question: The question to save

        Returns:
            The stored question
        """
        pass

    @abstractmethod
    async def delete(self, question_id: QuestionId) -> bool:
        """Delete a question.

        Args:
            question_id: The question to delete

        Returns:
            True if a question was deleted
        """
        pass

    @abstractmethod
    async def increment_views(self, question_id: QuestionId) -> Optional[Question]:
        """Atomically add one view.

        Args:
            question_id: The question being viewed

        Returns:
            The question after the increment, None if it does not exist
        """
        pass

    @abstractmethod
    async def compare_and_set(self, question: Question, expected_version: int) -> bool:
        """Write reaction state if the stored version still matches.

        Writes upvoters, downvoters, likers and version from the given
        question, only where the stored version equals expected_version.

        Args:
            question: Question carrying the new reaction state and version
            expected_version: Version the caller read

        Returns:
            True if the write happened, False if the version had moved
        """
        pass

    @abstractmethod
    def acceptance_lock(
        self, question_id: QuestionId
    ) -> AbstractAsyncContextManager[Optional[Question]]:
        """Serialize acceptance changes for one question.

        Holders of the lock for the same question run one at a time.
        The context yields the question as read under the lock, or None.

        Args:
            question_id: The question to lock
        """
        pass

    @abstractmethod
    async def set_accepted_answer(
        self, question_id: QuestionId, answer_id: Optional[AnswerId]
    ) -> None:
        """Point the question at its accepted answer (or clear it).

        Args:
            question_id: The question to update
            answer_id: The accepted answer, None to clear
        """
        pass

    @abstractmethod
    async def adjust_answer_count(self, question_id: QuestionId, delta: int) -> None:
        """Atomically add delta to the answer count, never going below zero.

        Args:
            question_id: The question to update
            delta: Amount to add (negative to subtract)
        """
        pass
