"""Comment repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from quorum.domain.model.comment import Comment
from quorum.domain.value import CommentId, QuestionId, TargetRef


class CommentRepository(ABC):
    """Repository for Comment entity."""

    @abstractmethod
    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID.

        Args:
            comment_id: The comment's unique identifier

        Returns:
            The comment if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_target(self, target: TargetRef) -> List[Comment]:
        """Find comments attached directly to a question or answer.

        Ordered oldest first.

        Args:
            target: The parent question or answer

        Returns:
            List of comments on the target
        """
        pass

    @abstractmethod
    async def save(self, comment: Comment) -> Comment:
        """Save a comment.

        Inserts new comments. For existing comments only the body and
        updated_at are written.

        Args:
            comment: The comment to save

        Returns:
            The stored comment
        """
        pass

    @abstractmethod
    async def delete(self, comment_id: CommentId) -> bool:
        """Delete a comment.

        Args:
            comment_id: The comment to delete

        Returns:
            True if a comment was deleted
        """
        pass

    @abstractmethod
    async def delete_by_target(self, target: TargetRef) -> int:
        """Delete comments attached directly to a question or answer.

        Args:
            target: The parent question or answer

        Returns:
            Number of comments deleted
        """
        pass

    @abstractmethod
    async def delete_by_question(self, question_id: QuestionId) -> int:
        """Delete every comment in a question's thread.

        Covers comments on the question itself and on its answers.

        Args:
            question_id: The thread's question

        Returns:
            Number of comments deleted
        """
        pass
