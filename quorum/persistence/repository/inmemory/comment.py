"""In-memory comment repository for testing."""

from typing import List, Optional

from quorum.domain.model.comment import Comment
from quorum.domain.repository.comment import CommentRepository
from quorum.domain.value import CommentId, QuestionId, TargetRef

from .store import InMemoryStore


class InMemoryCommentRepository(CommentRepository):
    """In-memory implementation of CommentRepository for testing."""

    def __init__(self, store: InMemoryStore | None = None) -> None:
        self._comments = (store or InMemoryStore()).comments

    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID."""
        return self._comments.get(comment_id)

    async def find_by_target(self, target: TargetRef) -> List[Comment]:
        """Find comments on a question or answer, oldest first."""
        comments = [c for c in self._comments.values() if c.target == target]
        comments.sort(key=lambda c: c.created_at)
        return comments

    async def save(self, comment: Comment) -> Comment:
        """Insert a comment or update its body."""
        existing = self._comments.get(comment.id)
        if existing is not None:
            comment = existing.model_copy(
                update={"body": comment.body, "updated_at": comment.updated_at}
            )
        self._comments[comment.id] = comment
        return comment

    async def delete(self, comment_id: CommentId) -> bool:
        """Delete a comment."""
        return self._comments.pop(comment_id, None) is not None

    async def delete_by_target(self, target: TargetRef) -> int:
        """Delete comments attached directly to a question or answer."""
        return self._delete_where(lambda c: c.target == target)

    async def delete_by_question(self, question_id: QuestionId) -> int:
        """Delete every comment in a question's thread."""
        return self._delete_where(lambda c: c.question_id == question_id)

    def _delete_where(self, predicate) -> int:
        doomed = [c.id for c in self._comments.values() if predicate(c)]
        for comment_id in doomed:
            del self._comments[comment_id]
        return len(doomed)
